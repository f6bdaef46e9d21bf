"""
SQLAlchemy declarative base.

Dependencies: sqlalchemy
System role: Foundation for the conversation store models
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, MetaData
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Deterministic constraint names so migrations diff cleanly
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Declarative base; every model registered here is created by create_tables()."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class UpdatedAtMixin:
    """
    Last-write timestamp.

    Conversation records keep their own millisecond created_at, which is
    rewritten with each turn; updated_at is the database-side write time.
    """

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
