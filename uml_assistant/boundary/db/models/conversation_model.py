"""
Conversation ORM models.

A conversation record is stored whole and overwritten on every turn. The
per-user index is a separate scored table so listing never loads messages.

Dependencies: sqlalchemy, uml_assistant.boundary.db.base
System role: Conversation persistence
"""

from sqlalchemy import JSON, BigInteger, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from uml_assistant.boundary.db.base import Base, UpdatedAtMixin


class ConversationModel(Base, UpdatedAtMixin):
    """
    Conversation ORM model.

    Attributes:
        id: 7-character conversation id
        user_id: Owner identity from the auth gateway
        title: First message content, truncated to 100 characters
        created_at: Creation time in milliseconds since the epoch
        path: Client route for the conversation ("/chat/{id}")
        messages: Ordered list of {"role", "content"} turns
    """

    __tablename__ = "conversations"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)
    path: Mapped[str] = mapped_column(String(64), nullable=False)
    messages: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
        doc="Ordered conversation turns",
    )

    def __repr__(self) -> str:
        return f"<ConversationModel(id={self.id}, user_id={self.user_id}, turns={len(self.messages or [])})>"


class ConversationIndexModel(Base):
    """
    Scored membership of a conversation in a user's index.

    Attributes:
        user_id: Owner identity
        conversation_key: "chat:{id}" key of the indexed conversation
        score: Sort score (creation time in ms); higher is newer
    """

    __tablename__ = "user_conversation_index"
    __table_args__ = (Index("ix_user_conversation_index_score", "user_id", "score"),)

    user_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    conversation_key: Mapped[str] = mapped_column(String(64), primary_key=True)
    score: Mapped[float] = mapped_column(Float, nullable=False)
