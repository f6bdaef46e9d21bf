"""
Base CRUD operations for SQLAlchemy models.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from uml_assistant.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations keyed by primary key.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def get_by_id(self, session: AsyncSession, id: Any) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Primary key value (tuple for composite keys)

        Returns:
            Model instance if found, None otherwise
        """
        return await session.get(self.model, id)

    async def upsert(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Insert or fully overwrite a record by primary key.

        The session is flushed but not committed; the caller owns the
        transaction.

        Args:
            session: Async database session
            **kwargs: Model field values, including the primary key

        Returns:
            Persistent model instance
        """
        instance = await session.merge(self.model(**kwargs))
        await session.flush()
        return instance
