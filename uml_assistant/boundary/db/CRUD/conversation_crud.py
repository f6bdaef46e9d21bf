"""
Conversation CRUD operations.

Provides the two writes issued per turn (full-record append and user index)
plus the reads behind the conversation endpoints.

Dependencies: sqlalchemy, uml_assistant.boundary.db.models
System role: Conversation persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from uml_assistant.boundary.db.CRUD.base_crud import BaseCRUD
from uml_assistant.boundary.db.models.conversation_model import (
    ConversationIndexModel,
    ConversationModel,
)

KEY_PREFIX = "chat:"


def conversation_key(conversation_id: str) -> str:
    """Return the index key for a conversation id."""
    return f"{KEY_PREFIX}{conversation_id}"


class ConversationCRUD(BaseCRUD[ConversationModel]):
    """
    CRUD operations for ConversationModel and its user index.

    Writes flush only. ChatService commits both writes of a turn together.
    """

    def __init__(self) -> None:
        super().__init__(ConversationModel)

    async def append(self, session: AsyncSession, conversation_id: str, record: dict) -> ConversationModel:
        """
        Store the full conversation record under its id, overwriting any previous value.

        Args:
            session: Async database session
            conversation_id: Conversation id
            record: Conversation fields (user_id, title, created_at, path, messages)

        Returns:
            Persisted ConversationModel
        """
        fields = {key: value for key, value in record.items() if key != "id"}
        return await self.upsert(session, id=conversation_id, **fields)

    async def index_by_user(
        self,
        session: AsyncSession,
        user_id: str,
        conversation_id: str,
        score: float,
    ) -> ConversationIndexModel:
        """
        Add (or rescore) a conversation in the user's index.

        Args:
            session: Async database session
            user_id: Owner identity
            conversation_id: Conversation id
            score: Sort score, newer is higher

        Returns:
            Persisted ConversationIndexModel
        """
        entry = await session.merge(
            ConversationIndexModel(
                user_id=user_id,
                conversation_key=conversation_key(conversation_id),
                score=score,
            )
        )
        await session.flush()
        return entry

    async def get_for_user(
        self,
        session: AsyncSession,
        conversation_id: str,
        user_id: str,
    ) -> ConversationModel | None:
        """
        Retrieve a conversation only if it belongs to the user.

        Returns:
            ConversationModel if found and owned by user_id, None otherwise
        """
        conversation = await self.get_by_id(session, conversation_id)
        if conversation is None or conversation.user_id != user_id:
            return None
        return conversation

    async def list_for_user(
        self,
        session: AsyncSession,
        user_id: str,
        limit: int | None = None,
    ) -> Sequence[ConversationModel]:
        """
        List a user's indexed conversations that they still own, highest score first.

        Args:
            session: Async database session
            user_id: Owner identity
            limit: Maximum number of conversations (None for all)

        Returns:
            Sequence of ConversationModel rows
        """
        stmt = (
            select(ConversationModel)
            .join(
                ConversationIndexModel,
                ConversationIndexModel.conversation_key == KEY_PREFIX + ConversationModel.id,
            )
            .where(
                ConversationIndexModel.user_id == user_id,
                ConversationModel.user_id == user_id,
            )
            .order_by(ConversationIndexModel.score.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


conversation_crud = ConversationCRUD()
