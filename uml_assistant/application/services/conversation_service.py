"""
Conversation service.

Read access to a user's stored conversations.

Dependencies: uml_assistant.boundary.db
System role: Conversation history business logic
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from uml_assistant.boundary.db.CRUD.conversation_crud import ConversationCRUD, conversation_crud
from uml_assistant.boundary.db.models.conversation_model import ConversationModel
from uml_assistant.core.exceptions import ConversationNotFoundError

logger = logging.getLogger(__name__)


class ConversationService:
    """Conversation read operations scoped to the calling user."""

    def __init__(self, db: AsyncSession, store: ConversationCRUD = conversation_crud) -> None:
        self.db = db
        self.store = store

    async def list_conversations(self, user_id: str, limit: int | None = None) -> Sequence[ConversationModel]:
        """
        List the user's conversations, newest first.

        Args:
            user_id: Authenticated user id
            limit: Maximum number of conversations

        Returns:
            Sequence of ConversationModel
        """
        conversations = await self.store.list_for_user(self.db, user_id, limit=limit)
        logger.info(f"{__name__}:list_conversations - user_id={user_id} count={len(conversations)}")
        return conversations

    async def get_conversation(self, user_id: str, conversation_id: str) -> ConversationModel:
        """
        Get one of the user's conversations.

        Raises:
            ConversationNotFoundError: If missing or owned by another user
        """
        conversation = await self.store.get_for_user(self.db, conversation_id, user_id)
        if conversation is None:
            raise ConversationNotFoundError(conversation_id)
        return conversation
