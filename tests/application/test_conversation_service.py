"""
Test suite for ConversationService.

System role: Verification of conversation read access
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from uml_assistant.application.services.conversation_service import ConversationService
from uml_assistant.core.exceptions import ConversationNotFoundError


@pytest.fixture
def read_store() -> MagicMock:
    store = MagicMock()
    store.list_for_user = AsyncMock(return_value=[])
    store.get_for_user = AsyncMock(return_value=None)
    return store


class TestConversationService:
    """Tests for list and get."""

    @pytest.mark.asyncio
    async def test_list_passes_user_and_limit(self, read_store) -> None:
        db = MagicMock()
        rows = [MagicMock(id="a"), MagicMock(id="b")]
        read_store.list_for_user.return_value = rows
        service = ConversationService(db, store=read_store)

        result = await service.list_conversations("user-1", limit=2)

        assert result == rows
        read_store.list_for_user.assert_awaited_once_with(db, "user-1", limit=2)

    @pytest.mark.asyncio
    async def test_get_returns_owned_conversation(self, read_store) -> None:
        conversation = MagicMock(id="Ab3xY9z")
        read_store.get_for_user.return_value = conversation
        service = ConversationService(MagicMock(), store=read_store)

        assert await service.get_conversation("user-1", "Ab3xY9z") is conversation

    @pytest.mark.asyncio
    async def test_get_missing_raises(self, read_store) -> None:
        service = ConversationService(MagicMock(), store=read_store)

        with pytest.raises(ConversationNotFoundError) as exc_info:
            await service.get_conversation("user-1", "nope123")

        assert exc_info.value.details["conversation_id"] == "nope123"
