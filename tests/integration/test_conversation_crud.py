"""
Integration tests for ConversationCRUD against in-memory SQLite.

System role: Verification of conversation persistence
"""

import pytest

from uml_assistant.boundary.db.CRUD.conversation_crud import conversation_crud, conversation_key
from uml_assistant.boundary.db.models.conversation_model import ConversationIndexModel


def make_record(user_id: str, created_at: int, content: str = "hello") -> dict:
    return {
        "user_id": user_id,
        "title": content[:100],
        "created_at": created_at,
        "path": "/chat/x",
        "messages": [{"role": "user", "content": content}],
    }


class TestConversationCRUD:
    """Tests for append, index and reads."""

    def test_conversation_key(self) -> None:
        assert conversation_key("Ab3xY9z") == "chat:Ab3xY9z"

    @pytest.mark.asyncio
    async def test_append_overwrites_full_record(self, test_async_db) -> None:
        await conversation_crud.append(test_async_db, "c1", make_record("u1", 100, "first"))
        await conversation_crud.append(test_async_db, "c1", make_record("u1", 200, "second"))
        await test_async_db.commit()

        stored = await conversation_crud.get_by_id(test_async_db, "c1")

        assert stored.created_at == 200
        assert stored.title == "second"
        assert stored.messages == [{"role": "user", "content": "second"}]

    @pytest.mark.asyncio
    async def test_index_by_user_rescores(self, test_async_db) -> None:
        await conversation_crud.index_by_user(test_async_db, "u1", "c1", 100)
        await conversation_crud.index_by_user(test_async_db, "u1", "c1", 300)
        await test_async_db.commit()

        entry = await test_async_db.get(ConversationIndexModel, ("u1", "chat:c1"))

        assert entry.score == 300

    @pytest.mark.asyncio
    async def test_get_for_user_checks_ownership(self, test_async_db) -> None:
        await conversation_crud.append(test_async_db, "c1", make_record("owner", 100))
        await test_async_db.commit()

        assert await conversation_crud.get_for_user(test_async_db, "c1", "owner") is not None
        assert await conversation_crud.get_for_user(test_async_db, "c1", "intruder") is None
        assert await conversation_crud.get_for_user(test_async_db, "missing", "owner") is None

    @pytest.mark.asyncio
    async def test_list_for_user_newest_first(self, test_async_db) -> None:
        for conversation_id, score in [("old", 100), ("new", 300), ("mid", 200)]:
            await conversation_crud.append(test_async_db, conversation_id, make_record("u1", score))
            await conversation_crud.index_by_user(test_async_db, "u1", conversation_id, score)
        await conversation_crud.append(test_async_db, "other", make_record("u2", 400))
        await conversation_crud.index_by_user(test_async_db, "u2", "other", 400)
        await test_async_db.commit()

        listed = await conversation_crud.list_for_user(test_async_db, "u1")
        limited = await conversation_crud.list_for_user(test_async_db, "u1", limit=1)

        assert [c.id for c in listed] == ["new", "mid", "old"]
        assert [c.id for c in limited] == ["new"]

    @pytest.mark.asyncio
    async def test_list_for_user_skips_records_owned_by_someone_else(self, test_async_db) -> None:
        await conversation_crud.append(test_async_db, "c1", make_record("alice", 100))
        await conversation_crud.index_by_user(test_async_db, "alice", "c1", 100)
        await conversation_crud.append(test_async_db, "c2", make_record("alice", 200))
        await conversation_crud.index_by_user(test_async_db, "alice", "c2", 200)
        # c1 rewritten under another user while alice's index entry still points at it
        await conversation_crud.append(test_async_db, "c1", make_record("bob", 300, "bob's text"))
        await test_async_db.commit()

        listed = await conversation_crud.list_for_user(test_async_db, "alice")

        assert [c.id for c in listed] == ["c2"]
        assert all(c.user_id == "alice" for c in listed)
