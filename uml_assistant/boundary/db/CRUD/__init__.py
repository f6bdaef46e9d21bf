"""
CRUD operations for ORM models.
"""

from uml_assistant.boundary.db.CRUD.conversation_crud import (
    ConversationCRUD,
    conversation_crud,
    conversation_key,
)

__all__ = ["ConversationCRUD", "conversation_crud", "conversation_key"]
