"""
ORM models.
"""

from uml_assistant.boundary.db.models.conversation_model import (
    ConversationIndexModel,
    ConversationModel,
)

__all__ = ["ConversationModel", "ConversationIndexModel"]
