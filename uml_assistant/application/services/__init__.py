"""
Application services.
"""

from uml_assistant.application.services.chat_service import ChatService, TurnOutcome
from uml_assistant.application.services.conversation_service import ConversationService

__all__ = ["ChatService", "ConversationService", "TurnOutcome"]
