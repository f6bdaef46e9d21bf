"""
API routers.
"""

from uml_assistant.api.routers.chat import router as chat_router
from uml_assistant.api.routers.conversations import router as conversations_router
from uml_assistant.api.routers.health import router as health_router

__all__ = ["chat_router", "conversations_router", "health_router"]
