"""
FastAPI dependencies.
"""

from uml_assistant.api.deps.dependencies import (
    ServiceCache,
    get_chat_service,
    get_conversation_service,
    get_current_user_id,
    get_service_cache,
)

__all__ = [
    "ServiceCache",
    "get_chat_service",
    "get_conversation_service",
    "get_current_user_id",
    "get_service_cache",
]
