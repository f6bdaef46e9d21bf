"""
API request/response schemas.
"""

from uml_assistant.models.chat import ChatRequest
from uml_assistant.models.conversation import (
    ConversationDetailResponse,
    ConversationListResponse,
    ConversationSummaryResponse,
)

__all__ = [
    "ChatRequest",
    "ConversationDetailResponse",
    "ConversationListResponse",
    "ConversationSummaryResponse",
]
