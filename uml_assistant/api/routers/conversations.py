"""Conversation API endpoints.

Routes:
- GET /conversations - List the caller's conversations, newest first
- GET /conversations/{conversation_id} - Get one of the caller's conversations

Dependencies: uml_assistant.application.services.conversation_service
System role: Conversation history HTTP API
"""

from fastapi import APIRouter, Depends, Query

from uml_assistant.api.deps import get_conversation_service, get_current_user_id
from uml_assistant.api.error_handling import handle_chat_errors
from uml_assistant.application.services.conversation_service import ConversationService
from uml_assistant.models.conversation import (
    ConversationDetailResponse,
    ConversationListResponse,
    ConversationSummaryResponse,
)

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.get("", response_model=ConversationListResponse)
@handle_chat_errors
async def list_conversations(
    limit: int | None = Query(default=None, ge=1, le=500),
    user_id: str = Depends(get_current_user_id),
    service: ConversationService = Depends(get_conversation_service),
) -> ConversationListResponse:
    """List the caller's conversations, newest first."""
    conversations = await service.list_conversations(user_id, limit=limit)
    summaries = [ConversationSummaryResponse.model_validate(c) for c in conversations]
    return ConversationListResponse(conversations=summaries, total=len(summaries))


@router.get("/{conversation_id}", response_model=ConversationDetailResponse)
@handle_chat_errors
async def get_conversation(
    conversation_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ConversationService = Depends(get_conversation_service),
) -> ConversationDetailResponse:
    """Get a conversation owned by the caller.

    Raises:
        HTTPException(404): Conversation missing or owned by another user
    """
    conversation = await service.get_conversation(user_id, conversation_id)
    return ConversationDetailResponse.model_validate(conversation)
