"""Chat API endpoint.

Routes:
- POST /chat - Process one conversational turn and stream the assembled text

Dependencies: uml_assistant.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from uml_assistant.api.deps import get_chat_service, get_current_user_id
from uml_assistant.api.error_handling import handle_chat_errors
from uml_assistant.application.services.chat_service import ChatService
from uml_assistant.models.chat import ChatRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

CONVERSATION_ID_HEADER = "X-Conversation-ID"


async def _single_chunk(text: str) -> AsyncGenerator[bytes, None]:
    yield text.encode("utf-8")


@router.post("/chat", response_class=StreamingResponse)
@handle_chat_errors
async def chat(
    request: ChatRequest,
    user_id: str = Depends(get_current_user_id),
    chat_service: ChatService = Depends(get_chat_service),
) -> StreamingResponse:
    """Process one turn of a conversation.

    The whole turn is computed before the first byte is sent; the body is a
    single plain-text chunk.

    Args:
        request: ChatRequest with the full message list and optional conversation id
        user_id: Authenticated user (injected)
        chat_service: Injected ChatService

    Returns:
        StreamingResponse: text/plain body, conversation id in X-Conversation-ID

    Raises:
        HTTPException(401): Missing user identity
        HTTPException(500): Model, retrieval or store failure
    """
    outcome = await chat_service.process_turn(
        user_id=user_id,
        messages=request.messages,
        conversation_id=request.id,
    )
    logger.info(
        f"{__name__}:chat - conversation_id={outcome.conversation_id} category={outcome.category.value}"
    )
    return StreamingResponse(
        _single_chunk(outcome.text),
        media_type="text/plain; charset=utf-8",
        headers={CONVERSATION_ID_HEADER: outcome.conversation_id},
    )
