"""
Chat domain models and schemas.

Request schema for a conversational turn. The response is the plain-text
turn body, so it has no schema.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, Field

from uml_assistant.core.agentic_system.pipeline_schema import ConversationTurn


class ChatRequest(BaseModel):
    """Request schema for a chat turn."""

    messages: list[ConversationTurn] = Field(
        min_length=1,
        description="Full conversation so far, latest user message last",
    )
    id: str | None = Field(
        default=None,
        max_length=32,
        description="Existing conversation id; omitted for a new conversation",
    )
