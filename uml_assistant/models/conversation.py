"""
Conversation schemas.

Response schemas for stored conversations.

Dependencies: pydantic
System role: Conversation API contracts
"""

from pydantic import BaseModel, ConfigDict, Field

from uml_assistant.core.agentic_system.pipeline_schema import ConversationTurn


class ConversationSummaryResponse(BaseModel):
    """Conversation listing entry (no messages)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    created_at: int = Field(description="Milliseconds since the epoch")
    path: str


class ConversationDetailResponse(ConversationSummaryResponse):
    """Conversation with its full message list."""

    user_id: str
    messages: list[ConversationTurn]


class ConversationListResponse(BaseModel):
    """Response schema for a user's conversations."""

    conversations: list[ConversationSummaryResponse]
    total: int = Field(description="Number of conversations returned")
