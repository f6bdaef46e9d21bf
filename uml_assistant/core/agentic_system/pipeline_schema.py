"""Conversation pipeline schemas.

This module defines:
- ConversationTurn: one message of the conversation history
- RequestCategory: the closed set of request types the classifier may return
- ClassificationResult: raw classifier answer plus its recognized category
- PipelineResult: immutable accumulator threaded through a single turn

Dependencies: pydantic, enum
System role: Data schemas for the chat pipeline
"""

from enum import Enum
from typing import Literal, Sequence

from pydantic import BaseModel, ConfigDict, Field

EVALUATION_TAG_TEMPLATE = "[Evaluation Response: {category}]"


class RequestCategory(str, Enum):
    """Request categories routed by the classifier."""

    CLARIFICATION = "clarification"
    DIAGRAM = "diagram"
    GENERAL = "general"


class ConversationTurn(BaseModel):
    """A single message in the conversation history."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"] = Field(description="Message author")
    content: str = Field(description="Message text")

    def format(self) -> str:
        """Render as a `role: content` history line."""
        return f"{self.role}: {self.content}"


def format_chat_history(turns: Sequence[ConversationTurn]) -> str:
    """Render turns as newline-separated `role: content` lines, in order."""
    return "\n".join(turn.format() for turn in turns)


class ClassificationResult(BaseModel):
    """Classifier output.

    category is None when the raw answer is not exactly one of the labels.
    """

    model_config = ConfigDict(frozen=True)

    raw_label: str = Field(description="Model answer, whitespace-trimmed")
    category: RequestCategory | None = Field(
        default=None, description="Recognized category, None if unrecognized"
    )

    @property
    def is_recognized(self) -> bool:
        return self.category is not None

    def effective_category(self) -> RequestCategory:
        """Resolve to a routable category, defaulting unrecognized labels to general."""
        if self.category is None:
            return RequestCategory.GENERAL
        return self.category


class PipelineResult(BaseModel):
    """Immutable turn accumulator.

    Every builder method returns a new value; the final value is sealed into
    the assistant turn that gets persisted and returned.
    """

    model_config = ConfigDict(frozen=True)

    category: RequestCategory
    text: str = ""

    def with_text(self, text: str) -> "PipelineResult":
        return self.model_copy(update={"text": text})

    def append(self, suffix: str) -> "PipelineResult":
        return self.model_copy(update={"text": self.text + suffix})

    def with_category_tag(self) -> "PipelineResult":
        """Append the evaluation tag, with no separator."""
        return self.append(EVALUATION_TAG_TEMPLATE.format(category=self.category.value))

    def seal(self) -> ConversationTurn:
        return ConversationTurn(role="assistant", content=self.text)
