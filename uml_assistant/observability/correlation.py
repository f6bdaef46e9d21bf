"""
Request-scoped log context.

Holds the correlation id of the current request and the conversation id of
the turn being processed, so every log line of a turn can be tied together.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

from contextvars import ContextVar
import uuid

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")
conversation_id_ctx: ContextVar[str] = ContextVar("conversation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set the request correlation id, generating one when the caller sent none.

    Returns:
        str: The correlation id now in context
    """
    value = (correlation_id or "").strip() or uuid.uuid4().hex
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    return correlation_id_ctx.get()


def bind_conversation_id(conversation_id: str) -> None:
    """Attach the conversation being processed to the current context."""
    conversation_id_ctx.set(conversation_id)


def get_conversation_id() -> str:
    return conversation_id_ctx.get()


def clear_correlation_id() -> None:
    """Reset both ids at the end of a request."""
    correlation_id_ctx.set("")
    conversation_id_ctx.set("")
