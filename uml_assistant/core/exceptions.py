"""
Exception hierarchy for the UML assistant.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Extraction misses and unrecognized classifier labels are deliberately not
exceptions: both are documented fallbacks handled inside the pipeline.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class UMLAssistantException(Exception):
    """Base exception for all UML assistant errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class AuthorizationError(UMLAssistantException):
    """Raised when no authenticated user identity can be resolved."""

    def __init__(self, message: str = "Unauthorized", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class ValidationError(UMLAssistantException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConversationNotFoundError(UMLAssistantException):
    """Raised when a conversation cannot be found for the caller."""

    def __init__(self, conversation_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize conversation not found error.

        Args:
            conversation_id: ID of the missing conversation
            details: Additional context
        """
        details = details or {}
        details["conversation_id"] = conversation_id
        super().__init__(f"Conversation not found: {conversation_id}", details)


class CapabilityError(UMLAssistantException):
    """Base exception for failures of an external capability (model, index, store)."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize capability error.

        Args:
            message: Error message
            operation: Operation that failed (classify, generate, retrieve, append)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class CompletionError(CapabilityError):
    """Raised when a chat model call fails."""

    pass


class RetrievalError(CapabilityError):
    """Raised when retrieval operations fail."""

    pass


class VectorStoreError(CapabilityError):
    """Raised when the vector index cannot be loaded."""

    pass


class ConversationStoreError(CapabilityError):
    """Raised when persisting a conversation turn fails."""

    pass
