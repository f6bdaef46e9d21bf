"""
Core business logic module.

Contains the exception hierarchy, context retrieval, and the agentic
pipeline components (classifier, generator, prompt catalog, diagram refiner).
"""

from uml_assistant.core.exceptions import (
    AuthorizationError,
    CapabilityError,
    CompletionError,
    ConversationNotFoundError,
    ConversationStoreError,
    RetrievalError,
    UMLAssistantException,
    ValidationError,
    VectorStoreError,
)

__all__ = [
    "UMLAssistantException",
    "AuthorizationError",
    "ValidationError",
    "ConversationNotFoundError",
    "CapabilityError",
    "CompletionError",
    "RetrievalError",
    "VectorStoreError",
    "ConversationStoreError",
]
