"""
Observability module.

Provides structured logging, correlation ID tracking, request middleware,
and prompt version management.
"""

from uml_assistant.observability.prompt_registry import ModelConfig, PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]
