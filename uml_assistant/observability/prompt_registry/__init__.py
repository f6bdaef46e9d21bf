"""
Langfuse prompt registry package.

Versioned storage of the pipeline's text templates with model configuration.
"""

from uml_assistant.observability.prompt_registry.models import ModelConfig
from uml_assistant.observability.prompt_registry.registry import PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]
