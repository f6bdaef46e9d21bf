"""
Prompt catalog for the chat pipeline.
"""

from uml_assistant.core.agentic_system.prompts.prompt_catalog import (
    DiagramStage,
    get_classification_prompt,
    get_response_prompt,
    get_stage_prompt,
    register_prompts,
)

__all__ = [
    "DiagramStage",
    "get_classification_prompt",
    "get_response_prompt",
    "get_stage_prompt",
    "register_prompts",
]
