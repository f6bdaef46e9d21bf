"""
Prompt catalog.

Pure lookup from request category (or diagram stage) to a PromptTemplate,
with optional Langfuse registry versions fetched by label.

Dependencies: langchain_core.prompts, uml_assistant.observability.prompt_registry
System role: Prompt selection for the chat pipeline
"""

import logging
from enum import Enum

from langchain_core.prompts import PromptTemplate

from uml_assistant.core.agentic_system.pipeline_schema import RequestCategory
from uml_assistant.core.agentic_system.prompts.classification_prompt import (
    CLASSIFICATION_PROMPT,
    CLASSIFICATION_PROMPT_NAME,
)
from uml_assistant.core.agentic_system.prompts.diagram_stage_prompts import (
    FINALIZE_PROMPT,
    HIGHLIGHT_PROMPT,
    VERIFY_PROMPT,
)
from uml_assistant.core.agentic_system.prompts.response_prompts import (
    CLARIFICATION_PROMPT,
    DIAGRAM_DRAFT_PROMPT,
    GENERAL_PROMPT,
)
from uml_assistant.observability.prompt_registry.models import ModelConfig
from uml_assistant.observability.prompt_registry.registry import PromptRegistry

logger = logging.getLogger(__name__)


class DiagramStage(str, Enum):
    """Diagram refinement stages that have their own template."""

    HIGHLIGHT = "highlight"
    VERIFY = "verify"
    FINALIZE = "finalize"


RESPONSE_PROMPTS: dict[RequestCategory, tuple[str, PromptTemplate]] = {
    RequestCategory.CLARIFICATION: ("uml-clarification", CLARIFICATION_PROMPT),
    RequestCategory.DIAGRAM: ("uml-diagram-draft", DIAGRAM_DRAFT_PROMPT),
    RequestCategory.GENERAL: ("uml-general", GENERAL_PROMPT),
}

STAGE_PROMPTS: dict[DiagramStage, tuple[str, PromptTemplate]] = {
    DiagramStage.HIGHLIGHT: ("uml-diagram-highlight", HIGHLIGHT_PROMPT),
    DiagramStage.VERIFY: ("uml-diagram-verify", VERIFY_PROMPT),
    DiagramStage.FINALIZE: ("uml-diagram-finalize", FINALIZE_PROMPT),
}


def _resolve(name: str, local: PromptTemplate, label: str | None) -> PromptTemplate:
    """Return the registry version for a label when available, else the local template."""
    if label:
        registry = PromptRegistry()
        if registry.is_enabled:
            prompt = registry.get_langchain_prompt(name, label=label)
            if prompt is not None:
                logger.debug(f"{__name__}:_resolve - Using registry prompt name={name} label={label}")
                return prompt
            logger.debug(f"{__name__}:_resolve - Prompt not found in registry, using local name={name}")
    return local


def get_classification_prompt(label: str | None = None) -> PromptTemplate:
    return _resolve(CLASSIFICATION_PROMPT_NAME, CLASSIFICATION_PROMPT, label)


def get_response_prompt(category: RequestCategory, label: str | None = None) -> PromptTemplate:
    """
    Get the first-pass template for a category.

    Args:
        category: Routable request category
        label: Optional registry label

    Returns:
        PromptTemplate taking chat_history, context and input
    """
    name, template = RESPONSE_PROMPTS[category]
    return _resolve(name, template, label)


def get_stage_prompt(stage: DiagramStage, label: str | None = None) -> PromptTemplate:
    """
    Get the template for a diagram refinement stage.

    Args:
        stage: Refinement stage
        label: Optional registry label

    Returns:
        PromptTemplate for the stage
    """
    name, template = STAGE_PROMPTS[stage]
    return _resolve(name, template, label)


def register_prompts(
    generation_model: str,
    stage_model: str,
    temperature: float,
    labels: list[str] | None = None,
) -> int:
    """
    Register every catalog template with Langfuse.

    Args:
        generation_model: Model behind response and finalize templates
        stage_model: Model behind classification, highlight and verify
        temperature: Sampling temperature
        labels: Optional labels (e.g., ["production"])

    Returns:
        int: Number of templates registered (0 when the registry is disabled)
    """
    registry = PromptRegistry()
    if not registry.is_enabled:
        logger.debug(f"{__name__}:register_prompts - Prompt registry disabled, skipping registration")
        return 0

    labels = labels or ["development"]
    entries: list[tuple[str, PromptTemplate, ModelConfig]] = [
        (
            CLASSIFICATION_PROMPT_NAME,
            CLASSIFICATION_PROMPT,
            ModelConfig(model=stage_model, temperature=temperature, stage="classify"),
        )
    ]
    for name, template in RESPONSE_PROMPTS.values():
        entries.append((name, template, ModelConfig(model=generation_model, temperature=temperature, stage="respond")))
    for stage, (name, template) in STAGE_PROMPTS.items():
        model = generation_model if stage is DiagramStage.FINALIZE else stage_model
        entries.append((name, template, ModelConfig(model=model, temperature=temperature, stage=stage.value)))

    for name, template, config in entries:
        registry.register_prompt(name=name, template=template, config=config, labels=labels)

    logger.info(f"{__name__}:register_prompts - Registered {len(entries)} prompts labels={labels}")
    return len(entries)
