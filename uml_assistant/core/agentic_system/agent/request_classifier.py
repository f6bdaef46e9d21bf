"""
Request classifier.

Labels the latest user message as clarification, diagram or general using
the stage model. An answer that is not exactly one label is reported as
unrecognized rather than raised.

Dependencies: langchain_core, uml_assistant.core.agentic_system.prompts
System role: First stage of the chat pipeline
"""

import logging

from langchain_core.prompts import PromptTemplate

from uml_assistant.core.agentic_system.pipeline_schema import (
    ClassificationResult,
    RequestCategory,
)
from uml_assistant.core.agentic_system.agent.response_generator import ResponseGenerator
from uml_assistant.core.agentic_system.prompts import get_classification_prompt

logger = logging.getLogger(__name__)

_LABELS = {category.value: category for category in RequestCategory}


def parse_category(raw: str) -> ClassificationResult:
    """Map a raw model answer to a category; anything but an exact label is unrecognized."""
    label = raw.strip()
    return ClassificationResult(raw_label=label, category=_LABELS.get(label))


class RequestClassifier:
    """Classify a user request from the conversation history and latest input."""

    def __init__(self, generator: ResponseGenerator, prompt: PromptTemplate | None = None) -> None:
        """
        Args:
            generator: Generator backed by the stage model
            prompt: Fixed template; when None the catalog is consulted on every call
        """
        self._generator = generator
        self._prompt = prompt

    async def aclassify(
        self,
        chat_history: str,
        user_input: str,
        label: str | None = None,
    ) -> ClassificationResult:
        """
        Classify the latest request.

        Args:
            chat_history: Rendered `role: content` history lines
            user_input: Latest user message
            label: Registry label to fetch the template by (ignored for a fixed template)

        Returns:
            ClassificationResult: Raw label and recognized category (None if unrecognized)
        """
        logger.info(f"{__name__}:aclassify - START input_len={len(user_input)}")
        prompt = self._prompt if self._prompt is not None else get_classification_prompt(label=label)
        raw = await self._generator.agenerate(
            prompt,
            {"chat_history": chat_history, "input": user_input},
        )
        result = parse_category(raw)

        if result.is_recognized:
            logger.info(f"{__name__}:aclassify - END category={result.category.value}")
        else:
            logger.warning(
                f"{__name__}:aclassify - Unrecognized label={result.raw_label!r}, defaulting to general"
            )
        return result
