"""
Response generator.

Runs a prompt template against a chat model, "stuffing" retrieved fragments
into the template's context variable when it declares one.

Dependencies: langchain_core
System role: Text generation for every pipeline stage
"""

import logging
from typing import Any, Sequence

from langchain_core.documents import Document
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import PromptTemplate

logger = logging.getLogger(__name__)

NO_CONTEXT_TEXT = "No additional information."
DOCUMENT_SEPARATOR = "\n\n"


def format_documents(documents: Sequence[Document]) -> str:
    """Join fragment contents with blank lines; empty input renders a fixed placeholder."""
    if not documents:
        return NO_CONTEXT_TEXT
    return DOCUMENT_SEPARATOR.join(doc.page_content for doc in documents)


class ResponseGenerator:
    """
    Template-driven text generation over a single chat model.

    Model errors propagate unchanged; there is no retry.
    """

    def __init__(self, model: BaseChatModel) -> None:
        self._model = model
        self._parser = StrOutputParser()

    async def agenerate(
        self,
        template: PromptTemplate,
        variables: dict[str, Any],
        context_docs: Sequence[Document] = (),
    ) -> str:
        """
        Generate text for a template.

        Args:
            template: Prompt template to fill
            variables: Template variables other than context
            context_docs: Retrieved fragments for the context variable

        Returns:
            str: Model output as plain text
        """
        inputs = dict(variables)
        if "context" in template.input_variables:
            inputs["context"] = format_documents(context_docs)

        logger.debug(
            f"{__name__}:agenerate - START variables={sorted(inputs)} context_docs={len(context_docs)}"
        )
        chain = template | self._model | self._parser
        text = await chain.ainvoke(inputs)
        logger.debug(f"{__name__}:agenerate - END output_len={len(text)}")
        return text
