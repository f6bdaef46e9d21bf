"""
Test suite for ResponseGenerator.

System role: Verification of template-driven generation
"""

from unittest.mock import patch

import pytest
from langchain_core.documents import Document
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.prompts import PromptTemplate

from uml_assistant.core.agentic_system.agent.response_generator import (
    NO_CONTEXT_TEXT,
    ResponseGenerator,
    format_documents,
)


class TestFormatDocuments:
    """Tests for context stuffing."""

    def test_joins_with_blank_lines(self) -> None:
        docs = [Document(page_content="one"), Document(page_content="two")]

        assert format_documents(docs) == "one\n\ntwo"

    def test_empty_renders_placeholder(self) -> None:
        assert format_documents([]) == NO_CONTEXT_TEXT == "No additional information."


class TestResponseGenerator:
    """Tests for agenerate."""

    @pytest.mark.asyncio
    async def test_returns_model_text(self) -> None:
        generator = ResponseGenerator(FakeListChatModel(responses=["hello"]))
        template = PromptTemplate.from_template("Say {input}")

        assert await generator.agenerate(template, {"input": "hi"}) == "hello"

    @pytest.mark.asyncio
    async def test_context_is_stuffed_when_declared(self) -> None:
        """The rendered prompt carries the joined fragments."""
        generator = ResponseGenerator(FakeListChatModel(responses=["ok"]))
        template = PromptTemplate.from_template("{context}|{input}")
        docs = [Document(page_content="alpha"), Document(page_content="beta")]

        with patch.object(FakeListChatModel, "_call", return_value="ok") as call:
            await generator.agenerate(template, {"input": "q"}, docs)

        messages = call.call_args.args[0]
        assert messages[0].content == "alpha\n\nbeta|q"

    @pytest.mark.asyncio
    async def test_empty_context_renders_placeholder(self) -> None:
        generator = ResponseGenerator(FakeListChatModel(responses=["ok"]))
        template = PromptTemplate.from_template("{context}|{input}")

        with patch.object(FakeListChatModel, "_call", return_value="ok") as call:
            await generator.agenerate(template, {"input": "q"})

        assert call.call_args.args[0][0].content == "No additional information.|q"

    @pytest.mark.asyncio
    async def test_context_ignored_without_variable(self) -> None:
        """Templates without context never receive one."""
        generator = ResponseGenerator(FakeListChatModel(responses=["ok"]))
        template = PromptTemplate.from_template("{input}")

        with patch.object(FakeListChatModel, "_call", return_value="ok") as call:
            await generator.agenerate(template, {"input": "q"}, [Document(page_content="x")])

        assert call.call_args.args[0][0].content == "q"

    @pytest.mark.asyncio
    async def test_model_errors_propagate(self) -> None:
        generator = ResponseGenerator(FakeListChatModel(responses=["ok"]))
        template = PromptTemplate.from_template("{input}")

        with patch.object(FakeListChatModel, "_call", side_effect=RuntimeError("quota")):
            with pytest.raises(RuntimeError, match="quota"):
                await generator.agenerate(template, {"input": "q"})
