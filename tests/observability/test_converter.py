"""Tests for LangChain to Langfuse converter."""

from langchain_core.prompts import PromptTemplate

from uml_assistant.observability.prompt_registry.converter import (
    from_langfuse_text,
    to_langfuse_text,
)


class TestToLangfuse:
    """Tests for LangChain -> Langfuse conversion."""

    def test_single_variable(self) -> None:
        assert to_langfuse_text(PromptTemplate.from_template("Hello {name}!")) == "Hello {{name}}!"

    def test_multiple_variables(self) -> None:
        template = PromptTemplate.from_template("{chat_history}\n{input}")
        assert to_langfuse_text(template) == "{{chat_history}}\n{{input}}"

    def test_no_variables(self) -> None:
        assert to_langfuse_text(PromptTemplate.from_template("Hello world!")) == "Hello world!"

    def test_escaped_braces_become_literal(self) -> None:
        """LangChain {{ }} escapes are single braces in Langfuse text."""
        template = PromptTemplate.from_template("class A {{\n  +id: int\n}}\n{diagram}")
        assert to_langfuse_text(template) == "class A {\n  +id: int\n}\n{{diagram}}"


class TestFromLangfuse:
    """Tests for Langfuse -> LangChain conversion."""

    def test_variables_restored(self) -> None:
        template = from_langfuse_text("Hello {{ name }}!")
        assert template.input_variables == ["name"]
        assert template.format(name="Ada") == "Hello Ada!"

    def test_literal_braces_escaped(self) -> None:
        template = from_langfuse_text("class A {\n}\n{{diagram}}")
        assert template.input_variables == ["diagram"]
        assert template.format(diagram="X") == "class A {\n}\nX"

    def test_stage_template_survives_both_directions(self) -> None:
        original = PromptTemplate.from_template("Mark {{New Addition}} in {diagram} for {input}")
        restored = from_langfuse_text(to_langfuse_text(original))
        assert restored.format(diagram="d", input="i") == original.format(diagram="d", input="i")
