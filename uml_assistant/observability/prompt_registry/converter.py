"""
LangChain to Langfuse template converter.

LangChain text templates use {variable} and {{ for a literal brace.
Langfuse uses {{variable}} and leaves single braces alone.

Dependencies: langchain_core.prompts
System role: Template syntax conversion for the prompt registry
"""

import re

from langchain_core.prompts import PromptTemplate

_LANGCHAIN_VARIABLE = re.compile(r"(?<!\{)\{([A-Za-z_][A-Za-z0-9_]*)\}(?!\})")
_LANGFUSE_VARIABLE = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")


def to_langfuse_text(template: PromptTemplate) -> str:
    """
    Convert a LangChain PromptTemplate to Langfuse text format.

    Example:
        >>> to_langfuse_text(PromptTemplate.from_template("Hello {name}!"))
        'Hello {{name}}!'
    """
    text = _LANGCHAIN_VARIABLE.sub(r"<<var:\1>>", template.template)
    # Unescape LangChain literal braces before re-introducing variables
    text = text.replace("{{", "{").replace("}}", "}")
    return re.sub(r"<<var:([A-Za-z0-9_]+)>>", r"{{\1}}", text)


def from_langfuse_text(text: str) -> PromptTemplate:
    """
    Convert Langfuse text back to a LangChain PromptTemplate.

    Example:
        >>> from_langfuse_text("Hello {{name}}!").input_variables
        ['name']
    """
    text = _LANGFUSE_VARIABLE.sub(r"<<var:\1>>", text)
    text = text.replace("{", "{{").replace("}", "}}")
    text = re.sub(r"<<var:([A-Za-z0-9_]+)>>", r"{\1}", text)
    return PromptTemplate.from_template(text)
