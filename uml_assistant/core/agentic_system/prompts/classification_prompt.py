"""
Request classification prompt.

Asks the stage model for exactly one category label.

Dependencies: langchain_core.prompts
System role: Prompt template for the request classifier
"""

from langchain_core.prompts import PromptTemplate

CLASSIFICATION_PROMPT_NAME = "uml-request-classification"

CLASSIFICATION_TEMPLATE = """
Based on the current conversation, classify the type of the user request into one of the following categories:
- clarification
- diagram
- general

Answer with only one of the following words: clarification, diagram, general.

Current conversation:
{chat_history}

User Input: {input}
Type:"""

CLASSIFICATION_PROMPT = PromptTemplate.from_template(CLASSIFICATION_TEMPLATE)
