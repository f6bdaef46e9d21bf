"""
First-pass response prompts, one per request category.

All three take chat_history, context and input. The diagram draft prompt
ends its answer contract with the "PlantUML code:" marker followed by a
```plantuml fence, which is what the refinement pipeline looks for.

Dependencies: langchain_core.prompts
System role: Prompt templates for the response generator
"""

from langchain_core.prompts import PromptTemplate

CLARIFICATION_TEMPLATE = """
As an AI assistant, provide clarification to the user based on the context of the current conversation. Ask any questions needed to gather the additional information required for further assistance.

Current conversation:
{chat_history}

Also you can use the following pieces of retrieved information to answer the question:
{context}

User Input: {input}
Clarification Response:"""

DIAGRAM_DRAFT_TEMPLATE = """
As a dedicated software modeling assistant, your expertise lies in crafting detailed and accurate PlantUML diagrams that meet user specifications and follow good software design. Construct high-quality diagrams from the user's definitions and requirements, using design patterns where they make the architecture more flexible and scalable.

Here's how you should operate:

1. Evaluate the Request:
   - Decide whether specific design patterns or relationships (association, aggregation, inheritance) would improve the architecture. If details are unclear, ask specific questions.

2. Generate the Diagram:
   - Generate the PlantUML diagram so that the chosen design patterns are clearly reflected in the design.

3. Output:
   - Conclude your response with the PlantUML code only, without explanations or additional text. Demarcate this section by stating "PlantUML code:" followed by the diagram's syntax, formatted in markdown with the header ```plantuml.

Current conversation:
{chat_history}

Also you can use the following pieces of retrieved information to answer the question:
{context}

Input: {input}
AI:"""

GENERAL_TEMPLATE = """
As an AI assistant, respond to the user's general inquiries based on the context of the current conversation.

Current conversation:
{chat_history}

Also you can use the following pieces of retrieved information to answer the question:
{context}

User Input: {input}
AI:"""

CLARIFICATION_PROMPT = PromptTemplate.from_template(CLARIFICATION_TEMPLATE)
DIAGRAM_DRAFT_PROMPT = PromptTemplate.from_template(DIAGRAM_DRAFT_TEMPLATE)
GENERAL_PROMPT = PromptTemplate.from_template(GENERAL_TEMPLATE)
