"""
Diagram refinement stage prompts.

- highlight(diagram, chat_history, input): returns the code unchanged when
  the diagram is new, or marks new elements with <<New Addition>> when it
  updates an earlier diagram
- verify(diagram, input): returns only the corrected @startuml/@enduml text
- finalize(diagram, chat_history, context, input): explanation followed by
  the diagram repeated verbatim after "PlantUML code:"

Dependencies: langchain_core.prompts
System role: Prompt templates for the diagram refinement graph
"""

from langchain_core.prompts import PromptTemplate

HIGHLIGHT_TEMPLATE = """As a dedicated software modeling assistant, your task is to determine whether the provided PlantUML diagram is new or an update to a previously discussed diagram. If it is an update, highlight the new additions or modifications in green. If it is new, return the diagram as-is.

Here's how you should operate:

1. Analyze Chat History:
   - Review the chat history to determine whether the provided PlantUML code has appeared before.
   - If the diagram has not been seen before, it is new.
   - If it has been seen before and now includes new elements or modifications, it is an update.

2. Highlight New Additions (if applicable):
   - For an update, identify new classes, relationships or other elements and give them the <<New Addition>> stereotype, for example:
     @startuml
     skinparam class {{
       BackgroundColor<<New Addition>> LightGreen
     }}
     class User {{
       +String name
       +String email
       +void login()
     }}
     class Employee <<New Addition>> implements User {{
       +String role
     }}
     @enduml

3. Output:
   - If the diagram is new, return the provided PlantUML code exactly as received.
   - If the diagram is an update, return the updated PlantUML code with new elements highlighted.

PlantUML Code:
{diagram}

Current conversation:
{chat_history}

Input: {input}
AI:"""

VERIFY_TEMPLATE = """As a dedicated software modeling assistant, your expertise lies in validating PlantUML diagrams. Verify the syntax correctness and logical consistency of the provided PlantUML code.

Here's how you should operate:

1. Syntax Validation:
   - Check the code for syntax errors and make sure it follows the PlantUML syntax rules.

2. Logical Consistency:
   - Check for duplicated relationships, disconnected parts, and patterns that are not meaningfully connected to the relevant classes.

3. Pattern Validation:
   - Make sure the design patterns the user asked for are applied correctly and connected to the right classes.

4. Output:
   - If errors or inconsistencies are found, correct them and return the updated PlantUML code.
   - If the diagram is already correct, return the original PlantUML code.
   - Do not include explanations or additional text. The output must only contain the PlantUML code enclosed in @startuml and @enduml.

User request: {input}

PlantUML Code:
{diagram}

Verified PlantUML Code:"""

FINALIZE_TEMPLATE = """As a dedicated software modeling assistant, explain the PlantUML diagram below in the light of the user's request. Describe the design choices, the design patterns used and the structure of the diagram.

Here's how you should operate:

1. Analyze the User Prompt:
   - Review the user's request to understand the requirements and context of the diagram.

2. Explain Diagram Elements:
   - Describe the classes, relationships (association, aggregation, inheritance) and applied design patterns.
   - Explain why each pattern was used and how it helps flexibility and scalability.

3. Highlight Key Features:
   - Elaborate on the key components and how they address the user's requirements, including notable interactions between elements.

4. Provide Contextual Information:
   - Add relevant considerations such as possible improvements or scalability concerns.

5. Output:
   - Provide the explanation followed by the given PlantUML code exactly as received. Demarcate this section by stating "PlantUML code:" followed by the diagram's syntax, formatted in markdown.

Also you can use the following pieces of retrieved information to answer the question:
{context}

Current conversation (Chat history):
{chat_history}

Input: {input}

PlantUML Code:
{diagram}

AI:"""

HIGHLIGHT_PROMPT = PromptTemplate.from_template(HIGHLIGHT_TEMPLATE)
VERIFY_PROMPT = PromptTemplate.from_template(VERIFY_TEMPLATE)
FINALIZE_PROMPT = PromptTemplate.from_template(FINALIZE_TEMPLATE)
