"""PlantUML extraction from model output.

Finds the first ```plantuml fence (non-greedy), then the first
@startuml ... @enduml span inside it (non-greedy). A miss is a normal
result, never an exception.

Dependencies: re
System role: Diagram detection between pipeline stages
"""

import re

from uml_assistant.core.agentic_system.diagram_agent.agent.diagram_schema import (
    DiagramDescription,
)

PLANTUML_MARKER = "PlantUML code:"

_FENCE_PATTERN = re.compile(r"```plantuml(.*?)```", re.DOTALL)
_DIAGRAM_PATTERN = re.compile(r"@startuml(.*?)@enduml", re.DOTALL)


def has_plantuml_marker(text: str) -> bool:
    """True if the answer announces a diagram section."""
    return PLANTUML_MARKER in text


def extract_plantuml(text: str | None, require_fence: bool = True) -> DiagramDescription | None:
    """
    Extract the first delimited diagram from text.

    Args:
        text: Model output to scan
        require_fence: When False, a bare @startuml/@enduml span also matches
            if no ```plantuml fence is present (verify stage output)

    Returns:
        DiagramDescription, or None for a missing/unterminated delimiter or an empty span
    """
    if not text:
        return None

    fence = _FENCE_PATTERN.search(text)
    if fence is not None and fence.group(1):
        scope = fence.group(1)
    elif require_fence:
        return None
    else:
        scope = text

    span = _DIAGRAM_PATTERN.search(scope)
    if span is None or not span.group(1):
        return None

    return DiagramDescription(text=f"@startuml{span.group(1)}@enduml".strip())
