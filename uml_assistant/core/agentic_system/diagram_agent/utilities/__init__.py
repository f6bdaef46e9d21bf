"""Diagram utilities.

Exports PlantUML extraction and link building helpers.
"""

from uml_assistant.core.agentic_system.diagram_agent.utilities.plantuml_extractor import (
    PLANTUML_MARKER,
    extract_plantuml,
    has_plantuml_marker,
)
from uml_assistant.core.agentic_system.diagram_agent.utilities.plantuml_link_builder import (
    PlantUMLLinkBuilder,
    decode_plantuml_payload,
    encode_plantuml,
    format_image_markdown,
)

__all__ = [
    "PLANTUML_MARKER",
    "PlantUMLLinkBuilder",
    "decode_plantuml_payload",
    "encode_plantuml",
    "extract_plantuml",
    "format_image_markdown",
    "has_plantuml_marker",
]
