"""Diagram refinement module.

Exports the refiner and the schema and utilities it is used with.
"""

from uml_assistant.core.agentic_system.diagram_agent.agent.diagram_schema import (
    DiagramDescription,
    RefinementOutcome,
    RefinementStage,
)
from uml_assistant.core.agentic_system.diagram_agent.diagram_refiner import DiagramRefiner
from uml_assistant.core.agentic_system.diagram_agent.utilities import (
    PlantUMLLinkBuilder,
    extract_plantuml,
    format_image_markdown,
    has_plantuml_marker,
)

__all__ = [
    "DiagramDescription",
    "DiagramRefiner",
    "PlantUMLLinkBuilder",
    "RefinementOutcome",
    "RefinementStage",
    "extract_plantuml",
    "format_image_markdown",
    "has_plantuml_marker",
]
