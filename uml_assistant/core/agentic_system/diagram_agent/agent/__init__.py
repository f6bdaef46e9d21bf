"""Diagram refinement schemas.

Exports schema definitions for the refinement graph.
"""

from uml_assistant.core.agentic_system.diagram_agent.agent.diagram_schema import (
    DiagramDescription,
    DiagramRefinementState,
    RefinementOutcome,
    RefinementStage,
    advance_stage,
)

__all__ = [
    "DiagramDescription",
    "DiagramRefinementState",
    "RefinementOutcome",
    "RefinementStage",
    "advance_stage",
]
