"""Diagram refinement graph orchestration.

Exports graph builder for pipeline execution.
"""

from uml_assistant.core.agentic_system.diagram_agent.graph.diagram_refinement_graph import (
    create_diagram_refinement_graph,
)

__all__ = [
    "create_diagram_refinement_graph",
]
