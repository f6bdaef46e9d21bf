"""LangGraph node functions for diagram refinement.

Exports the three stage nodes and the post-verify router:
1. highlight_node: mark new elements
2. verify_node: correct and re-extract
3. finalize_node: explain and link
"""

from uml_assistant.core.agentic_system.diagram_agent.graph.nodes.finalize_node import (
    finalize_node,
)
from uml_assistant.core.agentic_system.diagram_agent.graph.nodes.highlight_node import (
    highlight_node,
)
from uml_assistant.core.agentic_system.diagram_agent.graph.nodes.verify_node import (
    FINALIZE,
    route_after_verify,
    verify_node,
)

__all__ = [
    "FINALIZE",
    "finalize_node",
    "highlight_node",
    "route_after_verify",
    "verify_node",
]
