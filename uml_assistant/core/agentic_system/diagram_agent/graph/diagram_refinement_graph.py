"""LangGraph definition for diagram refinement.

Builds and compiles a stateful graph:
1. highlight (stage model)
2. verify (stage model) + re-extraction
3. finalize (generation model) + image link, only if re-extraction hit

No loops and no backward edges.

Dependencies: langgraph, node functions, schema
System role: Graph orchestration for diagram refinement
"""

import logging
from typing import TYPE_CHECKING

from langgraph.graph import END, StateGraph

from uml_assistant.core.agentic_system.diagram_agent.agent.diagram_schema import (
    DiagramRefinementState,
)
from uml_assistant.core.agentic_system.diagram_agent.graph.nodes import (
    FINALIZE,
    finalize_node,
    highlight_node,
    route_after_verify,
    verify_node,
)

if TYPE_CHECKING:
    from uml_assistant.core.agentic_system.agent.response_generator import ResponseGenerator
    from uml_assistant.core.agentic_system.diagram_agent.utilities.plantuml_link_builder import (
        PlantUMLLinkBuilder,
    )

logger = logging.getLogger(__name__)


def create_diagram_refinement_graph(
    stage_generator: "ResponseGenerator",
    final_generator: "ResponseGenerator",
    link_builder: "PlantUMLLinkBuilder",
):
    """Create the refinement graph.

    Args:
        stage_generator: Generator for highlight and verify
        final_generator: Generator for finalize
        link_builder: PlantUML image link builder

    Returns:
        CompiledStateGraph: Compiled and runnable graph
    """
    try:
        logger.info(f"{__name__}:create_diagram_refinement_graph - Building graph")

        graph = StateGraph(DiagramRefinementState)

        # Node wrappers with dependency injection
        async def highlight_wrapper(state):
            return await highlight_node(state, stage_generator)

        async def verify_wrapper(state):
            return await verify_node(state, stage_generator)

        async def finalize_wrapper(state):
            return await finalize_node(state, final_generator, link_builder)

        graph.add_node("highlight", highlight_wrapper)
        graph.add_node("verify", verify_wrapper)
        graph.add_node(FINALIZE, finalize_wrapper)

        graph.set_entry_point("highlight")
        graph.add_edge("highlight", "verify")
        graph.add_conditional_edges(
            "verify",
            route_after_verify,
            {FINALIZE: FINALIZE, END: END},
        )
        graph.add_edge(FINALIZE, END)

        compiled_graph = graph.compile()
        logger.info(f"{__name__}:create_diagram_refinement_graph - Graph created successfully")
        return compiled_graph

    except Exception as e:
        logger.error(
            f"{__name__}:create_diagram_refinement_graph - {type(e).__name__}: {e}"
        )
        raise
