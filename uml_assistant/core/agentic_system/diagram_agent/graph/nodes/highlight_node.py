"""Highlight node for diagram refinement.

Marks elements that are new relative to earlier diagrams in the conversation.

Dependencies: logging, response_generator, prompt_catalog, schema
System role: First stage of the refinement graph
"""

import logging
from typing import TYPE_CHECKING

from uml_assistant.core.agentic_system.diagram_agent.agent.diagram_schema import (
    DiagramRefinementState,
    RefinementStage,
    advance_stage,
)
from uml_assistant.core.agentic_system.prompts import DiagramStage, get_stage_prompt

if TYPE_CHECKING:
    from uml_assistant.core.agentic_system.agent.response_generator import ResponseGenerator

logger = logging.getLogger(__name__)


async def highlight_node(
    state: DiagramRefinementState,
    generator: "ResponseGenerator",
) -> dict:
    """Run the highlight template over the drafted diagram.

    The output may not be a valid diagram block; verify handles that.

    Args:
        state: LangGraph state with diagram, chat_history and input
        generator: Stage model generator

    Returns:
        dict: State update with highlighted_text and stage tracking
    """
    logger.info(f"{__name__}:highlight_node - START diagram_len={len(state['diagram'])}")
    try:
        highlighted = await generator.agenerate(
            get_stage_prompt(DiagramStage.HIGHLIGHT, label=state.get("prompt_label")),
            {
                "diagram": state["diagram"],
                "chat_history": state.get("chat_history", ""),
                "input": state["input"],
            },
        )
    except Exception as e:
        logger.error(
            f"{__name__}:highlight_node - FAILED {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise

    logger.info(f"{__name__}:highlight_node - END output_len={len(highlighted)}")
    return {"highlighted_text": highlighted, **advance_stage(state, RefinementStage.HIGHLIGHTED)}
