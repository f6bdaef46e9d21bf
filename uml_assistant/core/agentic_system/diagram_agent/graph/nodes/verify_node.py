"""Verify node for diagram refinement.

Asks the stage model for a corrected diagram, then re-extracts it. The
verify template answers with a bare @startuml/@enduml block, so a
markdown fence is optional here.

Dependencies: logging, response_generator, plantuml_extractor, schema
System role: Second stage of the refinement graph
"""

import logging
from typing import TYPE_CHECKING

from langgraph.graph import END

from uml_assistant.core.agentic_system.diagram_agent.agent.diagram_schema import (
    DiagramRefinementState,
    RefinementStage,
    advance_stage,
)
from uml_assistant.core.agentic_system.diagram_agent.utilities.plantuml_extractor import (
    extract_plantuml,
)
from uml_assistant.core.agentic_system.prompts import DiagramStage, get_stage_prompt

if TYPE_CHECKING:
    from uml_assistant.core.agentic_system.agent.response_generator import ResponseGenerator

logger = logging.getLogger(__name__)

FINALIZE = "finalize"


async def verify_node(
    state: DiagramRefinementState,
    generator: "ResponseGenerator",
) -> dict:
    """Verify the highlighted diagram and re-extract it.

    Args:
        state: LangGraph state with highlighted_text and input
        generator: Stage model generator

    Returns:
        dict: State update with verified_text, verified_diagram (None on miss)
            and stage tracking
    """
    logger.info(f"{__name__}:verify_node - START")
    try:
        verified = await generator.agenerate(
            get_stage_prompt(DiagramStage.VERIFY, label=state.get("prompt_label")),
            {"diagram": state["highlighted_text"], "input": state["input"]},
        )
    except Exception as e:
        logger.error(
            f"{__name__}:verify_node - FAILED {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise

    diagram = extract_plantuml(verified, require_fence=False)
    if diagram is None:
        logger.warning(f"{__name__}:verify_node - No diagram in verified output, keeping draft")
    else:
        logger.info(f"{__name__}:verify_node - END diagram_len={len(diagram.text)}")

    return {
        "verified_text": verified,
        "verified_diagram": diagram,
        **advance_stage(state, RefinementStage.VERIFIED),
    }


def route_after_verify(state: DiagramRefinementState) -> str:
    """Finalize only when verification produced an extractable diagram."""
    return FINALIZE if state.get("verified_diagram") is not None else END
