"""Finalize node for diagram refinement.

Writes the explanation for the verified diagram with the generation model,
reusing the retrieved context, and builds the image link.

Dependencies: logging, response_generator, plantuml_link_builder, schema
System role: Last stage of the refinement graph
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
    from uml_assistant.core.agentic_system.diagram_agent.utilities.plantuml_link_builder import (
        PlantUMLLinkBuilder,
    )

logger = logging.getLogger(__name__)


async def finalize_node(
    state: DiagramRefinementState,
    generator: "ResponseGenerator",
    link_builder: "PlantUMLLinkBuilder",
) -> dict:
    """Explain the verified diagram and link its rendering.

    Args:
        state: LangGraph state with verified_diagram, chat_history, input and context_docs
        generator: Generation model generator
        link_builder: PlantUML image link builder

    Returns:
        dict: State update with explanation, image_url and stage tracking
    """
    diagram = state["verified_diagram"]
    logger.info(f"{__name__}:finalize_node - START diagram_len={len(diagram.text)}")
    try:
        explanation = await generator.agenerate(
            get_stage_prompt(DiagramStage.FINALIZE, label=state.get("prompt_label")),
            {
                "diagram": diagram.text,
                "chat_history": state.get("chat_history", ""),
                "input": state["input"],
            },
            state.get("context_docs", []),
        )
    except Exception as e:
        logger.error(
            f"{__name__}:finalize_node - FAILED {type(e).__name__}: {e}",
            exc_info=True,
        )
        raise

    image_url = link_builder.build(diagram)
    logger.info(f"{__name__}:finalize_node - END explanation_len={len(explanation)}")
    return {
        "explanation": explanation,
        "image_url": image_url,
        **advance_stage(state, RefinementStage.FINALIZED),
    }
