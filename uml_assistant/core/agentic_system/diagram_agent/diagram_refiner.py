"""Diagram refiner with LangGraph orchestration.

Runs a drafted diagram through highlight, verify and finalize and reports
whether a finalized explanation and image link were produced.

Dependencies: langgraph, graph definition, schema
System role: Diagram sub-pipeline entry point for the chat service
"""

import logging
from typing import TYPE_CHECKING, Sequence

from langchain_core.documents import Document

from uml_assistant.core.agentic_system.diagram_agent.agent.diagram_schema import (
    DiagramDescription,
    DiagramRefinementState,
    RefinementOutcome,
    RefinementStage,
)
from uml_assistant.core.agentic_system.diagram_agent.graph.diagram_refinement_graph import (
    create_diagram_refinement_graph,
)

if TYPE_CHECKING:
    from uml_assistant.core.agentic_system.agent.response_generator import ResponseGenerator
    from uml_assistant.core.agentic_system.diagram_agent.utilities.plantuml_link_builder import (
        PlantUMLLinkBuilder,
    )

logger = logging.getLogger(__name__)


class DiagramRefiner:
    """Refines drafted PlantUML diagrams.

    Orchestrates:
    1. Highlighting of new elements
    2. Verification and re-extraction
    3. Final explanation and image link
    """

    def __init__(
        self,
        stage_generator: "ResponseGenerator",
        final_generator: "ResponseGenerator",
        link_builder: "PlantUMLLinkBuilder",
    ) -> None:
        """Initialize refiner and compile its graph.

        Args:
            stage_generator: Generator backed by the stage model
            final_generator: Generator backed by the generation model
            link_builder: PlantUML image link builder
        """
        self._graph = create_diagram_refinement_graph(
            stage_generator=stage_generator,
            final_generator=final_generator,
            link_builder=link_builder,
        )

    async def arefine(
        self,
        diagram: DiagramDescription,
        chat_history: str,
        user_input: str,
        context_docs: Sequence[Document] = (),
        prompt_label: str | None = None,
    ) -> RefinementOutcome:
        """Run the refinement graph once.

        Args:
            diagram: Diagram extracted from the draft answer
            chat_history: Rendered `role: content` history lines
            user_input: Latest user message
            context_docs: Fragments retrieved for this turn
            prompt_label: Registry label the stage prompts are fetched by

        Returns:
            RefinementOutcome: finalized=False when verification yielded no diagram

        Raises:
            Exception: Model errors from any stage propagate unchanged
        """
        logger.info(f"{__name__}:arefine - START diagram_len={len(diagram.text)}")

        initial_state: DiagramRefinementState = {
            "diagram": diagram.text,
            "chat_history": chat_history,
            "input": user_input,
            "context_docs": list(context_docs),
            "stage": RefinementStage.DRAFTED,
            "visited": [RefinementStage.DRAFTED],
            "prompt_label": prompt_label,
        }
        final_state = await self._graph.ainvoke(initial_state)
        outcome = RefinementOutcome.from_state(final_state)

        logger.info(
            f"{__name__}:arefine - END finalized={outcome.finalized} "
            f"stages={[stage.value for stage in outcome.stages]}"
        )
        return outcome
