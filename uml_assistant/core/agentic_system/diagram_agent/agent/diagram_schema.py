"""Diagram refinement schemas for state management and results.

This module defines:
- DiagramDescription: a delimited @startuml/@enduml block
- RefinementStage: forward-only stage machine of the refinement graph
- DiagramRefinementState: TypedDict schema for LangGraph state
- RefinementOutcome: what the orchestrator needs after the graph ran

Dependencies: pydantic, typing, langchain_core.documents
System role: Data schemas for the diagram refinement pipeline
"""

from enum import Enum
from typing import TypedDict

from langchain_core.documents import Document
from pydantic import BaseModel, ConfigDict, Field


class DiagramDescription(BaseModel):
    """PlantUML text including its @startuml and @enduml markers.

    Only the extractor creates these, and only from a successful match.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Trimmed @startuml ... @enduml span")

    def fenced(self) -> str:
        """Wrap in a ```plantuml markdown fence."""
        return f"```plantuml\n{self.text}\n```"


class RefinementStage(str, Enum):
    """Refinement stages, in the only order they may be visited."""

    DRAFTED = "drafted"
    HIGHLIGHTED = "highlighted"
    VERIFIED = "verified"
    FINALIZED = "finalized"


STAGE_ORDER: tuple[RefinementStage, ...] = (
    RefinementStage.DRAFTED,
    RefinementStage.HIGHLIGHTED,
    RefinementStage.VERIFIED,
    RefinementStage.FINALIZED,
)


class DiagramRefinementState(TypedDict, total=False):
    """LangGraph state schema for diagram refinement.

    Tracks data flow through highlight, verify and finalize.
    """

    # Pipeline inputs
    diagram: str
    chat_history: str
    input: str
    context_docs: list[Document]
    prompt_label: str | None

    # Stage tracking
    stage: RefinementStage
    visited: list[RefinementStage]

    # Highlight output
    highlighted_text: str

    # Verify output
    verified_text: str
    verified_diagram: DiagramDescription | None

    # Finalize output
    explanation: str
    image_url: str


def advance_stage(state: DiagramRefinementState, target: RefinementStage) -> dict:
    """
    Build the stage-tracking part of a node's state update.

    Args:
        state: Current graph state
        target: Stage the node is completing

    Returns:
        dict: {"stage", "visited"} update

    Raises:
        ValueError: If target is not the stage directly after the current one
    """
    current = state.get("stage", RefinementStage.DRAFTED)
    visited = list(state.get("visited", [RefinementStage.DRAFTED]))

    if STAGE_ORDER.index(target) != STAGE_ORDER.index(current) + 1 or target in visited:
        raise ValueError(f"Illegal stage transition {current.value} -> {target.value}")

    return {"stage": target, "visited": visited + [target]}


class RefinementOutcome(BaseModel):
    """Result of one refinement run.

    finalized is False when the verified output held no diagram; the caller
    then keeps the undecorated draft.
    """

    model_config = ConfigDict(frozen=True)

    stages: tuple[RefinementStage, ...] = Field(description="Visited stages, in order")
    diagram: str | None = Field(default=None, description="Verified diagram text")
    explanation: str | None = Field(default=None, description="Finalize stage output")
    image_url: str | None = Field(default=None, description="Rendering URL for the diagram")

    @property
    def finalized(self) -> bool:
        return bool(self.stages) and self.stages[-1] is RefinementStage.FINALIZED

    @classmethod
    def from_state(cls, state: DiagramRefinementState) -> "RefinementOutcome":
        verified = state.get("verified_diagram")
        return cls(
            stages=tuple(state.get("visited", [RefinementStage.DRAFTED])),
            diagram=verified.text if verified is not None else None,
            explanation=state.get("explanation"),
            image_url=state.get("image_url"),
        )
