"""
Pydantic models for prompt registry configuration.

Dependencies: pydantic
System role: Model parameters stored alongside each registered template
"""

from typing import Any

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """
    LLM parameters tracked with a prompt version.

    Attributes:
        model: Chat model identifier (e.g., "gemini-2.5-pro")
        temperature: Sampling temperature (0.0-2.0)
        stage: Pipeline stage the template belongs to, if any
    """

    model: str = Field(description="Chat model identifier")
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    stage: str | None = Field(
        default=None,
        description="Pipeline stage (classify, respond, highlight, verify, finalize)",
    )

    def to_langfuse_config(self) -> dict[str, Any]:
        """Convert to the config dict stored with the Langfuse prompt."""
        config: dict[str, Any] = {"model": self.model}
        if self.temperature is not None:
            config["temperature"] = self.temperature
        if self.stage:
            config["stage"] = self.stage
        return config
