"""
Language model configuration settings.

Two chat models back the pipeline: the generation model writes the drafted
and final answers, the stage model handles classification and the
highlight/verify diagram stages.

Dependencies: pydantic, pydantic_settings
System role: Completion capability configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str = Field(
        default="google_genai",
        description="LangChain model provider passed to init_chat_model",
    )
    generation_model: str = Field(
        default="gemini-2.5-pro",
        description="Model used for drafted and final answers",
    )
    stage_model: str = Field(
        default="gemini-2.5-flash",
        description="Model used for classification and diagram highlight/verify stages",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature shared by all pipeline calls",
    )
