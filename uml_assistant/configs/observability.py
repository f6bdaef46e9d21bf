"""
Observability configuration settings.

Langfuse credentials for the prompt registry and the label used to fetch
versioned prompts at request time.

Dependencies: pydantic, pydantic_settings
System role: Prompt registry configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilitySettings(BaseSettings):
    """Langfuse configuration. The registry stays inactive without both keys."""

    model_config = SettingsConfigDict(
        env_prefix="LANGFUSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    langfuse_public_key: str | None = Field(default=None, description="Langfuse public key")
    langfuse_secret_key: str | None = Field(default=None, description="Langfuse secret key")
    langfuse_host: str = Field(
        default="https://cloud.langfuse.com",
        description="Langfuse server URL",
    )
    enable_tracing: bool = Field(
        default=True,
        description="Allow the prompt registry to talk to Langfuse",
    )
    prompt_label: str | None = Field(
        default=None,
        description="Registry label to fetch prompts by (local templates when unset)",
    )
