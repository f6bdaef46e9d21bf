"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from uml_assistant.configs.auth import AuthSettings
from uml_assistant.configs.base import BaseSettings
from uml_assistant.configs.database import DatabaseSettings
from uml_assistant.configs.llm import LLMSettings
from uml_assistant.configs.observability import ObservabilitySettings
from uml_assistant.configs.plantuml import PlantUMLSettings
from uml_assistant.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    llm: LLMSettings = Field(default_factory=LLMSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    plantuml: PlantUMLSettings = Field(default_factory=PlantUMLSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from uml_assistant.configs import get_settings
        settings = get_settings()
    """
    return Settings()
