"""
PlantUML rendering service settings.

Dependencies: pydantic_settings
System role: Diagram image URL configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlantUMLSettings(BaseSettings):
    """Settings for building PlantUML image references."""

    model_config = SettingsConfigDict(
        env_prefix="PLANTUML_",
        case_sensitive=False,
        extra="ignore",
    )

    server_url: str = Field(
        default="http://www.plantuml.com/plantuml",
        description="Base URL of the PlantUML rendering server",
    )
    image_format: str = Field(
        default="img",
        description="Rendering endpoint (img, png, svg)",
    )
