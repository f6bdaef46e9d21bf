"""
Authentication boundary settings.

Identity is resolved by an upstream gateway; this service only reads the
trusted header it forwards.

Dependencies: pydantic_settings
System role: Caller identity configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Settings for resolving the authenticated user."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    user_header: str = Field(
        default="X-User-ID",
        description="Header carrying the authenticated user id",
    )
