"""
Conversation store connection settings.

The store is PostgreSQL reached through asyncpg. A full `POSTGRES_URL`
takes precedence over the individual fields, which is how tests and local
runs point the service at another database.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for the ORM
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from uml_assistant.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """PostgreSQL connection and pool configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="POSTGRES_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost")
    port: int = Field(default=5432)
    user: str = Field(default="postgres")
    password: str = Field(default="postgres")
    db: str = Field(default="umlassistant", description="Database holding the conversation tables")

    pool_size: int = Field(default=10, ge=1)
    max_overflow: int = Field(default=20, ge=0)
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = Field(default=False, description="Log emitted SQL")

    sslmode: Literal["disable", "require"] = Field(default="disable")
    url: str | None = Field(default=None, description="Full async SQLAlchemy URL override")

    @property
    def async_database_url(self) -> str:
        """SQLAlchemy URL for the asyncpg driver (asyncpg spells sslmode as `ssl`)."""
        if self.url:
            return self.url
        query = "?ssl=require" if self.sslmode == "require" else ""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}{query}"
