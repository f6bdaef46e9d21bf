"""Tests for configuration defaults and derived values."""

import pytest
from pydantic import ValidationError

from uml_assistant.configs.base import BaseSettings
from uml_assistant.configs.database import DatabaseSettings
from uml_assistant.configs.settings import Settings


def test_pipeline_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LLM_TEMPERATURE", "VECTOR_STORE_SEARCH_TYPE", "AUTH_USER_HEADER"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.llm.provider == "google_genai"
    assert settings.llm.temperature == 0.7
    assert settings.vector_store.search_type == "mmr"
    assert (settings.vector_store.top_k, settings.vector_store.fetch_k) == (4, 5)
    assert settings.plantuml.server_url == "http://www.plantuml.com/plantuml"
    assert settings.auth.user_header == "X-User-ID"


def test_prefixed_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LLM_STAGE_MODEL", "gemini-2.5-flash-lite")
    monkeypatch.setenv("PLANTUML_IMAGE_FORMAT", "svg")

    settings = Settings()

    assert settings.llm.stage_model == "gemini-2.5-flash-lite"
    assert settings.plantuml.image_format == "svg"


def test_database_url_from_fields() -> None:
    db = DatabaseSettings(host="db", port=5433, user="u", password="p", db="uml", sslmode="require", url=None)

    assert db.async_database_url == "postgresql+asyncpg://u:p@db:5433/uml?ssl=require"


def test_database_url_override() -> None:
    db = DatabaseSettings(url="sqlite+aiosqlite:///./local.db")

    assert db.async_database_url == "sqlite+aiosqlite:///./local.db"


def test_log_level_is_normalized() -> None:
    assert BaseSettings(log_level="debug").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        BaseSettings(log_level="chatty")
