"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory async database, conversation fixtures, diagram pipeline texts
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

from typing import NamedTuple
from unittest.mock import AsyncMock, MagicMock

import pytest

from uml_assistant.core.agentic_system.pipeline_schema import ConversationTurn
from uml_assistant.observability.prompt_registry.registry import PromptRegistry

DRAFT_DIAGRAM = "@startuml\nclass Order\nclass Customer\nCustomer --> Order\n@enduml"

DRAFT_ANSWER = (
    "A customer places orders.\n\n"
    "PlantUML code:\n"
    "```plantuml\n"
    f"{DRAFT_DIAGRAM}\n"
    "```"
)

HIGHLIGHTED_ANSWER = (
    "```plantuml\n"
    "@startuml\nclass Order\nclass Customer <<New Addition>>\nCustomer --> Order\n@enduml\n"
    "```"
)

VERIFIED_DIAGRAM = "@startuml\nclass Order\nclass Customer <<New Addition>>\nCustomer --> Order\n@enduml"

FINAL_EXPLANATION = (
    "Customer is associated with Order.\n\n"
    "PlantUML code:\n"
    "```plantuml\n"
    f"{VERIFIED_DIAGRAM}\n"
    "```"
)


@pytest.fixture(autouse=True)
def reset_prompt_registry() -> None:
    """Reset the registry singleton so no test leaks a Langfuse client."""
    PromptRegistry._instance = None
    PromptRegistry._client = None
    PromptRegistry._enabled = False


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    import uml_assistant.boundary.db.models  # noqa: F401
    from uml_assistant.boundary.db.base import Base

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def diagram_request() -> list[ConversationTurn]:
    """Conversation whose latest message asks for a diagram."""
    return [
        ConversationTurn(role="user", content="I am modeling an online shop."),
        ConversationTurn(role="assistant", content="Which entities do you need?"),
        ConversationTurn(role="user", content="Draw a class diagram for customers and orders."),
    ]


@pytest.fixture
def general_request() -> list[ConversationTurn]:
    """Single-message conversation with a general question."""
    return [ConversationTurn(role="user", content="What is an aggregation?")]


@pytest.fixture
def mock_store() -> MagicMock:
    """Conversation store with async append/index and no stored conversations."""
    store = MagicMock()
    store.get_by_id = AsyncMock(return_value=None)
    store.append = AsyncMock()
    store.index_by_user = AsyncMock()
    return store


class DiagramTexts(NamedTuple):
    """Model outputs for one pass through the diagram pipeline."""

    draft_diagram: str
    draft_answer: str
    highlighted_answer: str
    verified_diagram: str
    final_explanation: str


@pytest.fixture
def diagram_texts() -> DiagramTexts:
    """Model outputs of a diagram turn that refines successfully."""
    return DiagramTexts(
        draft_diagram=DRAFT_DIAGRAM,
        draft_answer=DRAFT_ANSWER,
        highlighted_answer=HIGHLIGHTED_ANSWER,
        verified_diagram=VERIFIED_DIAGRAM,
        final_explanation=FINAL_EXPLANATION,
    )
