"""
Test suite for chat API endpoint.

Tests POST /chat with FastAPI TestClient: identity handling, the streamed
plain-text body, the conversation id header, and error mapping.

System role: Verification of chat HTTP API endpoint
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from uml_assistant.api.deps import get_chat_service
from uml_assistant.api.error_handling import register_exception_handlers
from uml_assistant.api.routers.chat import router
from uml_assistant.application.services.chat_service import TurnOutcome
from uml_assistant.core.agentic_system.pipeline_schema import RequestCategory
from uml_assistant.core.exceptions import (
    CompletionError,
    ConversationNotFoundError,
    ConversationStoreError,
)

USER_HEADERS = {"X-User-ID": "user-1"}


@pytest.fixture
def app() -> FastAPI:
    """Create FastAPI test application with chat router."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(router)
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def mock_chat_service() -> AsyncMock:
    service = AsyncMock()
    service.process_turn.return_value = TurnOutcome(
        conversation_id="Ab3xY9z",
        category=RequestCategory.GENERAL,
        raw_label="general",
        text="An aggregation is a whole-part association.[Evaluation Response: general]",
    )
    return service


@pytest.fixture
def chat_payload() -> dict:
    return {"messages": [{"role": "user", "content": "What is an aggregation?"}]}


class TestChatEndpointSuccessful:
    """Test suite for successful chat endpoint requests."""

    def test_chat_streams_turn_text(self, client, mock_chat_service, chat_payload) -> None:
        client.app.dependency_overrides[get_chat_service] = lambda: mock_chat_service

        response = client.post("/chat", json=chat_payload, headers=USER_HEADERS)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "An aggregation is a whole-part association.[Evaluation Response: general]"
        assert response.headers["X-Conversation-ID"] == "Ab3xY9z"

    def test_chat_passes_user_messages_and_id(self, client, mock_chat_service) -> None:
        client.app.dependency_overrides[get_chat_service] = lambda: mock_chat_service

        client.post(
            "/chat",
            json={
                "messages": [
                    {"role": "user", "content": "Model a shop."},
                    {"role": "assistant", "content": "Which entities?"},
                    {"role": "user", "content": "Customers and orders."},
                ],
                "id": "Ab3xY9z",
            },
            headers=USER_HEADERS,
        )

        kwargs = mock_chat_service.process_turn.call_args.kwargs
        assert kwargs["user_id"] == "user-1"
        assert kwargs["conversation_id"] == "Ab3xY9z"
        assert [m.content for m in kwargs["messages"]] == [
            "Model a shop.",
            "Which entities?",
            "Customers and orders.",
        ]


class TestChatEndpointErrors:
    """Test suite for chat endpoint error handling."""

    def test_missing_identity_is_401_without_pipeline_work(self, client, mock_chat_service, chat_payload) -> None:
        client.app.dependency_overrides[get_chat_service] = lambda: mock_chat_service

        response = client.post("/chat", json=chat_payload)

        assert response.status_code == 401
        mock_chat_service.process_turn.assert_not_awaited()

    def test_blank_identity_is_401(self, client, mock_chat_service, chat_payload) -> None:
        client.app.dependency_overrides[get_chat_service] = lambda: mock_chat_service

        response = client.post("/chat", json=chat_payload, headers={"X-User-ID": "   "})

        assert response.status_code == 401

    def test_empty_messages_is_422(self, client, mock_chat_service) -> None:
        client.app.dependency_overrides[get_chat_service] = lambda: mock_chat_service

        response = client.post("/chat", json={"messages": []}, headers=USER_HEADERS)

        assert response.status_code == 422
        mock_chat_service.process_turn.assert_not_awaited()

    def test_unknown_role_is_422(self, client, mock_chat_service) -> None:
        client.app.dependency_overrides[get_chat_service] = lambda: mock_chat_service

        response = client.post(
            "/chat",
            json={"messages": [{"role": "system", "content": "hi"}]},
            headers=USER_HEADERS,
        )

        assert response.status_code == 422

    @pytest.mark.parametrize(
        "error",
        [
            CompletionError("Response generation failed", operation="generate"),
            ConversationStoreError("Failed to persist conversation", operation="append"),
            RuntimeError("unexpected"),
        ],
    )
    def test_pipeline_failures_are_500(self, client, mock_chat_service, chat_payload, error) -> None:
        mock_chat_service.process_turn.side_effect = error
        client.app.dependency_overrides[get_chat_service] = lambda: mock_chat_service

        response = client.post("/chat", json=chat_payload, headers=USER_HEADERS)

        assert response.status_code == 500
        assert "X-Conversation-ID" not in response.headers

    def test_foreign_conversation_is_404(self, client, mock_chat_service) -> None:
        mock_chat_service.process_turn.side_effect = ConversationNotFoundError("c1")
        client.app.dependency_overrides[get_chat_service] = lambda: mock_chat_service

        response = client.post(
            "/chat",
            json={"messages": [{"role": "user", "content": "hi"}], "id": "c1"},
            headers=USER_HEADERS,
        )

        assert response.status_code == 404
