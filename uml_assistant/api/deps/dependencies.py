"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: uml_assistant.configs, uml_assistant.application, uml_assistant.boundary
System role: DI container for service injection
"""

import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from uml_assistant.application.services import ChatService, ConversationService
from uml_assistant.boundary.db import get_async_db
from uml_assistant.configs import get_settings
from uml_assistant.core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


class ServiceCache:
    """Container for cached pipeline components."""

    def __init__(self):
        self._generation_model = None
        self._stage_model = None
        self._vector_store = None
        self._vector_store_loaded = False
        self._retriever = None
        self._generator = None
        self._classifier = None
        self._refiner = None

    @property
    def generation_model(self):
        """Get cached generation chat model."""
        if self._generation_model is None:
            from uml_assistant.core.agentic_system.agent.chat_models import create_generation_model
            self._generation_model = create_generation_model()
        return self._generation_model

    @property
    def stage_model(self):
        """Get cached stage chat model."""
        if self._stage_model is None:
            from uml_assistant.core.agentic_system.agent.chat_models import create_stage_model
            self._stage_model = create_stage_model()
        return self._stage_model

    @property
    def vector_store(self):
        """Get cached vector store (None when no index exists)."""
        if not self._vector_store_loaded:
            from uml_assistant.boundary.vdb import get_vector_store
            self._vector_store = get_vector_store()
            self._vector_store_loaded = True
        return self._vector_store

    @property
    def retriever(self):
        """Get cached context retriever."""
        if self._retriever is None:
            from uml_assistant.core.retriever import ContextRetriever

            vs_settings = get_settings().vector_store
            self._retriever = ContextRetriever(
                vector_store=self.vector_store,
                search_type=vs_settings.search_type,
                k=vs_settings.top_k,
                fetch_k=vs_settings.fetch_k,
            )
        return self._retriever

    @property
    def generator(self):
        """Get cached response generator (generation model)."""
        if self._generator is None:
            from uml_assistant.core.agentic_system.agent import ResponseGenerator
            self._generator = ResponseGenerator(self.generation_model)
        return self._generator

    @property
    def classifier(self):
        """Get cached request classifier (stage model)."""
        if self._classifier is None:
            from uml_assistant.core.agentic_system.agent import RequestClassifier, ResponseGenerator
            self._classifier = RequestClassifier(ResponseGenerator(self.stage_model))
        return self._classifier

    @property
    def refiner(self):
        """Get cached diagram refiner."""
        if self._refiner is None:
            from uml_assistant.core.agentic_system.agent import ResponseGenerator
            from uml_assistant.core.agentic_system.diagram_agent import (
                DiagramRefiner,
                PlantUMLLinkBuilder,
            )

            plantuml_settings = get_settings().plantuml
            self._refiner = DiagramRefiner(
                stage_generator=ResponseGenerator(self.stage_model),
                final_generator=self.generator,
                link_builder=PlantUMLLinkBuilder(
                    server_url=plantuml_settings.server_url,
                    image_format=plantuml_settings.image_format,
                ),
            )
        return self._refiner

    def clear(self) -> None:
        """Clear all cached instances."""
        self.__init__()


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_current_user_id(request: Request) -> str:
    """
    Resolve the authenticated user from the gateway header.

    Args:
        request: Incoming request

    Returns:
        str: User id

    Raises:
        AuthorizationError: If the header is missing or blank
    """
    header = get_settings().auth.user_header
    user_id = (request.headers.get(header) or "").strip()
    if not user_id:
        logger.warning(f"{__name__}:get_current_user_id - Missing {header} header")
        raise AuthorizationError(details={"header": header})
    return user_id


def get_chat_service(db: AsyncSession = Depends(get_async_db)) -> ChatService:
    """
    Get chat service instance with cached pipeline components.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ChatService: Chat service for one request
    """
    cache = get_service_cache()
    return ChatService(
        db=db,
        classifier=cache.classifier,
        retriever=cache.retriever,
        generator=cache.generator,
        refiner=cache.refiner,
        prompt_label=get_settings().observability.prompt_label,
    )


def get_conversation_service(db: AsyncSession = Depends(get_async_db)) -> ConversationService:
    """
    Get conversation service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        ConversationService: Conversation read service
    """
    return ConversationService(db=db)
