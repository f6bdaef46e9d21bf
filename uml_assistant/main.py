"""
FastAPI application entry point.

Initializes FastAPI app, registers routers, adds middleware, and configures lifespan.

Dependencies: fastapi, uml_assistant.api, uml_assistant.observability, uml_assistant.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from uml_assistant import __version__
from uml_assistant.api.deps import get_service_cache
from uml_assistant.api.error_handling import register_exception_handlers
from uml_assistant.api.routers import chat_router, conversations_router, health_router
from uml_assistant.boundary.db.connection import create_tables
from uml_assistant.configs import get_settings
from uml_assistant.core.agentic_system.prompts import register_prompts
from uml_assistant.observability.logger import configure_logging
from uml_assistant.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging, creates tables, registers prompts with Langfuse when
    enabled, and pre-loads the document index.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup: logging configured")

    try:
        await create_tables()
        register_prompts(
            generation_model=settings.llm.generation_model,
            stage_model=settings.llm.stage_model,
            temperature=settings.llm.temperature,
            labels=[settings.environment],
        )

        cache = get_service_cache()
        _ = cache.retriever
        logger.info("Application startup complete: retriever enabled=%s", cache.retriever.is_enabled)
    except Exception as e:
        logger.exception(
            "Failed to initialize application resources",
            extra={"error": str(e)},
        )
        raise

    yield

    get_service_cache().clear()
    logger.info("Application shutdown")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title="UML Assistant API",
        description="Conversational software-modeling assistant with PlantUML diagram refinement",
        version=__version__,
        lifespan=lifespan,
    )

    # Add observability middleware (added first = last to execute)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Conversation-ID", "X-Correlation-ID"],
    )

    register_exception_handlers(app)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(conversations_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "uml_assistant.main:app",
        host="0.0.0.0",
        port=8000,
    )
