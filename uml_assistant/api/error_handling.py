"""
API error handling utilities.

A decorator mapping domain exceptions raised inside route handlers to
HTTPExceptions, and app-level handlers for exceptions raised by
dependencies (which run before the decorated handler).
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from uml_assistant.core.exceptions import (
    AuthorizationError,
    CapabilityError,
    ConversationNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_chat_errors(func: F) -> F:
    """
    Decorator to transform pipeline and store errors into HTTPExceptions.

    - ConversationNotFoundError -> 404
    - ValidationError -> 400
    - AuthorizationError -> 401
    - CapabilityError and anything unexpected -> 500
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ConversationNotFoundError as e:
            logger.warning("Conversation not found", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ValidationError as e:
            logger.warning("Invalid chat request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except AuthorizationError as e:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)

        except CapabilityError as e:
            logger.error("Capability failure in chat operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            logger.exception("Unexpected failure in chat operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during chat processing",
            )

    return wrapper  # type: ignore


async def authorization_error_handler(request: Request, exc: AuthorizationError) -> JSONResponse:
    """Render a missing identity as 401."""
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthorizationError, authorization_error_handler)
