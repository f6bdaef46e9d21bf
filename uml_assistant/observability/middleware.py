"""
FastAPI middleware for observability.

CorrelationMiddleware binds a correlation id for the request and echoes it
back; RequestLoggingMiddleware logs each request with its caller, status,
conversation id and timing.

Dependencies: fastapi, starlette, uml_assistant.configs, uml_assistant.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from uml_assistant.configs import get_settings
from uml_assistant.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
CONVERSATION_HEADER = "X-Conversation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with timing."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        caller = request.headers.get(get_settings().auth.user_header) or "anonymous"

        logger.info(f"{__name__}:dispatch - START {route} user={caller}")
        try:
            response: Response = await call_next(request)
        except Exception as e:
            elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)
            logger.exception(
                f"{__name__}:dispatch - FAILED {route} {type(e).__name__} after {elapsed_ms}ms",
                extra={"path": request.url.path, "process_time_ms": elapsed_ms},
            )
            raise

        elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)
        conversation_id = response.headers.get(CONVERSATION_HEADER, "-")
        logger.info(
            f"{__name__}:dispatch - END {route} status={response.status_code} "
            f"conversation_id={conversation_id} time_ms={elapsed_ms}",
            extra={
                "path": request.url.path,
                "status_code": response.status_code,
                "process_time_ms": elapsed_ms,
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind X-Correlation-ID (incoming or generated) for the request and echo it."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
