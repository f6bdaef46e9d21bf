"""
Logging configuration.

Single stdout handler with ISO timestamps; every record carries the request
correlation id and, inside a chat turn, the conversation id.

Dependencies: logging (stdlib), uml_assistant.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys

from uml_assistant.observability.correlation import get_conversation_id, get_correlation_id

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(correlation_id)s conv=%(conversation_id)s] %(message)s"
)

# Libraries whose INFO output drowns the pipeline logs
NOISY_LOGGERS = ("urllib3", "httpx", "httpcore", "google_genai", "langfuse", "faiss")


class CorrelationIdFilter(logging.Filter):
    """Attach correlation and conversation ids to every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        record.conversation_id = get_conversation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once at startup.

    Args:
        level: Root log level name (e.g. "INFO", "DEBUG")
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logging.DEBUG)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root_logger.setLevel(level.upper())
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
