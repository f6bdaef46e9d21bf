"""
Conversation identifiers and record fields.

Dependencies: secrets, time
System role: Conversation naming shared by the chat service and store
"""

import secrets
import string
import time

ID_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
ID_LENGTH = 7
TITLE_MAX_LENGTH = 100


def generate_conversation_id(size: int = ID_LENGTH) -> str:
    """Random id over [0-9A-Za-z]."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


def conversation_path(conversation_id: str) -> str:
    return f"/chat/{conversation_id}"


def conversation_title(first_message: str) -> str:
    """First message content truncated to the title limit."""
    return first_message[:TITLE_MAX_LENGTH]


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)
