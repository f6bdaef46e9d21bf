"""Tests for conversation id and record field helpers."""

from uml_assistant.core.conversation_ids import (
    ID_ALPHABET,
    conversation_path,
    conversation_title,
    generate_conversation_id,
    now_ms,
)


def test_generated_id_uses_alphanumeric_alphabet() -> None:
    conversation_id = generate_conversation_id()

    assert len(conversation_id) == 7
    assert set(conversation_id) <= set(ID_ALPHABET)


def test_generated_ids_differ() -> None:
    assert len({generate_conversation_id() for _ in range(50)}) == 50


def test_path() -> None:
    assert conversation_path("Ab3xY9z") == "/chat/Ab3xY9z"


def test_title_truncates_to_100_characters() -> None:
    assert conversation_title("short") == "short"
    assert conversation_title("y" * 101) == "y" * 100


def test_now_ms_is_milliseconds() -> None:
    assert now_ms() > 1_600_000_000_000
