"""
Test suite for PlantUML extraction.

Covers fenced extraction, misses on missing or unterminated delimiters,
empty spans, bare-span mode and idempotence on re-wrapped output.

System role: Verification of diagram detection between pipeline stages
"""

import pytest

from uml_assistant.core.agentic_system.diagram_agent.utilities.plantuml_extractor import (
    PLANTUML_MARKER,
    extract_plantuml,
    has_plantuml_marker,
)


class TestExtractPlantUMLHits:
    """Tests for successful extraction."""

    def test_extracts_span_from_fenced_block(self) -> None:
        """Returns the @startuml..@enduml span inside the plantuml fence."""
        # Arrange
        text = "Intro\n```plantuml\n@startuml\nclass A\n@enduml\n```\nOutro"

        # Act
        diagram = extract_plantuml(text)

        # Assert
        assert diagram is not None
        assert diagram.text == "@startuml\nclass A\n@enduml"

    def test_ignores_text_around_span_inside_fence(self) -> None:
        """Content of the fence outside the markers is dropped."""
        text = "```plantuml\n' comment\n@startuml\nA -> B\n@enduml\ntrailing\n```"

        diagram = extract_plantuml(text)

        assert diagram.text == "@startuml\nA -> B\n@enduml"

    def test_first_fence_wins(self) -> None:
        """Only the first fenced block is considered."""
        text = (
            "```plantuml\n@startuml\nclass First\n@enduml\n```\n"
            "```plantuml\n@startuml\nclass Second\n@enduml\n```"
        )

        diagram = extract_plantuml(text)

        assert "First" in diagram.text
        assert "Second" not in diagram.text

    def test_first_span_within_fence_wins(self) -> None:
        """Non-greedy match stops at the first @enduml."""
        text = "```plantuml\n@startuml\nclass A\n@enduml\n@startuml\nclass B\n@enduml\n```"

        diagram = extract_plantuml(text)

        assert diagram.text == "@startuml\nclass A\n@enduml"

    def test_extraction_is_idempotent_on_rewrapped_output(self) -> None:
        """Re-wrapping an extracted diagram in a fence extracts the same text."""
        first = extract_plantuml("x\n```plantuml\n  @startuml\nclass A\n@enduml  \n```")

        second = extract_plantuml(first.fenced())

        assert second == first


class TestExtractPlantUMLMisses:
    """Tests for extraction misses, which return None and never raise."""

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "No diagram here.",
            "@startuml\nclass A\n@enduml",
            "```plantuml\nclass A\n```",
            "```plantuml\n@startuml\nclass A\n```",
            "```plantuml\n@startuml\nclass A\n@enduml",
            "```plantuml\n@startuml@enduml\n```",
        ],
        ids=[
            "empty",
            "no-delimiters",
            "bare-span-without-fence",
            "fence-without-markers",
            "missing-enduml",
            "unterminated-fence",
            "empty-span",
        ],
    )
    def test_returns_none(self, text: str) -> None:
        """Missing, unterminated or empty delimiters yield None."""
        assert extract_plantuml(text) is None

    def test_none_input_returns_none(self) -> None:
        """None is treated like empty text."""
        assert extract_plantuml(None) is None


class TestExtractPlantUMLBareSpan:
    """Tests for require_fence=False, used on verify stage output."""

    def test_bare_span_matches(self) -> None:
        """A bare @startuml..@enduml answer is extracted."""
        diagram = extract_plantuml("@startuml\nclass A\n@enduml\n", require_fence=False)

        assert diagram.text == "@startuml\nclass A\n@enduml"

    def test_fenced_span_still_preferred(self) -> None:
        """When a fence exists, its content is searched."""
        text = "@startuml\nclass Outside\n@enduml\n```plantuml\n@startuml\nclass Inside\n@enduml\n```"

        diagram = extract_plantuml(text, require_fence=False)

        assert "Inside" in diagram.text

    def test_missing_enduml_still_misses(self) -> None:
        """An unterminated bare span is a miss."""
        assert extract_plantuml("@startuml\nclass A\n", require_fence=False) is None


class TestPlantUMLMarker:
    """Tests for marker detection."""

    def test_marker_detected(self) -> None:
        assert has_plantuml_marker(f"Design\n{PLANTUML_MARKER}\n```plantuml```")

    def test_marker_is_case_sensitive(self) -> None:
        assert not has_plantuml_marker("plantuml code:")
