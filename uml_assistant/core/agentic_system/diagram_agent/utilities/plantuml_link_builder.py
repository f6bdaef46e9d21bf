"""PlantUML image link building.

The server payload is the diagram text deflated (raw, no zlib header) and
base64-encoded with the PlantUML alphabet. Building a link makes no
network call.

Dependencies: plantuml, zlib, base64
System role: Diagram image reference for the final answer
"""

import base64
import string
import zlib

from plantuml import deflate_and_encode

from uml_assistant.core.agentic_system.diagram_agent.agent.diagram_schema import (
    DiagramDescription,
)

DEFAULT_SERVER_URL = "http://www.plantuml.com/plantuml"
DEFAULT_IMAGE_FORMAT = "img"

_PLANTUML_ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase + "-_"
_BASE64_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"
_PLANTUML_TO_BASE64 = str.maketrans(_PLANTUML_ALPHABET, _BASE64_ALPHABET)


def encode_plantuml(text: str) -> str:
    """Encode diagram text into a PlantUML server payload."""
    return deflate_and_encode(text).rstrip("=")


def decode_plantuml_payload(payload: str) -> str:
    """Invert encode_plantuml.

    Nothing on the request path decodes; this exists so the payload can be
    shown to round-trip back to the diagram text (and for debugging links).
    """
    b64 = payload.translate(_PLANTUML_TO_BASE64)
    b64 += "=" * (-len(b64) % 4)
    decompressor = zlib.decompressobj(-zlib.MAX_WBITS)
    raw = decompressor.decompress(base64.b64decode(b64)) + decompressor.flush()
    return raw.decode("utf-8")


def format_image_markdown(image_url: str) -> str:
    """Markdown image reference appended after the final explanation."""
    return f"\n\n![PlantUML Diagram]({image_url})"


class PlantUMLLinkBuilder:
    """Builds `{server_url}/{image_format}/{payload}` references."""

    def __init__(
        self,
        server_url: str = DEFAULT_SERVER_URL,
        image_format: str = DEFAULT_IMAGE_FORMAT,
    ) -> None:
        self._server_url = server_url.rstrip("/")
        self._image_format = image_format.strip("/")

    def build(self, diagram: DiagramDescription | str) -> str:
        """
        Build the image URL for a diagram.

        Args:
            diagram: Extracted diagram or raw diagram text

        Returns:
            str: Rendering URL (deterministic for equal input)
        """
        text = diagram.text if isinstance(diagram, DiagramDescription) else diagram
        return f"{self._server_url}/{self._image_format}/{encode_plantuml(text)}"
