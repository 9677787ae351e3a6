"""Image chunk payloads carried as base64 text on the wire.

The transport layer encodes binary buffers as standard base64. Decoding is
fallible: malformed text is kept verbatim as a :class:`RawChunk` instead of
failing the surrounding report.
"""

import base64
import binascii
from collections.abc import Mapping, Sequence
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ground_control.exceptions import PayloadDecodeError
from ground_control.logging import get_logger

logger = get_logger(__name__)


class DecodedChunk(BaseModel):
    """Chunk bytes successfully recovered from the wire."""

    model_config = ConfigDict(frozen=True, ser_json_bytes="base64")

    kind: Literal["decoded"] = "decoded"
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)

    def to_wire(self) -> str:
        return base64.b64encode(self.content).decode("ascii")


class RawChunk(BaseModel):
    """Chunk text that could not be decoded, kept unchanged."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["raw"] = "raw"
    text: str

    @property
    def size(self) -> int:
        return len(self.text)

    def to_wire(self) -> str:
        return self.text


ChunkPayload = Annotated[DecodedChunk | RawChunk, Field(discriminator="kind")]


def decode_base64(text: str) -> bytes:
    """Strictly decode standard base64 text.

    Raises:
        PayloadDecodeError: If the text is not valid base64.
    """
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise PayloadDecodeError(
            "Image chunk is not valid base64",
            context={"length": len(text)},
        ) from exc


def decode_chunk(value: Any) -> DecodedChunk | RawChunk | None:
    """Turn a wire ``data`` value into a chunk payload.

    Args:
        value: base64 text, an already-binary buffer, or None.

    Returns:
        The decoded bytes, the untouched text on decode failure, or None
        when no payload was sent. Any other value is returned unchanged and
        left for the model to default.
    """
    if value is None or isinstance(value, DecodedChunk | RawChunk):
        return value
    if isinstance(value, str):
        try:
            return DecodedChunk(content=decode_base64(value))
        except PayloadDecodeError as error:
            logger.debug(
                "Keeping undecodable image chunk as text",
                extra={"error_code": error.error_code},
            )
            return RawChunk(text=value)
    if isinstance(value, bytes | bytearray | memoryview):
        return DecodedChunk(content=bytes(value))
    if isinstance(value, Sequence) and all(isinstance(item, int) and 0 <= item <= 255 for item in value):
        # JSON array of byte values
        return DecodedChunk(content=bytes(value))
    if isinstance(value, Mapping) and isinstance(value.get("data"), list):
        # Node Buffer serialized with JSON.stringify: {"type": "Buffer", "data": [...]}
        return decode_chunk(value["data"])
    return value
