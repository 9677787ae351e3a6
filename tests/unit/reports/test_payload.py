"""Tests for image chunk payload decoding."""

import base64

import pytest

from ground_control.exceptions import PayloadDecodeError
from ground_control.reports.payload import DecodedChunk, RawChunk, decode_base64, decode_chunk


class TestDecodeBase64:
    def test_decodes(self, image_chunk):
        assert decode_base64(base64.b64encode(image_chunk).decode()) == image_chunk

    def test_malformed_raises_decode_error(self):
        with pytest.raises(PayloadDecodeError):
            decode_base64("not base64!")

    def test_non_ascii_raises_decode_error(self):
        with pytest.raises(PayloadDecodeError):
            decode_base64("ÿØÿà")


class TestDecodeChunk:
    def test_none_stays_none(self):
        assert decode_chunk(None) is None

    def test_round_trip(self, image_chunk):
        result = decode_chunk(base64.b64encode(image_chunk).decode())
        assert isinstance(result, DecodedChunk)
        assert result.content == image_chunk
        assert result.size == len(image_chunk)

    def test_malformed_text_kept_unchanged(self):
        result = decode_chunk("%%%not-base64%%%")
        assert isinstance(result, RawChunk)
        assert result.text == "%%%not-base64%%%"
        assert result.size == len("%%%not-base64%%%")

    def test_empty_text_decodes_to_empty_bytes(self):
        result = decode_chunk("")
        assert isinstance(result, DecodedChunk)
        assert result.content == b""

    def test_bytes_kept_as_is(self, image_chunk):
        result = decode_chunk(image_chunk)
        assert isinstance(result, DecodedChunk)
        assert result.content == image_chunk

    def test_bytearray_converted(self):
        assert decode_chunk(bytearray(b"\x01\x02")).content == b"\x01\x02"

    def test_list_of_byte_values(self):
        assert decode_chunk([1, 2, 255]).content == bytes([1, 2, 255])

    def test_list_with_out_of_range_values_passed_through(self):
        assert decode_chunk([1, 256]) == [1, 256]

    def test_existing_payload_passed_through(self):
        chunk = RawChunk(text="abc")
        assert decode_chunk(chunk) is chunk

    def test_serialized_node_buffer(self):
        result = decode_chunk({"type": "Buffer", "data": [137, 80, 78, 71]})
        assert isinstance(result, DecodedChunk)
        assert result.content == b"\x89PNG"

    def test_unrecognized_shape_passed_through(self):
        assert decode_chunk({"bytes": "AAAA"}) == {"bytes": "AAAA"}


class TestChunkToWire:
    def test_decoded_chunk_encodes_base64(self, image_chunk):
        assert DecodedChunk(content=image_chunk).to_wire() == base64.b64encode(image_chunk).decode()

    def test_raw_chunk_returns_text(self):
        assert RawChunk(text="???").to_wire() == "???"
