"""
Tests for image ingestion: reading uploads and producing base64 payloads.
"""

import base64
import io
from unittest.mock import Mock

import pytest

from fridgechef.errors import ImageReadError
from fridgechef.ingestion import (
    DEFAULT_MIME_TYPE,
    EncodedImage,
    decode_image,
    encode_image_bytes,
    guess_mime_type,
    read_image,
    strip_data_url,
)

RAW = b"\x89PNG\r\n\x1a\nfake"


class TestStripDataUrl:
    def test_data_url(self):
        assert strip_data_url("data:image/png;base64,AAAA") == ("AAAA", "image/png")

    def test_plain_base64(self):
        assert strip_data_url("AAAA") == ("AAAA", None)

    def test_payload_never_contains_prefix(self):
        payload, _ = strip_data_url("data:image/webp;base64,UklGRg==")
        assert not payload.startswith("data:")
        assert payload == "UklGRg=="


class TestReadImage:
    """Test cases for read_image."""

    def test_uploaded_file_like(self):
        """Test a Streamlit UploadedFile-like object (getvalue + type + name)."""
        upload = Mock(spec=["getvalue", "type", "name"])
        upload.getvalue.return_value = RAW
        upload.type = "image/png"
        upload.name = "fridge.png"

        image = read_image(upload)

        assert image.mime_type == "image/png"
        assert base64.b64decode(image.data) == RAW

    def test_binary_stream(self):
        image = read_image(io.BytesIO(RAW), mime_type="image/webp")
        assert image.mime_type == "image/webp"
        assert decode_image(image) == RAW

    def test_plain_bytes_default_mime(self):
        image = read_image(RAW)
        assert image.mime_type == DEFAULT_MIME_TYPE

    def test_mime_guessed_from_filename(self):
        assert read_image(RAW, filename="pantry.png").mime_type == "image/png"

    def test_unreadable_source_raises(self):
        stream = Mock(spec=["read"])
        stream.read.side_effect = OSError("disk gone")
        with pytest.raises(ImageReadError):
            read_image(stream)

    def test_unsupported_source_raises(self):
        with pytest.raises(ImageReadError):
            read_image(12345)

    def test_non_bytes_content_raises(self):
        stream = Mock(spec=["read"])
        stream.read.return_value = "text, not bytes"
        with pytest.raises(ImageReadError):
            read_image(stream)


class TestDecodeImage:
    def test_round_trip(self):
        assert decode_image(encode_image_bytes(RAW, "image/png")) == RAW

    def test_invalid_base64_raises(self):
        with pytest.raises(ImageReadError):
            decode_image(EncodedImage(data="***", mime_type="image/png"))


class TestGuessMimeType:
    def test_known_extension(self):
        assert guess_mime_type("photo.jpg") == "image/jpeg"

    def test_unknown_or_missing(self):
        assert guess_mime_type(None) == DEFAULT_MIME_TYPE
        assert guess_mime_type("photo") == DEFAULT_MIME_TYPE


def test_size_bytes_approximates_decoded_length():
    image = encode_image_bytes(b"x" * 100, "image/jpeg")
    assert image.size_bytes == 100
