"""
Image ingestion for fridge/pantry photos.

Turns an uploaded image into a transport-friendly payload: the base64-encoded
bytes (without any `data:<mime>;base64,` prefix) plus the declared MIME type.

No file type or size validation happens here. The generative model is left to
reject or tolerate unexpected input; the only failure is not being able to
read (or decode) the data at all, which raises ImageReadError.
"""

import base64
import binascii
import logging
import mimetypes
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from .errors import ImageReadError

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"

_DATA_URL_PREFIX = "data:"
_BASE64_MARKER = ";base64,"


@dataclass(frozen=True)
class EncodedImage:
    """
    An image ready to be sent to the generative model.

    Attributes:
        data: Base64-encoded image bytes, no data-URL prefix
        mime_type: Declared MIME type (e.g. "image/png")
    """
    data: str
    mime_type: str

    @property
    def size_bytes(self) -> int:
        """Approximate decoded size, used for log lines."""
        padding = self.data.count("=", max(len(self.data) - 2, 0))
        return max(len(self.data) * 3 // 4 - padding, 0)


def strip_data_url(value: str) -> Tuple[str, Optional[str]]:
    """
    Remove a data-URL prefix from a base64 string.

    Args:
        value: Either raw base64 or a data URL like "data:image/png;base64,iVBOR..."

    Returns:
        Tuple of (base64 payload, MIME type from the prefix or None)

    Examples:
        >>> strip_data_url("data:image/png;base64,AAAA")
        ('AAAA', 'image/png')
        >>> strip_data_url("AAAA")
        ('AAAA', None)
    """
    value = value.strip()
    if value.startswith(_DATA_URL_PREFIX) and "," in value:
        header, payload = value.split(",", 1)
        mime_type = None
        if header.endswith(_BASE64_MARKER[:-1]):
            mime_type = header[len(_DATA_URL_PREFIX):-len(_BASE64_MARKER[:-1])] or None
        return payload, mime_type
    return value, None


def encode_image_bytes(data: bytes, mime_type: str) -> EncodedImage:
    """Base64-encode raw image bytes."""
    return EncodedImage(data=base64.b64encode(data).decode("ascii"), mime_type=mime_type)


def decode_image(image: EncodedImage) -> bytes:
    """
    Decode an EncodedImage back into raw bytes.

    Raises:
        ImageReadError: If the payload is not valid base64
    """
    try:
        return base64.b64decode(image.data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImageReadError(f"Image payload is not valid base64: {e}") from e


def guess_mime_type(filename: Optional[str]) -> str:
    """Guess an image MIME type from a file name, defaulting to image/jpeg."""
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            return guessed
    return DEFAULT_MIME_TYPE


def read_image(
    source: Any,
    mime_type: Optional[str] = None,
    filename: Optional[str] = None,
) -> EncodedImage:
    """
    Read a user-provided image once into memory and encode it.

    Accepts anything file-like: Streamlit's UploadedFile (getvalue()), an open
    binary file or io.BytesIO (read()), or plain bytes.

    Args:
        source: File-like object or bytes
        mime_type: Declared MIME type. Falls back to source.type, then to a
                   guess from the file name, then to image/jpeg.
        filename: File name used for the MIME type guess (defaults to source.name)

    Returns:
        EncodedImage with the base64 payload and MIME type

    Raises:
        ImageReadError: If the source cannot be read
    """
    try:
        if isinstance(source, (bytes, bytearray)):
            raw = bytes(source)
        elif hasattr(source, "getvalue"):
            raw = source.getvalue()
        elif hasattr(source, "read"):
            raw = source.read()
        else:
            raise TypeError(f"Unsupported image source: {type(source).__name__}")
    except Exception as e:
        logger.error("Failed to read uploaded image: %s", e)
        raise ImageReadError(f"Could not read image: {e}") from e

    if not isinstance(raw, (bytes, bytearray)):
        raise ImageReadError(f"Image source returned {type(raw).__name__}, expected bytes")

    declared = mime_type or getattr(source, "type", None)
    if not declared:
        declared = guess_mime_type(filename or getattr(source, "name", None))

    encoded = encode_image_bytes(bytes(raw), declared)
    logger.debug("Read image (%s, %d bytes)", encoded.mime_type, len(raw))
    return encoded
