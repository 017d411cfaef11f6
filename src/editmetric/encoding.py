from __future__ import annotations

"""Decoding of text operands into code-point sequences."""

import logging
from dataclasses import dataclass
from typing import Tuple, Union

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"

# Names that select one code point per raw byte instead of a codec.
BYTE_ENCODINGS = frozenset({"binary", "bytes", "ascii-8bit"})

CodePoints = Tuple[int, ...]


class InvalidEncodingError(ValueError):
    """Raised when an operand cannot be decoded into well-formed code points."""

    def __init__(self, encoding: str, detail: str) -> None:
        super().__init__(f"Cannot decode operand as '{encoding}': {detail}")
        self.encoding = encoding
        self.detail = detail


@dataclass(frozen=True)
class EncodedText:
    """Raw bytes paired with the encoding they were written in."""

    data: bytes
    encoding: str = DEFAULT_ENCODING

    def code_points(self) -> CodePoints:
        return decode_bytes(self.data, self.encoding)


Text = Union[str, bytes, bytearray, memoryview, EncodedText]


def normalise_encoding(encoding: str) -> str:
    """Canonical spelling of an encoding name, e.g. ``ASCII_8BIT`` -> ``ascii-8bit``."""

    return encoding.strip().lower().replace("_", "-")


def validate_encoding(encoding: str) -> str:
    """Return the normalised *encoding*, raising if it cannot decode text."""

    name = normalise_encoding(encoding)
    if name not in BYTE_ENCODINGS:
        decode_bytes(b"", encoding)
    return name


def decode_bytes(data: bytes | bytearray | memoryview, encoding: str) -> CodePoints:
    """Decode *data* under *encoding* into a tuple of code points."""

    raw = bytes(data)
    name = normalise_encoding(encoding)
    if name in BYTE_ENCODINGS:
        return tuple(raw)
    try:
        decoded = raw.decode(name)
    except LookupError as exc:
        # Unknown names and bytes-to-bytes codecs such as "hex" both land here.
        logger.debug("Unusable encoding %r requested", encoding)
        raise InvalidEncodingError(encoding, "not a known text encoding") from exc
    except UnicodeDecodeError as exc:
        logger.debug("Failed to decode %d bytes as %s: %s", len(raw), encoding, exc)
        raise InvalidEncodingError(encoding, exc.reason) from exc
    return decode_str(decoded, encoding=encoding)


def decode_str(text: str, *, encoding: str = "unicode") -> CodePoints:
    """Return the Unicode scalar values of *text*.

    Lone surrogates are not scalar values and are rejected.
    """

    points = tuple(ord(char) for char in text)
    for index, point in enumerate(points):
        if 0xD800 <= point <= 0xDFFF:
            logger.debug("Lone surrogate U+%04X at index %d", point, index)
            raise InvalidEncodingError(
                encoding, f"lone surrogate U+{point:04X} at index {index}"
            )
    return points


def to_code_points(text: Text, *, encoding: str = DEFAULT_ENCODING) -> CodePoints:
    """Decode one operand; *encoding* applies only to bare bytes."""

    if isinstance(text, str):
        return decode_str(text)
    if isinstance(text, EncodedText):
        return text.code_points()
    if isinstance(text, (bytes, bytearray, memoryview)):
        return decode_bytes(text, encoding)
    raise TypeError(
        f"Expected str, bytes or EncodedText, got {type(text).__name__}"
    )


__all__ = [
    "BYTE_ENCODINGS",
    "DEFAULT_ENCODING",
    "CodePoints",
    "EncodedText",
    "InvalidEncodingError",
    "Text",
    "decode_bytes",
    "decode_str",
    "normalise_encoding",
    "to_code_points",
    "validate_encoding",
]
