from __future__ import annotations

"""Public edit-distance entry point."""

from .encoding import DEFAULT_ENCODING, Text, to_code_points
from .utils.edit_distance import levenshtein


def distance(text1: Text, text2: Text, *, encoding: str = DEFAULT_ENCODING) -> int:
    """Return the Levenshtein distance between two text operands.

    Each operand is decoded on its own before comparison: ``str`` values as
    Unicode scalar values, ``EncodedText`` under its declared encoding, and
    bare bytes under *encoding* (UTF-8 unless stated). The result counts
    single-code-point insertions, deletions and substitutions.

    Raises ``InvalidEncodingError`` when an operand cannot be decoded.
    """

    s = to_code_points(text1, encoding=encoding)
    t = to_code_points(text2, encoding=encoding)
    return levenshtein(s, t)


__all__ = ["distance"]
