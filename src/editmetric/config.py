from __future__ import annotations

"""Corpus schema models and loading utilities for the harnesses."""

import logging
from itertools import permutations
from pathlib import Path
from typing import List, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .encoding import (
    BYTE_ENCODINGS,
    DEFAULT_ENCODING,
    EncodedText,
    InvalidEncodingError,
    Text,
    normalise_encoding,
)

logger = logging.getLogger(__name__)


class CorpusPair(BaseModel):
    """A labelled pair of texts, optionally with a known distance."""

    left: str
    right: str
    label: Optional[str] = None
    expected: Optional[int] = Field(default=None, ge=0)


class CorpusModel(BaseModel):
    """Texts compared pairwise by the benchmark and cross-check harnesses."""

    id: str
    encoding: str = DEFAULT_ENCODING
    texts: List[str] = Field(default_factory=list)
    pairs: List[CorpusPair] = Field(default_factory=list)

    @field_validator("texts")
    @classmethod
    def _unique_texts(cls, value: List[str]) -> List[str]:
        if len(set(value)) != len(value):
            raise ValueError("corpus texts must be unique")
        return value

    def operand(self, text: str) -> Text:
        """Wrap *text* so it is decoded under the corpus encoding."""

        name = normalise_encoding(self.encoding)
        if name == DEFAULT_ENCODING:
            return text
        # Byte-wise corpora store their texts as UTF-8 on disk.
        source = "utf-8" if name in BYTE_ENCODINGS else name
        try:
            raw = text.encode(source)
        except (LookupError, UnicodeEncodeError) as exc:
            raise InvalidEncodingError(self.encoding, f"cannot encode {text!r}") from exc
        return EncodedText(raw, self.encoding)

    def all_pairs(self) -> List[Tuple[str, str]]:
        """Every ordered pair of texts (self-pairs included) plus listed pairs."""

        combos = [(text, text) for text in self.texts]
        combos.extend(permutations(self.texts, 2))
        for pair in self.pairs:
            combos.append((pair.left, pair.right))
            combos.append((pair.right, pair.left))
        return combos


CLOSE = "This is a very close string"
CLOSE_VARIANT = "This is not a very close string"
UNRELATED = "Cows don't fly over restricted air space"

DEFAULT_CORPUS = CorpusModel(
    id="default",
    texts=[CLOSE, CLOSE_VARIANT, UNRELATED],
    pairs=[
        CorpusPair(left=CLOSE, right=CLOSE, label="identical", expected=0),
        CorpusPair(left=CLOSE, right=CLOSE_VARIANT, label="near", expected=4),
        CorpusPair(left="", right=UNRELATED, label="empty", expected=len(UNRELATED)),
        CorpusPair(left="", right="", label="both-empty", expected=0),
        CorpusPair(left="kitten", right="sitting", label="textbook", expected=3),
        CorpusPair(left="flaw", right="lawn", label="shifted", expected=2),
    ],
)


class CorpusNotFoundError(FileNotFoundError):
    """Raised when a corpus file cannot be located."""


def load_corpus(path: Path) -> CorpusModel:
    """Load and validate a YAML corpus file."""

    if not path.exists():
        raise CorpusNotFoundError(f"Corpus not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Corpus file {path} must contain a mapping")
    data.setdefault("id", path.stem)
    try:
        corpus = CorpusModel.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid corpus data in {path}: {exc}") from exc
    logger.info(
        "Loaded corpus '%s' (%d texts, %d pairs) from %s",
        corpus.id,
        len(corpus.texts),
        len(corpus.pairs),
        path,
    )
    return corpus


def resolve_corpus(path: Optional[Path] = None) -> CorpusModel:
    """Return the corpus at *path*, or the built-in default corpus."""

    if path is None:
        return DEFAULT_CORPUS
    return load_corpus(path)
