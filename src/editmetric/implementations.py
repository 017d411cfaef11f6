from __future__ import annotations

"""Registry of explicitly selectable distance implementations."""

from typing import Callable, Dict, Hashable, Sequence

from .utils.edit_distance import levenshtein, levenshtein_matrix

DistanceFunc = Callable[[Sequence[Hashable], Sequence[Hashable]], int]

CANONICAL = "rolling"

_IMPLEMENTATIONS: Dict[str, DistanceFunc] = {
    CANONICAL: levenshtein,
    "matrix": levenshtein_matrix,
}


def get_implementation(name: str) -> DistanceFunc:
    try:
        return _IMPLEMENTATIONS[name]
    except KeyError as exc:
        raise ValueError(
            f"Unknown implementation '{name}'; "
            f"choose from {', '.join(sorted(_IMPLEMENTATIONS))}"
        ) from exc


def register_implementation(name: str, func: DistanceFunc) -> None:
    """Register an alternate implementation under *name*."""

    if not name:
        raise ValueError("Implementation name must be non-empty")
    if not callable(func):
        raise ValueError(f"Implementation '{name}' is not callable")
    _IMPLEMENTATIONS[name] = func


def available_implementations() -> Dict[str, DistanceFunc]:
    """Return the currently registered implementation mapping."""

    return dict(_IMPLEMENTATIONS)


__all__ = [
    "CANONICAL",
    "DistanceFunc",
    "available_implementations",
    "get_implementation",
    "register_implementation",
]
