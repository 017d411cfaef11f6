from __future__ import annotations

"""Levenshtein edit-distance kernels over decoded code-point sequences."""

from typing import Hashable, Sequence

import numpy as np


def levenshtein(s: Sequence[Hashable], t: Sequence[Hashable]) -> int:
    """Return the Levenshtein distance between *s* and *t*.

    Iterative single rolling-row formulation. The shorter sequence indexes the
    row, so memory stays at ``min(len(s), len(t)) + 1`` integers.
    """

    n = len(s)
    m = len(t)
    if n == 0:
        return m
    if m == 0:
        return n
    if m > n:
        s, t = t, s
        n, m = m, n

    d = list(range(m + 1))
    x = 0
    for i in range(n):
        e = i + 1
        s_i = s[i]
        for j in range(m):
            cost = 0 if s_i == t[j] else 1
            insertion = d[j + 1] + 1
            deletion = e + 1
            substitution = d[j] + cost
            x = min(insertion, deletion, substitution)
            d[j] = e
            e = x
        d[m] = x
    return x


def levenshtein_matrix(s: Sequence[Hashable], t: Sequence[Hashable]) -> int:
    """Reference Levenshtein using a bulk-allocated ``(n+1) x (m+1)`` matrix."""

    n = len(s)
    m = len(t)
    if n == 0:
        return m
    if m == 0:
        return n

    d = np.zeros((n + 1, m + 1), dtype=np.int64)
    d[:, 0] = np.arange(n + 1)
    d[0, :] = np.arange(m + 1)
    for i in range(1, n + 1):
        s_i = s[i - 1]
        for j in range(1, m + 1):
            cost = 0 if s_i == t[j - 1] else 1
            d[i, j] = min(
                d[i - 1, j] + 1,
                d[i, j - 1] + 1,
                d[i - 1, j - 1] + cost,
            )
    return int(d[n, m])
