from __future__ import annotations

"""Seed helpers to keep synthetic corpora reproducible."""

import numpy as np


def seeded_generator(seed: int) -> np.random.Generator:
    """Return a private NumPy generator; global PRNG state is left untouched."""

    return np.random.default_rng(seed)
