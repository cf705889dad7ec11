"""
Injectable random sources.

The Compositor only ever asks for one thing: a uniform integer in [0, bound).
Any object with a matching next_int method satisfies RandomSource, so tests
can pass scripted sources and callers can seed for reproducible paintings.
"""

import random
from typing import Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    """Bounded integer generator."""

    def next_int(self, bound: int) -> int:
        """Return a uniform integer in [0, bound)."""
        ...


def _check_bound(bound: int) -> None:
    if bound < 1:
        raise ValueError(f"bound must be >= 1, got {bound}")


class PythonRandom:
    """RandomSource backed by the stdlib Mersenne Twister."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        return self._random.randrange(bound)


class NumpyRandom:
    """RandomSource backed by numpy's default Generator (PCG64)."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._generator = np.random.default_rng(seed)

    def next_int(self, bound: int) -> int:
        _check_bound(bound)
        return int(self._generator.integers(bound))


BACKENDS = {
    "python": PythonRandom,
    "numpy": NumpyRandom,
}


def make_random(seed: Optional[int] = None, backend: str = "python") -> RandomSource:
    """
    Build a RandomSource by backend name.

    Args:
        seed: Optional seed; None draws fresh OS entropy
        backend: "python" or "numpy"

    Returns:
        Seeded RandomSource

    Raises:
        ValueError: If backend is unknown
    """
    if backend not in BACKENDS:
        raise ValueError(f"Unknown random backend '{backend}'. Must be one of {sorted(BACKENDS)}")
    return BACKENDS[backend](seed)
