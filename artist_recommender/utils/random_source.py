"""
Random source — the single place the engine draws randomness from.

Scoring jitter, the random part of the selection split, cold-start shuffles and
replacement picks all go through a RandomSource so tests can substitute a
fixed sequence.
"""

from typing import List, Optional, Protocol, TypeVar

import numpy as np

T = TypeVar("T")


class RandomSource(Protocol):
    """Protocol for the randomness the engine needs."""

    def uniform(self, low: float, high: float) -> float:
        """Float drawn uniformly from [low, high)."""
        ...

    def randrange(self, stop: int) -> int:
        """Integer drawn uniformly from [0, stop). stop must be positive."""
        ...

    def shuffle(self, items: List[T]) -> None:
        """Shuffle items in place, uniformly over permutations."""
        ...


class NumpyRandomSource:
    """RandomSource backed by numpy's default Generator (PCG64)."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        return float(self._rng.uniform(low, high))

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError(f"randrange stop must be positive, got {stop}")
        return int(self._rng.integers(stop))

    def shuffle(self, items: List[T]) -> None:
        order = self._rng.permutation(len(items))
        items[:] = [items[i] for i in order]
