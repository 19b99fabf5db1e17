"""Uniform random numbers drawn from a range."""

from __future__ import annotations

import random as _random
from numbers import Integral


class Random:
    """A Mersenne Twister source of uniform values in a range."""

    def __init__(self, seed: int | None = None) -> None:
        self._engine = _random.Random(seed)

    def range(self, low: float, high: float) -> float:
        """A value in ``[low, high]`` for integers, ``[low, high)`` otherwise."""
        if low > high:
            raise ValueError(f"low ({low}) must not exceed high ({high})")
        if isinstance(low, Integral) and isinstance(high, Integral):
            return self._engine.randint(int(low), int(high))
        if low == high:
            return float(low)
        value = low + (high - low) * self._engine.random()
        # Rounding can land exactly on the upper bound; keep it half-open.
        return value if value < high else float(low)


_shared = Random()


def random_range(low: float, high: float) -> float:
    """Draw from the shared generator; see ``Random.range``."""
    return _shared.range(low, high)