"""Seeded linear-congruential generator used by every dataset builder.

Each generator call owns its own :class:`SeededRandom`; there is no module
level stream, so two calls with the same seed never influence each other.
"""
from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")

MULTIPLIER = 9301
INCREMENT = 49297
MODULUS = 233280


class SeededRandom:
    """Reproducible stream of draws: ``state = (state * A + C) mod M``."""

    def __init__(self, seed: int) -> None:
        self._state = int(seed)

    def next(self) -> float:
        """Advance the stream and return a float in ``[0, 1)``."""

        self._state = (self._state * MULTIPLIER + INCREMENT) % MODULUS
        return self._state / MODULUS

    def next_int(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` inclusive."""

        return math.floor(self.next() * (high - low + 1)) + low

    def next_float(self, low: float, high: float) -> float:
        """Return a float in ``[low, high)``."""

        return self.next() * (high - low) + low

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return items[self.next_int(0, len(items) - 1)]

    def weighted_choice(self, items: Sequence[T], weights: Sequence[float]) -> T:
        """Pick one item with probability proportional to its weight.

        Consumes exactly one draw, like :meth:`choice`.
        """

        if not items:
            raise ValueError("cannot choose from an empty sequence")
        if len(items) != len(weights):
            raise ValueError("items and weights must have the same length")
        if any(weight < 0 for weight in weights):
            raise ValueError("weights must be non-negative")
        total = sum(weights)
        if total <= 0:
            raise ValueError("weights must sum to a positive value")

        target = self.next() * total
        cumulative = 0.0
        for item, weight in zip(items, weights):
            cumulative += weight
            if target < cumulative:
                return item
        # float accumulation can leave target just past the last bound
        return next(item for item, weight in reversed(list(zip(items, weights))) if weight > 0)
