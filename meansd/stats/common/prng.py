"""
meansd.stats.common.prng
========================

Seeded pseudorandom generator.

A 32-bit linear congruential generator (Numerical Recipes constants)::

    state = (state * 1664525 + 1013904223) mod 2**32
    u     = state / 2**32

The whole purpose of the generator is reproducibility: the same seed gives a
bit-identical stream, so a demo can be regenerated exactly. It is NOT
cryptographically secure and is not meant to be.

Callers sharing one instance must serialise their draws and call
`SeededRandom.reset` between independent runs.

Examples
--------
>>> rng = SeededRandom(24)
>>> first = rng.draw(3)
>>> rng.reset(24)
>>> rng.draw(3) == first
True
>>> SeededRandom(24).state
24
>>> rng = SeededRandom(24); _ = rng.next(); rng.state
1053852823
"""

from __future__ import annotations
from typing import List

MULTIPLIER = 1664525
INCREMENT = 1013904223
MODULUS = 2**32

DEFAULT_SEED = 24


class SeededRandom:
    """Deterministic uniform generator on [0, 1)."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.reset(seed)

    @property
    def state(self) -> int:
        return self._state

    @property
    def seed(self) -> int:
        """The seed of the last `reset`."""
        return self._seed

    def reset(self, seed: int = DEFAULT_SEED) -> None:
        """Reinitialise the state to ``seed`` (reduced mod 2**32)."""
        self._seed = int(seed) % MODULUS
        self._state = self._seed

    def next(self) -> float:
        """Advance the state and return it scaled to [0, 1)."""
        self._state = (self._state * MULTIPLIER + INCREMENT) % MODULUS
        return self._state / MODULUS

    def draw(self, n: int) -> List[float]:
        return [self.next() for _ in range(n)]

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self._seed}, state={self._state})"
