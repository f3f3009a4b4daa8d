"""
Deterministic sequence generator used by the packer.

The recurrence is a small linear congruential step kept in exact integer
arithmetic, so a given seed yields the same draws on every platform.
"""
from __future__ import annotations

from stonelayout.config import DEFAULT_SEED

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280


class SeededRandom:
    """
    Stateful source of uniform values in [0, 1).

    One instance belongs to one layout computation. Use copy() to hand an
    identical, independent stream to someone else.
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        if seed < 0:
            raise ValueError(f"Seed must be non-negative, got {seed}.")
        self.seed: int = int(seed)
        self._state: int = self.seed

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self._state / LCG_MODULUS

    def copy(self) -> SeededRandom:
        clone = SeededRandom(self.seed)
        clone._state = self._state
        return clone

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed}, state={self._state})"
