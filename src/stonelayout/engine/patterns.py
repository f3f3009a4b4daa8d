"""
Coursing patterns.

Each pattern decides where a course starts relative to the left wall edge.
The set is closed: one subclass per PatternType, resolved by get_pattern().
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from stonelayout.config import RUNNING_OFFSET_MIN, RUNNING_OFFSET_MAX
from stonelayout.model.parameters import PatternType
from stonelayout.utils import lerp

if TYPE_CHECKING:
    from stonelayout.engine.random import SeededRandom


class CoursePattern(ABC):
    """
    Abstract base class for coursing patterns.
    """
    KIND: PatternType

    @abstractmethod
    def start_offset(self, rng: SeededRandom, is_first_row: bool) -> float:
        """
        Get the starting x of a course.

        Args:
            rng: The generator of the running layout computation. Only
                patterns that actually need a value draw from it.
            is_first_row: True for the bottom course.

        Returns:
            The x coordinate where the first stone of the course begins
            (zero or negative).
        """
        pass


class RunningBond(CoursePattern):
    """
    Every course after the first is shifted left by a random amount so
    vertical joints do not line up between courses.
    """
    KIND = PatternType.RUNNING

    def start_offset(self, rng: SeededRandom, is_first_row: bool) -> float:
        if is_first_row:
            return 0.0
        return -lerp(RUNNING_OFFSET_MIN, RUNNING_OFFSET_MAX, rng.next())


class StackBond(CoursePattern):
    """All courses start flush with the wall edge."""
    KIND = PatternType.STACK

    def start_offset(self, rng: SeededRandom, is_first_row: bool) -> float:
        return 0.0


class RandomBond(CoursePattern):
    """
    Courses start flush with the wall edge; the irregular look comes from
    the size jitter alone.
    """
    KIND = PatternType.RANDOM

    def start_offset(self, rng: SeededRandom, is_first_row: bool) -> float:
        return 0.0


def get_pattern(kind: PatternType | str) -> CoursePattern:
    """Resolves a pattern kind to its variant."""
    try:
        kind = PatternType(kind)
    except ValueError:
        raise ValueError(f"Unknown pattern type '{kind}'.") from None

    match kind:
        case PatternType.RUNNING:
            return RunningBond()
        case PatternType.STACK:
            return StackBond()
        case PatternType.RANDOM:
            return RandomBond()
