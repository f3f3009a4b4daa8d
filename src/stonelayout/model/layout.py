"""
Layout Output Records
=====================
Immutable value records returned by the layout engine.

Classes:
    Stone: A single placed unit.
    Layout: The ordered stone sequence plus summary statistics.
"""
from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Iterator, TYPE_CHECKING

import numpy as np

from stonelayout.model.parameters import LayoutDirection

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Stone:
    """A rectangular unit; (x, y) is its lower-left corner."""
    id: str
    x: float
    y: float
    width: float
    height: float
    depth: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def transposed(self) -> Stone:
        """Mirror across the wall diagonal (x <-> y, width <-> height)."""
        return Stone(
            id=self.id,
            x=self.y,
            y=self.x,
            width=self.height,
            height=self.width,
            depth=self.depth,
        )


@dataclass(frozen=True)
class Layout:
    """
    Stones are kept in generation order: course by course, bottom to top for
    horizontal courses (left to right within each) and left to right for
    vertical ones (bottom to top within each).
    """
    stones: tuple[Stone, ...] = ()
    total_area: float = 0.0
    stone_count: int = 0
    truncated: bool = False
    direction: LayoutDirection = LayoutDirection.HORIZONTAL

    @classmethod
    def from_stones(
        cls,
        stones: list[Stone] | tuple[Stone, ...],
        truncated: bool = False,
        direction: LayoutDirection = LayoutDirection.HORIZONTAL,
    ) -> Layout:
        """Builds a layout and its totals from an ordered stone sequence."""
        stones = tuple(stones)
        total_area = sum((stone.width * stone.height for stone in stones), 0.0)
        return cls(
            stones=stones,
            total_area=total_area,
            stone_count=len(stones),
            truncated=truncated,
            direction=direction,
        )

    def __len__(self) -> int:
        return self.stone_count

    def __iter__(self) -> Iterator[Stone]:
        return iter(self.stones)

    def to_array(self) -> npt.NDArray[np.float64]:
        """Returns an (N, 5) array of [x, y, width, height, depth] rows."""
        if not self.stones:
            return np.empty((0, 5), dtype=np.float64)
        return np.array(
            [[s.x, s.y, s.width, s.height, s.depth] for s in self.stones],
            dtype=np.float64,
        )

    def rows(self) -> list[tuple[Stone, ...]]:
        """
        Groups consecutive stones sharing the same course (same y for
        horizontal courses, same x for vertical ones).
        """
        if self.direction == LayoutDirection.VERTICAL:
            key = lambda s: s.x
        else:
            key = lambda s: s.y
        return [tuple(group) for _, group in groupby(self.stones, key=key)]

    def iter_batches(self, batch_size: int = 50) -> Iterator[tuple[Stone, ...]]:
        """
        Yields consecutive slices of the stone sequence in generation order,
        for consumers that add stones to a scene over several ticks.
        """
        if batch_size <= 0:
            raise ValueError("batch_size must be positive.")
        for start in range(0, self.stone_count, batch_size):
            yield self.stones[start:start + batch_size]
