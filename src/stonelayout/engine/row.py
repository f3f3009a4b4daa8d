"""
Row packer: lays out a single horizontal course of stones.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from stonelayout.config import MAX_ROW_STEPS, MIN_STONE_SIZE, STONE_DEPTH
from stonelayout.engine.patterns import get_pattern
from stonelayout.model.layout import Stone
from stonelayout.utils import lerp

if TYPE_CHECKING:
    from stonelayout.engine.random import SeededRandom
    from stonelayout.model.parameters import StoneParameters


@dataclass
class RowResult:
    """Outcome of packing one course."""
    stones: list[Stone] = field(default_factory=list)
    next_y: float = 0.0
    next_id: int = 0
    row_height: float = 0.0
    # The course was cut short: stone budget exhausted, or the cursor stopped advancing
    stalled: bool = False


def apply_randomness(value: float, randomness: float, rng: SeededRandom) -> float:
    """
    Jitter a dimension by up to +/- randomness * value.

    Used for both the course height and every stone width. The result never
    drops below MIN_STONE_SIZE.
    """
    variation = value * randomness * (rng.next() - 0.5) * 2
    return max(MIN_STONE_SIZE, value + variation)


def generate_row(
    params: StoneParameters,
    rng: SeededRandom,
    start_y: float,
    start_id: int,
    is_first_row: bool,
    max_stones: Optional[int] = None,
    max_steps: int = MAX_ROW_STEPS,
) -> RowResult:
    """
    Packs one course from left to right, starting at height start_y.

    Args:
        params: Wall and stone parameters (horizontal frame).
        rng: Generator of the running computation; draws happen in a fixed
            order (row height, jitter, pattern offset, then two per stone).
        start_y: Bottom of the course.
        start_id: Number assigned to the first placed stone.
        is_first_row: True for the bottom course of the wall.
        max_stones: Optional cap on the stones this course may place.
        max_steps: Cursor steps allowed before the course is given up as
            stalled (joints that nearly cancel the stone widths).

    Returns:
        RowResult with the placed stones, the y of the next course and the
        next free stone number.
    """
    base_height = lerp(params.stone_min_height, params.stone_max_height, rng.next())
    row_height = apply_randomness(base_height, params.randomness, rng)

    pattern = get_pattern(params.pattern_type)
    current_x = pattern.start_offset(rng, is_first_row)

    stones: list[Stone] = []
    stone_id = start_id
    stalled = False
    steps = 0

    while current_x < params.wall_width:
        if steps >= max_steps:
            stalled = True
            break
        steps += 1

        base_width = lerp(params.stone_min_width, params.stone_max_width, rng.next())
        stone_width = apply_randomness(base_width, params.randomness, rng)

        # Right wall edge
        if current_x + stone_width > params.wall_width:
            stone_width = params.wall_width - current_x

        # Left wall edge (running bond overhang)
        if current_x < 0:
            visible_x, visible_width = 0.0, current_x + stone_width
        else:
            visible_x, visible_width = current_x, stone_width

        if visible_width > MIN_STONE_SIZE:
            if max_stones is not None and len(stones) >= max_stones:
                stalled = True
                break
            stones.append(
                Stone(
                    id=f"stone-{stone_id}",
                    x=visible_x,
                    y=start_y,
                    width=visible_width,
                    height=row_height,
                    depth=STONE_DEPTH,
                )
            )
            stone_id += 1

        step = stone_width + params.joint_width
        if step <= 0:
            stalled = True
            break
        current_x += step

    return RowResult(
        stones=stones,
        next_y=start_y + row_height + params.joint_height,
        next_id=stone_id,
        row_height=row_height,
        stalled=stalled,
    )
