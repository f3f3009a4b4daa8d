"""
Layout Assembler
================
Drives the row packer up the wall and aggregates the placed stones.

Why is this file needed?
------------------------
1. Orchestration: it owns the generator of one computation and feeds rows
   to the row packer until the wall height is covered.
2. Safety: it enforces the stone cutoff and reports truncation on the
   returned Layout instead of silently handing back a partial result.
3. Orientation: vertical layouts are produced by running the same packer on
   the transposed wall and mirroring the result back.

Classes:
    LayoutEngine: Entry point of the layout computation.
"""
from __future__ import annotations

import logging

from stonelayout.config import DEFAULT_SEED, MAX_STONES
from stonelayout.engine.random import SeededRandom
from stonelayout.engine.row import generate_row
from stonelayout.model.layout import Layout, Stone
from stonelayout.model.parameters import LayoutDirection, StoneParameters

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Computes stone layouts for a fixed seed.

    The engine itself holds no per-layout state: every call to
    generate_layout() starts a fresh SeededRandom, so repeated calls with the
    same parameters return identical layouts and one engine may be used from
    several threads.
    """

    def __init__(self, seed: int = DEFAULT_SEED, max_stones: int = MAX_STONES) -> None:
        if max_stones <= 0:
            raise ValueError(f"max_stones must be positive, got {max_stones}.")
        # Validates the seed up front
        SeededRandom(seed)
        self.seed = seed
        self.max_stones = max_stones

    def generate_layout(self, params: StoneParameters) -> Layout:
        """
        Generates the full layout for the given parameters.

        Returns:
            A Layout whose stones are ordered course by course. The
            `truncated` flag is set when generation stopped early.
        """
        logger.debug(
            f"Generating layout {params.wall_width}x{params.wall_height} "
            f"({params.pattern_type}, {params.layout_direction}, seed={self.seed})"
        )

        if params.layout_direction == LayoutDirection.VERTICAL:
            stones, truncated = self._generate_stones(params.transposed())
            stones = [stone.transposed() for stone in stones]
        else:
            stones, truncated = self._generate_stones(params)

        # Trim stones that start outside the wall
        trimmed = [
            stone for stone in stones
            if stone.x < params.wall_width and stone.y < params.wall_height
        ]

        layout = Layout.from_stones(trimmed, truncated=truncated, direction=params.layout_direction)
        logger.info(
            f"Layout generated: {layout.stone_count} stones, total area {layout.total_area:.1f}"
            + (" (truncated)" if truncated else "")
        )
        return layout

    def _generate_stones(self, params: StoneParameters) -> tuple[list[Stone], bool]:
        """Runs the row packer from y=0 upwards in the horizontal frame."""
        rng = SeededRandom(self.seed)
        stones: list[Stone] = []
        current_y = 0.0
        stone_id = 0
        is_first_row = True

        while current_y < params.wall_height:
            budget = self.max_stones - len(stones)
            row = generate_row(
                params,
                rng,
                start_y=current_y,
                start_id=stone_id,
                is_first_row=is_first_row,
                max_stones=budget,
            )

            # A cut-short course is dropped whole, never kept half-filled
            if row.stalled:
                if len(row.stones) >= budget:
                    logger.warning(
                        f"Maximum stone count reached ({self.max_stones}); "
                        f"stopping at y={current_y:.1f} with {len(stones)} stones."
                    )
                else:
                    logger.warning(
                        f"Course at y={current_y:.1f} stopped advancing; "
                        f"stopping with {len(stones)} stones."
                    )
                return stones, True

            stones.extend(row.stones)
            is_first_row = False

            if row.next_y <= current_y:
                logger.warning(
                    f"Courses no longer advance (next y {row.next_y:.1f} <= {current_y:.1f}); "
                    f"stopping with {len(stones)} stones."
                )
                return stones, True

            current_y = row.next_y
            stone_id = row.next_id

        return stones, False
