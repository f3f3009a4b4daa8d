"""
2D elevation drawing of a layout (matplotlib).
"""
from __future__ import annotations

from typing import Optional, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.collections import PatchCollection
from matplotlib.patches import Rectangle

from stonelayout.config import STONE_PALETTE

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from stonelayout.model.layout import Layout
    from stonelayout.model.parameters import StoneParameters


def plot_layout(
    layout: Layout,
    params: StoneParameters,
    ax: Optional[Axes] = None,
    show: bool = True,
) -> Axes:
    """
    Draws the wall outline and every stone as a filled rectangle.

    Args:
        layout: The generated layout.
        params: Parameters the layout was generated from (wall outline, title).
        ax: Axes to draw into. A new figure is created when omitted.
        show: Call plt.show() when done.

    Returns:
        The axes that were drawn into.
    """
    if ax is None:
        plt.rcParams["figure.constrained_layout.use"] = True
        aspect = params.wall_height / max(params.wall_width, 1.0)
        fig = plt.figure(figsize=(10, min(20.0, max(2.0, 10 * aspect))))
        ax = fig.add_subplot()

    patches = [
        Rectangle((stone.x, stone.y), stone.width, stone.height)
        for stone in layout.stones
    ]
    colors = [STONE_PALETTE[i % len(STONE_PALETTE)] for i in range(len(patches))]
    ax.add_collection(PatchCollection(patches, facecolor=colors, edgecolor='black', lw=0.5))

    # Wall outline
    ax.add_patch(
        Rectangle((0.0, 0.0), params.wall_width, params.wall_height, fill=False, edgecolor='red', lw=1.5)
    )

    ax.set_aspect('equal')
    ax.set_xlim(-0.02 * params.wall_width, 1.02 * params.wall_width)
    ax.set_ylim(-0.02 * params.wall_height, 1.02 * params.wall_height)

    title = f"{params.pattern_type.capitalize()} bond, {layout.stone_count} stones"
    if layout.truncated:
        title += " (truncated)"
    ax.set_title(title)
    ax.set_xlabel("X")
    ax.set_ylabel("Y")

    if show:
        plt.show()
    return ax
