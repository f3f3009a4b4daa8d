"""
Box mesh of a layout for 3D viewers and VTK export.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyvista as pv

from stonelayout.config import STONE_PALETTE

if TYPE_CHECKING:
    from stonelayout.model.layout import Layout

logger = logging.getLogger(__name__)

# Corner order of one box: bottom face (z=0) CCW, then top face (z=depth) CCW
_CORNERS = np.array(
    [
        [0, 0, 0], [1, 0, 0], [1, 1, 0], [0, 1, 0],
        [0, 0, 1], [1, 0, 1], [1, 1, 1], [0, 1, 1],
    ],
    dtype=np.float64,
)

# Quad faces of one box, outward normals
_FACES = np.array(
    [
        [0, 3, 2, 1],  # back (z=0)
        [4, 5, 6, 7],  # front (z=depth)
        [0, 1, 5, 4],  # bottom
        [2, 3, 7, 6],  # top
        [0, 4, 7, 3],  # left
        [1, 2, 6, 5],  # right
    ],
    dtype=np.int64,
)


def layout_to_polydata(layout: Layout) -> pv.PolyData:
    """
    Builds one closed box per stone, extruded from the wall plane (z=0)
    by the stone depth.

    Cell data:
        stone_index: Position of the stone in the layout (6 faces each).
        material_index: Index into STONE_PALETTE (stone_index % 5).
    """
    n_stones = layout.stone_count
    if n_stones == 0:
        return pv.PolyData()

    data = layout.to_array()  # x, y, width, height, depth
    origins = np.c_[data[:, 0], data[:, 1], np.zeros(n_stones)]
    sizes = data[:, 2:5]

    # (N, 8, 3) -> (8N, 3)
    points = (origins[:, None, :] + _CORNERS[None, :, :] * sizes[:, None, :]).reshape(-1, 3)

    offsets = (np.arange(n_stones, dtype=np.int64) * len(_CORNERS))[:, None, None]
    quads = (_FACES[None, :, :] + offsets).reshape(-1, 4)
    faces = np.hstack([np.full((len(quads), 1), 4, dtype=np.int64), quads]).ravel()

    mesh = pv.PolyData(points, faces)

    stone_index = np.repeat(np.arange(n_stones), len(_FACES))
    mesh.cell_data["stone_index"] = stone_index
    mesh.cell_data["material_index"] = stone_index % len(STONE_PALETTE)

    logger.debug(f"Built box mesh: {mesh.n_points} points, {mesh.n_cells} faces.")
    return mesh
