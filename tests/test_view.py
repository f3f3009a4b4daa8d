import matplotlib.pyplot as plt
import numpy as np
import pytest

from stonelayout.engine.layout_engine import LayoutEngine
from stonelayout.model.layout import Layout
from stonelayout.model.parameters import PatternType, StoneParameters
from stonelayout.view.elevation import plot_layout
from stonelayout.view.mesh import layout_to_polydata


@pytest.fixture
def params() -> StoneParameters:
    return StoneParameters(wall_width=2000.0, wall_height=1000.0, pattern_type=PatternType.STACK)


@pytest.fixture
def layout(params) -> Layout:
    return LayoutEngine().generate_layout(params)


def test_polydata_counts(layout):
    mesh = layout_to_polydata(layout)
    assert mesh.n_points == 8 * layout.stone_count
    assert mesh.n_cells == 6 * layout.stone_count


def test_polydata_bounds(layout, params):
    mesh = layout_to_polydata(layout)
    xmin, xmax, ymin, ymax, zmin, zmax = mesh.bounds

    assert xmin == 0.0 and ymin == 0.0 and zmin == 0.0
    assert xmax == pytest.approx(max(s.right for s in layout.stones))
    assert ymax == pytest.approx(max(s.top for s in layout.stones))
    assert zmax == layout.stones[0].depth


def test_polydata_cell_data(layout):
    mesh = layout_to_polydata(layout)
    stone_index = np.asarray(mesh.cell_data["stone_index"])

    assert stone_index[:6].tolist() == [0] * 6
    assert stone_index[-1] == layout.stone_count - 1
    assert np.array_equal(np.asarray(mesh.cell_data["material_index"]), stone_index % 5)


def test_polydata_first_box_matches_stone(layout):
    mesh = layout_to_polydata(layout)
    stone = layout.stones[0]
    box = np.asarray(mesh.points)[:8]

    np.testing.assert_allclose(box.min(axis=0), [stone.x, stone.y, 0.0])
    np.testing.assert_allclose(box.max(axis=0), [stone.right, stone.top, stone.depth])


def test_polydata_empty():
    assert layout_to_polydata(Layout()).n_points == 0


def test_plot_layout(layout, params):
    ax = plot_layout(layout, params, show=False)
    try:
        assert len(ax.collections) == 1
        assert f"{layout.stone_count} stones" in ax.get_title()
        assert ax.get_title().startswith("Stack bond")
    finally:
        plt.close(ax.figure)


def test_plot_layout_into_existing_axes(layout, params):
    fig, ax = plt.subplots()
    try:
        assert plot_layout(Layout(truncated=True), params, ax=ax, show=False) is ax
        assert "(truncated)" in ax.get_title()
    finally:
        plt.close(fig)
