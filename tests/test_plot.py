"""
Smoke tests for matplotlib drawing of a triangulation.
"""

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")
from matplotlib.figure import Figure  # noqa: E402

from cg2d.plot import plot_triangulation  # noqa: E402
from cg2d.pipeline import triangulate  # noqa: E402


def test_each_edge_drawn_once(unit_square):
    pts, _, tris = triangulate([(p.x, p.y) for p in unit_square])
    ax = Figure().add_subplot(111)

    plot_triangulation(ax, pts, tris)

    assert len(ax.lines) == 5, "Four sides plus one diagonal"
    assert len(ax.collections) == 1
    assert "2 triangles" in ax.get_title()


def test_points_can_be_hidden(unit_square):
    pts, _, tris = triangulate([(p.x, p.y) for p in unit_square])
    ax = Figure().add_subplot(111)

    plot_triangulation(ax, pts, tris, show_points=False)

    assert len(ax.collections) == 0


def test_empty_triangulation():
    ax = Figure().add_subplot(111)
    plot_triangulation(ax, [], [])
    assert ax.get_title() == "No triangles"
