"""
Unit tests for the 2D convex hull used to check triangulation coverage.
"""

import pytest

from cg2d.geom import Pt
from cg2d.hull import ConvexHull2D, polygon_area


class TestConvexHull2D:
    def test_square_with_inner_and_edge_points(self, unit_square):
        pts = unit_square + [Pt(0.5, 0.5), Pt(0.5, 0.0)]
        hull = ConvexHull2D(pts)

        assert sorted(hull.vertices()) == [0, 1, 2, 3], "Edge midpoint is not a hull vertex"
        assert hull.area() == pytest.approx(1.0)

    def test_polygon_is_counter_clockwise(self, scattered_points):
        poly = ConvexHull2D(scattered_points).polygon()
        assert polygon_area(poly) > 0

    def test_contains(self, unit_square):
        hull = ConvexHull2D(unit_square)
        assert hull.contains(Pt(0.5, 0.5))
        assert hull.contains(Pt(1.0, 0.5))
        assert not hull.contains(Pt(1.5, 0.5))

    def test_too_few_points(self):
        with pytest.raises(ValueError, match="at least 3 points"):
            ConvexHull2D([Pt(0, 0), Pt(1, 1)])

    def test_collinear(self):
        with pytest.raises(ValueError, match="collinear"):
            ConvexHull2D([Pt(0, 0), Pt(1, 1), Pt(2, 2)])


def test_polygon_area_sign():
    square = [Pt(0, 0), Pt(2, 0), Pt(2, 2), Pt(0, 2)]
    assert polygon_area(square) == pytest.approx(4.0)
    assert polygon_area(square[::-1]) == pytest.approx(-4.0)
