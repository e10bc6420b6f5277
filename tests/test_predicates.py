"""
Unit tests for the orientation and circumcircle predicates.
"""

import pytest

from cg2d.geom import Pt
from cg2d.predicates import (
    in_circumcircle,
    in_circumcircle_far,
    incircle_det,
    orient2d,
    orient2d_far,
)


A, B, C = Pt(0.0, 0.0), Pt(1.0, 0.0), Pt(0.0, 1.0)


class TestOrient2d:
    def test_counter_clockwise_is_positive(self):
        assert orient2d(A, B, C) == pytest.approx(1.0)

    def test_clockwise_is_negative(self):
        assert orient2d(A, C, B) == pytest.approx(-1.0)

    def test_collinear_is_zero(self):
        assert orient2d(Pt(0, 0), Pt(1, 1), Pt(2, 2)) == 0.0


class TestInCircumcircle:
    def test_raw_determinant_positive_inside_ccw(self):
        """The raw determinant is positive for a CCW triangle and an inner point."""
        assert incircle_det(Pt(0.25, 0.25), A, B, C) == pytest.approx(0.375)

    def test_raw_determinant_flips_with_winding(self):
        assert incircle_det(Pt(0.25, 0.25), A, C, B) == pytest.approx(-0.375)

    @pytest.mark.parametrize("tri", [(A, B, C), (A, C, B), (C, B, A)])
    def test_inside_point_independent_of_winding(self, tri):
        """Winding is normalized, so every ordering of the vertices agrees."""
        assert in_circumcircle(Pt(0.4, 0.4), *tri)

    @pytest.mark.parametrize("tri", [(A, B, C), (A, C, B)])
    def test_outside_point(self, tri):
        assert not in_circumcircle(Pt(2.0, 2.0), *tri)

    def test_point_on_circle_is_not_inside(self):
        """(1, 1) lies exactly on the circle through A, B, C."""
        assert not in_circumcircle(Pt(1.0, 1.0), A, B, C)

    def test_vertex_is_not_inside(self):
        assert not in_circumcircle(B, A, B, C)

    def test_degenerate_triangle_has_no_interior(self):
        assert not in_circumcircle(Pt(0.5, 0.1), Pt(0, 0), Pt(1, 0), Pt(2, 0))

    def test_eps_threshold(self):
        """A generous eps rejects points only marginally inside."""
        p = Pt(0.999, 0.999)
        assert in_circumcircle(p, A, B, C)
        assert not in_circumcircle(p, A, B, C, eps=1.0)


class TestFarVertices:
    """A vertex mapped to (base, dir) behaves like base + s*dir with s -> infinity."""

    UP = Pt(0.5, 0.0)
    FAR = {Pt(0.5, 100.0): (UP, Pt(0.0, 1.0))}
    S = Pt(0.5, 100.0)

    def test_orientation_uses_direction(self):
        assert orient2d_far(A, B, self.S, self.FAR) > 0
        assert orient2d_far(B, A, self.S, self.FAR) < 0

    def test_super_triangle_is_counter_clockwise(self):
        s1, s2, s3 = Pt(-1, -1), Pt(1, -1), Pt(0, 1)
        far = {
            s1: (Pt(0, -1), Pt(-1, 0)),
            s2: (Pt(0, -1), Pt(1, 0)),
            s3: (Pt(0, 0), Pt(0, 1)),
        }
        assert orient2d_far(s1, s2, s3, far) > 0

    def test_circle_through_far_vertex_is_a_half_plane(self):
        """Circle through A, B and a point far above tends to the half-plane y > 0."""
        assert in_circumcircle_far(Pt(0.5, 1e-6), A, B, self.S, self.FAR)
        assert in_circumcircle_far(Pt(-50.0, 3.0), A, B, self.S, self.FAR)
        assert not in_circumcircle_far(Pt(0.5, -1e-6), A, B, self.S, self.FAR)

    def test_collinear_point_inside_only_between_edge_ends(self):
        assert in_circumcircle_far(Pt(0.5, 0.0), A, B, self.S, self.FAR)
        assert not in_circumcircle_far(Pt(2.0, 0.0), A, B, self.S, self.FAR)
        assert not in_circumcircle_far(Pt(-1.0, 0.0), A, B, self.S, self.FAR)

    def test_winding_does_not_matter(self):
        p = Pt(0.3, 2.0)
        assert in_circumcircle_far(p, A, B, self.S, self.FAR)
        assert in_circumcircle_far(p, B, A, self.S, self.FAR)

    def test_finite_triangle_falls_back_to_plain_test(self):
        assert in_circumcircle_far(Pt(0.4, 0.4), A, B, C, self.FAR)
        assert not in_circumcircle_far(Pt(2.0, 2.0), A, B, C, self.FAR)
        assert orient2d_far(A, B, C, self.FAR) == orient2d(A, B, C)
