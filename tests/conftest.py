import random

import pytest

from cg2d.geom import Pt


@pytest.fixture
def unit_square():
    return [Pt(0.0, 0.0), Pt(1.0, 0.0), Pt(1.0, 1.0), Pt(0.0, 1.0)]


@pytest.fixture
def scattered_points():
    """Square corners plus seeded interior points kept away from the border."""
    rng = random.Random(20261019)
    pts = [Pt(0.0, 0.0), Pt(1.0, 0.0), Pt(1.0, 1.0), Pt(0.0, 1.0)]
    for _ in range(30):
        pts.append(Pt(rng.uniform(0.1, 0.9), rng.uniform(0.1, 0.9)))
    return pts


@pytest.fixture
def uniform_points():
    """Factory: uniform points in the full unit square, some close to the hull."""
    def make(seed, n=40):
        rng = random.Random(seed)
        return [Pt(rng.random(), rng.random()) for _ in range(n)]
    return make
