"""
cg2d — мінімальна бібліотека для 2D комп'ютерної геометрії.
Зараз: інкрементальна тріангуляція Делоне (Bowyer–Watson) + експорт у VTK/OFF.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, SUPER_SCALE, point_key, unique_points
from cg2d.predicates import orient2d, orient2d_far, incircle_det, in_circumcircle, in_circumcircle_far
from cg2d.hull import ConvexHull2D, polygon_area
from cg2d.mesh import Edge, Tri, Delaunay2D, delaunay_triangulation, validate_triangles
from cg2d.export import to_vtk, write_vtk, to_off, write_off

__all__ = [
    "Pt", "EPS", "SUPER_SCALE", "point_key", "unique_points",
    "orient2d", "orient2d_far", "incircle_det", "in_circumcircle", "in_circumcircle_far",
    "ConvexHull2D", "polygon_area",
    "Edge", "Tri", "Delaunay2D", "delaunay_triangulation", "validate_triangles",
    "to_vtk", "write_vtk", "to_off", "write_off", "__version__",
]
