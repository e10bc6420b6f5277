# examples/demo_pipeline.py
import logging

from cg2d.pipeline import triangulate

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    # квадрат + внутрішні точки
    raw = [
        (0, 0), (1, 0), (1, 1), (0, 1),
        (0.5, 0.5), (0.2, 0.8), (0.8, 0.3), (0.35, 0.25),
    ]

    for backend in ("internal", "scipy"):
        pts, hull, tris = triangulate(raw, backend=backend)
        print(f"[{backend}] vertices: {len(pts)}, hull: {len(hull)}, triangles: {len(tris)}")
