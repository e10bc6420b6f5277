# examples/main.py
from __future__ import annotations

import logging
import time

from cg2d.mesh import Delaunay2D
from cg2d.export import write_vtk

logger = logging.getLogger("cg2d.examples.main")


# профіль крила: верхня/нижня дуги + точки хорди y = 0
POINTS = [
    (0.0, 0.0), (0.7, 1.4), (2.7, 2.7), (6.0, 3.8),
    (10.5, 4.8), (16.1, 5.5), (22.7, 5.9), (29.9, 6.0),
    (37.7, 5.9), (45.9, 5.5), (54.1, 5.0), (62.3, 4.4),
    (70.1, 3.6), (77.3, 2.9), (83.9, 2.1), (89.5, 1.4),
    (94.0, 0.8), (97.3, 0.4), (99.3, 0.1), (0.7, -1.4),
    (2.7, -2.7), (6.0, -3.8), (10.5, -4.8), (16.1, -5.5),
    (22.7, -5.9), (29.9, -6.0), (37.7, -5.9), (45.9, -5.5),
    (54.1, -5.0), (62.3, -4.4), (70.1, -3.6), (77.3, -2.9),
    (83.9, -2.1), (89.5, -1.4), (94.0, -0.8), (97.3, -0.4),
    (99.3, -0.1), (0.7, 0.0), (2.7, 0.0), (6.0, 0.0),
    (10.5, 0.0), (16.1, 0.0), (22.7, 0.0), (29.9, 0.0),
    (37.7, 0.0), (45.9, 0.0), (54.1, 0.0), (62.3, 0.0),
    (70.1, 0.0), (77.3, 0.0), (83.9, 0.0), (89.5, 0.0),
    (94.0, 0.0), (97.3, 0.0), (99.3, 0.0), (100.0, 0.0),
]


def main(path: str = "triangulation.vtk") -> int:
    # --- 1) Тріангуляція з заміром часу ---
    start = time.perf_counter()
    dt = Delaunay2D(POINTS)
    triangles = dt.build()
    elapsed = time.perf_counter() - start

    logger.info("Time taken for triangulation: %.6f seconds.", elapsed)
    logger.info("Generated %d triangles.", len(triangles))

    # --- 2) Експорт у VTK (помилка запису не скасовує результат) ---
    if not write_vtk(triangles, path):
        logger.error("%s не записано", path)
        return 1
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    raise SystemExit(main())
