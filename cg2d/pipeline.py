from __future__ import annotations
from typing import Iterable, List, Tuple

from .geom import Pt, EPS, unique_points
from .hull import ConvexHull2D
from .mesh import Delaunay2D


def triangulate(
    points: Iterable[Tuple[float, float]],
    backend: str = "internal",
    eps: float = EPS,
) -> Tuple[List[Pt], List[int], List[Tuple[int, int, int]]]:
    """
    Повний пайплайн:
      - прибирає дублікати точок;
      - будує опуклу оболонку (наш ConvexHull2D) -> hull;
      - будує 2D тріангуляцію Делоне: наш Bowyer–Watson ("internal")
        або SciPy Delaunay ("scipy").

    Повертає:
      pts   — список Pt у фінальному порядку;
      hull  — індекси вершин оболонки (проти годинникової);
      tris  — список трикутників (індекси у pts).
    """
    pts: List[Pt] = unique_points(points)

    # 1) Опукла оболонка; заодно відсікає вироджені входи
    hull = ConvexHull2D(pts, eps).vertices()

    b = backend.lower()
    if b == "internal":
        dt = Delaunay2D(pts, eps)
        dt.build()
        return pts, hull, dt.simplices()

    if b == "scipy":
        try:
            import numpy as np
            from scipy.spatial import Delaunay
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy' requires SciPy. "
                "Install scipy or use backend='internal'."
            ) from e

        arr = np.array([(p.x, p.y) for p in pts], dtype=float)

        # 2) 2D Delaunay (Qhull під капотом)
        dela = Delaunay(arr)
        tris = [tuple(int(i) for i in simplex) for simplex in dela.simplices]
        return pts, hull, tris

    raise ValueError(f"Unknown backend: {backend}")
