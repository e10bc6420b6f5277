from __future__ import annotations
from typing import List, Sequence

from .geom import Pt, EPS, point_key
from .predicates import orient2d


def polygon_area(poly: Sequence[Pt]) -> float:
    """Знакова площа многокутника (формула шнурка): >0 для обходу проти годинникової."""
    n = len(poly)
    s = 0.0
    for i in range(n):
        a = poly[i]
        b = poly[(i + 1) % n]
        s += a.x * b.y - b.x * a.y
    return 0.5 * s


class ConvexHull2D:
    """
    Опукла оболонка на площині (монотонний ланцюг Ендрю).

    Вхід: список Pt (мінімум 3, не всі колінеарні).
    Вихід: vertices() — індекси вершин оболонки у порядку проти годинникової стрілки,
    колінеарні точки на ребрах оболонки відкидаються.
    """

    def __init__(self, points: List[Pt], eps: float = EPS):
        if len(points) < 3:
            raise ValueError("Need at least 3 points")
        self.P: List[Pt] = points[:]
        self.eps = eps
        self._hull: List[int] = self._build()
        if len(self._hull) < 3:
            raise ValueError("All points collinear: convex hull is degenerate")

    # ---------------- Публічний API ----------------
    def vertices(self) -> List[int]:
        return self._hull[:]

    def polygon(self) -> List[Pt]:
        return [self.P[i] for i in self._hull]

    def area(self) -> float:
        return polygon_area(self.polygon())

    def contains(self, p: Pt) -> bool:
        """Точка всередині або на межі оболонки (з допуском eps)."""
        poly = self.polygon()
        n = len(poly)
        for i in range(n):
            if orient2d(poly[i], poly[(i + 1) % n], p) < -self.eps:
                return False
        return True

    # ---------------- Внутрішні методи ----------------
    def _build(self) -> List[int]:
        order = sorted(range(len(self.P)), key=lambda i: point_key(self.P[i]))

        def half(idx: List[int]) -> List[int]:
            chain: List[int] = []
            for i in idx:
                # викидаємо праві повороти та колінеарні (orient <= 0)
                while len(chain) >= 2 and orient2d(self.P[chain[-2]], self.P[chain[-1]], self.P[i]) <= 0:
                    chain.pop()
                chain.append(i)
            return chain

        lower = half(order)
        upper = half(order[::-1])
        # останні вершини кожного ланцюга повторюють першу іншого
        return lower[:-1] + upper[:-1]
