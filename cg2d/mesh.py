# cg2d/mesh.py
from __future__ import annotations
import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .geom import Pt, EPS, SUPER_SCALE, bbox, point_key
from .hull import ConvexHull2D
from .predicates import orient2d, orient2d_far, in_circumcircle, in_circumcircle_far

logger = logging.getLogger(__name__)

PointLike = Union[Pt, Tuple[float, float]]
Simplex = Tuple[int, int, int]  # трійка індексів вершин у points


@dataclass(frozen=True, eq=False)
class Edge:
    """Неорієнтоване ребро: Edge(a, b) == Edge(b, a)."""
    u: Pt
    v: Pt

    def key(self) -> Tuple[Pt, Pt]:
        a, b = sorted((self.u, self.v), key=point_key)
        return (a, b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())


@dataclass(frozen=True)
class Tri:
    """
    Трикутник (a, b, c). Ребра: (a,b), (b,c), (c,a).
    Рівність — точний збіг упорядкованої трійки вершин.
    """
    a: Pt
    b: Pt
    c: Pt

    def vertices(self) -> Tuple[Pt, Pt, Pt]:
        return (self.a, self.b, self.c)

    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return (Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a))

    def has_vertex(self, p: Pt) -> bool:
        return p == self.a or p == self.b or p == self.c

    def area2(self) -> float:
        return orient2d(self.a, self.b, self.c)

    def ccw(self) -> "Tri":
        """Та сама трійка з обходом проти годинникової стрілки."""
        if self.area2() < 0:
            return Tri(self.a, self.c, self.b)
        return self

    def circumcircle_contains(self, p: Pt, eps: float = EPS) -> bool:
        return in_circumcircle(p, self.a, self.b, self.c, eps)


def _as_points(points: Iterable[PointLike]) -> List[Pt]:
    return [p if isinstance(p, Pt) else Pt(float(p[0]), float(p[1])) for p in points]


def _check_input(points: List[Pt], eps: float) -> None:
    """Вироджені входи відсікаємо одразу, а не повертаємо порожню сітку."""
    if len(points) < 3:
        raise ValueError("Need at least 3 points")
    if len(set(points)) != len(points):
        raise ValueError("Duplicate points: coincident input points are not supported")

    min_x, min_y, max_x, max_y = bbox(points)
    delta_max = max(max_x - min_x, max_y - min_y)
    # базова пряма: p0 і найвіддаленіша від неї точка
    p0 = points[0]
    p1 = max(points, key=lambda q: (q.x - p0.x)**2 + (q.y - p0.y)**2)
    tol = eps * delta_max * delta_max
    if not any(abs(orient2d(p0, p1, q)) > tol for q in points):
        raise ValueError("All points collinear: cannot form a triangle")


class Delaunay2D:
    """
    Інкрементальна 2D тріангуляція Делоне (Bowyer–Watson) з супер-трикутником.

    Точки вставляються у вхідному порядку; результат залежить від порядку лише
    у випадку співколових четвірок. Колекція трикутників належить екземпляру.

    symbolic=True (типово): вершини супер-трикутника в предикатах вважаються
    відсунутими на нескінченність уздовж своїх напрямків, тож жоден трикутник
    з супер-вершиною не витісняє ребро опуклої оболонки. Збережені координати
    супер-вершин — ті самі, що при скінченному `scale`.
    symbolic=False: буквальний скінченний супер-трикутник `scale`×max(w, h).
    """
    def __init__(
        self,
        points: Iterable[PointLike],
        eps: float = EPS,
        scale: float = SUPER_SCALE,
        symbolic: bool = True,
    ):
        self.points: List[Pt] = _as_points(points)
        self.eps = eps
        self.scale = scale
        self.symbolic = symbolic
        _check_input(self.points, eps)
        self.tris: List[Tri] = []
        self.super_tri: Optional[Tri] = None
        self.skipped: List[Pt] = []
        self._far: Dict[Pt, Tuple[Pt, Pt]] = {}

    # ---- супер-трикутник ----
    def _build_super_triangle(self) -> Tri:
        min_x, min_y, max_x, max_y = bbox(self.points)
        delta_max = max(max_x - min_x, max_y - min_y)
        mid_x = (min_x + max_x) / 2.0
        mid_y = (min_y + max_y) / 2.0

        # вершина = base + scale*dir
        low = Pt(mid_x, mid_y - delta_max)
        top = Pt(mid_x, mid_y)
        rays = [
            (low, Pt(-delta_max, 0.0)),
            (low, Pt(delta_max, 0.0)),
            (top, Pt(0.0, delta_max)),
        ]
        verts = [Pt(b.x + self.scale * d.x, b.y + self.scale * d.y) for b, d in rays]
        self._far = {v: ray for v, ray in zip(verts, rays)} if self.symbolic else {}

        self.super_tri = self._ccw(Tri(*verts))
        self.tris = [self.super_tri]
        self.skipped = []
        return self.super_tri

    def _ccw(self, t: Tri) -> Tri:
        if orient2d_far(t.a, t.b, t.c, self._far) < 0:
            return Tri(t.a, t.c, t.b)
        return t

    def _contains(self, t: Tri, p: Pt) -> bool:
        return in_circumcircle_far(p, t.a, t.b, t.c, self._far, self.eps)

    # ---- вставка однієї точки ----
    def insert(self, p: Pt) -> int:
        """Вставити p у поточну тріангуляцію. Повертає кількість нових трикутників."""
        if self.super_tri is None:
            self._build_super_triangle()

        # 1) «погані» трикутники і ребра їхньої порожнини
        bad: List[Tri] = []
        polygon: List[Edge] = []
        for t in self.tris:
            if self._contains(t, p):
                bad.append(t)
                polygon.extend(t.edges())

        if not bad:
            # p не потрапила в жодне описане коло — лише через похибку float / eps
            logger.warning("point %r is outside every circumcircle, skipped", p)
            self.skipped.append(p)
            return 0

        # 2) видалити погані трикутники
        bad_set = set(bad)
        self.tris = [t for t in self.tris if t not in bad_set]

        # 3) межа порожнини — ребра, що зустрілися рівно один раз
        counts = Counter(polygon)
        boundary = [e for e in polygon if counts[e] == 1]

        # 4) зірка з p на межі порожнини
        for e in boundary:
            self.tris.append(self._ccw(Tri(e.u, e.v, p)))

        logger.debug("insert %r: %d bad, %d boundary edges, %d triangles",
                     p, len(bad), len(boundary), len(self.tris))
        return len(boundary)

    def build(self, finalize: bool = True) -> List[Tri]:
        """Побудувати тріангуляцію для всіх points (у вхідному порядку)."""
        self._build_super_triangle()
        for p in self.points:
            self.insert(p)
        if finalize:
            self.remove_super_triangle()
        logger.info("triangulated %d points into %d triangles", len(self.points), len(self.tris))
        return self.triangles()

    def remove_super_triangle(self) -> None:
        """Прибрати усі трикутники, що мають спільну вершину з супер-трикутником."""
        if self.super_tri is None:
            return
        sv = self.super_tri.vertices()
        self.tris = [t for t in self.tris if not any(t.has_vertex(s) for s in sv)]

    # ---------- результати ----------
    def triangles(self) -> List[Tri]:
        return self.tris[:]

    def simplices(self) -> List[Simplex]:
        """Трикутники як трійки індексів у self.points (лише після remove_super_triangle)."""
        index: Dict[Pt, int] = {p: i for i, p in enumerate(self.points)}
        if any(v not in index for t in self.tris for v in t.vertices()):
            raise ValueError("simplices() needs a finalized triangulation: call remove_super_triangle() first")
        return [(index[t.a], index[t.b], index[t.c]) for t in self.tris]

    def validate(self) -> dict:
        return validate_triangles(self.points, self.tris, self.eps, self.super_tri)


def validate_triangles(
    points: Sequence[Pt],
    tris: Sequence[Tri],
    eps: float = EPS,
    super_tri: Optional[Tri] = None,
) -> dict:
    """
    Швидка перевірка тріангуляції:
      - кожен трикутник орієнтований проти годинникової і має ненульову площу;
      - кожне ребро належить 1 (межа) або 2 (внутрішнє) трикутникам;
      - жодна точка не лежить всередині описаного кола чужого трикутника;
      - жоден трикутник не торкається супер-вершин;
      - сумарна площа дорівнює площі опуклої оболонки.
    Повертає словник з діагностикою (порожні списки = все ок).
    """
    bad_orientation: list[int] = []
    bad_edges: list[tuple[Edge, int]] = []
    non_delaunay: list[tuple[int, Pt]] = []
    super_leak: list[int] = []

    # 1) орієнтація
    for ti, t in enumerate(tris):
        if t.area2() <= 0:
            bad_orientation.append(ti)

    # 2) кратність ребер
    edge_count: Counter = Counter(e for t in tris for e in t.edges())
    bad_edges = [(e, k) for e, k in edge_count.items() if k not in (1, 2)]

    # 3) порожні описані кола
    for ti, t in enumerate(tris):
        for p in points:
            if not t.has_vertex(p) and t.circumcircle_contains(p, eps):
                non_delaunay.append((ti, p))

    # 4) витік супер-вершин
    if super_tri is not None:
        sv = super_tri.vertices()
        super_leak = [ti for ti, t in enumerate(tris) if any(t.has_vertex(s) for s in sv)]

    # 5) покриття оболонки
    area = sum(abs(t.area2()) for t in tris) * 0.5
    hull_area = ConvexHull2D(list(points), eps).area()

    return {
        "triangles": len(tris),
        "bad_orientation": bad_orientation,
        "bad_edges": bad_edges,
        "non_delaunay": non_delaunay,
        "super_leak": super_leak,
        "area": area,
        "hull_area": hull_area,
    }


def delaunay_triangulation(points: Iterable[PointLike], eps: float = EPS) -> List[Tri]:
    """Тріангуляція Делоне за один виклик."""
    return Delaunay2D(points, eps).build()
