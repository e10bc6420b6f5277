# cg2d/predicates.py
from __future__ import annotations
from typing import List, Mapping, Tuple

from .geom import Pt, sub, cross, EPS

def orient2d(a: Pt, b: Pt, c: Pt) -> float:
    """Подвоєна знакова площа (a,b,c): >0 — проти годинникової, <0 — за, 0 — колінеарні."""
    return cross(sub(b, a), sub(c, a))

def incircle_det(p: Pt, a: Pt, b: Pt, c: Pt) -> float:
    """
    Сирий детермінант
        | ax  ay  ax²+ay² |
        | bx  by  bx²+by² |
        | cx  cy  cx²+cy² |
    у системі координат з центром у p, розкладений за третім стовпцем.
    Знак залежить від орієнтації (a,b,c): для CCW >0 означає «p всередині».
    """
    ax = a.x - p.x; ay = a.y - p.y
    bx = b.x - p.x; by = b.y - p.y
    cx = c.x - p.x; cy = c.y - p.y
    return ((ax*ax + ay*ay) * (bx*cy - cx*by)
            - (bx*bx + by*by) * (ax*cy - cx*ay)
            + (cx*cx + cy*cy) * (ax*by - bx*ay))

def in_circumcircle(p: Pt, a: Pt, b: Pt, c: Pt, eps: float = EPS) -> bool:
    """
    Чи лежить p строго всередині кола, описаного навколо (a,b,c)?
    Знак детермінанта множимо на sign(orient2d(a,b,c)), тож відповідь
    не залежить від порядку обходу вершин.
    """
    ori = orient2d(a, b, c)
    if ori == 0.0:
        # вироджений трикутник — кола немає
        return False
    det = incircle_det(p, a, b, c)
    if ori < 0:
        det = -det
    return det > eps


# ---------- вершини «на нескінченності» ----------
# Вершина супер-трикутника задається як base + s*dir, s → ∞.
# Координати стають многочленами від s (список коефіцієнтів, індекс = степінь),
# а знак предиката — знаком старшого ненульового коефіцієнта.
Poly = List[float]
FarMap = Mapping[Pt, Tuple[Pt, Pt]]  # вершина -> (base, dir)

def _padd(p: Poly, q: Poly) -> Poly:
    n = max(len(p), len(q))
    return [(p[i] if i < len(p) else 0.0) + (q[i] if i < len(q) else 0.0) for i in range(n)]

def _psub(p: Poly, q: Poly) -> Poly:
    return _padd(p, [-c for c in q])

def _pmul(p: Poly, q: Poly) -> Poly:
    out = [0.0] * (len(p) + len(q) - 1)
    for i, a in enumerate(p):
        for j, b in enumerate(q):
            out[i + j] += a * b
    return out

def _lift(v: Pt, origin: Pt, far: FarMap) -> Tuple[Poly, Poly]:
    """Координати v - origin як многочлени від s."""
    if v in far:
        base, d = far[v]
        return [base.x - origin.x, d.x], [base.y - origin.y, d.y]
    return [v.x - origin.x], [v.y - origin.y]

def _leading(p: Poly) -> Tuple[float, int]:
    """Старший ненульовий коефіцієнт і його степінь (0, якщо лишився лише вільний член)."""
    for k in range(len(p) - 1, 0, -1):
        if p[k] != 0.0:
            return p[k], k
    return p[0], 0

def orient2d_far(a: Pt, b: Pt, c: Pt, far: FarMap) -> float:
    """Знак orient2d(a,b,c) при s → ∞ (значення — старший коефіцієнт)."""
    if a not in far and b not in far and c not in far:
        return orient2d(a, b, c)
    ax, ay = _lift(a, Pt(0.0, 0.0), far)
    bx, by = _lift(b, Pt(0.0, 0.0), far)
    cx, cy = _lift(c, Pt(0.0, 0.0), far)
    ux, uy = _psub(bx, ax), _psub(by, ay)
    vx, vy = _psub(cx, ax), _psub(cy, ay)
    return _leading(_psub(_pmul(ux, vy), _pmul(uy, vx)))[0]

def in_circumcircle_far(p: Pt, a: Pt, b: Pt, c: Pt, far: FarMap, eps: float = EPS) -> bool:
    """
    Те саме, що in_circumcircle, але вершини з `far` відсунуті на нескінченність
    уздовж своїх напрямків. Для трикутника без таких вершин — звичайний тест.
    """
    if a not in far and b not in far and c not in far:
        return in_circumcircle(p, a, b, c, eps)
    ori = orient2d_far(a, b, c, far)
    if ori == 0.0:
        return False
    ax, ay = _lift(a, p, far)
    bx, by = _lift(b, p, far)
    cx, cy = _lift(c, p, far)
    sa = _padd(_pmul(ax, ax), _pmul(ay, ay))
    sb = _padd(_pmul(bx, bx), _pmul(by, by))
    sc = _padd(_pmul(cx, cx), _pmul(cy, cy))
    det = _padd(_psub(_pmul(sa, _psub(_pmul(bx, cy), _pmul(cx, by))),
                      _pmul(sb, _psub(_pmul(ax, cy), _pmul(cx, ay)))),
                _pmul(sc, _psub(_pmul(ax, by), _pmul(bx, ay))))
    lead, k = _leading(det)
    if ori < 0:
        lead = -lead
    # eps стосується лише скінченного залишку; старші степені s домінують
    return lead > 0.0 if k > 0 else lead > eps
