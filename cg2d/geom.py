from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple

EPS = 1e-9          # поріг для тесту описаного кола
SUPER_SCALE = 20.0  # відступ вершин супер-трикутника, у разах від max(w, h)

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def cross(a: Pt, b: Pt) -> float:
    return a.x*b.y - a.y*b.x

def point_key(p: Pt) -> Tuple[float, float]:
    """Лексикографічний порядок (x, потім y). Геометричного змісту не має."""
    return (p.x, p.y)

def bbox(points: Iterable[Pt]) -> Tuple[float, float, float, float]:
    it = iter(points)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("empty set") from None
    min_x = max_x = first.x
    min_y = max_y = first.y
    for p in it:
        min_x = min(min_x, p.x); max_x = max(max_x, p.x)
        min_y = min(min_y, p.y); max_y = max(max_y, p.y)
    return min_x, min_y, max_x, max_y

def unique_points(points: Iterable[Tuple[float, float]], scale: float = 1e9) -> list[Pt]:
    """
    Груба дедуплікація з квантуванням, порядок першої появи зберігається.
    `scale=1e9` ≈ EPS=1e-9 на координату.
    """
    seen: dict[Tuple[int, int], Pt] = {}
    for x, y in points:
        key = (int(round(x*scale)), int(round(y*scale)))
        if key not in seen:
            seen[key] = Pt(float(x), float(y))
    return list(seen.values())
