# cg2d/export.py
from __future__ import annotations
import logging
from typing import Dict, List, Sequence, Tuple

from .geom import Pt
from .mesh import Tri

logger = logging.getLogger(__name__)

VTK_TRIANGLE = 5  # код типу комірки «трикутник» у VTK


def index_vertices(tris: Sequence[Tri]) -> Tuple[List[Pt], List[Tuple[int, int, int]]]:
    """
    Унікальні вершини в порядку першої появи (a, b, c кожного трикутника)
    та трикутники як індекси в цьому списку. Рівність вершин — точна.
    """
    remap: Dict[Pt, int] = {}
    cells: List[Tuple[int, int, int]] = []
    for t in tris:
        ids = []
        for p in t.vertices():
            if p not in remap:
                remap[p] = len(remap)
            ids.append(remap[p])
        cells.append((ids[0], ids[1], ids[2]))
    return list(remap), cells


def to_vtk(tris: Sequence[Tri], title: str = "Delaunay Triangulation") -> str:
    """Legacy VTK (ASCII, UNSTRUCTURED_GRID) для плаского трикутного меша, z = 0."""
    pts, cells = index_vertices(tris)
    lines = [
        "# vtk DataFile Version 3.0",
        title,
        "ASCII",
        "DATASET UNSTRUCTURED_GRID",
        f"POINTS {len(pts)} float",
    ]
    for p in pts:
        lines.append(f"{p.x} {p.y} 0.0")

    lines.append(f"CELLS {len(cells)} {len(cells) * 4}")
    for a, b, c in cells:
        lines.append(f"3 {a} {b} {c}")

    lines.append(f"CELL_TYPES {len(cells)}")
    lines.extend(str(VTK_TRIANGLE) for _ in cells)
    return "\n".join(lines) + "\n"


def to_off(tris: Sequence[Tri]) -> str:
    """OFF для тих самих трикутників (вершини — з z = 0)."""
    pts, cells = index_vertices(tris)
    lines = ["OFF", f"{len(pts)} {len(cells)} 0"]
    for p in pts:
        lines.append(f"{p.x} {p.y} 0.0")
    for a, b, c in cells:
        lines.append(f"3 {a} {b} {c}")
    return "\n".join(lines)


def _write(path: str, text: str) -> bool:
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        # сама тріангуляція від цього не страждає — лише повідомляємо
        logger.error("Could not open file %s: %s", path, e)
        return False
    logger.info("Exported to %s", path)
    return True


def write_vtk(tris: Sequence[Tri], path: str, title: str = "Delaunay Triangulation") -> bool:
    return _write(path, to_vtk(tris, title))


def write_off(tris: Sequence[Tri], path: str) -> bool:
    return _write(path, to_off(tris))
