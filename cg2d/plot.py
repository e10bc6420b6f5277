from __future__ import annotations
from typing import Sequence, Tuple

from .geom import Pt


def plot_triangulation(ax, pts: Sequence[Pt], tris: Sequence[Tuple[int, int, int]], show_points: bool = True):
    """
    Намалювати ребра трикутників на matplotlib Axes (однаковий масштаб осей).
    Кожне спільне ребро малюється один раз.
    """
    ax.clear()
    if not tris:
        ax.set_title("No triangles")
        return ax

    drawn = set()
    for (i0, i1, i2) in tris:
        for a, b in ((i0, i1), (i1, i2), (i2, i0)):
            key = (min(a, b), max(a, b))
            if key in drawn:
                continue
            drawn.add(key)
            pa, pb = pts[a], pts[b]
            ax.plot([pa.x, pb.x], [pa.y, pb.y], color="tab:blue", linewidth=0.6)

    if show_points:
        ax.scatter([p.x for p in pts], [p.y for p in pts], s=6, color="tab:red", zorder=3)

    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(f"Delaunay triangulation ({len(tris)} triangles)")
    return ax
