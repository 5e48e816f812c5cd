from __future__ import annotations

import math
from pathlib import Path
from typing import List, Tuple

from .face import Face, Orientation, get_self_intersections
from .polygon import Polygon

_ORIENTATION_COLORS = {
    Orientation.CCW: "#5aa9e6",
    Orientation.CW: "#e6a35a",
    Orientation.NOT_ORIENTABLE: "#999999",
}


def render_png(
    polygon: Polygon,
    output_path: str | Path,
    face_alpha: float = 0.25,
    edge_color: str = "#2b2b2b",
    vertex_color: str = "#2b2b2b",
    vertex_size: float = 8.0,
    intersection_color: str = "#d1495b",
    padding: float = 0.5,
    dpi: int = 150,
    arc_step: float = math.radians(5),
    show_intersections: bool = True,
) -> None:
    """Render every face of *polygon* to PNG.

    Faces are filled by orientation (CCW blue, CW orange).  Arcs are
    drawn as polylines with one vertex per *arc_step* radians.

    Requires matplotlib; imported lazily to keep core package lightweight.
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Polygon as PolygonPatch
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for rendering. Install with `pip install matplotlib`."
        ) from exc

    faces = [face for face in polygon.faces if not face.is_empty()]
    if not faces:
        raise ValueError("Polygon has no edges to render.")

    fig, ax = plt.subplots()

    for face in faces:
        points = face_outline(face, arc_step)
        color = _ORIENTATION_COLORS[face.orientation()]
        ax.add_patch(PolygonPatch(points, closed=True, facecolor=color, alpha=face_alpha))
        xs, ys = zip(*(points + [points[0]]))
        ax.plot(xs, ys, color=edge_color, linewidth=1.0)
        for edge in face:
            ax.scatter(edge.start.x, edge.start.y, s=vertex_size, c=vertex_color, zorder=3)

        if show_intersections:
            for pt in get_self_intersections(face, polygon.edges):
                ax.scatter(pt.x, pt.y, s=vertex_size * 3, c=intersection_color,
                           marker="x", zorder=4)

    box = polygon.box
    ax.set_aspect("equal", "box")
    ax.set_xlim(box.xmin - padding, box.xmax + padding)
    ax.set_ylim(box.ymin - padding, box.ymax + padding)
    ax.axis("off")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)


def face_outline(face: Face, arc_step: float = math.radians(5)) -> List[Tuple[float, float]]:
    """Vertices of *face* with arcs linearised, without repeating the start."""
    points: List[Tuple[float, float]] = []
    for edge in face:
        points.append((edge.start.x, edge.start.y))
        if edge.is_arc:
            steps = max(int(math.ceil(edge.shape.sweep / arc_step)), 1)
            for i in range(1, steps):
                pt = edge.point_at_length(edge.length * i / steps)
                points.append((pt.x, pt.y))
    return points
