"""Quality reports for faces and polygons.

The reports are plain JSON-serialisable dicts so the CLI can print or
save them directly.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .face import Face, get_self_intersections
from .polygon import Polygon
from .shapes import Point
from .spatial_index import EdgeIndex


def face_report(face: Face, index: EdgeIndex) -> Dict[str, Any]:
    """Size, area, orientation and self-intersections of one face."""
    points = get_self_intersections(face, index) if not face.is_empty() else []
    box = face.box
    return {
        "size": face.size,
        "signed_area": face.signed_area(),
        "area": face.area(),
        "orientation": face.orientation().name if not face.is_empty() else None,
        "perimeter": face.perimeter,
        "box": None if box.is_empty() else box.to_dict(),
        "simple": not points,
        "self_intersections": _unique_points(points),
        "errors": face.validate(),
    }


def has_self_intersections(polygon: Polygon) -> bool:
    return not polygon.is_valid()


def min_face_area(polygon: Polygon) -> float:
    areas = [face.area() for face in polygon.faces if not face.is_empty()]
    return min(areas) if areas else 0.0


def diagnostics_report(polygon: Polygon) -> Dict[str, Any]:
    faces = [face_report(face, polygon.edges) for face in polygon.faces]
    return {
        "face_count": len(polygon.faces),
        "edge_count": len(polygon.edges),
        "area": polygon.area(),
        "min_face_area": min_face_area(polygon),
        "simple": all(report["simple"] for report in faces),
        "faces": faces,
    }


def _unique_points(points: List[Point]) -> List[List[float]]:
    # each crossing is found once from either edge of the pair
    seen: List[Point] = []
    for pt in points:
        if not any(pt.equal_to(other) for other in seen):
            seen.append(pt)
    return [[pt.x, pt.y] for pt in seen]
