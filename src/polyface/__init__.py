"""polyface — closed boundary loops (faces) of 2D polygons.

Public API is organised into layers:

- **Primitives** — points, boxes, segments, arcs, circles, tolerance
- **Core** — edges, faces, the shared edge index, the polygon container
- **I/O** — JSON and SVG export
- **Diagnostics** — per-face quality reports
- **Rendering** — PNG output (requires matplotlib)
"""

# ── Primitives ──────────────────────────────────────────────────────
from .shapes import Arc, Box, Circle, Point, Segment, shape_from_dict
from .intersections import intersect_shapes
from .utils import DP_TOL, get_tolerance, set_tolerance, tolerance
from .errors import FaceConstructionError, GeometryError, LoopStructureError

# ── Core ────────────────────────────────────────────────────────────
from .edge import Edge
from .spatial_index import EdgeIndex
from .sources import (
    BoxSource,
    CircleSource,
    EdgePair,
    FaceCopy,
    FaceSource,
    PointList,
    RecordList,
    ShapeList,
    as_face_source,
)
from .face import Face, Orientation, get_self_intersections, points_to_segments
from .polygon import Polygon

# ── I/O ─────────────────────────────────────────────────────────────
from .io import load_json, save_json, save_svg, to_svg_document

# ── Diagnostics ─────────────────────────────────────────────────────
from .diagnostics import (
    diagnostics_report,
    face_report,
    has_self_intersections,
    min_face_area,
)

# ── Rendering (requires matplotlib) ────────────────────────────────
from .render import face_outline, render_png

__all__ = [
    # Primitives
    "Arc",
    "Box",
    "Circle",
    "Point",
    "Segment",
    "shape_from_dict",
    "intersect_shapes",
    "DP_TOL",
    "get_tolerance",
    "set_tolerance",
    "tolerance",
    "GeometryError",
    "FaceConstructionError",
    "LoopStructureError",
    # Core
    "Edge",
    "EdgeIndex",
    "FaceSource",
    "PointList",
    "ShapeList",
    "RecordList",
    "FaceCopy",
    "CircleSource",
    "BoxSource",
    "EdgePair",
    "as_face_source",
    "Face",
    "Orientation",
    "get_self_intersections",
    "points_to_segments",
    "Polygon",
    # I/O
    "load_json",
    "save_json",
    "save_svg",
    "to_svg_document",
    # Diagnostics
    "face_report",
    "diagnostics_report",
    "has_self_intersections",
    "min_face_area",
    # Rendering
    "face_outline",
    "render_png",
]
