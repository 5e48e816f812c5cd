"""Tagged inputs for face construction.

Each variant names one way of building a face.  Callers that know what
they hold construct the variant directly; :func:`as_face_source` maps
loosely-typed data (as read from JSON or passed to
:meth:`Polygon.add_face`) onto a variant and rejects anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Sequence, Tuple, Union

from .errors import FaceConstructionError
from .shapes import Arc, Box, Circle, Point, Segment, as_point, is_point_like, is_shape_record

if TYPE_CHECKING:
    from .edge import Edge
    from .face import Face


@dataclass(frozen=True)
class PointList:
    points: Tuple[Point, ...]


@dataclass(frozen=True)
class ShapeList:
    shapes: Tuple[Union[Segment, Arc], ...]
    check_closed: bool = False


@dataclass(frozen=True)
class RecordList:
    records: Tuple[dict, ...]


@dataclass(frozen=True)
class FaceCopy:
    face: "Face"
    copy_edges: bool = False


@dataclass(frozen=True)
class CircleSource:
    circle: Circle


@dataclass(frozen=True)
class BoxSource:
    box: Box


@dataclass(frozen=True)
class EdgePair:
    first: "Edge"
    last: "Edge"


FaceSource = Union[PointList, ShapeList, RecordList, FaceCopy, CircleSource, BoxSource, EdgePair]

_SOURCE_TYPES = (PointList, ShapeList, RecordList, FaceCopy, CircleSource, BoxSource, EdgePair)


def as_face_source(data: Any) -> FaceSource:
    """Classify *data* as a :data:`FaceSource` variant.

    Accepted: a variant instance; a sequence of points (``Point`` or
    ``(x, y)`` pairs), of shapes, or of serialized shape records; a
    ``Face``; a ``Circle``; a ``Box``; a ``(first, last)`` edge pair.
    An empty sequence is an empty point list.
    """
    from .edge import Edge
    from .face import Face

    if isinstance(data, _SOURCE_TYPES):
        return data
    if isinstance(data, Face):
        return FaceCopy(data)
    if isinstance(data, Circle):
        return CircleSource(data)
    if isinstance(data, Box):
        return BoxSource(data)
    if (
        isinstance(data, tuple)
        and len(data) == 2
        and all(isinstance(item, Edge) for item in data)
    ):
        return EdgePair(data[0], data[1])
    if isinstance(data, (list, tuple)):
        return _classify_sequence(data)
    raise FaceConstructionError(f"Cannot build a face from {type(data).__name__}")


def _classify_sequence(items: Sequence[Any]) -> FaceSource:
    if not items:
        return PointList(())
    if all(is_point_like(item) for item in items):
        return PointList(tuple(as_point(item) for item in items))
    if all(isinstance(item, (Segment, Arc)) for item in items):
        return ShapeList(tuple(items))
    if all(is_shape_record(item) for item in items):
        return RecordList(tuple(items))
    kinds = sorted({type(item).__name__ for item in items})
    raise FaceConstructionError(
        "Face input must be all points, all segments/arcs or all shape records; "
        f"got {', '.join(kinds)}"
    )
