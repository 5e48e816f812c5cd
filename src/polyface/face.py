"""Face — one closed boundary loop of a polygon.

A face is a circular, doubly linked chain of :class:`Edge` objects.  The
navigation links live on the edges; the face only keeps references to
the first and last edge.  Edge storage belongs to the polygon's shared
:class:`EdgeIndex`, which every structural operation receives
explicitly.

Iteration walks the loop from ``first``::

    for edge in face:
        print(edge.length)

Orientation follows Green's theorem: ``signed_area()`` sums
∫(y − ymin) dx over the edges, which is negative for a counter-clockwise
loop and positive for a clockwise one.

Cache contract
--------------
``box`` and ``orientation()`` are computed lazily and cached.
``append``, ``insert`` and ``remove`` drop both caches; ``reverse``
keeps the box (it does not depend on direction) and recomputes a cached
orientation.  ``invalidate()`` drops both on demand.

Edge ``arc_length`` values are only guaranteed right after
``set_arc_length()``: ``append`` keeps them correct, but ``insert`` and
``remove`` only set the inserted edge and leave downstream edges stale.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Sequence

from .edge import Edge
from .errors import FaceConstructionError, LoopStructureError
from .shapes import Box, Circle, Point, Segment, Shape, as_point, shape_from_dict
from .sources import (
    BoxSource,
    CircleSource,
    EdgePair,
    FaceCopy,
    FaceSource,
    PointList,
    RecordList,
    ShapeList,
)
from .spatial_index import EdgeIndex
from .utils import eq_0, lt

logger = logging.getLogger(__name__)


class Orientation(IntEnum):
    CCW = -1
    NOT_ORIENTABLE = 0
    CW = 1


class Face:
    """Closed loop of edges.  An instance starts empty."""

    def __init__(self) -> None:
        self.first: Optional[Edge] = None
        self.last: Optional[Edge] = None
        self._box: Optional[Box] = None
        self._orientation: Optional[Orientation] = None

    # ── construction ────────────────────────────────────────────────

    @classmethod
    def build(cls, index: EdgeIndex, source: FaceSource) -> "Face":
        """Build a face from a tagged :data:`FaceSource` variant."""
        if isinstance(source, PointList):
            return cls.from_points(index, source.points)
        if isinstance(source, ShapeList):
            return cls.from_shapes(index, source.shapes, check_closed=source.check_closed)
        if isinstance(source, RecordList):
            return cls.from_records(index, source.records)
        if isinstance(source, FaceCopy):
            return cls.from_face(index, source.face, copy_edges=source.copy_edges)
        if isinstance(source, CircleSource):
            return cls.from_circle(index, source.circle)
        if isinstance(source, BoxSource):
            return cls.from_box(index, source.box)
        if isinstance(source, EdgePair):
            return cls.from_edges(source.first, source.last)
        raise FaceConstructionError(f"Unknown face source {type(source).__name__}")

    @classmethod
    def from_points(cls, index: EdgeIndex, points: Sequence) -> "Face":
        """Closed polyline through *points*; the last point joins the first."""
        return cls.from_shapes(index, points_to_segments(points))

    @classmethod
    def from_shapes(
        cls,
        index: EdgeIndex,
        shapes: Iterable[Shape],
        check_closed: bool = False,
    ) -> "Face":
        """Wrap each shape in an edge and append them in order.

        The shapes must already join end-to-start into a closed loop.
        That is not verified unless *check_closed* is set.
        """
        shapes = list(shapes)
        if check_closed:
            _check_shapes_closed(shapes)
        face = cls()
        for shape in shapes:
            face.append(index, Edge(shape))
        logger.debug("Built face with %d edges", len(shapes))
        return face

    @classmethod
    def from_records(cls, index: EdgeIndex, records: Iterable[dict]) -> "Face":
        return cls.from_shapes(index, [shape_from_dict(record) for record in records])

    @classmethod
    def from_face(cls, index: EdgeIndex, other: "Face", copy_edges: bool = False) -> "Face":
        """Face over the edges of *other*, registered in *index*.

        By default the edges themselves are shared and re-pointed at the
        new face, so *other* must be discarded afterwards.  With
        *copy_edges* fresh edges holding the same shapes are created and
        *other* is left untouched.
        """
        if copy_edges:
            return cls.from_shapes(index, [edge.shape for edge in other])
        face = cls()
        face.first = other.first
        face.last = other.last
        for edge in face:
            index.add(edge)
        face.set_arc_length()
        return face

    @classmethod
    def from_circle(cls, index: EdgeIndex, circle: Circle) -> "Face":
        return cls.from_shapes(index, [circle.to_arc(counter_clockwise=True)])

    @classmethod
    def from_box(cls, index: EdgeIndex, box: Box) -> "Face":
        return cls.from_shapes(index, [
            Segment(Point(box.xmin, box.ymin), Point(box.xmax, box.ymin)),
            Segment(Point(box.xmax, box.ymin), Point(box.xmax, box.ymax)),
            Segment(Point(box.xmax, box.ymax), Point(box.xmin, box.ymax)),
            Segment(Point(box.xmin, box.ymax), Point(box.xmin, box.ymin)),
        ])

    @classmethod
    def from_edges(cls, first: Edge, last: Edge) -> "Face":
        """Close a chain already linked from *first* to *last*.

        Used by boundary algorithms that link edges themselves and have
        already registered them in the polygon's index.
        """
        face = cls()
        face.first = first
        face.last = last
        last.next = first
        first.prev = last
        face.set_arc_length()
        return face

    # ── iteration and size ──────────────────────────────────────────

    def __iter__(self) -> Iterator[Edge]:
        edge = self.first
        if edge is None:
            return
        while True:
            yield edge
            edge = edge.next
            if edge is self.first:
                break

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Face(size={self.size})"

    @property
    def edges(self) -> List[Edge]:
        return list(self)

    @property
    def size(self) -> int:
        """Number of edges; walks the loop every time."""
        return sum(1 for _ in self)

    @property
    def shapes(self) -> List[Shape]:
        return [edge.shape for edge in self]

    def is_empty(self) -> bool:
        return self.first is None and self.last is None

    # ── mutation ────────────────────────────────────────────────────

    def append(self, index: EdgeIndex, edge: Edge) -> None:
        """Add *edge* after ``last`` (and therefore before ``first``)."""
        if self.first is None:
            edge.prev = edge
            edge.next = edge
            self.first = edge
            self.last = edge
            edge.arc_length = 0.0
        else:
            edge.prev = self.last
            self.last.next = edge
            self.last = edge
            self.last.next = self.first
            self.first.prev = self.last
            edge.arc_length = edge.prev.arc_length + edge.prev.length
        edge.face = self
        index.add(edge)
        self.invalidate()

    def insert(self, index: EdgeIndex, new_edge: Edge, edge_before: Edge) -> None:
        """Link *new_edge* right after *edge_before*.

        Inserting after ``last`` makes *new_edge* the new ``first``.
        Arc lengths of the edges following *new_edge* are left as they
        were; call :meth:`set_arc_length` to bring them up to date.
        """
        if self.first is None:
            new_edge.prev = new_edge
            new_edge.next = new_edge
            self.first = new_edge
            self.last = new_edge
        else:
            if edge_before.face is not self:
                raise LoopStructureError("edge_before does not belong to this face")
            edge_after = edge_before.next
            edge_before.next = new_edge
            edge_after.prev = new_edge
            new_edge.prev = edge_before
            new_edge.next = edge_after
            if self.last is edge_before:
                self.first = new_edge
        new_edge.face = self

        if new_edge.prev is self.last:
            new_edge.arc_length = 0.0
        else:
            new_edge.arc_length = new_edge.prev.arc_length + new_edge.prev.length

        index.add(new_edge)
        self.invalidate()

    def remove(self, index: EdgeIndex, edge: Edge) -> None:
        """Unlink *edge* and drop it from *index*.

        Arc lengths downstream of the removed edge become stale.
        """
        if edge.face is not self:
            raise LoopStructureError("edge does not belong to this face")
        if edge is self.first and edge is self.last:
            self.first = None
            self.last = None
        else:
            edge.prev.next = edge.next
            edge.next.prev = edge.prev
            if edge is self.first:
                self.first = edge.next
            if edge is self.last:
                self.last = edge.prev
        index.delete(edge)
        edge.prev = None
        edge.next = None
        edge.face = None
        self.invalidate()

    def reverse(self) -> None:
        """Traverse the loop the other way round.

        Every shape is replaced by its reversal and the old ``last``
        becomes the new ``first``.
        """
        if self.is_empty():
            return

        edges: List[Edge] = []
        edge = self.last
        while True:
            edge.shape = edge.shape.reverse()
            edges.append(edge)
            edge = edge.prev
            if edge is self.last:
                break

        self.first = None
        self.last = None
        for edge in edges:
            if self.first is None:
                edge.prev = edge
                edge.next = edge
                self.first = edge
                self.last = edge
                edge.arc_length = 0.0
            else:
                edge.prev = self.last
                self.last.next = edge
                self.last = edge
                self.last.next = self.first
                self.first.prev = self.last
                edge.arc_length = edge.prev.arc_length + edge.prev.length

        if self._orientation is not None:
            self._orientation = None
            self._orientation = self.orientation()

    def set_arc_length(self) -> None:
        """Recompute every edge's arc length and face back-reference."""
        for edge in self:
            if edge is self.first:
                edge.arc_length = 0.0
            else:
                edge.arc_length = edge.prev.arc_length + edge.prev.length
            edge.face = self

    def invalidate(self) -> None:
        """Drop the cached box and orientation."""
        self._box = None
        self._orientation = None

    # ── derived geometry ────────────────────────────────────────────

    @property
    def box(self) -> Box:
        if self._box is None:
            box = Box.empty()
            for edge in self:
                box = box.merge(edge.box)
            self._box = box
        return self._box

    @property
    def perimeter(self) -> float:
        return sum(edge.length for edge in self)

    def signed_area(self) -> float:
        """Green's-theorem area: negative if CCW, positive if CW.

        Only meaningful for a simple face; a self-crossing loop mixes
        both senses.
        """
        if self.is_empty():
            return 0.0
        ymin = self.box.ymin
        return sum(edge.shape.definite_integral(ymin) for edge in self)

    def area(self) -> float:
        return abs(self.signed_area())

    def orientation(self) -> Orientation:
        if self._orientation is None:
            area = self.signed_area()
            if eq_0(area):
                self._orientation = Orientation.NOT_ORIENTABLE
            elif lt(area, 0):
                self._orientation = Orientation.CCW
            else:
                self._orientation = Orientation.CW
        return self._orientation

    def point_at_length(self, length: float) -> Optional[Point]:
        """Point at boundary distance *length* from ``first.start``.

        Relies on current edge arc lengths.  Returns ``None`` outside
        ``[0, perimeter]``.
        """
        if self.is_empty() or length < 0:
            return None
        for edge in self:
            if edge.arc_length <= length <= edge.arc_length + edge.length:
                return edge.point_at_length(length - edge.arc_length)
        return None

    def find_edge_by_point(self, point) -> Optional[Edge]:
        point = as_point(point)
        for edge in self:
            if edge.contains(point):
                return edge
        return None

    def is_simple(self, index: EdgeIndex) -> bool:
        """True if no self-intersection is found.

        Touching points are not detected; only crossings reported by the
        narrow phase count.
        """
        return not get_self_intersections(self, index, exit_on_first=True)

    def validate(self) -> List[str]:
        """Return descriptions of broken loop invariants (empty if none)."""
        errors: List[str] = []
        if self.is_empty():
            return errors
        if self.first is None or self.last is None:
            return ["Face has only one of first/last set"]
        if self.first.prev is not self.last or self.last.next is not self.first:
            errors.append("Face first/last are not linked to each other")

        expected = 0.0
        for i, edge in enumerate(self):
            if edge.next is None or edge.next.prev is not edge:
                errors.append(f"Edge {i}: next.prev does not point back")
            if edge.face is not self:
                errors.append(f"Edge {i}: face back-reference is wrong")
            if edge.next is not None and not edge.end.equal_to(edge.next.start):
                errors.append(f"Edge {i}: end does not meet the next edge's start")
            if not eq_0(edge.arc_length - expected):
                errors.append(
                    f"Edge {i}: arc_length {edge.arc_length:.6g} != {expected:.6g}"
                )
            expected += edge.length
        return errors

    # ── serialization ───────────────────────────────────────────────

    def to_list(self) -> List[dict]:
        """Per-edge shape records in traversal order."""
        return [edge.to_dict() for edge in self]

    def svg(self) -> str:
        """Path data for an SVG ``d`` attribute."""
        if self.is_empty():
            return ""
        path = f"\nM{self.first.start.svg_coords()}"
        for edge in self:
            path += edge.svg()
        path += " z"
        return path


def points_to_segments(points: Sequence) -> List[Segment]:
    """Segments joining consecutive points, wrapping the last to the first."""
    points = [as_point(p) for p in points]
    n = len(points)
    return [Segment(points[i], points[(i + 1) % n]) for i in range(n)]


def get_self_intersections(
    face: Face,
    index: EdgeIndex,
    exit_on_first: bool = False,
) -> List[Point]:
    """Crossings between the face's edges and the indexed edges.

    Adjacent segments are not tested against each other, and points
    that coincide exactly with either endpoint of a shared loop joint
    are dropped.  An arc is
    still tested against its neighbours since it can cross them.
    """
    int_points: List[Point] = []

    for edge1 in face:
        for edge2 in index.search(edge1.box):
            if edge1 is edge2:
                continue

            if (
                edge1.is_segment
                and edge2.is_segment
                and (edge1.next is edge2 or edge1.prev is edge2)
            ):
                continue

            for pt in edge1.shape.intersect(edge2.shape):
                # shared loop joints; the point is snapped onto one side only
                if edge2 is edge1.prev and (pt == edge1.start or pt == edge2.end):
                    continue
                if edge2 is edge1.next and (pt == edge1.end or pt == edge2.start):
                    continue

                int_points.append(pt)
                if exit_on_first:
                    break

            if int_points and exit_on_first:
                break

        if int_points and exit_on_first:
            break

    logger.debug("Self-intersection scan found %d point(s)", len(int_points))
    return int_points


def _check_shapes_closed(shapes: Sequence[Shape]) -> None:
    for i, shape in enumerate(shapes):
        following = shapes[(i + 1) % len(shapes)]
        if not shape.end.equal_to(following.start):
            raise FaceConstructionError(
                f"Shape {i} ends at ({shape.end.x}, {shape.end.y}) but shape "
                f"{(i + 1) % len(shapes)} starts at ({following.start.x}, {following.start.y})"
            )
