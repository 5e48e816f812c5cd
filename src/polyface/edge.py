from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from .shapes import Arc, Box, Point, Segment, Shape

if TYPE_CHECKING:
    from .face import Face


@dataclass(eq=False)
class Edge:
    """One boundary piece of a face plus its loop links.

    *prev* / *next* / *face* are set by the owning :class:`Face`.
    *arc_length* is the boundary length from the face's first edge to
    the start of this edge; it is only guaranteed current right after
    :meth:`Face.set_arc_length`.
    """

    shape: Shape
    prev: Optional["Edge"] = field(default=None, repr=False)
    next: Optional["Edge"] = field(default=None, repr=False)
    face: Optional["Face"] = field(default=None, repr=False)
    arc_length: float = 0.0

    @property
    def start(self) -> Point:
        return self.shape.start

    @property
    def end(self) -> Point:
        return self.shape.end

    @property
    def length(self) -> float:
        return self.shape.length

    @property
    def box(self) -> Box:
        return self.shape.box

    @property
    def is_segment(self) -> bool:
        return isinstance(self.shape, Segment)

    @property
    def is_arc(self) -> bool:
        return isinstance(self.shape, Arc)

    def contains(self, point: Point) -> bool:
        return self.shape.contains(point)

    def point_at_length(self, length: float) -> Point:
        return self.shape.point_at_length(length)

    def svg(self) -> str:
        return self.shape.svg()

    def to_dict(self) -> dict:
        return self.shape.to_dict()
