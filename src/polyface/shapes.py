"""Boundary primitives: points, boxes, segments, arcs and circles.

Shapes are immutable.  Every boundary piece (:class:`Segment` and
:class:`Arc`) exposes the same small surface that faces rely on:

- ``start`` / ``end`` / ``length`` / ``box``
- ``definite_integral(ymin)`` — ∫(y − ymin) dx along the piece, the
  Green's-theorem term summed by :meth:`Face.signed_area`
- ``intersect(other)`` — exact intersection points
- ``reverse()`` — the same piece traversed the other way
- ``svg()`` / ``to_dict()`` — path fragment and structured record
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Union

from .errors import FaceConstructionError
from .utils import eq, eq_0, format_number, get_tolerance, gt, le

PI_X2 = 2.0 * math.pi


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: "Point") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def equal_to(self, other: "Point") -> bool:
        """Tolerance-based equality (``==`` is exact)."""
        return eq(self.x, other.x) and eq(self.y, other.y)

    def svg_coords(self) -> str:
        return f"{format_number(self.x)},{format_number(self.y)}"

    def to_dict(self) -> dict:
        return {"name": "point", "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, payload: dict) -> "Point":
        return cls(float(payload["x"]), float(payload["y"]))


def as_point(value: Any) -> Point:
    """Accept a :class:`Point` or an ``(x, y)`` pair."""
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(float(x), float(y))


def is_point_like(value: Any) -> bool:
    if isinstance(value, Point):
        return True
    return (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in value)
    )


@dataclass(frozen=True)
class Box:
    """Axis-aligned bounding box.  The default instance is empty."""

    xmin: float = math.inf
    ymin: float = math.inf
    xmax: float = -math.inf
    ymax: float = -math.inf

    @classmethod
    def empty(cls) -> "Box":
        return cls()

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> "Box":
        if not points:
            return cls()
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))

    def is_empty(self) -> bool:
        return self.xmin > self.xmax or self.ymin > self.ymax

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty() else self.xmax - self.xmin

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty() else self.ymax - self.ymin

    def merge(self, other: "Box") -> "Box":
        return Box(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def intersects(self, other: "Box") -> bool:
        """Closed overlap test, widened by the current tolerance."""
        if self.is_empty() or other.is_empty():
            return False
        tol = get_tolerance()
        return not (
            self.xmax < other.xmin - tol
            or self.xmin > other.xmax + tol
            or self.ymax < other.ymin - tol
            or self.ymin > other.ymax + tol
        )

    def to_dict(self) -> dict:
        return {
            "xmin": self.xmin,
            "ymin": self.ymin,
            "xmax": self.xmax,
            "ymax": self.ymax,
        }


@dataclass(frozen=True)
class Segment:
    ps: Point
    pe: Point

    @property
    def start(self) -> Point:
        return self.ps

    @property
    def end(self) -> Point:
        return self.pe

    @property
    def length(self) -> float:
        return self.ps.distance_to(self.pe)

    @property
    def box(self) -> Box:
        return Box(
            min(self.ps.x, self.pe.x),
            min(self.ps.y, self.pe.y),
            max(self.ps.x, self.pe.x),
            max(self.ps.y, self.pe.y),
        )

    def reverse(self) -> "Segment":
        return Segment(self.pe, self.ps)

    def definite_integral(self, ymin: float = 0.0) -> float:
        """Trapezoid between the segment and the horizontal line *ymin*."""
        dx = self.pe.x - self.ps.x
        dy1 = self.ps.y - ymin
        dy2 = self.pe.y - ymin
        return dx * (dy1 + dy2) / 2

    def distance_to_point(self, point: Point) -> float:
        dx = self.pe.x - self.ps.x
        dy = self.pe.y - self.ps.y
        len_sq = dx * dx + dy * dy
        if len_sq == 0.0:
            return self.ps.distance_to(point)
        t = ((point.x - self.ps.x) * dx + (point.y - self.ps.y) * dy) / len_sq
        t = max(0.0, min(1.0, t))
        return point.distance_to(Point(self.ps.x + t * dx, self.ps.y + t * dy))

    def contains(self, point: Point) -> bool:
        return eq_0(self.distance_to_point(point))

    def point_at_length(self, length: float) -> Point:
        total = self.length
        if length <= 0 or total == 0.0:
            return self.ps
        if length >= total:
            return self.pe
        t = length / total
        return Point(
            self.ps.x + t * (self.pe.x - self.ps.x),
            self.ps.y + t * (self.pe.y - self.ps.y),
        )

    def intersect(self, other: "Shape") -> List[Point]:
        from .intersections import intersect_shapes
        return intersect_shapes(self, other)

    def svg(self) -> str:
        return f" L{self.pe.svg_coords()}"

    def to_dict(self) -> dict:
        return {"name": "segment", "ps": self.ps.to_dict(), "pe": self.pe.to_dict()}


@dataclass(frozen=True)
class Arc:
    """Circular arc from *start_angle* to *end_angle* around *pc*.

    Angles are in radians.  A sweep of 2π (``|start − end| == 2π``) is
    a full circle.
    """

    pc: Point = Point()
    r: float = 1.0
    start_angle: float = 0.0
    end_angle: float = PI_X2
    counter_clockwise: bool = True

    @property
    def sweep(self) -> float:
        if eq(self.start_angle, self.end_angle):
            return 0.0
        if eq(abs(self.start_angle - self.end_angle), PI_X2):
            return PI_X2
        if self.counter_clockwise:
            sweep = self.end_angle - self.start_angle
        else:
            sweep = self.start_angle - self.end_angle
        return sweep % PI_X2

    @property
    def start(self) -> Point:
        return self._point_at_angle(self.start_angle)

    @property
    def end(self) -> Point:
        return self._point_at_angle(self.end_angle)

    @property
    def length(self) -> float:
        return abs(self.sweep * self.r)

    @property
    def box(self) -> Box:
        points = [self.start, self.end]
        for angle in (0.0, math.pi / 2, math.pi, 3 * math.pi / 2):
            if self.contains_angle(angle):
                points.append(self._point_at_angle(angle))
        return Box.from_points(points)

    def _point_at_angle(self, angle: float) -> Point:
        return Point(
            self.pc.x + self.r * math.cos(angle),
            self.pc.y + self.r * math.sin(angle),
        )

    def _end_parameter(self) -> float:
        # start_angle advanced by the sweep in the traversal direction
        if self.counter_clockwise:
            return self.start_angle + self.sweep
        return self.start_angle - self.sweep

    def contains_angle(self, angle: float) -> bool:
        sweep = self.sweep
        if eq(sweep, PI_X2):
            return True
        if self.counter_clockwise:
            delta = (angle - self.start_angle) % PI_X2
        else:
            delta = (self.start_angle - angle) % PI_X2
        return le(delta, sweep) or eq(delta, PI_X2)

    def contains(self, point: Point) -> bool:
        if not eq(self.pc.distance_to(point), self.r):
            return False
        return self.contains_angle(math.atan2(point.y - self.pc.y, point.x - self.pc.x))

    def point_at_length(self, length: float) -> Point:
        total = self.length
        if length <= 0 or total == 0.0:
            return self.start
        if length >= total:
            return self.end
        delta = length / self.r
        if not self.counter_clockwise:
            delta = -delta
        return self._point_at_angle(self.start_angle + delta)

    def reverse(self) -> "Arc":
        return Arc(self.pc, self.r, self.end_angle, self.start_angle, not self.counter_clockwise)

    def definite_integral(self, ymin: float = 0.0) -> float:
        """Exact ∫(y − ymin) dx along the arc in its traversal direction.

        With x = cx + r·cosθ, y = cy + r·sinθ the integrand is
        −(cy − ymin)·r·sinθ − r²·sin²θ, integrated from the start
        parameter to the end parameter.
        """
        t0 = self.start_angle
        t1 = self._end_parameter()
        r = self.r
        linear = -(self.pc.y - ymin) * r * (math.cos(t0) - math.cos(t1))
        quadratic = -r * r * ((t1 - t0) / 2 - (math.sin(2 * t1) - math.sin(2 * t0)) / 4)
        return linear + quadratic

    def intersect(self, other: "Shape") -> List[Point]:
        from .intersections import intersect_shapes
        return intersect_shapes(self, other)

    def svg(self) -> str:
        r = format_number(self.r)
        sweep_flag = "1" if self.counter_clockwise else "0"
        if eq(self.sweep, PI_X2):
            # a single SVG arc command cannot close on itself
            middle = self.point_at_length(self.length / 2)
            return (
                f" A{r},{r},0,0,{sweep_flag},{middle.svg_coords()}"
                f" A{r},{r},0,0,{sweep_flag},{self.end.svg_coords()}"
            )
        large_arc_flag = "1" if gt(self.sweep, math.pi) else "0"
        return f" A{r},{r},0,{large_arc_flag},{sweep_flag},{self.end.svg_coords()}"

    def to_dict(self) -> dict:
        return {
            "name": "arc",
            "pc": self.pc.to_dict(),
            "r": self.r,
            "startAngle": self.start_angle,
            "endAngle": self.end_angle,
            "counterClockwise": self.counter_clockwise,
        }


@dataclass(frozen=True)
class Circle:
    pc: Point = Point()
    r: float = 1.0

    @property
    def box(self) -> Box:
        return Box(self.pc.x - self.r, self.pc.y - self.r, self.pc.x + self.r, self.pc.y + self.r)

    def to_arc(self, counter_clockwise: bool = True) -> Arc:
        """The full circle as one arc starting and ending at angle π."""
        return Arc(self.pc, self.r, math.pi, -math.pi, counter_clockwise)

    def to_dict(self) -> dict:
        return {"name": "circle", "pc": self.pc.to_dict(), "r": self.r}


Shape = Union[Segment, Arc]

SHAPE_NAMES = ("segment", "arc")


def is_shape_record(value: Any) -> bool:
    return isinstance(value, dict) and value.get("name") in SHAPE_NAMES


def shape_from_dict(record: Dict[str, Any]) -> Shape:
    """Rebuild a :class:`Segment` or :class:`Arc` from its ``to_dict`` form."""
    name = record.get("name") if isinstance(record, dict) else None
    try:
        if name == "segment":
            return Segment(Point.from_dict(record["ps"]), Point.from_dict(record["pe"]))
        if name == "arc":
            return Arc(
                Point.from_dict(record["pc"]),
                float(record["r"]),
                float(record["startAngle"]),
                float(record["endAngle"]),
                bool(record.get("counterClockwise", True)),
            )
    except (KeyError, TypeError, ValueError) as exc:
        raise FaceConstructionError(f"Malformed {name} record: {exc!r}") from exc
    raise FaceConstructionError(f"Unknown shape record {name!r}; expected one of {SHAPE_NAMES}")
