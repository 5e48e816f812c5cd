"""Exact shape-to-shape intersection (the narrow phase).

Only the pairs a face can contain are handled: segment/segment,
segment/arc and arc/arc.  Computed points lying within tolerance of an
endpoint of either input are replaced by that endpoint, so that a
genuine loop joint compares exactly equal to the edge endpoints.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from .shapes import Arc, Point, Segment, Shape
from .utils import eq, eq_0, ge, gt, le, lt


def intersect_shapes(a: Shape, b: Shape) -> List[Point]:
    if not a.box.intersects(b.box):
        return []

    if isinstance(a, Segment) and isinstance(b, Segment):
        points = _segment_segment(a, b)
    elif isinstance(a, Segment) and isinstance(b, Arc):
        points = _segment_arc(a, b)
    elif isinstance(a, Arc) and isinstance(b, Segment):
        points = _segment_arc(b, a)
    elif isinstance(a, Arc) and isinstance(b, Arc):
        points = _arc_arc(a, b)
    else:
        raise TypeError(
            f"Cannot intersect {type(a).__name__} with {type(b).__name__}"
        )

    return _snap_and_dedupe(points, (a.start, a.end, b.start, b.end))


def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx


def _segment_segment(s1: Segment, s2: Segment) -> List[Point]:
    len1 = s1.length
    len2 = s2.length
    if len1 == 0.0:
        return [s1.ps] if s2.contains(s1.ps) else []
    if len2 == 0.0:
        return [s2.ps] if s1.contains(s2.ps) else []

    rx, ry = s1.pe.x - s1.ps.x, s1.pe.y - s1.ps.y
    sx, sy = s2.pe.x - s2.ps.x, s2.pe.y - s2.ps.y
    qpx, qpy = s2.ps.x - s1.ps.x, s2.ps.y - s1.ps.y

    denom = _cross(rx, ry, sx, sy)
    if eq_0(denom / (len1 * len2)):
        # parallel: only collinear overlaps meet, at their endpoints
        if not eq_0(_cross(qpx, qpy, rx, ry) / len1):
            return []
        points = [p for p in (s1.ps, s1.pe) if s2.contains(p)]
        points.extend(p for p in (s2.ps, s2.pe) if s1.contains(p))
        return points

    t = _cross(qpx, qpy, sx, sy) / denom
    u = _cross(qpx, qpy, rx, ry) / denom
    if not (ge(t * len1, 0.0) and le(t * len1, len1)):
        return []
    if not (ge(u * len2, 0.0) and le(u * len2, len2)):
        return []
    return [Point(s1.ps.x + t * rx, s1.ps.y + t * ry)]


def _line_circle(seg: Segment, pc: Point, r: float) -> List[Point]:
    dx, dy = seg.pe.x - seg.ps.x, seg.pe.y - seg.ps.y
    length = math.hypot(dx, dy)
    if length == 0.0:
        return [seg.ps] if eq(seg.ps.distance_to(pc), r) else []

    ux, uy = dx / length, dy / length
    # foot of the perpendicular from the centre onto the line
    along = (pc.x - seg.ps.x) * ux + (pc.y - seg.ps.y) * uy
    foot = Point(seg.ps.x + along * ux, seg.ps.y + along * uy)
    dist = foot.distance_to(pc)

    if eq(dist, r):
        return [foot]
    if gt(dist, r):
        return []
    half_chord = math.sqrt(r * r - dist * dist)
    return [
        Point(foot.x - half_chord * ux, foot.y - half_chord * uy),
        Point(foot.x + half_chord * ux, foot.y + half_chord * uy),
    ]


def _segment_arc(seg: Segment, arc: Arc) -> List[Point]:
    candidates = _line_circle(seg, arc.pc, arc.r)
    return [p for p in candidates if seg.contains(p) and arc.contains(p)]


def _arc_arc(a1: Arc, a2: Arc) -> List[Point]:
    dist = a1.pc.distance_to(a2.pc)
    r1, r2 = a1.r, a2.r

    if eq_0(dist):
        if not eq(r1, r2):
            return []
        # same circle: the arcs meet where one's endpoints lie on the other
        points = [p for p in (a1.start, a1.end) if a2.contains(p)]
        points.extend(p for p in (a2.start, a2.end) if a1.contains(p))
        return points

    if gt(dist, r1 + r2) or lt(dist, abs(r1 - r2)):
        return []

    a = (r1 * r1 - r2 * r2 + dist * dist) / (2 * dist)
    h = math.sqrt(max(r1 * r1 - a * a, 0.0))
    ux, uy = (a2.pc.x - a1.pc.x) / dist, (a2.pc.y - a1.pc.y) / dist
    base = Point(a1.pc.x + a * ux, a1.pc.y + a * uy)

    if eq_0(h):
        candidates = [base]
    else:
        candidates = [
            Point(base.x - h * uy, base.y + h * ux),
            Point(base.x + h * uy, base.y - h * ux),
        ]
    return [p for p in candidates if a1.contains(p) and a2.contains(p)]


def _snap_and_dedupe(points: List[Point], anchors: Tuple[Point, ...]) -> List[Point]:
    result: List[Point] = []
    for point in points:
        for anchor in anchors:
            if point.equal_to(anchor):
                point = anchor
                break
        if not any(point.equal_to(other) for other in result):
            result.append(point)
    return result
