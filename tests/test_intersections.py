"""Tests for exact shape-to-shape intersection."""

import math

import pytest

from polyface.intersections import intersect_shapes
from polyface.shapes import Arc, Circle, Point, Segment


def _coords(points):
    return sorted((round(p.x, 9), round(p.y, 9)) for p in points)


class TestSegmentSegment:

    def test_crossing(self):
        a = Segment(Point(0, 0), Point(2, 2))
        b = Segment(Point(0, 2), Point(2, 0))
        assert intersect_shapes(a, b) == [Point(1, 1)]

    def test_disjoint_boxes(self):
        a = Segment(Point(0, 0), Point(1, 0))
        b = Segment(Point(5, 5), Point(6, 6))
        assert intersect_shapes(a, b) == []

    def test_parallel(self):
        a = Segment(Point(0, 0), Point(2, 0))
        b = Segment(Point(0, 1e-3), Point(2, 1e-3))
        assert intersect_shapes(a, b) == []

    def test_lines_cross_outside_segments(self):
        a = Segment(Point(0, 0), Point(1, 1))
        b = Segment(Point(1, 0), Point(1.4, 0.2))
        assert intersect_shapes(a, b) == []

    def test_collinear_overlap_gives_inner_endpoints(self):
        a = Segment(Point(0, 0), Point(2, 0))
        b = Segment(Point(1, 0), Point(3, 0))
        assert _coords(intersect_shapes(a, b)) == [(1.0, 0.0), (2.0, 0.0)]

    def test_shared_endpoint_is_exact(self):
        joint = Point(1.0, 0.0)
        a = Segment(Point(0, 0), joint)
        b = Segment(joint, Point(1.3, 0.7))
        result = intersect_shapes(a, b)
        assert result == [joint]

    def test_symmetric(self):
        a = Segment(Point(0, 0), Point(2, 2))
        b = Segment(Point(0, 2), Point(2, 0))
        assert _coords(intersect_shapes(a, b)) == _coords(a.intersect(b)) == _coords(b.intersect(a))


class TestSegmentArc:

    def test_secant_through_full_circle(self):
        circle = Circle(Point(0, 0), 1).to_arc()
        seg = Segment(Point(-2, 0), Point(2, 0))
        assert _coords(intersect_shapes(seg, circle)) == [(-1.0, 0.0), (1.0, 0.0)]

    def test_tangent(self):
        circle = Circle(Point(0, 0), 1).to_arc()
        seg = Segment(Point(-1, 1), Point(1, 1))
        assert _coords(intersect_shapes(seg, circle)) == [(0.0, 1.0)]

    def test_points_outside_arc_are_dropped(self):
        upper = Arc(Point(0, 0), 1, 0, math.pi, True)
        seg = Segment(Point(-2, -0.5), Point(2, -0.5))
        assert intersect_shapes(seg, upper) == []

    def test_order_of_arguments(self):
        upper = Arc(Point(0, 0), 1, 0, math.pi, True)
        seg = Segment(Point(0, -2), Point(0, 2))
        assert _coords(intersect_shapes(upper, seg)) == [(0.0, 1.0)]


class TestArcArc:

    def test_two_circles(self):
        a = Circle(Point(0, 0), 1).to_arc()
        b = Circle(Point(1, 0), 1).to_arc()
        h = math.sqrt(3) / 2
        assert _coords(intersect_shapes(a, b)) == _coords([Point(0.5, -h), Point(0.5, h)])

    def test_filtered_by_sweep(self):
        upper = Arc(Point(0, 0), 1, 0, math.pi, True)
        b = Circle(Point(1, 0), 1).to_arc()
        result = intersect_shapes(upper, b)
        assert len(result) == 1
        assert result[0].equal_to(Point(0.5, math.sqrt(3) / 2))

    def test_concentric(self):
        a = Circle(Point(0, 0), 1).to_arc()
        b = Circle(Point(0, 0), 0.5).to_arc()
        assert intersect_shapes(a, b) == []

    def test_coincident_arcs_meet_at_endpoints(self):
        a = Arc(Point(0, 0), 1, 0, math.pi, True)
        b = Arc(Point(0, 0), 1, math.pi / 2, 3 * math.pi / 2, True)
        assert _coords(intersect_shapes(a, b)) == _coords([Point(-1, 0), Point(0, 1)])

    def test_externally_tangent(self):
        a = Circle(Point(0, 0), 1).to_arc()
        b = Circle(Point(2, 0), 1).to_arc()
        assert _coords(intersect_shapes(a, b)) == [(1.0, 0.0)]


def test_unsupported_pair():
    with pytest.raises(TypeError):
        intersect_shapes(Segment(Point(0, 0), Point(1, 1)), Circle(Point(0, 0), 1))
