"""Tests for area, orientation, perimeter and point queries on faces."""

import math

import pytest

from polyface.face import Face, Orientation
from polyface.shapes import Arc, Box, Circle, Point, Segment
from polyface.spatial_index import EdgeIndex
from polyface.utils import tolerance


SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


@pytest.fixture
def index():
    return EdgeIndex()


@pytest.fixture
def square(index):
    return Face.from_points(index, SQUARE)


def _half_disc(index):
    arc = Arc(Point(0, 0), 1, 0, math.pi, True)
    return Face.from_shapes(index, [arc, Segment(arc.end, arc.start)])


# ═══════════════════════════════════════════════════════════════════
# Area and orientation
# ═══════════════════════════════════════════════════════════════════

class TestArea:

    def test_ccw_square(self, square):
        assert square.signed_area() == pytest.approx(-1.0)
        assert square.area() == pytest.approx(1.0)
        assert square.orientation() is Orientation.CCW

    def test_cw_square(self, index):
        face = Face.from_points(index, [(0, 0), (0, 1), (1, 1), (1, 0)])
        assert face.signed_area() == pytest.approx(1.0)
        assert face.orientation() is Orientation.CW

    def test_box_face(self, index):
        face = Face.from_box(index, Box(0, 0, 2, 3))
        assert face.area() == pytest.approx(6.0)
        assert face.box == Box(0, 0, 2, 3)

    def test_offset_triangle(self, index):
        face = Face.from_points(index, [(10, 10), (14, 10), (10, 13)])
        assert face.area() == pytest.approx(6.0)
        assert face.orientation() is Orientation.CCW

    def test_circle(self, index):
        face = Face.from_circle(index, Circle(Point(1, -2), 2))
        assert face.area() == pytest.approx(4 * math.pi)
        assert face.orientation() is Orientation.CCW

    def test_half_disc(self, index):
        face = _half_disc(index)
        assert face.area() == pytest.approx(math.pi / 2)
        assert face.orientation() is Orientation.CCW

    def test_reversed_half_disc(self, index):
        face = _half_disc(index)
        face.reverse()
        assert face.signed_area() == pytest.approx(math.pi / 2)
        assert face.orientation() is Orientation.CW

    def test_empty_face(self):
        face = Face()
        assert face.signed_area() == 0.0
        assert face.area() == 0.0
        assert face.orientation() is Orientation.NOT_ORIENTABLE

    def test_degenerate_line(self, index):
        face = Face.from_points(index, [(0, 0), (1, 0)])
        assert face.orientation() is Orientation.NOT_ORIENTABLE

    def test_tiny_area_depends_on_tolerance(self, index):
        points = [(0, 0), (1, 0), (1, 1e-8)]
        face = Face.from_points(index, points)
        assert face.orientation() is Orientation.NOT_ORIENTABLE
        with tolerance(1e-12):
            fine = Face.from_points(EdgeIndex(), points)
            assert fine.orientation() is Orientation.CCW

    def test_orientation_is_cached(self, square):
        square.orientation()
        assert square._orientation is Orientation.CCW


# ═══════════════════════════════════════════════════════════════════
# Length queries
# ═══════════════════════════════════════════════════════════════════

class TestLengthQueries:

    def test_perimeter(self, square):
        assert square.perimeter == pytest.approx(4.0)

    def test_circle_perimeter(self, index):
        face = Face.from_circle(index, Circle(Point(0, 0), 3))
        assert face.perimeter == pytest.approx(6 * math.pi)

    def test_empty_perimeter(self):
        assert Face().perimeter == 0.0

    def test_point_at_length(self, square):
        assert square.point_at_length(2.5) == Point(0.5, 1.0)

    def test_point_at_length_endpoints(self, square):
        assert square.point_at_length(0.0) == Point(0, 0)
        assert square.point_at_length(4.0) == Point(0, 0)

    def test_point_at_length_out_of_range(self, square):
        assert square.point_at_length(-0.1) is None
        assert square.point_at_length(4.5) is None

    def test_point_at_length_on_arc(self, index):
        face = _half_disc(index)
        assert face.point_at_length(math.pi / 2).equal_to(Point(0, 1))

    def test_point_at_length_empty(self):
        assert Face().point_at_length(0.0) is None


class TestFindEdgeByPoint:

    def test_interior_of_edge(self, square):
        assert square.find_edge_by_point((1, 0.5)) is square.first.next

    def test_vertex_returns_first_match(self, square):
        assert square.find_edge_by_point(Point(1, 0)) is square.first

    def test_on_arc(self, index):
        face = _half_disc(index)
        assert face.find_edge_by_point((0, 1)) is face.first

    def test_missing(self, square):
        assert square.find_edge_by_point((5, 5)) is None


# ═══════════════════════════════════════════════════════════════════
# Structural validation
# ═══════════════════════════════════════════════════════════════════

class TestValidate:

    def test_well_formed(self, square):
        assert square.validate() == []

    def test_empty(self):
        assert Face().validate() == []

    def test_circle(self, index):
        assert Face.from_circle(index, Circle(Point(0, 0), 1)).validate() == []

    def test_stale_arc_length(self, square):
        square.first.next.arc_length = 10.0
        errors = square.validate()
        assert any("arc_length" in error for error in errors)

    def test_wrong_back_reference(self, square):
        square.first.face = None
        errors = square.validate()
        assert any("back-reference" in error for error in errors)

    def test_broken_prev_link(self, square):
        square.first.next.prev = square.last
        errors = square.validate()
        assert any("next.prev" in error for error in errors)

    def test_gap_between_edges(self, index):
        face = Face.from_shapes(index, [
            Segment(Point(0, 0), Point(1, 0)),
            Segment(Point(1, 0.5), Point(0, 0)),
        ])
        errors = face.validate()
        assert errors == ["Edge 0: end does not meet the next edge's start"]
