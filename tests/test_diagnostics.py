"""Tests for the face and polygon quality reports."""

import json
import math

import pytest

from polyface.diagnostics import (
    diagnostics_report,
    face_report,
    has_self_intersections,
    min_face_area,
)
from polyface.face import Face
from polyface.polygon import Polygon
from polyface.shapes import Circle, Point
from polyface.spatial_index import EdgeIndex


SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]
BOWTIE = [(0, 0), (1, 1), (1, 0), (0, 1)]


class TestFaceReport:

    def test_square(self):
        index = EdgeIndex()
        report = face_report(Face.from_points(index, SQUARE), index)
        assert report["size"] == 4
        assert report["signed_area"] == pytest.approx(-1.0)
        assert report["area"] == pytest.approx(1.0)
        assert report["orientation"] == "CCW"
        assert report["perimeter"] == pytest.approx(4.0)
        assert report["box"] == {"xmin": 0.0, "ymin": 0.0, "xmax": 1.0, "ymax": 1.0}
        assert report["simple"] is True
        assert report["self_intersections"] == []
        assert report["errors"] == []

    def test_bowtie_crossing_reported_once(self):
        index = EdgeIndex()
        report = face_report(Face.from_points(index, BOWTIE), index)
        assert report["simple"] is False
        assert report["orientation"] == "NOT_ORIENTABLE"
        assert len(report["self_intersections"]) == 1
        assert report["self_intersections"][0] == pytest.approx([0.5, 0.5])

    def test_empty_face(self):
        report = face_report(Face(), EdgeIndex())
        assert report["size"] == 0
        assert report["orientation"] is None
        assert report["box"] is None
        assert report["simple"] is True

    def test_is_json_serialisable(self):
        index = EdgeIndex()
        report = face_report(Face.from_circle(index, Circle(Point(0, 0), 1)), index)
        assert json.loads(json.dumps(report))["orientation"] == "CCW"


class TestPolygonReport:

    def test_counts_and_area(self):
        polygon = Polygon([SQUARE, Circle(Point(5, 5), 1)])
        report = diagnostics_report(polygon)
        assert report["face_count"] == 2
        assert report["edge_count"] == 5
        assert report["min_face_area"] == pytest.approx(1.0)
        assert report["simple"] is True
        assert len(report["faces"]) == 2

    def test_area_sums_signed(self):
        polygon = Polygon([SQUARE, Circle(Point(5, 5), 1)])
        assert diagnostics_report(polygon)["area"] == pytest.approx(1.0 + math.pi)

    def test_bowtie_not_simple(self):
        polygon = Polygon([BOWTIE])
        assert diagnostics_report(polygon)["simple"] is False
        assert has_self_intersections(polygon)

    def test_empty_polygon(self):
        report = diagnostics_report(Polygon())
        assert report["face_count"] == 0
        assert report["min_face_area"] == 0.0
        assert report["simple"] is True


def test_min_face_area_skips_empty_faces():
    polygon = Polygon([SQUARE, []])
    assert min_face_area(polygon) == pytest.approx(1.0)
