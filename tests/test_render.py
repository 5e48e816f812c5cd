"""Tests for the render module (rendering to PNG)."""

import math
import tempfile
from pathlib import Path

import pytest

from polyface.face import Face
from polyface.polygon import Polygon
from polyface.render import face_outline, render_png
from polyface.shapes import Arc, Circle, Point, Segment
from polyface.spatial_index import EdgeIndex


SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


@pytest.fixture
def tmp_dir():
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


class TestRenderPng:
    def test_renders_polygon(self, tmp_dir):
        polygon = Polygon([Circle(Point(0, 0), 2), SQUARE])
        out = tmp_dir / "polygon.png"
        render_png(polygon, out)
        assert out.exists()
        assert out.stat().st_size > 0

    def test_renders_self_intersecting(self, tmp_dir):
        polygon = Polygon([[(0, 0), (1, 1), (1, 0), (0, 1)]])
        out = tmp_dir / "sub" / "bowtie.png"
        render_png(polygon, out, show_intersections=True)
        assert out.exists()

    def test_empty_polygon_rejected(self, tmp_dir):
        with pytest.raises(ValueError, match="no edges"):
            render_png(Polygon(), tmp_dir / "empty.png")


class TestFaceOutline:
    def test_segments_keep_vertices(self):
        face = Face.from_points(EdgeIndex(), SQUARE)
        assert face_outline(face) == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]

    def test_arc_is_linearised(self):
        arc = Arc(Point(0, 0), 1, 0, math.pi, True)
        face = Face.from_shapes(EdgeIndex(), [arc, Segment(arc.end, arc.start)])
        points = face_outline(face, arc_step=math.pi / 4)
        assert len(points) == 5
        for x, y in points[:4]:
            assert math.hypot(x, y) == pytest.approx(1.0)
