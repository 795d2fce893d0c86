"""Tests for cubic Bezier evaluation and control point dragging."""

import pytest

from drawmodes.patterns.bezier import BezierEditor, MIN_SAMPLES, default_layout, evaluate, sample
from drawmodes.state.geometry import Point


@pytest.fixture
def editor():
    return BezierEditor.for_viewport(300, 300)


class TestEvaluate:

    def test_endpoints_exact(self):
        pts = [Point(0.1, 0.7), Point(3.3, 1.1), Point(-2.0, 5.5), Point(9.9, 0.3)]
        assert evaluate(pts, 0.0) == pts[0]
        assert evaluate(pts, 1.0) == pts[3]

    def test_t_is_clamped(self):
        pts = default_layout(300, 300)
        assert evaluate(pts, -1.0) == pts[0]
        assert evaluate(pts, 2.0) == pts[3]

    def test_midpoint_on_default_layout(self):
        p = evaluate(default_layout(300, 300), 0.5)
        assert p.x == pytest.approx(175.0)
        assert p.y == pytest.approx(150.0)

    def test_straight_control_polygon_gives_straight_curve(self):
        pts = [Point(0.0, 0.0), Point(1.0, 1.0), Point(2.0, 2.0), Point(3.0, 3.0)]
        for t in (0.1, 0.25, 0.8):
            p = evaluate(pts, t)
            assert p.x == pytest.approx(p.y)


class TestSample:

    def test_sample_count_and_ends(self):
        pts = default_layout(300, 300)
        out = sample(pts, 64)
        assert len(out) == 65
        assert out[0] == pts[0]
        assert out[-1] == pts[3]

    def test_minimum_resolution(self):
        assert len(sample(default_layout(300, 300), 4)) == MIN_SAMPLES + 1


class TestEditor:

    def test_default_layout(self, editor):
        assert editor.points == [
            Point(100.0, 100.0),
            Point(200.0, 100.0),
            Point(200.0, 200.0),
            Point(100.0, 200.0),
        ]

    def test_requires_four_points(self):
        with pytest.raises(ValueError):
            BezierEditor(points=[Point(0.0, 0.0)] * 3)

    def test_drag_moves_only_hit_point(self, editor):
        before = list(editor.points)
        assert editor.pointer_down(Point(205.0, 95.0))
        assert editor.dragged_index == 1
        assert editor.pointer_move(Point(230.0, 120.0))
        assert editor.points[1] == Point(230.0, 120.0)
        for i in (0, 2, 3):
            assert editor.points[i] == before[i]

    def test_hit_radius_is_per_axis_box(self, editor):
        # 50 away on both axes is a corner of the box: still a hit
        assert editor.hit_test(Point(150.0, 150.0)) == 0
        assert editor.hit_test(Point(150.0, 151.0)) is not None
        assert editor.hit_test(Point(40.0, 100.0)) is None

    def test_lower_index_wins(self):
        ed = BezierEditor(points=[Point(10.0, 10.0), Point(20.0, 10.0), Point(200.0, 200.0), Point(250.0, 250.0)])
        assert ed.hit_test(Point(15.0, 10.0)) == 0

    def test_drag_on_overlap_takes_lower_index(self):
        ed = BezierEditor(points=[Point(10.0, 10.0), Point(20.0, 10.0), Point(200.0, 200.0), Point(250.0, 250.0)])
        assert ed.pointer_down(Point(15.0, 12.0))
        assert ed.dragged_index == 0
        assert ed.pointer_move(Point(18.0, 14.0))
        assert ed.dragged_index == 0
        assert ed.points[0] == Point(18.0, 14.0)
        assert ed.points[1] == Point(20.0, 10.0)

    def test_miss_changes_nothing(self, editor):
        before = list(editor.points)
        assert not editor.pointer_down(Point(0.0, 0.0))
        assert editor.points == before
        assert editor.dragged_index is None

    def test_pointer_up_releases(self, editor):
        editor.pointer_down(Point(100.0, 100.0))
        editor.pointer_up()
        assert editor.dragged_index is None
