"""Tests for the simple drawing modes and the inert placeholder."""

import pytest

from drawmodes.modes.averaging import AveragingMode
from drawmodes.modes.base import POINTER_CANCEL, POINTER_DOWN, POINTER_MOVE, POINTER_UP, PointerEvent
from drawmodes.modes.geometry import GeometryMode
from drawmodes.modes.inert import FALLBACK_PROMPT, InertMode
from drawmodes.modes.points import PointsMode
from drawmodes.modes.sketchy import SketchyMode
from drawmodes.render.commands import GREEN, RED, WHITE, Circle, Fill, Line, Oval, Rect, Text
from drawmodes.state.geometry import Point


def down(x, y):
    return PointerEvent(POINTER_DOWN, x, y)


def move(x, y):
    return PointerEvent(POINTER_MOVE, x, y)


def up(x, y):
    return PointerEvent(POINTER_UP, x, y)


CANCEL = PointerEvent(POINTER_CANCEL)


class TestSketchy:

    def test_initial_layout(self, host, cfg):
        mode = SketchyMode(host, cfg)
        assert mode.a == Point(100.0, 200.0)
        assert mode.b == Point(200.0, 100.0)
        assert mode.c == Point(150.0, 150.0)

    def test_swipe_moves_a_then_b(self, host, cfg):
        mode = SketchyMode(host, cfg)
        mode.on_pointer(down(10, 20))
        assert mode.a == Point(10.0, 20.0)
        mode.on_pointer(move(50, 50))
        mode.on_pointer(up(90, 40))
        assert mode.b == Point(90.0, 40.0)
        assert mode.c == Point(50.0, 30.0)
        assert host.redraws == 2

    def test_cancel_keeps_b(self, host, cfg):
        mode = SketchyMode(host, cfg)
        mode.on_pointer(down(10, 20))
        mode.on_pointer(CANCEL)
        assert mode.b == Point(200.0, 100.0)

    def test_render(self, host, cfg):
        cmds = SketchyMode(host, cfg).render()
        assert isinstance(cmds[0], Fill)
        assert sum(isinstance(c, Line) for c in cmds) == 3
        assert sum(isinstance(c, (Circle, Rect, Oval)) for c in cmds) == 3
        assert [c.text for c in cmds if isinstance(c, Text)] == ["A", "B", "C"]


class TestPoints:

    def test_tap_adds_numbered_point(self, host, cfg):
        mode = PointsMode(host, cfg)
        mode.on_pointer(down(5, 5))
        mode.on_pointer(down(15, 25))
        assert mode.points == [Point(5.0, 5.0), Point(15.0, 25.0)]
        labels = [c.text for c in mode.render() if isinstance(c, Text)]
        assert labels == ["1", "2"]

    def test_tenth_tap_clears(self, host, cfg):
        mode = PointsMode(host, cfg)
        for i in range(9):
            mode.on_pointer(down(i, i))
        assert len(mode.points) == 9
        mode.on_pointer(down(50, 50))
        assert mode.points == []

    def test_render_joins_consecutive_points(self, host, cfg):
        mode = PointsMode(host, cfg)
        for i in range(3):
            mode.on_pointer(down(i * 10, 0))
        assert sum(isinstance(c, Line) for c in mode.render()) == 2


class TestAveraging:

    def test_running_mean(self, host, cfg):
        mode = AveragingMode(host, cfg)
        for x, y in [(0, 0), (10, 20), (20, 40)]:
            mode.on_pointer(down(x, y))
        assert mode.count == 3
        assert mode.mean.x == pytest.approx(10.0)
        assert mode.mean.y == pytest.approx(20.0)

    def test_radius_grows_with_count(self, host, cfg):
        mode = AveragingMode(host, cfg)
        for _ in range(4):
            mode.on_pointer(down(1, 1))
        assert mode.radius() == pytest.approx(18.0)

    def test_nothing_drawn_before_first_tap(self, host, cfg):
        assert len(AveragingMode(host, cfg).render()) == 1


class TestGeometry:

    def test_drag_moves_active_point_then_toggles(self, host, cfg):
        mode = GeometryMode(host, cfg)
        mode.on_pointer(down(10, 10))
        mode.on_pointer(move(20, 30))
        assert mode.a == Point(20.0, 30.0)
        mode.on_pointer(up(20, 30))
        assert mode.active == "b"
        mode.on_pointer(down(70, 80))
        assert mode.b == Point(70.0, 80.0)
        assert mode.a == Point(20.0, 30.0)

    def test_stray_up_ignored(self, host, cfg):
        mode = GeometryMode(host, cfg)
        mode.on_pointer(up(5, 5))
        mode.on_pointer(move(5, 5))
        assert mode.active == "a"
        assert mode.a == Point(100.0, 200.0)

    def test_cancel_also_toggles(self, host, cfg):
        mode = GeometryMode(host, cfg)
        mode.on_pointer(down(10, 10))
        mode.on_pointer(CANCEL)
        assert mode.active == "b"

    def test_render_colors(self, host, cfg):
        mode = GeometryMode(host, cfg)
        circles = [c for c in mode.render() if isinstance(c, Circle)]
        # diagonal circle, then the active and idle markers
        assert circles[0].radius == pytest.approx(((100 ** 2 + 100 ** 2) ** 0.5) / 2)
        assert circles[1].center == mode.a and circles[1].color == GREEN
        assert circles[2].center == mode.b and circles[2].color == RED


class TestInert:

    def test_ignores_input(self, host, cfg):
        mode = InertMode(host, cfg)
        mode.on_pointer(down(1, 1))
        mode.on_pointer(up(1, 1))
        assert host.redraws == 0
        assert mode.render() == [Fill(WHITE)]
        assert mode.status_text() == FALLBACK_PROMPT
