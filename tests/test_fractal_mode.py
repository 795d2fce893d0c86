"""Tests for the fractal drawing mode."""

from dataclasses import replace

from drawmodes.modes.base import POINTER_CANCEL, POINTER_DOWN, POINTER_MOVE, POINTER_UP, PointerEvent
from drawmodes.modes.fractal import FractalMode
from drawmodes.render.commands import BLACK, BLUE, Line
from drawmodes.state.geometry import Point, Segment


def swipe(mode, start, end):
    mode.on_pointer(PointerEvent(POINTER_DOWN, *start))
    mode.on_pointer(PointerEvent(POINTER_MOVE, *end))
    mode.on_pointer(PointerEvent(POINTER_UP, *end))


class TestFractalMode:

    def test_preview_line_while_swiping(self, host, cfg):
        mode = FractalMode(host, cfg)
        mode.on_pointer(PointerEvent(POINTER_DOWN, 10, 10))
        mode.on_pointer(PointerEvent(POINTER_MOVE, 90, 40))
        lines = [c for c in mode.render() if isinstance(c, Line)]
        assert lines == [Line(Point(10.0, 10.0), Point(90.0, 40.0), BLUE, cfg.fractal_stroke_width)]

    def test_each_swipe_deepens(self, host, cfg):
        mode = FractalMode(host, cfg)
        assert mode.status_text() is None
        swipe(mode, (0, 0), (100, 100))
        assert mode.state.depth == 1
        assert mode.status_text() == "Fractal depth: 1"
        swipe(mode, (10, 10), (200, 50))
        assert mode.state.depth == 2
        assert mode.state.origin == Segment.from_coords(10.0, 10.0, 200.0, 50.0)
        lines = [c for c in mode.render() if isinstance(c, Line)]
        assert len(lines) == mode.rule.size ** 2
        assert all(line.color == BLACK for line in lines)

    def test_depth_clamped_by_budget(self, host, cfg):
        small = replace(cfg, max_fractal_segments=30)
        mode = FractalMode(host, small)
        for _ in range(5):
            swipe(mode, (0, 0), (100, 100))
        assert mode.state.depth == 3
        assert len(mode.segments) == 27

    def test_cancel_commits_gesture(self, host, cfg):
        mode = FractalMode(host, cfg)
        mode.on_pointer(PointerEvent(POINTER_DOWN, 0, 0))
        mode.on_pointer(PointerEvent(POINTER_MOVE, 50, 50))
        mode.on_pointer(PointerEvent(POINTER_CANCEL))
        assert not mode.moving
        assert mode.state.depth == 1
        assert mode.state.origin == Segment.from_coords(0.0, 0.0, 50.0, 50.0)

    def test_stray_events_ignored(self, host, cfg):
        mode = FractalMode(host, cfg)
        mode.on_pointer(PointerEvent(POINTER_MOVE, 5, 5))
        mode.on_pointer(PointerEvent(POINTER_UP, 5, 5))
        mode.on_pointer(PointerEvent(POINTER_CANCEL))
        assert mode.state is None
        assert host.redraws == 0

    def test_unknown_rule_name_uses_default(self, host, cfg):
        mode = FractalMode(host, replace(cfg, fractal_rule="nope"))
        assert mode.rule.name == "paperfold"

    def test_configured_rule(self, host, cfg):
        mode = FractalMode(host, replace(cfg, fractal_rule="levy"))
        swipe(mode, (0, 0), (100, 0))
        assert len(mode.segments) == 2

    def test_commit_without_gesture_is_noop(self, host, cfg):
        mode = FractalMode(host, cfg)
        mode._commit()
        mode.moving = True
        assert len(mode.render()) == 1
        assert mode.state is None
        assert host.redraws == 0
