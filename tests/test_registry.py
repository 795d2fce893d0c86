"""Tests for mode selection by index."""

import pytest

from drawmodes.modes import registry
from drawmodes.modes.bezier import BezierMode
from drawmodes.modes.inert import FALLBACK_PROMPT, InertMode
from drawmodes.modes.sketchy import SketchyMode


class TestRegistry:

    def test_order(self):
        assert registry.mode_titles() == ["Sketchy", "Fractal", "Points", "Averaging", "Geometry", "Bezier"]

    @pytest.mark.parametrize("index", [-1, 6, 99])
    def test_out_of_range_is_inert(self, index, host, cfg):
        mode = registry.create_mode(index, host, cfg)
        assert isinstance(mode, InertMode)
        assert registry.instructions_for(index) == FALLBACK_PROMPT

    def test_create_mode(self, host, cfg):
        assert isinstance(registry.create_mode(0, host, cfg), SketchyMode)
        assert isinstance(registry.create_mode(5, host, cfg), BezierMode)

    def test_instructions(self):
        assert registry.instructions_for(1) == "Swipe the screen to draw a pretty fractal."
        assert registry.instructions_for(5) == "Drag the points around to change the Bezier curve."
