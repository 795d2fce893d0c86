from __future__ import annotations

from typing import List

from drawmodes.patterns.bezier import BezierEditor
from drawmodes.render.commands import BLACK, GREEN, RED, WHITE, Circle, DrawCommand, Fill, Line, Polyline, label
from drawmodes.state.geometry import Point

from .base import Mode

HULL_COLOR = (227, 227, 227)


class BezierMode(Mode):
    """Cubic Bezier curve with four draggable, numbered control points."""

    title = "Bezier"
    instructions = "Drag the points around to change the Bezier curve."

    def reset(self) -> None:
        self.editor = BezierEditor.for_viewport(self.width, self.height, self.cfg.hit_radius)

    def on_down(self, p: Point) -> None:
        if self.editor.pointer_down(p):
            self.redraw()

    def on_move(self, p: Point) -> None:
        if self.editor.pointer_move(p):
            self.redraw()

    def on_up(self, p: Point) -> None:
        self._release()

    def on_cancel(self) -> None:
        self._release()

    def _release(self) -> None:
        self.editor.pointer_up()
        self.redraw()

    def render(self) -> List[DrawCommand]:
        pts = self.editor.points
        stroke = self.cfg.stroke_width
        cmds: List[DrawCommand] = [Fill(WHITE)]
        # control polygon, then the curve on top of it
        for prev, cur in zip(pts, pts[1:]):
            cmds.append(Line(prev, cur, HULL_COLOR, stroke))
        cmds.append(Polyline(tuple(self.editor.sample(self.cfg.bezier_samples)), BLACK, stroke))
        for i, p in enumerate(pts):
            color = GREEN if i == self.editor.dragged_index else RED
            cmds.append(Circle(p, self.cfg.point_radius, color))
        for i, p in enumerate(pts):
            cmds.append(label(str(i), p, WHITE, self.cfg.text_size))
        return cmds
