from __future__ import annotations

import math
from typing import List

from drawmodes.render.commands import BLACK, BLUE, GREEN, RED, WHITE, Circle, DrawCommand, Fill, Line, Rect, label
from drawmodes.state.geometry import Point

from .base import Mode


class GeometryMode(Mode):
    """
    Two points A and B span a rectangle, its diagonal and the circle on that
    diagonal. Dragging moves the active (green) point; lifting the pointer
    hands the turn to the other one.
    """

    title = "Geometry"
    instructions = "Move the green point around to change the shapes."

    def reset(self) -> None:
        self.a = Point(self.width / 3.0, 2.0 * self.height / 3.0)
        self.b = Point(2.0 * self.width / 3.0, self.height / 3.0)
        self.active = "a"
        self._pressed = False

    def _place(self, p: Point) -> None:
        if self.active == "a":
            self.a = p
        else:
            self.b = p
        self.redraw()

    def on_down(self, p: Point) -> None:
        self._pressed = True
        self._place(p)

    def on_move(self, p: Point) -> None:
        if self._pressed:
            self._place(p)

    def on_up(self, p: Point) -> None:
        self._release()

    def on_cancel(self) -> None:
        self._release()

    def _release(self) -> None:
        if not self._pressed:
            return
        self._pressed = False
        self.active = "b" if self.active == "a" else "a"
        self.redraw()

    def render(self) -> List[DrawCommand]:
        a, b = self.a, self.b
        radius = math.hypot(a.x - b.x, a.y - b.y) / 2.0
        active, idle = (a, b) if self.active == "a" else (b, a)
        size = self.cfg.text_size
        return [
            Fill(WHITE),
            Circle(a.midpoint(b), radius, BLACK),
            Rect(Point(a.x, b.y), Point(b.x, a.y), BLUE),
            Line(a, b, WHITE, self.cfg.stroke_width),
            Circle(active, self.cfg.point_radius, GREEN),
            Circle(idle, self.cfg.point_radius, RED),
            label("A", a, WHITE, size),
            label("B", b, WHITE, size),
        ]
