from __future__ import annotations

from typing import List

from drawmodes.render.commands import BLACK, WHITE, Circle, DrawCommand, Fill, Line, Oval, Rect, label
from drawmodes.state.geometry import Point

from .base import Mode

BACKGROUND = (235, 245, 255)
A_COLOR = (0, 85, 170)
B_COLOR = (0, 170, 85)
C_COLOR = (170, 0, 85)


class SketchyMode(Mode):
    """Simple drawing demo: a swipe moves A to where it starts and B to where it ends; C sits between them."""

    title = "Sketchy"
    instructions = "Swipe the screen to make the points move."

    def reset(self) -> None:
        self.a = Point(self.width / 3.0, 2.0 * self.height / 3.0)
        self.b = Point(2.0 * self.width / 3.0, self.height / 3.0)

    @property
    def c(self) -> Point:
        return self.a.midpoint(self.b)

    def on_down(self, p: Point) -> None:
        self.a = p
        self.redraw()

    def on_up(self, p: Point) -> None:
        self.b = p
        self.redraw()

    def render(self) -> List[DrawCommand]:
        w, h = float(self.width), float(self.height)
        a, b, c = self.a, self.b, self.c
        stroke = self.cfg.stroke_width
        size = self.cfg.text_size
        return [
            Fill(BACKGROUND),
            # Lines among the points and two corners of the canvas
            Line(Point(0.0, h), a, BLACK, stroke),
            Line(a, b, BLACK, stroke),
            Line(b, Point(w, 0.0), BLACK, stroke),
            Circle(a, self.cfg.point_radius, A_COLOR),
            Rect(Point(b.x - 24.0, b.y - 24.0), Point(b.x + 24.0, b.y + 24.0), B_COLOR),
            Oval(Point(c.x - 12.0, c.y - 24.0), Point(c.x + 12.0, c.y + 24.0), C_COLOR),
            label("A", a, WHITE, size),
            label("B", b, WHITE, size),
            label("C", c, WHITE, size),
        ]
