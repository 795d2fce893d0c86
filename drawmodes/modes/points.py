from __future__ import annotations

from typing import List

from drawmodes.render.commands import BLACK, WHITE, DrawCommand, Fill, Line, label
from drawmodes.state.geometry import Point

from .base import Mode

TRAIL_COLOR = (225, 225, 225)


class PointsMode(Mode):
    """Each tap plots a numbered point; the tap that would reach max_points clears the board."""

    title = "Points"
    instructions = "Tap the screen to plot a point."

    def reset(self) -> None:
        self.points: List[Point] = []

    def on_down(self, p: Point) -> None:
        if len(self.points) + 1 < self.cfg.max_points:
            self.points.append(p)
        else:
            self.points = []
        self.redraw()

    def render(self) -> List[DrawCommand]:
        cmds: List[DrawCommand] = [Fill(WHITE)]
        for prev, cur in zip(self.points, self.points[1:]):
            cmds.append(Line(prev, cur, TRAIL_COLOR, self.cfg.stroke_width))
        for i, p in enumerate(self.points):
            cmds.append(label(str(i + 1), p, BLACK, self.cfg.text_size))
        return cmds
