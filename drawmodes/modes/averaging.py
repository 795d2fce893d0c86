from __future__ import annotations

import math
from typing import List, Optional

from drawmodes.render.commands import BLACK, WHITE, Circle, DrawCommand, Fill
from drawmodes.state.geometry import Point

from .base import Mode


class AveragingMode(Mode):
    """Shows the running mean of every tap as a circle that grows with the sample count."""

    title = "Averaging"
    instructions = "Tap the screen to register a point to include in the average."

    def reset(self) -> None:
        self.count = 0
        self.mean: Optional[Point] = None

    def on_down(self, p: Point) -> None:
        self.count += 1
        if self.mean is None:
            self.mean = p
        else:
            n = self.count
            self.mean = Point(
                (self.mean.x * (n - 1) + p.x) / n,
                (self.mean.y * (n - 1) + p.y) / n,
            )
        self.redraw()

    def radius(self) -> float:
        return math.sqrt(self.count) * 9.0

    def render(self) -> List[DrawCommand]:
        cmds: List[DrawCommand] = [Fill(BLACK)]
        if self.mean is not None:
            cmds.append(Circle(self.mean, self.radius(), WHITE))
        return cmds
