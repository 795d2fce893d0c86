from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from drawmodes.patterns import library
from drawmodes.patterns.fractal import clamp_depth, generate
from drawmodes.render.commands import BLACK, BLUE, WHITE, DrawCommand, Fill, Line
from drawmodes.state.geometry import Point, Segment

from .base import Mode

logger = logging.getLogger(__name__)


@dataclass
class FractalState:
    origin: Segment
    depth: int = 0


class FractalMode(Mode):
    """
    Draws one substitution fractal per swipe.

    While swiping, a preview line follows the pointer. Each completed swipe
    replaces the fractal's base segment and deepens the recursion by one,
    up to the configured depth cap and segment budget.
    """

    title = "Fractal"
    instructions = "Swipe the screen to draw a pretty fractal."

    def reset(self) -> None:
        self.rule = library.get_rule(self.cfg.fractal_rule)
        self.state: Optional[FractalState] = None
        self.moving = False
        self.start: Optional[Point] = None
        self.end: Optional[Point] = None
        self._segments: List[Segment] = []

    def on_down(self, p: Point) -> None:
        self.moving = True
        self.start = p
        self.end = p

    def on_move(self, p: Point) -> None:
        if not self.moving:
            return
        self.end = p
        self.redraw()

    def on_up(self, p: Point) -> None:
        if not self.moving:
            return
        self.end = p
        self._commit()

    def on_cancel(self) -> None:
        if self.moving:
            self._commit()

    def _commit(self) -> None:
        if self.start is None or self.end is None:
            return
        self.moving = False
        wanted = (self.state.depth if self.state else 0) + 1
        depth = clamp_depth(wanted, self.rule, self.cfg.max_fractal_depth, self.cfg.max_fractal_segments)
        if depth < wanted:
            logger.info("Fractal depth held at %d (segment budget %d).", depth, self.cfg.max_fractal_segments)
        self.state = FractalState(origin=Segment(self.start, self.end), depth=depth)
        self._segments = generate(self.state.origin, self.state.depth, self.rule)
        logger.debug("Fractal depth %d: %d segments", depth, len(self._segments))
        self.redraw()

    @property
    def segments(self) -> List[Segment]:
        return self._segments

    def render(self) -> List[DrawCommand]:
        cmds: List[DrawCommand] = [Fill(WHITE)]
        width = self.cfg.fractal_stroke_width
        if self.moving and self.start is not None and self.end is not None:
            cmds.append(Line(self.start, self.end, BLUE, width))
        elif self.state is not None and self.state.depth > 0:
            cmds.extend(Line(seg.a, seg.b, BLACK, width) for seg in self._segments)
        return cmds

    def status_text(self) -> Optional[str]:
        if self.state is None:
            return None
        return f"Fractal depth: {self.state.depth}"
