"""Cubic Bezier evaluation and the drag model for its four control points."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from drawmodes.state.geometry import Point

logger = logging.getLogger(__name__)

CONTROL_POINTS = 4
MIN_SAMPLES = 32


def evaluate(points: Sequence[Point], t: float) -> Point:
    """
    B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3.

    t is clamped to [0, 1]; the endpoints are returned as-is so that
    B(0) == P0 and B(1) == P3 hold exactly.
    """
    p0, p1, p2, p3 = points
    if t <= 0.0:
        return p0
    if t >= 1.0:
        return p3
    u = 1.0 - t
    w0 = u * u * u
    w1 = 3.0 * u * u * t
    w2 = 3.0 * u * t * t
    w3 = t * t * t
    return Point(
        w0 * p0.x + w1 * p1.x + w2 * p2.x + w3 * p3.x,
        w0 * p0.y + w1 * p1.y + w2 * p2.y + w3 * p3.y,
    )


def sample(points: Sequence[Point], segments: int = 64) -> List[Point]:
    """Polyline approximation with segments + 1 points (at least MIN_SAMPLES segments)."""
    segments = max(MIN_SAMPLES, segments)
    return [evaluate(points, i / segments) for i in range(segments + 1)]


def default_layout(width: float, height: float) -> List[Point]:
    """Four points on the corners of the centred third-size rectangle, clockwise from top-left."""
    return [
        Point(width / 3.0, height / 3.0),
        Point(2.0 * width / 3.0, height / 3.0),
        Point(2.0 * width / 3.0, 2.0 * height / 3.0),
        Point(width / 3.0, 2.0 * height / 3.0),
    ]


@dataclass
class BezierEditor:
    """
    Four control points plus the index of the one being dragged.

    Pointer down/move grabs the first point (in index order) whose box of
    half-size hit_radius contains the pointer and moves it there; lower
    indices win when boxes overlap. Pointer up releases the drag.
    """

    points: List[Point]
    hit_radius: float = 50.0
    dragged_index: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.points) != CONTROL_POINTS:
            raise ValueError(f"a cubic Bezier needs {CONTROL_POINTS} control points, got {len(self.points)}")
        self.points = list(self.points)

    @classmethod
    def for_viewport(cls, width: float, height: float, hit_radius: float = 50.0) -> "BezierEditor":
        return cls(points=default_layout(width, height), hit_radius=hit_radius)

    def evaluate(self, t: float) -> Point:
        return evaluate(self.points, t)

    def sample(self, segments: int = 64) -> List[Point]:
        return sample(self.points, segments)

    def hit_test(self, p: Point) -> Optional[int]:
        for i, cp in enumerate(self.points):
            if abs(p.x - cp.x) <= self.hit_radius and abs(p.y - cp.y) <= self.hit_radius:
                return i
        return None

    def pointer_down(self, p: Point) -> bool:
        return self._grab(p)

    def pointer_move(self, p: Point) -> bool:
        return self._grab(p)

    def pointer_up(self) -> None:
        if self.dragged_index is not None:
            logger.debug("Released control point %d at %s", self.dragged_index, self.points[self.dragged_index])
        self.dragged_index = None

    def _grab(self, p: Point) -> bool:
        """Move the hit point to p. Returns False (and changes nothing) on a miss."""
        idx = self.hit_test(p)
        if idx is None:
            return False
        if idx != self.dragged_index:
            logger.debug("Dragging control point %d", idx)
        self.dragged_index = idx
        self.points[idx] = p
        return True
