from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> Vec2:
        return (self.x, self.y)

    def midpoint(self, other: "Point") -> "Point":
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0)


@dataclass(frozen=True)
class Segment:
    """Directed line segment from a to b."""

    a: Point
    b: Point

    @classmethod
    def from_coords(cls, ax: float, ay: float, bx: float, by: float) -> "Segment":
        return cls(Point(ax, ay), Point(bx, by))

    def is_degenerate(self) -> bool:
        return self.a == self.b
