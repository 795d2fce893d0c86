"""
Toolkit-free draw primitives.

Modes return lists of these from render(); the canvas renderer turns them
into pygame calls. Coordinates are canvas-local, colors are RGB tuples and
a width of 0 means "filled".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from drawmodes.state.geometry import Point

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
BLUE: Color = (0, 0, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 170, 0)


@dataclass(frozen=True)
class Fill:
    color: Color


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: Color
    width: int = 1


@dataclass(frozen=True)
class Polyline:
    points: Tuple[Point, ...]
    color: Color
    width: int = 1


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    color: Color
    width: int = 0


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle spanned by two opposite corners, in any order."""

    corner_a: Point
    corner_b: Point
    color: Color
    width: int = 0


@dataclass(frozen=True)
class Oval:
    """Ellipse inscribed in the rectangle spanned by two opposite corners."""

    corner_a: Point
    corner_b: Point
    color: Color
    width: int = 0


@dataclass(frozen=True)
class Text:
    """A label whose baseline starts at position."""

    text: str
    position: Point
    color: Color
    size: int = 40


DrawCommand = Union[Fill, Line, Polyline, Circle, Rect, Oval, Text]


def bounds(corner_a: Point, corner_b: Point) -> Tuple[float, float, float, float]:
    """(left, top, width, height) of the box spanned by two corners."""
    left = min(corner_a.x, corner_b.x)
    top = min(corner_a.y, corner_b.y)
    return left, top, abs(corner_b.x - corner_a.x), abs(corner_b.y - corner_a.y)


def label(text: str, at: Point, color: Color, size: int = 40) -> Text:
    """Label roughly centred on a control point of the default radius."""
    return Text(text, Point(at.x - 13.0, at.y + 14.0), color, size)
