"""Substitution fractals: each segment is replaced by a fixed table of sub-segments."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from drawmodes.state.geometry import Point, Segment, Vec2

logger = logging.getLogger(__name__)

Template = Tuple[Vec2, Vec2]

# In the template frame (0, 0) lands on the parent's start and (1, 1) on its end.
FRAME_START: Vec2 = (0.0, 0.0)
FRAME_END: Vec2 = (1.0, 1.0)


@dataclass(frozen=True)
class FractalRule:
    """
    A named substitution table.

    Each template is a pair of fractional points. The mapping onto a parent
    segment is a rotation by 45 degrees plus a scale of 1/sqrt(2), so
    (1, 0) and (0, 1) land on the two corners of the square whose diagonal
    is the parent segment.
    """

    name: str
    templates: Tuple[Template, ...]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.templates:
            raise ValueError(f"fractal rule {self.name!r} has no templates")

    @property
    def size(self) -> int:
        return len(self.templates)

    @property
    def continuous(self) -> bool:
        """True when the templates chain head-to-tail from (0,0) to (1,1)."""
        if self.templates[0][0] != FRAME_START or self.templates[-1][1] != FRAME_END:
            return False
        for (_, end), (start, _) in zip(self.templates, self.templates[1:]):
            if end != start:
                return False
        return True

    def segment_count(self, depth: int) -> int:
        return self.size ** max(0, depth)

    def apply_segments(self, segments: Sequence[Segment]) -> List[Segment]:
        """One substitution pass over every segment, preserving order."""
        out: List[Segment] = []
        for seg in segments:
            out.extend(substitute(seg, self))
        return out


PAPERFOLD = FractalRule(
    name="paperfold",
    templates=(
        ((0.00, 0.00), (0.25, 0.60)),
        ((0.25, 0.25), (0.75, 0.75)),
        ((0.75, 0.40), (1.00, 1.00)),
    ),
    description="Three strokes that simulate the regular paperfolding sequence.",
)


def map_point(segment: Segment, tx: float, ty: float) -> Point:
    """Map a template-frame point onto the plane of the given segment."""
    a, b = segment.a, segment.b
    cos_distance = ((b.x - a.x) + (b.y - a.y)) / 2.0
    sin_distance = ((a.x - b.x) + (b.y - a.y)) / 2.0
    return Point(
        a.x + tx * cos_distance - ty * sin_distance,
        a.y + tx * sin_distance + ty * cos_distance,
    )


def substitute(segment: Segment, rule: FractalRule) -> List[Segment]:
    out: List[Segment] = []
    for (sx, sy), (ex, ey) in rule.templates:
        out.append(Segment(map_point(segment, sx, sy), map_point(segment, ex, ey)))
    return out


def generate(segment: Segment, depth: int, rule: FractalRule = PAPERFOLD) -> List[Segment]:
    """
    Return the leaf segments of the substitution tree rooted at segment.

    depth <= 0 yields the segment itself; otherwise every sub-segment is
    expanded with depth - 1 and the results are concatenated in template
    order, giving rule.size ** depth segments.
    """
    if depth <= 0:
        return [segment]
    out: List[Segment] = []
    for child in substitute(segment, rule):
        out.extend(generate(child, depth - 1, rule))
    return out


def clamp_depth(depth: int, rule: FractalRule, max_depth: int, max_segments: int) -> int:
    """Largest depth not above the request that fits both the depth cap and the segment budget."""
    clamped = max(0, min(depth, max_depth))
    while clamped > 0 and rule.segment_count(clamped) > max_segments:
        clamped -= 1
    if clamped != depth:
        logger.debug(
            "Clamped %s depth %d -> %d (max_depth=%d, max_segments=%d)",
            rule.name, depth, clamped, max_depth, max_segments,
        )
    return clamped
