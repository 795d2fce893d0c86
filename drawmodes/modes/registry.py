"""Selection index -> drawing mode."""
from __future__ import annotations

from typing import List, Tuple, Type

from drawmodes.config import AppConfig

from .averaging import AveragingMode
from .base import Mode, ModeHost
from .bezier import BezierMode
from .fractal import FractalMode
from .geometry import GeometryMode
from .inert import FALLBACK_PROMPT, InertMode
from .points import PointsMode
from .sketchy import SketchyMode

MODES: Tuple[Type[Mode], ...] = (
    SketchyMode,
    FractalMode,
    PointsMode,
    AveragingMode,
    GeometryMode,
    BezierMode,
)


def mode_class(index: int) -> Type[Mode]:
    """Mode class for a selection index; anything out of range is the inert mode."""
    if 0 <= index < len(MODES):
        return MODES[index]
    return InertMode


def instructions_for(index: int) -> str:
    if 0 <= index < len(MODES):
        return MODES[index].instructions
    return FALLBACK_PROMPT


def mode_titles() -> List[str]:
    return [m.title for m in MODES]


def create_mode(index: int, host: ModeHost, cfg: AppConfig) -> Mode:
    return mode_class(index)(host, cfg)
