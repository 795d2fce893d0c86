from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple

from drawmodes.config import AppConfig
from drawmodes.render.commands import DrawCommand
from drawmodes.state.geometry import Point


POINTER_DOWN = "down"
POINTER_MOVE = "move"
POINTER_UP = "up"
POINTER_CANCEL = "cancel"


@dataclass(frozen=True)
class PointerEvent:
    """A canvas-local pointer event. Cancel events carry no position."""

    kind: str
    x: float = 0.0
    y: float = 0.0

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


class ModeHost(Protocol):
    """What a mode may ask of the shell that hosts it."""

    def request_redraw(self) -> None:
        ...

    def viewport_size(self) -> Tuple[int, int]:
        ...


class Mode:
    """
    Base for all drawing modes.

    A mode owns its state exclusively. The host feeds it pointer events and
    asks it for draw commands; the mode calls host.request_redraw() after
    any change that should become visible. Subclasses override reset() to
    build their initial state and whichever of the on_* hooks they need.
    """

    title: str = "Mode"
    instructions: str = ""

    def __init__(self, host: ModeHost, cfg: AppConfig) -> None:
        self.host = host
        self.cfg = cfg
        self.width, self.height = host.viewport_size()
        self.reset()

    # ---- lifecycle ------------------------------------------------------ #

    def reset(self) -> None:
        return None

    # ---- input ---------------------------------------------------------- #

    def on_pointer(self, event: PointerEvent) -> None:
        if event.kind == POINTER_DOWN:
            self.on_down(event.point)
        elif event.kind == POINTER_MOVE:
            self.on_move(event.point)
        elif event.kind == POINTER_UP:
            self.on_up(event.point)
        elif event.kind == POINTER_CANCEL:
            self.on_cancel()

    def on_down(self, p: Point) -> None:
        return None

    def on_move(self, p: Point) -> None:
        return None

    def on_up(self, p: Point) -> None:
        return None

    def on_cancel(self) -> None:
        return None

    # ---- output --------------------------------------------------------- #

    def render(self) -> List[DrawCommand]:
        return []

    def status_text(self) -> Optional[str]:
        """Text to show instead of the instructions, or None."""
        return None

    def redraw(self) -> None:
        self.host.request_redraw()
