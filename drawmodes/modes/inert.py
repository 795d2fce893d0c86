from __future__ import annotations

from typing import List, Optional

from drawmodes.render.commands import WHITE, DrawCommand, Fill

from .base import Mode

FALLBACK_PROMPT = "Please choose a mode above."


class InertMode(Mode):
    """Placeholder shown for a selection with no matching mode. Ignores all input."""

    title = "(none)"
    instructions = FALLBACK_PROMPT

    def render(self) -> List[DrawCommand]:
        return [Fill(WHITE)]

    def status_text(self) -> Optional[str]:
        return FALLBACK_PROMPT
