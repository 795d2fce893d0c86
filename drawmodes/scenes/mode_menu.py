from __future__ import annotations

from typing import Optional

import pygame

from drawmodes.modes import registry

from .base import PopupMenuScene


class ModeMenuScene(PopupMenuScene):
    """Popup list of drawing modes; picking one switches the canvas under it."""

    QUIT_LABEL = "Quit"

    def __init__(self, window_rect: Optional[pygame.Rect] = None, *, canvas) -> None:
        super().__init__(window_rect)
        self.canvas = canvas
        if 0 <= canvas.mode_index < len(registry.MODES):
            self.selected_idx = canvas.mode_index

    def get_title(self) -> Optional[str]:
        return "Choose a mode"

    def get_menu_items(self) -> list[str]:
        return registry.mode_titles() + [self.QUIT_LABEL]

    def on_activate(self, index: int, manager) -> None:
        if index >= len(registry.MODES):
            manager.set_scene(None)
            return
        self.canvas.change_mode(index)
        manager.pop_scene()
