from __future__ import annotations

import logging
from typing import Optional, Tuple

import pygame

from drawmodes.config import AppConfig
from drawmodes.modes import registry
from drawmodes.modes.base import (
    POINTER_CANCEL,
    POINTER_DOWN,
    POINTER_MOVE,
    POINTER_UP,
    Mode,
    PointerEvent,
)

from .base import Scene
from .mode_menu import ModeMenuScene

logger = logging.getLogger(__name__)

# number row -> mode index; 0 is the "no mode" slot
_MODE_KEYS = {
    pygame.K_0: len(registry.MODES),
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
    pygame.K_5: 4,
    pygame.K_6: 5,
}

HEADER_HINT = "Tab: next mode   Esc: mode list"


class CanvasScene(Scene):
    """
    Hosts one drawing mode on the canvas below an instructions header.

    Mouse events inside the canvas become canvas-local PointerEvents for the
    mode. The canvas is repainted only after the mode asked for a redraw.
    """

    def __init__(self, cfg: AppConfig, canvas_rect: pygame.Rect, mode_index: int = 0) -> None:
        self.cfg = cfg
        self.canvas_rect = pygame.Rect(canvas_rect)
        self.mode_index = mode_index
        self.mode: Optional[Mode] = None
        self.dirty = True
        self.pressed = False
        self.change_mode(mode_index)

    # ---- host contract -------------------------------------------------- #

    def request_redraw(self) -> None:
        self.dirty = True

    def viewport_size(self) -> Tuple[int, int]:
        return self.canvas_rect.width, self.canvas_rect.height

    # ---- mode selection ------------------------------------------------- #

    def change_mode(self, index: int) -> None:
        """Replace the live mode with a fresh one; its previous state is dropped."""
        self.mode_index = index
        self.pressed = False
        self.mode = registry.create_mode(index, self, self.cfg)
        logger.info("Switched to mode %d (%s).", index, self.mode.title)
        self.request_redraw()

    def cycle_mode(self, step: int) -> None:
        count = len(registry.MODES)
        if 0 <= self.mode_index < count:
            self.change_mode((self.mode_index + step) % count)
        else:
            self.change_mode(0 if step > 0 else count - 1)

    def open_mode_menu(self, manager) -> None:
        self.pressed = False
        manager.open_window_scene(ModeMenuScene, scale=0.8, canvas=self)

    # ---- pointer mapping ------------------------------------------------ #

    def _canvas_pos(self, manager, pos) -> Tuple[int, int]:
        """Display coords -> surface coords -> canvas-local coords."""
        renderer = manager.renderer
        if hasattr(renderer, "_to_surface"):
            pos = renderer._to_surface(pos)
        return pos[0] - self.canvas_rect.x, pos[1] - self.canvas_rect.y

    def _inside(self, local: Tuple[int, int]) -> bool:
        return 0 <= local[0] < self.canvas_rect.width and 0 <= local[1] < self.canvas_rect.height

    def _dispatch(self, event: PointerEvent) -> None:
        if self.mode is None:
            return
        try:
            self.mode.on_pointer(event)
        except (ArithmeticError, ValueError):
            logger.exception("Mode %s failed on %s event.", self.mode.title, event.kind)

    def _cancel(self) -> None:
        if self.pressed:
            self.pressed = False
            self._dispatch(PointerEvent(POINTER_CANCEL))

    # ---- live-loop hooks ------------------------------------------------ #

    def on_enter(self, manager) -> None:
        self.request_redraw()

    def handle_event(self, event, manager) -> None:
        if event.type == pygame.KEYDOWN:
            self._handle_key(event, manager)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            local = self._canvas_pos(manager, event.pos)
            if self._inside(local):
                self.pressed = True
                self._dispatch(PointerEvent(POINTER_DOWN, float(local[0]), float(local[1])))
            elif local[1] < 0:
                # click on the header
                self.open_mode_menu(manager)
        elif event.type == pygame.MOUSEMOTION and self.pressed:
            local = self._canvas_pos(manager, event.pos)
            if self._inside(local):
                self._dispatch(PointerEvent(POINTER_MOVE, float(local[0]), float(local[1])))
            else:
                self._cancel()
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.pressed:
            self.pressed = False
            local = self._canvas_pos(manager, event.pos)
            self._dispatch(PointerEvent(POINTER_UP, float(local[0]), float(local[1])))
        elif event.type in (pygame.WINDOWFOCUSLOST, pygame.WINDOWLEAVE):
            self._cancel()

    def _handle_key(self, event, manager) -> None:
        key = event.key
        if key == pygame.K_ESCAPE:
            self.open_mode_menu(manager)
        elif key == pygame.K_TAB:
            self.cycle_mode(-1 if event.mod & pygame.KMOD_SHIFT else 1)
        elif key in _MODE_KEYS:
            self.change_mode(_MODE_KEYS[key])

    def header_text(self) -> str:
        if self.mode is None:
            return ""
        return self.mode.status_text() or registry.instructions_for(self.mode_index)

    def render(self, renderer, manager) -> None:
        if self.dirty:
            self.dirty = False
            self._draw_header(renderer)
            if self.mode is not None:
                try:
                    commands = self.mode.render()
                except (ArithmeticError, ValueError):
                    logger.exception("Mode %s failed to render.", self.mode.title)
                else:
                    renderer.draw(commands, self.canvas_rect)
        renderer.present()

    def _draw_header(self, renderer) -> None:
        header = pygame.Rect(0, 0, renderer.width, self.canvas_rect.y)
        if header.height <= 0:
            return
        surface = renderer.surface
        surface.fill(renderer.header_bg, header)
        text = renderer.font.render(self.header_text(), True, renderer.fg)
        surface.blit(text, (12, 10))
        hint = renderer.small_font.render(HEADER_HINT, True, renderer.dim)
        surface.blit(hint, (12, header.height - hint.get_height() - 8))
