from __future__ import annotations

from typing import Optional

import pygame


# ---------------------------------------------------------------------------
# Base Scene
# ---------------------------------------------------------------------------


class Scene:
    """
    Abstract base for all scenes.

    The SceneManager drives the scene on top of its stack: on_enter once each
    time the scene becomes the top, then handle_event / update / render every
    frame until the stack changes.
    """

    def on_enter(self, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Called when this scene (re)gains the top of the stack."""
        return None

    def handle_event(self, event, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Process a single pygame event."""
        return None

    def update(self, dt_ms: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Advance scene state by dt_ms."""
        return None

    def render(self, renderer, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        """Draw the scene."""
        return None


# ---------------------------------------------------------------------------
# Standardized menu input helpers
# ---------------------------------------------------------------------------

# High-level logical actions for menus
MENU_ACTION_UP = "up"
MENU_ACTION_DOWN = "down"
MENU_ACTION_ACTIVATE = "activate"
MENU_ACTION_BACK = "back"

# Shared footer hint for standard menus
MENU_FOOTER_HELP = "W/S or ↑/↓ to move, Enter/Space or click to select, Esc to go back"

# Map raw Pygame keycodes to logical actions
_MENU_KEYMAP = {
    # Up
    pygame.K_UP: MENU_ACTION_UP,
    pygame.K_w: MENU_ACTION_UP,
    pygame.K_KP8: MENU_ACTION_UP,

    # Down
    pygame.K_DOWN: MENU_ACTION_DOWN,
    pygame.K_s: MENU_ACTION_DOWN,
    pygame.K_KP2: MENU_ACTION_DOWN,

    # Activate / confirm
    pygame.K_RETURN: MENU_ACTION_ACTIVATE,
    pygame.K_SPACE: MENU_ACTION_ACTIVATE,
    pygame.K_KP_ENTER: MENU_ACTION_ACTIVATE,

    # Back / cancel
    pygame.K_ESCAPE: MENU_ACTION_BACK,
}


class MenuInput:
    """
    Helper for standardized menu input with key-repeat.

    Feed it KEYDOWN / KEYUP keys and call update() once per frame; both
    return a MENU_ACTION_* (or None). Only up/down repeat while held.
    """

    def __init__(
        self,
        *,
        initial_delay: int = 300,
        slow_interval: int = 120,
        fast_interval: int = 40,
        fast_threshold: int = 900,
    ) -> None:
        self.repeat_key: Optional[int] = None
        self.repeat_start_ms = 0
        self.last_repeat_ms = 0

        self.initial_delay = initial_delay
        self.slow_interval = slow_interval
        self.fast_interval = fast_interval
        self.fast_threshold = fast_threshold

    @staticmethod
    def map_key(key: int) -> Optional[str]:
        return _MENU_KEYMAP.get(key)

    def handle_keydown(self, key: int, now_ms: Optional[int] = None) -> Optional[str]:
        """Call from your KEYDOWN handler. Returns a MENU_ACTION_* or None."""
        action = self.map_key(key)

        if action in (MENU_ACTION_UP, MENU_ACTION_DOWN):
            now = pygame.time.get_ticks() if now_ms is None else now_ms
            self.repeat_key = key
            self.repeat_start_ms = now
            self.last_repeat_ms = now
        else:
            # Non-directional key: stop repeating
            self.repeat_key = None

        return action

    def handle_keyup(self, key: int) -> None:
        if self.repeat_key == key:
            self.cancel_repeat()

    def update(self, now_ms: Optional[int] = None) -> Optional[str]:
        """Call once per frame; returns a repeated MENU_ACTION_* or None."""
        if self.repeat_key is None:
            return None

        now = pygame.time.get_ticks() if now_ms is None else now_ms
        action = self.map_key(self.repeat_key)

        elapsed_since_start = now - self.repeat_start_ms
        if elapsed_since_start < self.initial_delay:
            return None

        elapsed_since_last = now - self.last_repeat_ms
        interval = (
            self.fast_interval
            if elapsed_since_start >= self.fast_threshold
            else self.slow_interval
        )

        if elapsed_since_last >= interval:
            self.last_repeat_ms = now
            return action

        return None

    def cancel_repeat(self) -> None:
        self.repeat_key = None


class PopupMenuScene(Scene):
    """
    Menu rendered as a framed popup over a dimmed snapshot of the screen.

    Subclasses should override:
      - get_menu_items(self) -> list[str]
      - on_activate(self, index, manager) -> None
      - optionally on_back(self, manager) -> None  (default: close popup)
      - optionally get_title(self) -> Optional[str]
    """

    FOOTER_TEXT = MENU_FOOTER_HELP

    def __init__(
        self,
        window_rect: Optional[pygame.Rect] = None,
        *,
        dim_background: bool = True,
    ) -> None:
        self.window_rect = window_rect
        self.dim_background = dim_background
        self.selected_idx = 0
        self._menu_input = MenuInput()
        # screen-space rects for hit-testing options with the mouse
        self._option_rects: list[pygame.Rect] = []
        self._background: Optional[pygame.Surface] = None

    # ---- hooks for subclasses ------------------------------------------------

    def get_menu_items(self) -> list[str]:
        raise NotImplementedError

    def on_activate(self, index: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        raise NotImplementedError

    def on_back(self, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        manager.pop_scene()

    def get_title(self) -> Optional[str]:
        return None

    # ---- mouse helpers -------------------------------------------------------

    def _index_from_mouse_pos(self, pos: tuple[int, int]) -> int | None:
        """Return index of option under this mouse position, or None."""
        mx, my = pos
        for i, rect in enumerate(self._option_rects):
            if rect.collidepoint(mx, my):
                return i
        return None

    @staticmethod
    def _surface_pos(manager, pos: tuple[int, int]) -> tuple[int, int]:
        renderer = manager.renderer
        if hasattr(renderer, "_to_surface"):
            return renderer._to_surface(pos)
        return pos

    # ---- live-loop hooks -----------------------------------------------------

    def handle_event(self, event, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        if event.type == pygame.KEYDOWN:
            self._handle_action(self._menu_input.handle_keydown(event.key), manager)
        elif event.type == pygame.KEYUP:
            self._menu_input.handle_keyup(event.key)
        elif event.type == pygame.MOUSEMOTION:
            idx = self._index_from_mouse_pos(self._surface_pos(manager, event.pos))
            if idx is not None:
                self.selected_idx = idx
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            idx = self._index_from_mouse_pos(self._surface_pos(manager, event.pos))
            if idx is not None:
                self.selected_idx = idx
                # Behave like pressing Enter on this option
                self.on_activate(idx, manager)

    def update(self, dt_ms: int, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        self._handle_action(self._menu_input.update(), manager)

    def _handle_action(self, action: Optional[str], manager) -> None:
        if action is None:
            return
        num_items = max(1, len(self.get_menu_items()))
        if action == MENU_ACTION_UP:
            self.selected_idx = (self.selected_idx - 1) % num_items
        elif action == MENU_ACTION_DOWN:
            self.selected_idx = (self.selected_idx + 1) % num_items
        elif action == MENU_ACTION_BACK:
            self.on_back(manager)
        elif action == MENU_ACTION_ACTIVATE:
            self.on_activate(self.selected_idx, manager)

    def _ensure_window_rect(self, renderer) -> pygame.Rect:
        if self.window_rect is None:
            w = int(renderer.width * 0.7)
            h = int(renderer.height * 0.7)
            self.window_rect = pygame.Rect((renderer.width - w) // 2, (renderer.height - h) // 2, w, h)
        return self.window_rect

    def render(self, renderer, manager: "SceneManager") -> None:  # type: ignore[name-defined]
        surface = renderer.surface

        # Snapshot the screen beneath this popup once.
        if self._background is None:
            self._background = surface.copy()
        surface.blit(self._background, (0, 0))

        if self.dim_background:
            overlay = pygame.Surface((renderer.width, renderer.height), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 140))
            surface.blit(overlay, (0, 0))

        self._draw_panel(renderer, self._ensure_window_rect(renderer))
        renderer.present()

    def _draw_panel(self, renderer, rect: pygame.Rect) -> None:
        """Framed box with optional title, the options and a footer inside rect."""
        panel = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
        panel.fill((10, 10, 20, 240))
        pygame.draw.rect(panel, (220, 220, 240, 255), panel.get_rect(), 2)

        font = renderer.font
        y = 16

        title = self.get_title()
        if title:
            text = font.render(title, True, renderer.fg)
            panel.blit(text, ((panel.get_width() - text.get_width()) // 2, y))
            y += text.get_height() + 16

        self._option_rects = []
        for idx, label in enumerate(self.get_menu_items()):
            selected = idx == self.selected_idx
            color = renderer.sel if selected else renderer.fg
            prefix = "▶ " if selected else "  "
            text = font.render(prefix + label, True, color)
            local_rect = text.get_rect(topleft=((panel.get_width() - text.get_width()) // 2, y))
            panel.blit(text, local_rect.topleft)
            # Convert to global coords for hit-testing
            self._option_rects.append(local_rect.move(rect.left, rect.top))
            y += text.get_height() + 6

        if self.FOOTER_TEXT:
            footer = renderer.small_font.render(self.FOOTER_TEXT, True, renderer.dim)
            panel.blit(
                footer,
                ((panel.get_width() - footer.get_width()) // 2, panel.get_height() - footer.get_height() - 8),
            )

        renderer.surface.blit(panel, rect.topleft)
