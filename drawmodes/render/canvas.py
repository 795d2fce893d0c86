"""Pygame renderer: window, letterboxed presentation and draw-command execution."""
from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

import pygame

from drawmodes.render.commands import (
    Circle,
    DrawCommand,
    Fill,
    Line,
    Oval,
    Polyline,
    Rect,
    Text,
    bounds,
)


class FontCache:
    """Lazily created fonts keyed by pixel size."""

    def __init__(self, name: Optional[str] = "consolas") -> None:
        self.name = name
        self._fonts: Dict[int, pygame.font.Font] = {}

    def get(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(self.name, size)
            self._fonts[size] = font
        return font


def _to_rect(corner_a, corner_b) -> pygame.Rect:
    left, top, width, height = bounds(corner_a, corner_b)
    return pygame.Rect(round(left), round(top), round(width), round(height))


def draw_commands(surface: pygame.Surface, commands: Iterable[DrawCommand], fonts: FontCache) -> None:
    """Execute draw commands in order on surface (canvas-local coordinates)."""
    for cmd in commands:
        if isinstance(cmd, Fill):
            surface.fill(cmd.color)
        elif isinstance(cmd, Line):
            pygame.draw.line(surface, cmd.color, cmd.start.as_tuple(), cmd.end.as_tuple(), max(1, cmd.width))
        elif isinstance(cmd, Polyline):
            if len(cmd.points) >= 2:
                pygame.draw.lines(surface, cmd.color, False, [p.as_tuple() for p in cmd.points], max(1, cmd.width))
        elif isinstance(cmd, Circle):
            radius = max(0.0, cmd.radius)
            if radius > 0:
                pygame.draw.circle(surface, cmd.color, cmd.center.as_tuple(), radius, cmd.width)
        elif isinstance(cmd, Rect):
            pygame.draw.rect(surface, cmd.color, _to_rect(cmd.corner_a, cmd.corner_b), cmd.width)
        elif isinstance(cmd, Oval):
            pygame.draw.ellipse(surface, cmd.color, _to_rect(cmd.corner_a, cmd.corner_b), cmd.width)
        elif isinstance(cmd, Text):
            font = fonts.get(cmd.size)
            text_surf = font.render(cmd.text, True, cmd.color)
            # position is the baseline origin
            surface.blit(text_surf, (round(cmd.position.x), round(cmd.position.y) - font.get_ascent()))


class CanvasRenderer:
    def __init__(self, width: int, height: int, caption: str = "Drawing Modes") -> None:
        pygame.init()
        self.width = width
        self.height = height
        self.surface_flags = pygame.RESIZABLE
        # render surface at native resolution; display may be larger in fullscreen
        self.surface = pygame.Surface((width, height))
        self.fullscreen = False
        self.display = pygame.display.set_mode((width, height), self.surface_flags)
        self.lb_off = (0, 0)  # letterbox offset when centering
        self.lb_scale = 1.0   # letterbox scale factor
        pygame.display.set_caption(caption)
        self.fonts = FontCache()
        self.font = self.fonts.get(28)
        self.small_font = self.fonts.get(16)
        self.bg = (10, 10, 20)   # letterbox bars
        self.fg = (220, 230, 240)
        self.dim = (120, 130, 150)
        self.sel = (255, 230, 120)
        self.header_bg = (30, 40, 60)

    def _to_surface(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        """Convert display-space mouse coords to surface-space, accounting for letterbox and scale."""
        return (
            int((pos[0] - self.lb_off[0]) / max(1e-6, self.lb_scale)),
            int((pos[1] - self.lb_off[1]) / max(1e-6, self.lb_scale)),
        )

    def draw(self, commands: Iterable[DrawCommand], area: Optional[pygame.Rect] = None) -> None:
        """Draw commands clipped to area (whole surface if None), with coordinates relative to it."""
        target = self.surface if area is None else self.surface.subsurface(area)
        draw_commands(target, commands, self.fonts)

    def toggle_fullscreen(self) -> None:
        flags = self.display.get_flags()
        if flags & pygame.FULLSCREEN:
            self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
            self.fullscreen = False
        else:
            self.display = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.fullscreen = True

    def handle_resize(self, width: int, height: int) -> None:
        # The logical surface keeps its size; only the letterbox changes.
        if not self.fullscreen:
            self.display = pygame.display.set_mode((width, height), self.surface_flags)

    def present(self) -> None:
        """Blit render surface to display with letterboxing (no stretch, aspect preserved)."""
        dw, dh = self.display.get_size()
        sw, sh = self.surface.get_size()
        scale = min(dw / sw, dh / sh)
        new_w = int(sw * scale)
        new_h = int(sh * scale)
        ox = max(0, (dw - new_w) // 2)
        oy = max(0, (dh - new_h) // 2)

        # Keep letterbox info for mouse unprojection.
        self.lb_off = (ox, oy)
        self.lb_scale = scale

        self.display.fill(self.bg)
        if scale != 1.0:
            panel = pygame.transform.smoothscale(self.surface, (new_w, new_h))
        else:
            panel = self.surface
        self.display.blit(panel, (ox, oy))
        pygame.display.flip()

    def teardown(self) -> None:
        pygame.quit()
