# manager.py
from __future__ import annotations

import logging
from typing import List, Optional, Type

import pygame
from pygame import Rect

from drawmodes.config import AppConfig

from .base import Scene
from .canvas_scene import CanvasScene

logger = logging.getLogger(__name__)


class SceneManager:
    def __init__(self, cfg: AppConfig, renderer) -> None:
        self.cfg = cfg
        self.renderer = renderer

        # Scene stack + window rects (for popup scenes like the mode picker)
        self.scene_stack: List[Scene] = []
        self.window_stack: List[Rect] = []

        # Canvas sits below the instructions header.
        header_h = min(cfg.header_height, renderer.height - 1)
        canvas_rect = Rect(0, header_h, renderer.width, renderer.height - header_h)
        self.set_scene(CanvasScene(cfg, canvas_rect, cfg.start_mode))

    # ------------------------------------------------------------------ #
    # Window helpers

    def _root_window_rect(self) -> Rect:
        """Full-screen rect."""
        return Rect(0, 0, self.renderer.width, self.renderer.height)

    def compute_child_window_rect(
        self,
        scale: float,
        parent: Optional[Rect] = None,
        offset: int = 0,
    ) -> Rect:
        """
        Compute a child window rect:
        - If parent is None, use the top of window_stack or full screen.
        - Size = parent.size * scale, centered in parent, plus offset.
        """
        if parent is None:
            base = self.window_stack[-1] if self.window_stack else self._root_window_rect()
        else:
            base = parent

        w = int(base.width * scale)
        h = int(base.height * scale)
        x = base.x + (base.width - w) // 2 + offset
        y = base.y + (base.height - h) // 2 + offset
        return Rect(x, y, w, h)

    def open_window_scene(
        self,
        scene_cls: Type[Scene],
        *,
        scale: float = 0.6,
        parent: Optional[Rect] = None,
        offset: int = 0,
        **kwargs,
    ) -> Scene:
        """
        Open a scene as a window at a given scale and push it.

        scene_cls is called as scene_cls(window_rect=..., **kwargs).
        """
        window_rect = self.compute_child_window_rect(scale, parent, offset)
        scene = scene_cls(window_rect=window_rect, **kwargs)  # type: ignore[call-arg]
        # Tag the scene so pop_scene knows it's windowed
        scene.window_rect = window_rect  # type: ignore[attr-defined]
        self.window_stack.append(window_rect)
        self.scene_stack.append(scene)
        return scene

    # ------------------------------------------------------------------ #
    # Stack operations

    def pop_scene(self) -> None:
        if not self.scene_stack:
            return
        scene = self.scene_stack.pop()

        # If this scene was windowed, pop matching rect too
        if getattr(scene, "window_rect", None) is not None and self.window_stack:
            self.window_stack.pop()

    def set_scene(self, scene: Optional[Scene]) -> None:
        self.window_stack.clear()
        if scene is None:
            self.scene_stack.clear()
        else:
            self.scene_stack = [scene]

    @property
    def current_scene(self) -> Optional[Scene]:
        return self.scene_stack[-1] if self.scene_stack else None

    # ------------------------------------------------------------------ #

    def run(self) -> None:
        """Drive the top scene until the stack is empty."""
        while self.scene_stack:
            self._run_live_scene(self.scene_stack[-1])
        logger.info("Scene stack empty; leaving main loop.")

    def _run_live_scene(self, scene: Scene) -> None:
        renderer = self.renderer
        clock = pygame.time.Clock()
        scene.on_enter(self)

        # Drive events/update/render until the scene stack changes or the
        # app is quit.
        while self.scene_stack and self.scene_stack[-1] is scene:
            dt = clock.tick(self.cfg.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.set_scene(None)
                    return

                # Window resize is purely a view concern.
                if event.type == pygame.VIDEORESIZE:
                    renderer.handle_resize(event.w, event.h)
                    continue

                # Global fullscreen toggle
                if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                    renderer.toggle_fullscreen()
                    continue

                scene.handle_event(event, self)
                if not self.scene_stack or self.scene_stack[-1] is not scene:
                    # Scene changed mid-batch; the new top gets the rest.
                    return

            scene.update(dt, self)
            scene.render(renderer, self)
