"""
Engine entry point: owns the window and drives the scene stack.
"""
from __future__ import annotations

import logging

import pygame

from drawmodes import config
from drawmodes.render.canvas import CanvasRenderer
from drawmodes.scenes import SceneManager

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: config.AppConfig) -> None:
        pygame.init()
        self.cfg = cfg
        self.renderer = CanvasRenderer(cfg.view_width, cfg.view_height)
        self.manager = SceneManager(cfg, self.renderer)

    def run(self) -> None:
        logger.info("Starting with a %dx%d view.", self.cfg.view_width, self.cfg.view_height)
        try:
            self.manager.run()
        finally:
            self.renderer.teardown()
