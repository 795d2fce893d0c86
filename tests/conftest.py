"""
Shared test fixtures for the drawmodes test suite.

Renderer and scene tests run against SDL's dummy video driver, so nothing
here opens a real window.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from drawmodes.config import AppConfig


# ---------------------------------------------------------------------------
# Mode host
# ---------------------------------------------------------------------------

class FakeHost:
    """Records redraw requests instead of repainting anything."""

    def __init__(self, width=300, height=300):
        self.width = width
        self.height = height
        self.redraws = 0

    def request_redraw(self):
        self.redraws += 1

    def viewport_size(self):
        return self.width, self.height


@pytest.fixture
def host():
    """300x300 recording host."""
    return FakeHost()


@pytest.fixture
def cfg():
    """Stock app config."""
    return AppConfig()
