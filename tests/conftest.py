"""
Shared fixtures. pygame runs headless through SDL's dummy drivers.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from snake.config import WIDTH, HEIGHT  # noqa: E402


class FixedRandom:
    """Stands in for random.Random; randint replays the queued values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, lo, hi):
        self.calls.append((lo, hi))
        return self.values.pop(0)


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def surface():
    """Off-screen surface the size of the game window."""
    pygame.init()
    yield pygame.Surface((WIDTH, HEIGHT))
    pygame.quit()
