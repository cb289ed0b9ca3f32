"""
Shared fixtures. SDL runs headless so the suite works without a display
or sound card.
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from core.round import GameRoundController


@pytest.fixture
def controller():
    """A fresh 60 s round ticking once per second."""
    return GameRoundController(60000, 1000)


@pytest.fixture(scope="session")
def pygame_init():
    # Session scoped: renderer.ui caches Font objects that die with pygame.quit()
    pygame.init()
    yield
    pygame.quit()


class RecordingAudio:
    """Stands in for core.audio.Audio and remembers what was played."""

    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)


@pytest.fixture
def audio():
    return RecordingAudio()
