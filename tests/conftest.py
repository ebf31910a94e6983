"""Shared fixtures.  pygame runs headless for the whole suite."""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from core.shape_assets import ShapeBundle


class FakeSound:
    """Stands in for pygame.mixer.Sound; play() returns no channel."""

    def __init__(self, length=0.5):
        self.length = length
        self.plays = 0

    def play(self):
        self.plays += 1
        return None

    def stop(self):
        pass

    def get_length(self):
        return self.length


def make_bundle(name, size=(40, 40)):
    return ShapeBundle(
        name=name,
        filled_image=pygame.Surface(size, pygame.SRCALPHA),
        outline_image=pygame.Surface(size, pygame.SRCALPHA),
        audio=FakeSound(),
    )


@pytest.fixture
def bundles():
    return [make_bundle(n) for n in ("triangle", "square", "circle")]


@pytest.fixture
def screen():
    pygame.display.init()
    pygame.font.init()
    surf = pygame.display.set_mode((800, 600))
    yield surf
    pygame.display.quit()
