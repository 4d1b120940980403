import os
import random
from collections import deque

import pygame
import pytest

from flappy.data_models import Pipe
from flappy.game_state import GameSession
from flappy.pillar import Pillar


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(rng):
    return GameSession(rng=rng)


@pytest.fixture
def make_pillar(rng):
    """Builds a pillar holding exactly the given (x, gap_y) pipes."""
    def _make(*pipes, **kwargs):
        return Pillar(rng=rng, pipes=deque(Pipe(float(x), float(y)) for x, y in pipes), **kwargs)
    return _make


@pytest.fixture
def headless_pygame(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    pygame.init()
    yield
    pygame.quit()
