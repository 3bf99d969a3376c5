import os

# Headless pygame for every test.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

from config import EffectParameters
from input_mapper import InputMapper, PointerState
from particle_system import ParticleSystem
from trail import TrailBuffer


class FakeClock:
    """Millisecond clock whose time only moves when told to."""
    def __init__(self, now=0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def params():
    return EffectParameters()


@pytest.fixture
def clock():
    return FakeClock(1000)


@pytest.fixture
def particles():
    return ParticleSystem()


@pytest.fixture
def mapper(particles, params, rng, clock):
    return InputMapper(particles, TrailBuffer(), PointerState(), params, rng, clock=clock)


@pytest.fixture
def display():
    pygame.init()
    screen = pygame.display.set_mode((200, 150))
    yield screen
    pygame.quit()
