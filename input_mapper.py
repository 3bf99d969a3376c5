# input_mapper.py

"""
Translates pointer events into particle emission and trail points.

The pointer is either UP or DOWN (PointerState.held). Press enters DOWN;
release and leaving the window both force UP. Moving back into the window
with the button still pressed does not resume DOWN.

Emission policy by mode:
- click:      a press emits a burst of 3 x particle_count; moves emit nothing.
- continuous: every move emits particle_count, held or not.
- drag:       moves emit particle_count only while held.
"""

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np
import pygame

import constants
from config import EffectParameters
from particle_system import ParticleSystem
from trail import TrailBuffer

logger = logging.getLogger(constants.LOGGER_NAME)


@dataclass
class PointerState:
    x: float = 0.0
    y: float = 0.0
    held: bool = False


class InputMapper:
    def __init__(self, particles: ParticleSystem, trail: TrailBuffer, pointer: PointerState,
                 params: EffectParameters, rng: np.random.Generator,
                 clock: Callable[[], float] = pygame.time.get_ticks):
        self.particles = particles
        self.trail = trail
        self.pointer = pointer
        self.params = params
        self.rng = rng
        self.clock = clock

    def _emit(self, x: float, y: float, count: int) -> int:
        p = self.params
        return self.particles.emit(x, y, count, p.intensity, p.size, p.color, self.rng)

    def move(self, x: float, y: float) -> int:
        """Handles a pointer move and returns the number of particles created."""
        self.pointer.x = x
        self.pointer.y = y

        if self.params.enable_trail:
            self.trail.append(x, y, self.clock())

        mode = self.params.effect_mode
        if mode == constants.MODE_CONTINUOUS or (mode == constants.MODE_DRAG and self.pointer.held):
            return self._emit(x, y, self.params.particle_count)
        return 0

    def press(self, x: float, y: float) -> int:
        """Handles a pointer press and returns the number of particles created."""
        self.pointer.held = True
        self.pointer.x = x
        self.pointer.y = y

        if self.params.effect_mode == constants.MODE_CLICK:
            return self._emit(x, y, self.params.particle_count * constants.CLICK_BURST_MULTIPLIER)
        return 0

    def release(self):
        self.pointer.held = False

    def leave(self):
        self.pointer.held = False
