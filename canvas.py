# canvas.py

"""
The drawing surface and the single owner of the effect state.

InteractiveCanvas holds the particle set, trail buffer and pointer state,
and is the only object that hands them to the input mapper and the
renderer. Events are drained at the start of each tick, so input handling
and simulation never overlap.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np
import pygame

import constants
import controls
from config import EffectParameters
from input_mapper import InputMapper, PointerState
from particle_system import ParticleSystem
from renderer import Renderer
from scheduler import AnimationScheduler
from trail import TrailBuffer

logger = logging.getLogger(constants.LOGGER_NAME)


@dataclass
class EffectState:
    particles: ParticleSystem = field(default_factory=ParticleSystem)
    trail: TrailBuffer = field(default_factory=TrailBuffer)
    pointer: PointerState = field(default_factory=PointerState)


class InteractiveCanvas:
    """
    Data Contract:
    - Inputs:
        - params (EffectParameters): Live parameter set, re-read every tick.
        - rng (np.random.Generator): Random source for particle emission.
        - defaults (EffectParameters): Values restored by the reset binding.
        - size (tuple): Initial surface size in pixels.
        - fps (int): Frame rate cap.
        - clock (callable): Millisecond clock used for trail and ripple timing.
        - get_surface (callable): Returns the display surface, or None once
          it is gone.
        - log_throttle_ticks (int): Ticks between DEBUG status lines.
    - Side Effects: Draws to the display surface; mutates its own state.
    """
    def __init__(self, params: EffectParameters, rng: np.random.Generator,
                 defaults: Optional[EffectParameters] = None,
                 size: tuple = (constants.WIDTH, constants.HEIGHT),
                 fps: int = constants.FPS,
                 clock: Callable[[], float] = pygame.time.get_ticks,
                 get_surface: Callable[[], Optional[pygame.Surface]] = pygame.display.get_surface,
                 log_throttle_ticks: int = 300):
        self.params = params
        self.defaults = defaults if defaults is not None else params.copy()
        self.clock = clock
        self.get_surface = get_surface
        self.log_throttle_ticks = log_throttle_ticks

        self.state = EffectState()
        self.input = InputMapper(
            self.state.particles, self.state.trail, self.state.pointer,
            params, rng, clock=clock
        )
        self.renderer = Renderer(size)
        self.scheduler = AnimationScheduler(self.tick, fps=fps)
        self.frames_drawn = 0

        logger.info(f"InteractiveCanvas created ({size[0]}x{size[1]}, mode='{params.effect_mode}').")

    # --- Lifecycle ---

    def run(self, max_ticks: Optional[int] = None) -> int:
        return self.scheduler.run(max_ticks)

    def teardown(self):
        self.scheduler.cancel()

    @property
    def torn_down(self) -> bool:
        return self.scheduler.token.cancelled

    def resize(self, size: tuple):
        """Matches the render layers to a new surface size. Particles and trail are kept."""
        self.renderer.resize(size)

    # --- Events ---

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.input.move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.input.press(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.input.release()
        elif event.type == pygame.WINDOWLEAVE:
            self.input.leave()
        elif event.type == pygame.VIDEORESIZE:
            self.resize((event.w, event.h))
        elif event.type == pygame.WINDOWSIZECHANGED:
            self.resize((event.x, event.y))
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.teardown()
            else:
                controls.apply_key(self.params, self.defaults, event.key)
        elif event.type == pygame.QUIT:
            self.teardown()

    # --- Frame ---

    def tick(self):
        """One scheduled frame: drain events, then simulate and render."""
        for event in pygame.event.get():
            self.handle_event(event)
        if self.torn_down:
            return

        surface = self.get_surface()
        if surface is None:
            logger.info("Display surface is gone; stopping animation.")
            self.teardown()
            return

        self.step_frame(surface, self.clock())
        pygame.display.flip()

    def step_frame(self, surface: pygame.Surface, now_ms: float):
        """Advances the simulation by one tick and draws the result onto `surface`."""
        params = self.params
        state = self.state

        if surface.get_size() != self.renderer.size:
            self.resize(surface.get_size())

        state.particles.update(params.gravity, params.color)
        self.renderer.draw(surface, state.particles, state.trail, state.pointer, params, now_ms)
        self.frames_drawn += 1

        # Hot loop: throttle logs.
        if self.log_throttle_ticks and self.frames_drawn % self.log_throttle_ticks == 0:
            logger.debug(
                f"Frame={self.frames_drawn}, "
                f"Particles={len(state.particles)}, "
                f"TrailPoints={len(state.trail)}, "
                f"Dropped={state.particles.dropped_total}, "
                f"FPS={self.scheduler.clock.get_fps():.1f}"
            )
