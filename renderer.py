# renderer.py

"""
Draws one frame of the effect.

Fixed order per frame:
1. Fade overlay (always): a translucent black layer over the previous frame.
2. Glow (if enabled): bloom of the particle set added onto the screen.
3. Trail (if enabled and at least two points survive pruning).
4. Particles.
5. Ripples (if enabled and the pointer is held).

Stages 3-5 are drawn onto a shared transparent layer, which is then
blitted onto the screen once.
"""

import logging

import pygame

import constants
from color_model import hex_to_rgb, to_rgba
from config import EffectParameters
from input_mapper import PointerState
from particle_system import ParticleSystem
from trail import TrailBuffer

logger = logging.getLogger(constants.LOGGER_NAME)


def ripple_rings(now_ms: float) -> list:
    """
    Returns (radius, alpha) for each visible ripple ring at time `now_ms`.

    Rings grow with wall-clock time, wrap at RIPPLE_MAX_RADIUS and fade out
    linearly as they grow. Rings with no alpha left are skipped.
    """
    phase = now_ms * constants.RIPPLE_PHASE_RATE
    rings = []
    for i in range(constants.RIPPLE_COUNT):
        radius = (phase * constants.RIPPLE_SPEED + i * constants.RIPPLE_SPACING) % constants.RIPPLE_MAX_RADIUS
        alpha = max(0.0, 1 - radius / constants.RIPPLE_MAX_RADIUS) * constants.RIPPLE_MAX_ALPHA
        if alpha > 0:
            rings.append((radius, alpha))
    return rings


class Renderer:
    """
    Owns the off-screen layers used to compose a frame.

    The layers match the screen size and must be rebuilt with resize()
    whenever the window changes size.
    """
    def __init__(self, size: tuple):
        self.size = (0, 0)
        self.resize(size)

    def resize(self, size: tuple):
        width, height = max(int(size[0]), 1), max(int(size[1]), 1)
        if (width, height) == self.size:
            return
        self.size = (width, height)

        fade_alpha = int(round(constants.FADE_OVERLAY_ALPHA * 255))
        self.fade_surface = pygame.Surface(self.size, pygame.SRCALPHA)
        self.fade_surface.fill((*constants.BLACK, fade_alpha))

        self.effect_surface = pygame.Surface(self.size, pygame.SRCALPHA)
        self.glow_surface = pygame.Surface(self.size, pygame.SRCALPHA)
        logger.info(f"Render layers resized to {width}x{height}.")

    def draw(self, screen: pygame.Surface, particles: ParticleSystem, trail: TrailBuffer,
             pointer: PointerState, params: EffectParameters, now_ms: float):
        self.draw_fade(screen)

        if params.enable_glow:
            self.draw_glow(screen, particles)

        self.effect_surface.fill((0, 0, 0, 0))
        if params.enable_trail:
            self.draw_trail(self.effect_surface, trail, params, now_ms)
        self.draw_particles(self.effect_surface, particles)
        if params.enable_ripples and pointer.held:
            self.draw_ripples(self.effect_surface, pointer, params, now_ms)
        screen.blit(self.effect_surface, (0, 0))

    def draw_fade(self, screen: pygame.Surface):
        screen.blit(self.fade_surface, (0, 0))

    def draw_trail(self, surface: pygame.Surface, trail: TrailBuffer,
                   params: EffectParameters, now_ms: float) -> int:
        """
        Prunes expired points and draws the surviving trail as line segments.

        Each segment's alpha and width shrink linearly with the age of its
        newer end. Returns the number of segments drawn.
        """
        if len(trail) == 0:
            return 0
        points = trail.prune(now_ms, params.trail_length)
        if len(points) < 2:
            return 0

        rgb = hex_to_rgb(params.color)
        max_age = TrailBuffer.max_age(params.trail_length)
        for prev, curr in zip(points, points[1:]):
            age = (now_ms - curr.time) / max_age
            remaining = 1 - age
            color = to_rgba(rgb, remaining * constants.TRAIL_MAX_ALPHA)
            width = max(int(round(remaining * constants.TRAIL_MAX_WIDTH)), 1)
            pygame.draw.line(surface, color, (prev.x, prev.y), (curr.x, curr.y), width)
        return len(points) - 1

    def draw_particles(self, surface: pygame.Surface, particles: ParticleSystem) -> int:
        """Draws each live particle as a filled disc. Returns the number drawn."""
        drawn = 0
        for particle in particles:
            if particle.life <= 0:
                continue
            pygame.draw.circle(
                surface,
                particle.color,
                (particle.x, particle.y),
                particle.size
            )
            drawn += 1
        return drawn

    def draw_glow(self, screen: pygame.Surface, particles: ParticleSystem):
        """
        Adds a soft halo around every particle in its own color.

        Particles are drawn onto the glow layer, blurred by scaling down and
        back up, dimmed, and added onto the screen.
        """
        if len(particles) == 0:
            return
        self.glow_surface.fill((0, 0, 0, 0))
        self.draw_particles(self.glow_surface, particles)

        width, height = self.size
        scale = constants.BLOOM_RADIUS
        scaled_size = (max(width // scale, 1), max(height // scale, 1))
        scaled_surface = pygame.transform.smoothscale(self.glow_surface, scaled_size)
        blurred_surface = pygame.transform.smoothscale(scaled_surface, self.size)

        intensity = constants.BLOOM_INTENSITY
        blurred_surface.fill((intensity, intensity, intensity), special_flags=pygame.BLEND_RGB_MULT)
        screen.blit(blurred_surface, (0, 0), special_flags=pygame.BLEND_RGB_ADD)

    def draw_ripples(self, surface: pygame.Surface, pointer: PointerState,
                     params: EffectParameters, now_ms: float) -> int:
        """Draws the ripple rings around the pointer. Returns the number of rings drawn."""
        rgb = hex_to_rgb(params.color)
        center = (int(pointer.x), int(pointer.y))
        rings = ripple_rings(now_ms)
        for radius, alpha in rings:
            pygame.draw.circle(surface, to_rgba(rgb, alpha), center, radius, constants.RIPPLE_LINE_WIDTH)
        return len(rings)
