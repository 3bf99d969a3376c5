# particle_system.py

import logging
import math

import numba
import numpy as np

import constants
from color_model import hex_to_rgb
from particle import Particle

logger = logging.getLogger(constants.LOGGER_NAME)

# --- JIT-Compiled Physics Functions ---
# Kept outside the ParticleSystem class and operating only on NumPy arrays
# and scalars, as required by Numba's nopython mode.

@numba.jit(nopython=True, fastmath=True)
def _step_particles_jit(positions, velocities, lives, max_lives, alphas, gravity_accel, drag, life_decrement):
    """
    Advances every particle by one tick, in place.

    Order per particle: integrate position, apply gravity, apply drag,
    decay life, recompute the fade ratio.
    """
    for i in range(positions.shape[0]):
        positions[i, 0] += velocities[i, 0]
        positions[i, 1] += velocities[i, 1]

        velocities[i, 1] += gravity_accel

        velocities[i, 0] *= drag
        velocities[i, 1] *= drag

        lives[i] -= life_decrement
        alphas[i] = lives[i] / max_lives[i]


class ParticleSystem:
    """
    Manages the live particle set using NumPy arrays (Structure of Arrays).

    Data Contract:
    - Inputs:
        - max_particles (int): Hard cap on concurrently live particles.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Manages the lifecycle of all particle data.
    - Invariants: All internal arrays have the same length (len(self)).
      No particle with life <= 0 survives an update().
    """
    def __init__(self, max_particles: int = constants.MAX_PARTICLES):
        self.max_particles = max_particles
        self.base_rgb = constants.WHITE

        self.positions = np.zeros((0, 2), dtype=float)
        self.velocities = np.zeros((0, 2), dtype=float)
        self.lives = np.zeros(0, dtype=float)
        self.max_lives = np.zeros(0, dtype=float)
        self.sizes = np.zeros(0, dtype=float)
        self.alphas = np.zeros(0, dtype=float)

        # Particles refused because the cap was reached, for throttled logging.
        self.dropped_total = 0

        logger.info(f"ParticleSystem created with a cap of {max_particles} particles.")

    def __len__(self):
        return self.positions.shape[0]

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __getitem__(self, i: int) -> Particle:
        return Particle(
            x=float(self.positions[i, 0]),
            y=float(self.positions[i, 1]),
            vx=float(self.velocities[i, 0]),
            vy=float(self.velocities[i, 1]),
            life=float(self.lives[i]),
            max_life=float(self.max_lives[i]),
            size=float(self.sizes[i]),
            rgb=self.base_rgb,
            alpha=float(self.alphas[i]),
        )

    def emit(self, x: float, y: float, count: int, intensity: float, size: float,
             color: str, rng: np.random.Generator) -> int:
        """
        Spawns up to `count` particles at (x, y) and returns how many were created.

        Each particle gets a uniformly random direction in [0, 2pi), a speed in
        [1, intensity + 1) and a radius in [2, size + 2). Particles beyond the
        cap are silently dropped.
        """
        count = max(int(count), 0)
        n = min(count, self.max_particles - len(self))
        n = max(n, 0)
        self.dropped_total += count - n
        if n == 0:
            return 0

        angles = rng.random(n) * (2.0 * math.pi)
        speeds = rng.random(n) * intensity + constants.MIN_SPEED
        sizes = rng.random(n) * size + constants.MIN_SIZE

        new_positions = np.empty((n, 2), dtype=float)
        new_positions[:, 0] = x
        new_positions[:, 1] = y
        new_velocities = np.column_stack((np.cos(angles) * speeds, np.sin(angles) * speeds))
        new_lives = np.full(n, constants.MAX_LIFE, dtype=float)

        self.base_rgb = hex_to_rgb(color)
        self.positions = np.concatenate((self.positions, new_positions))
        self.velocities = np.concatenate((self.velocities, new_velocities))
        self.lives = np.concatenate((self.lives, new_lives))
        self.max_lives = np.concatenate((self.max_lives, new_lives.copy()))
        self.sizes = np.concatenate((self.sizes, sizes.astype(float)))
        self.alphas = np.concatenate((self.alphas, np.ones(n, dtype=float)))
        return n

    def update(self, gravity: float, color: str):
        """
        Runs one simulation tick and drops every particle whose life reached zero.

        Gravity and color are read fresh each call so parameter changes show up
        on the very next tick.
        """
        self.base_rgb = hex_to_rgb(color)
        if len(self) == 0:
            return

        _step_particles_jit(
            self.positions,
            self.velocities,
            self.lives,
            self.max_lives,
            self.alphas,
            float(gravity) * constants.GRAVITY_DAMPING,
            constants.DRAG,
            float(constants.LIFE_DECREMENT),
        )

        alive = self.lives > 0
        if not alive.all():
            self.positions = self.positions[alive]
            self.velocities = self.velocities[alive]
            self.lives = self.lives[alive]
            self.max_lives = self.max_lives[alive]
            self.sizes = self.sizes[alive]
            self.alphas = self.alphas[alive]

