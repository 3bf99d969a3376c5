# particle.py

from color_model import to_rgba


class Particle:
    """
    Represents a single emitted particle.

    The live set is stored by ParticleSystem as NumPy arrays; this class is a
    read-only record of one row of those arrays, used when drawing and when
    inspecting the simulation.
    """
    def __init__(self, x: float, y: float, vx: float, vy: float,
                 life: float, max_life: float, size: float, rgb: tuple,
                 alpha: float = 1.0):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life
        self.max_life = max_life
        self.size = size
        self.rgb = rgb
        # Fade ratio life / max_life, recomputed by the stepper every tick.
        self.alpha = alpha

    @property
    def color(self) -> tuple:
        """RGBA display color built from the base color and the fade ratio."""
        return to_rgba(self.rgb, self.alpha)

    @property
    def position(self) -> tuple:
        return (self.x, self.y)

    def __repr__(self):
        return (f"Particle(pos=({self.x:.1f}, {self.y:.1f}), vel=({self.vx:.2f}, {self.vy:.2f}), "
                f"life={self.life:g}/{self.max_life:g}, size={self.size:.1f})")
