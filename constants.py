# constants.py

"""
Application Constants

This module defines the static tuning values for the pointer effect.
These are not expected to change between runs; the visual feel of the
effect depends on them, so they are kept here as named values instead of
being re-derived at the call sites.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Window defaults (used when config.json does not provide a window section)
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate
FPS = 60  # Frames per second

# Colors (RGB)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

# Window Title
TITLE = "Pointer Particles"

# --- Particle Physics ---
MAX_PARTICLES = 300      # Hard cap on concurrently live particles.
MAX_LIFE = 255           # Starting life of every particle.
LIFE_DECREMENT = 2       # Life lost per tick (~127 tick lifespan).
GRAVITY_DAMPING = 0.1    # Scales the user-facing gravity into per-tick acceleration.
DRAG = 0.995             # Per-tick velocity multiplier (gentle air resistance).

# Particle spawn ranges. Speed is uniform in [MIN_SPEED, intensity + MIN_SPEED),
# radius is uniform in [MIN_SIZE, size + MIN_SIZE).
MIN_SPEED = 1.0          # Units per tick
MIN_SIZE = 2.0           # Pixels
CLICK_BURST_MULTIPLIER = 3

# --- Trail ---
TRAIL_TIME_UNIT_MS = 100 # trail_length * TRAIL_TIME_UNIT_MS = lifetime of a trail point.
TRAIL_MAX_ALPHA = 0.8    # Alpha of the newest segment.
TRAIL_MAX_WIDTH = 3.0    # Pixels, width of the newest segment.

# --- Visual Effects ---
# Alpha of the black layer laid over the previous frame (afterimage fade).
FADE_OVERLAY_ALPHA = 0.08

# Bloom effect settings for the glow pass.
BLOOM_RADIUS = 10        # Downscale factor of the blur. Larger is more diffuse.
BLOOM_INTENSITY = 180    # The brightness of the glow (0-255).

# --- Ripples ---
RIPPLE_COUNT = 3
RIPPLE_SPACING = 30      # Pixels between consecutive rings.
RIPPLE_MAX_RADIUS = 120  # Pixels; rings wrap back to 0 here.
RIPPLE_PHASE_RATE = 0.005  # Phase units per millisecond of wall-clock time.
RIPPLE_SPEED = 3         # Radius growth per phase unit.
RIPPLE_MAX_ALPHA = 0.6
RIPPLE_LINE_WIDTH = 2    # Pixels

# --- Emission Modes ---
MODE_CLICK = "click"
MODE_CONTINUOUS = "continuous"
MODE_DRAG = "drag"
EFFECT_MODES = (MODE_CLICK, MODE_CONTINUOUS, MODE_DRAG)

# Logger name shared by all modules.
LOGGER_NAME = "pointer_fx"
