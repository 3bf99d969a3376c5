# controls.py

"""
Keyboard bindings that edit the effect parameters.

This is the only place parameters change at runtime. Every binding either
selects an emission mode, flips a toggle, nudges a numeric parameter within
the same range a slider would allow, or resets everything to the defaults.
"""

import logging

import pygame

import constants
from config import EffectParameters

logger = logging.getLogger(constants.LOGGER_NAME)

# Numeric parameter ranges: name -> (minimum, maximum, step)
PARAMETER_RANGES = {
    "intensity": (1, 15, 1),
    "particle_count": (1, 8, 1),
    "gravity": (-3.0, 3.0, 0.1),
    "size": (2, 15, 1),
    "trail_length": (3, 25, 1),
}

MODE_KEYS = {
    pygame.K_1: constants.MODE_CLICK,
    pygame.K_2: constants.MODE_CONTINUOUS,
    pygame.K_3: constants.MODE_DRAG,
}

TOGGLE_KEYS = {
    pygame.K_t: "enable_trail",
    pygame.K_g: "enable_glow",
    pygame.K_r: "enable_ripples",
}

# key -> (parameter, direction)
NUDGE_KEYS = {
    pygame.K_UP: ("intensity", 1),
    pygame.K_DOWN: ("intensity", -1),
    pygame.K_RIGHTBRACKET: ("particle_count", 1),
    pygame.K_LEFTBRACKET: ("particle_count", -1),
    pygame.K_EQUALS: ("gravity", 1),
    pygame.K_MINUS: ("gravity", -1),
    pygame.K_PERIOD: ("size", 1),
    pygame.K_COMMA: ("size", -1),
    pygame.K_PAGEUP: ("trail_length", 1),
    pygame.K_PAGEDOWN: ("trail_length", -1),
}

RESET_KEY = pygame.K_BACKSPACE


def nudge(params: EffectParameters, name: str, direction: int):
    """Steps a numeric parameter up or down, clamped to its range."""
    minimum, maximum, step = PARAMETER_RANGES[name]
    value = getattr(params, name) + direction * step
    value = min(max(value, minimum), maximum)
    if isinstance(step, float):
        # Keep 0.1 steps from accumulating float noise (0.30000000000000004).
        value = round(value, 1)
    setattr(params, name, value)


def apply_key(params: EffectParameters, defaults: EffectParameters, key: int) -> bool:
    """
    Applies the binding for `key` to `params` in place.

    Returns True if a binding matched, False for unbound keys.
    """
    if key in MODE_KEYS:
        params.effect_mode = MODE_KEYS[key]
        logger.info(f"Effect mode set to '{params.effect_mode}'.")
    elif key in TOGGLE_KEYS:
        name = TOGGLE_KEYS[key]
        setattr(params, name, not getattr(params, name))
        logger.info(f"{name} = {getattr(params, name)}")
    elif key in NUDGE_KEYS:
        name, direction = NUDGE_KEYS[key]
        nudge(params, name, direction)
        logger.info(f"{name} = {getattr(params, name)}")
    elif key == RESET_KEY:
        params.reset_to(defaults)
        logger.info("Effect parameters reset to defaults.")
    else:
        return False
    return True
