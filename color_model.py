# color_model.py

"""
Hex color parsing for the effect.

The base color arrives as a hex string from the parameter set and is looked
up for every particle on every frame, so the conversion is memoized.
"""

import re
from functools import lru_cache

from constants import WHITE

_HEX_PATTERN = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


@lru_cache(maxsize=64)
def hex_to_rgb(hex_color: str) -> tuple:
    """
    Converts a 6-digit hex color (with or without a leading '#') to an
    (r, g, b) tuple of ints in [0, 255].

    Malformed input returns opaque white instead of raising.
    """
    match = _HEX_PATTERN.match(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        return WHITE
    return tuple(int(channel, 16) for channel in match.groups())


def to_rgba(rgb: tuple, alpha: float) -> tuple:
    """Builds a pygame RGBA tuple from an RGB triple and an alpha ratio."""
    alpha = min(max(alpha, 0.0), 1.0)
    return (rgb[0], rgb[1], rgb[2], int(round(alpha * 255)))
