# config.py

"""
Configuration loading and the effect parameter set.

The parameter set is the flat structure the control layer edits and the
core reads every tick. The core never validates it: out-of-range values
simply produce a different (still harmless) picture.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict

import constants

logger = logging.getLogger(constants.LOGGER_NAME)

# External (camelCase) parameter names mapped to attribute names.
_EXTERNAL_NAMES = {
    "particleCount": "particle_count",
    "trailLength": "trail_length",
    "effectMode": "effect_mode",
    "enableTrail": "enable_trail",
    "enableGlow": "enable_glow",
    "enableRipples": "enable_ripples",
}


@dataclass
class EffectParameters:
    color: str = "#00BFFF"
    intensity: float = 6
    particle_count: int = 3
    trail_length: float = 12
    gravity: float = 0.3
    size: float = 5
    effect_mode: str = constants.MODE_CONTINUOUS
    enable_trail: bool = True
    enable_glow: bool = True
    enable_ripples: bool = True

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "EffectParameters":
        """
        Builds a parameter set from a mapping that may use either the
        external camelCase names or the attribute names. Unknown keys are
        ignored with a warning; missing keys keep their defaults.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = _EXTERNAL_NAMES.get(key, key)
            if name in known:
                kwargs[name] = value
            else:
                logger.warning(f"Ignoring unknown effect parameter '{key}'.")
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def copy(self) -> "EffectParameters":
        return replace(self)

    def reset_to(self, defaults: "EffectParameters"):
        """Overwrites every field in place with the values of `defaults`."""
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))


def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logger.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r') as f:
            config = json.load(f)
        logger.info("Configuration loaded successfully.")
        return config
    except FileNotFoundError:
        logger.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logger.error(f"Error decoding JSON from {path}.")
        raise
