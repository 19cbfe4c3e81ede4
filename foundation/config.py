"""Foundation design parameters: lenient parsing, clamping, immutable updates.

A FoundationConfig is a snapshot. Updates return a new snapshot with the
changed value already clamped, so a stored value is always in range.
"""
import math, re
from typing import Mapping, NamedTuple

from foundation.constants import PARAM_LIMITS, DEFAULTS


class ConfigError(KeyError):
    """Raised for a parameter name that is not part of the configuration."""


class FoundationConfig(NamedTuple):
    """Seven design parameters, all in mm."""
    length: float
    width: float
    depth: float
    wall_thickness: float
    rebar_spacing: float
    rebar_diameter: float
    cover_concrete: float


def default_config() -> FoundationConfig:
    return FoundationConfig(**DEFAULTS)


# Longest leading decimal literal, like a browser's parseFloat
_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def parse_number(value) -> float:
    """Parse user input leniently. Anything unparseable becomes 0.0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, (int, float)):
        v = float(value)
    else:
        m = _NUMBER_PREFIX.match(str(value))
        if not m:
            return 0.0
        v = float(m.group(1).replace("Infinity", "inf"))
    return 0.0 if math.isnan(v) else v


def clamp_param(key: str, value: float) -> float:
    """Clamp value into the inclusive range of parameter *key*."""
    try:
        lo, hi = PARAM_LIMITS[key]
    except KeyError:
        raise ConfigError(f"Unknown parameter: {key!r}") from None
    return max(lo, min(hi, value))


def update_config(config: FoundationConfig, key: str, value) -> FoundationConfig:
    """Return a copy of *config* with *key* set to the parsed, clamped value."""
    return config._replace(**{key: clamp_param(key, parse_number(value))})


def apply_updates(config: FoundationConfig, updates: Mapping[str, object]) -> FoundationConfig:
    """Apply update_config for each key in *updates*, in order."""
    for key, value in updates.items():
        config = update_config(config, key, value)
    return config
