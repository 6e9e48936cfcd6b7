"""
Small helpers: random numbers, default values, circular indices and
property copying, plus the package message function.
"""

import logging
import math
import random
from typing import Any, Optional

logger = logging.getLogger("coordmath")


def random_number(low: float, high: float) -> float:
    """Uniform random float in [low, high)."""
    return random.random() * (high - low) + low


def random_int(low: int, high: int) -> int:
    """Random integer in [low, high], both ends inclusive."""
    return math.floor(random.random() * (high - low + 1) + low)


def random_boolean() -> bool:
    return random_int(0, 1) == 1


def seeded_random_int(low: int, high: int, seed: int) -> int:
    """
    Deterministic integer in [low, high] derived from seed.

    Uses the linear congruential step (seed * 9301 + 49297) % 233280.
    """
    value = ((seed * 9301 + 49297) % 233280) / 233280
    return math.floor(value * (high - low + 1) + low)


def value_or_default(value: Any, default: Any) -> Any:
    """Return value, or default when value is None."""
    if value is None:
        return default
    return value


def prev_index(index: int, length: int) -> int:
    """Circular previous index for a sequence of the given length."""
    return index - 1 if index > 0 else length - 1


def next_index(index: int, length: int) -> int:
    """Circular next index for a sequence of the given length."""
    return index + 1 if index < length - 1 else 0


def _properties(obj: Any) -> dict:
    if isinstance(obj, dict):
        return obj
    return vars(obj)


def copy_object_properties(source: Any, target: Any, overwrite: bool) -> None:
    """
    Copy properties (dict keys or instance attributes) from source to target.

    Properties already set to a non-None value on target are kept unless
    overwrite is True. Nothing happens if either side is None.
    """
    if source is None or target is None:
        return

    target_props = _properties(target)
    for name, value in _properties(source).items():
        if overwrite or target_props.get(name) is None:
            if isinstance(target, dict):
                target[name] = value
            else:
                setattr(target, name, value)


def get_object_property(obj: Any, name: str, default: Optional[Any] = None) -> Any:
    """Return obj's property (dict key or attribute), or default if missing/None."""
    if obj is None:
        return default

    if isinstance(obj, dict):
        value = obj.get(name)
    else:
        value = getattr(obj, name, None)

    return default if value is None else value


def message(text: Any) -> None:
    """Write a package message to the log."""
    logger.info("coordmath: %s", text)
