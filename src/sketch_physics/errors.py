# MIT License (see LICENSE)
"""
Error types.

Only construction can fail: the per-frame math is total, so nothing in an
`update()` or `step()` call raises.
"""
from __future__ import annotations


class InvalidParameter(ValueError):
    """A constructor argument is outside its valid range (e.g. mass <= 0)."""


def require_positive(name: str, value: float) -> float:
    """Return value, or raise InvalidParameter when it is not > 0."""
    if not value > 0:
        raise InvalidParameter(f"{name} must be positive, got {value}")
    return value


def require_unit_interval(name: str, value: float) -> float:
    """Return value, or raise InvalidParameter when it is outside (0, 1]."""
    if not 0.0 < value <= 1.0:
        raise InvalidParameter(f"{name} must be in (0, 1], got {value}")
    return value
