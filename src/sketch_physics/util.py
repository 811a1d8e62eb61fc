# MIT License (see LICENSE)
"""
Vector helpers and small numeric utilities for the sketches.

Every 2D vector in the package is a float64 numpy array of shape (2,).
All normalization and heading computations go through this module so a
zero-length vector yields the zero vector (or the zero angle) instead of
propagating NaN into the simulation state.

Also provides the two drawing-library style helpers used inside the
simulation math: `constrain` (clamp) and `remap` (linear range mapping).
"""
from __future__ import annotations
import os

import numpy as np

EPS: float = 1e-12


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Always copies, so callers can pass tuples, lists or arrays shared with
    another body without aliasing its state.
    """
    return np.array(x, dtype=np.float64)


def zeros() -> np.ndarray:
    """A fresh zero vector."""
    return np.zeros(2, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.sqrt(norm2(v)))


def unit(v: np.ndarray, eps: float = EPS) -> np.ndarray:
    """
    Return a unit (normalized) vector in the same direction as v.

    Returns zero vector if |v| < eps to avoid division by zero.
    """
    n = norm(v)
    if n < eps:
        return zeros()
    return v / n


def set_mag(v: np.ndarray, magnitude: float) -> np.ndarray:
    """Return v rescaled to the given magnitude (zero vector stays zero)."""
    return unit(v) * magnitude


def limit(v: np.ndarray, max_magnitude: float) -> np.ndarray:
    """Return v clamped to at most max_magnitude, direction preserved."""
    n2 = norm2(v)
    if n2 > max_magnitude * max_magnitude:
        return set_mag(v, max_magnitude)
    return f64(v)


def heading(v: np.ndarray, eps: float = EPS) -> float:
    """
    Angle of v in radians, measured from the +x axis.

    Returns 0.0 for a zero-length vector.
    """
    if norm(v) < eps:
        return 0.0
    return float(np.arctan2(v[1], v[0]))


def from_angle(theta: float, length: float = 1.0) -> np.ndarray:
    """Vector of the given length pointing along angle theta."""
    return np.array([np.cos(theta) * length, np.sin(theta) * length], dtype=np.float64)


def constrain(value: float, low: float, high: float) -> float:
    """Clamp a scalar into [low, high]."""
    return max(low, min(high, value))


def remap(value: float, start1: float, stop1: float, start2: float, stop2: float) -> float:
    """
    Linearly re-map value from range [start1, stop1] into [start2, stop2].

    The result is not clamped, matching the drawing library's `map`.
    """
    return start2 + (stop2 - start2) * ((value - start1) / (stop1 - start1))


def make_rng(seed: int | None = None) -> np.random.Generator:
    """
    Build the random source injected into wandering vehicles and emitters.

    When no seed is given, the SKETCH_PHYSICS_SEED environment variable is
    consulted so whole sketches can be made reproducible without code edits.
    """
    if seed is None:
        env_seed = os.environ.get("SKETCH_PHYSICS_SEED")
        if env_seed:
            seed = int(env_seed)
    return np.random.default_rng(seed)
