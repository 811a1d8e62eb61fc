# MIT License (see LICENSE)
"""
Force generators for the sketches.

Two kinds of generators live here:

- Field objects (Spring, Repeller) that compute a force from a body's
  position. `force_on` is pure; the caller decides whether to apply it.
- Helper functions (apply_gravity, apply_friction, apply_drag) that
  accumulate a force directly on the body, in the same spirit as the
  engine's apply_* functions.

Key concepts:
- Forces are never stored; they go straight into body.acceleration via
  body.apply_force (which divides by mass).
- Every direction is computed with util.unit, so coincident points produce
  a zero force rather than NaN.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from ..constants import (
    ATTRACTOR_MAX_DISTANCE,
    ATTRACTOR_MIN_DISTANCE,
    REPELLER_MAX_DISTANCE,
    REPELLER_MIN_DISTANCE,
)
from ..errors import InvalidParameter, require_positive
from ..util import constrain, f64, norm, unit, zeros

if TYPE_CHECKING:
    from ..types import KinematicBody


# =============================================================================
# Field objects
# =============================================================================

@dataclass
class Spring:
    """
    Hookean spring anchored at a fixed point.

    Implements F = k · (|d| - L) · d̂ with d = anchor - position.
    A stretched spring pulls the body toward the anchor; a compressed one
    pushes it away.

    Attributes:
        anchor: Fixed end of the spring [x, y].
        rest_length: Natural length L, must be > 0.
        stiffness: Spring constant k.

    Raises:
        InvalidParameter: If rest_length <= 0.
    """
    anchor: np.ndarray | tuple[float, float]
    rest_length: float
    stiffness: float = 0.2

    def __post_init__(self) -> None:
        require_positive("Rest length", self.rest_length)
        self.anchor = f64(self.anchor)

    def force_on(self, body: "KinematicBody") -> np.ndarray:
        """
        Restoring force on body. Zero vector when the body sits on the anchor.
        """
        d = self.anchor - body.position
        distance = norm(d)
        if distance == 0.0:
            return zeros()
        stretch = distance - self.rest_length
        return (self.stiffness * stretch) * (d / distance)

    def connect(self, body: "KinematicBody") -> np.ndarray:
        """Apply the spring force to body and return it."""
        f = self.force_on(body)
        body.apply_force(f)
        return f

    def constrain_length(self, body: "KinematicBody", min_length: float, max_length: float) -> bool:
        """
        Keep body within [min_length, max_length] of the anchor.

        A clamped body is moved onto the limit and its velocity zeroed.
        A body sitting exactly on the anchor has no direction to be pushed
        along and is left alone.

        Returns:
            True if the body was clamped.
        """
        d = body.position - self.anchor
        distance = norm(d)
        if distance == 0.0:
            return False
        if distance < min_length:
            target = min_length
        elif distance > max_length:
            target = max_length
        else:
            return False
        body.position = self.anchor + (d / distance) * target
        body.velocity[:] = 0.0
        return True


@dataclass
class Repeller:
    """
    Inverse-square repulsion field.

    Implements strength = -power · radius / r², with r clamped into
    [REPELLER_MIN_DISTANCE, REPELLER_MAX_DISTANCE] so the force neither
    blows up at the centre nor fades to nothing at long range.

    The direction is d̂ with d = position - body.position (toward the
    repeller); the negative strength flips it, so the force points away.

    Attributes:
        position: Centre of the field [x, y].
        power: Repulsion strength, must be >= 0.
        radius: Effective radius, must be > 0.
    """
    position: np.ndarray | tuple[float, float]
    power: float = 5.0
    radius: float = 132.0

    def __post_init__(self) -> None:
        if self.power < 0:
            raise InvalidParameter(f"Power must be non-negative, got {self.power}")
        require_positive("Radius", self.radius)
        self.position = f64(self.position)

    def force_on(self, body: "KinematicBody") -> np.ndarray:
        d = self.position - body.position
        distance = constrain(norm(d), REPELLER_MIN_DISTANCE, REPELLER_MAX_DISTANCE)
        strength = -self.power * self.radius / (distance * distance)
        return strength * unit(d)


# =============================================================================
# Accumulating helpers
# =============================================================================

def apply_gravity(body: "KinematicBody", g: np.ndarray | tuple[float, float]) -> None:
    """
    Apply weight W = m · g.

    Scaling by mass makes every body fall with the same acceleration g.
    """
    body.apply_force(body.mass * f64(g))


def apply_friction(body: "KinematicBody", mu: float) -> None:
    """
    Apply kinetic friction of magnitude mu against the direction of motion.

    No effect on a body at rest.
    """
    if mu != 0.0:
        body.apply_force(-mu * unit(body.velocity))


def apply_drag(body: "KinematicBody", c: float) -> None:
    """
    Apply quadratic drag F = -c · |v|² · v̂ (fluid resistance).

    No effect on a body at rest.
    """
    if c != 0.0:
        speed = norm(body.velocity)
        body.apply_force(-c * speed * speed * unit(body.velocity))


def attraction(
    position: np.ndarray | tuple[float, float],
    mass: float,
    body: "KinematicBody",
    g: float = 1.0,
) -> np.ndarray:
    """
    Gravitational pull of a fixed attractor on body.

    Implements F = G · M · m / r² toward the attractor, with r clamped into
    [ATTRACTOR_MIN_DISTANCE, ATTRACTOR_MAX_DISTANCE].
    """
    d = f64(position) - body.position
    distance = constrain(norm(d), ATTRACTOR_MIN_DISTANCE, ATTRACTOR_MAX_DISTANCE)
    strength = g * mass * body.mass / (distance * distance)
    return strength * unit(d)
