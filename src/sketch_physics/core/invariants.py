# MIT License (see LICENSE)
"""
Utilities for calculating energy and momentum of sketch entities.

Used for verifying integrator behaviour: with damping < 1 the energy of a
body or pendulum must never grow from one frame to the next.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Iterable

import numpy as np

if TYPE_CHECKING:
    from ..oscillators import Pendulum
    from ..types import KinematicBody


def kinetic_energy(bodies: Iterable["KinematicBody"]) -> float:
    """
    Total kinetic energy T = Σ ½ m v².
    """
    ke = 0.0
    for b in bodies:
        ke += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
    return ke


def linear_momentum(bodies: Iterable["KinematicBody"]) -> np.ndarray:
    """
    Total linear momentum P = Σ m v.
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity
    return p


def pendulum_energy(pendulum: "Pendulum") -> float:
    """
    Mechanical energy per unit mass of a pendulum bob.

    E = ½ (L ω)² + g L (1 - cos θ)

    Zero at the downward rest position.
    """
    L = pendulum.arm_length
    v = L * pendulum.angular_velocity
    return 0.5 * v * v + pendulum.gravity * L * (1.0 - float(np.cos(pendulum.angle)))
