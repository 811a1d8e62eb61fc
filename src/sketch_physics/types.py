# MIT License (see LICENSE)
"""
Core type definitions for the sketches.

Defines the fundamental simulation entity:
- KinematicBody: position, velocity and a per-frame acceleration accumulator.
- Mover: a KinematicBody that also spins in response to its acceleration.

Forces are integrated with semi-implicit Euler, one frame per update:
  - a = ΣF / m          (accumulated by apply_force)
  - v ← (v + a) · damping
  - x ← x + v
  - a ← 0
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import MOVER_MAX_SPIN, MOVER_SPIN_FACTOR
from .core.integrators import euler_step
from .errors import require_positive, require_unit_interval
from .util import constrain, f64, heading


@dataclass
class KinematicBody:
    """
    A point mass driven by forces.

    Attributes:
        position: Location [x, y] in pixels.
        velocity: Velocity [vx, vy] in pixels per frame.
        acceleration: Force accumulator for the current frame. Zeroed by
                      every update(); never carries over between frames.
        mass: Mass, must be > 0.
        damping: Multiplicative velocity attenuation per frame, in (0, 1].
                 1.0 means no energy loss.

    Raises:
        InvalidParameter: If mass <= 0 or damping is outside (0, 1].
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    acceleration: np.ndarray | tuple[float, float] = (0.0, 0.0)
    mass: float = 1.0
    damping: float = 1.0

    def __post_init__(self) -> None:
        """Validate parameters and convert vectors to float64 arrays."""
        require_positive("Mass", self.mass)
        require_unit_interval("Damping", self.damping)
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.acceleration = f64(self.acceleration)

    def apply_force(self, force: np.ndarray | tuple[float, float]) -> None:
        """
        Accumulate a force for this frame (Newton's second law, a = F/m).

        Args:
            force: Force vector [Fx, Fy]. Not stored; only F/m is kept.
        """
        self.acceleration += f64(force) / self.mass

    def update(self) -> None:
        """Advance exactly one frame and clear the force accumulator."""
        euler_step(self)

    @property
    def speed(self) -> float:
        return float(np.hypot(self.velocity[0], self.velocity[1]))

    @property
    def heading(self) -> float:
        """Direction of travel in radians (0.0 when at rest)."""
        return heading(self.velocity)


@dataclass
class Mover(KinematicBody):
    """
    A body that also rotates, spun by the horizontal part of its acceleration.

    There is no torque or inertia model: angular acceleration is simply
    acceleration.x / MOVER_SPIN_FACTOR, and angular velocity is clamped to
    ±max_spin so the mover never spins out of control.

    Attributes:
        angle: Orientation in radians.
        angular_velocity: Radians per frame.
        angular_acceleration: Last frame's angular acceleration.
        max_spin: Bound on |angular_velocity|.
    """
    angle: float = 0.0
    angular_velocity: float = 0.0
    angular_acceleration: float = 0.0
    max_spin: float = MOVER_MAX_SPIN

    def update(self) -> None:
        # Read the accumulator before the linear step clears it.
        self.angular_acceleration = float(self.acceleration[0]) / MOVER_SPIN_FACTOR
        super().update()
        self.angular_velocity = constrain(
            self.angular_velocity + self.angular_acceleration,
            -self.max_spin,
            self.max_spin,
        )
        self.angle += self.angular_velocity

