# MIT License (see LICENSE)
"""
Angular oscillators.

- Pendulum: a bob on a rigid arm swinging under gravity-like torque, with a
  damping factor that itself decays every frame so the swing slowly dies out.
- Oscillator: an undriven per-axis sinusoid (angle advances at a constant
  rate, displacement is sin(angle) · amplitude).

Pendulum equation (no small-angle approximation):
    α = -g · sin(θ) / L
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from .constants import PENDULUM_DAMPING, PENDULUM_DAMPING_DECAY, PENDULUM_GRAVITY
from .core.integrators import angular_euler_step
from .errors import require_positive, require_unit_interval
from .util import f64


@dataclass
class Pendulum:
    """
    A single rigid pendulum.

    θ = 0 is straight down from the anchor; positive θ swings toward +x.
    There is no terminal state: the pendulum runs forever, approaching the
    downward rest position as energy leaks out.

    Attributes:
        anchor: Pivot point [x, y] (y grows downward, as on screen).
        arm_length: Length L of the arm, must be > 0.
        angle: θ in radians.
        angular_velocity: ω in radians per frame.
        angular_acceleration: α from the most recent update.
        gravity: Gravity-like constant g.
        damping: Per-frame multiplier on ω, in (0, 1]. Decays by
                 damping_decay after every frame, so it never increases.
        damping_decay: Geometric decay applied to damping, in (0, 1].
    """
    anchor: np.ndarray | tuple[float, float]
    arm_length: float
    angle: float = np.pi / 4
    angular_velocity: float = 0.0
    angular_acceleration: float = 0.0
    gravity: float = PENDULUM_GRAVITY
    damping: float = PENDULUM_DAMPING
    damping_decay: float = PENDULUM_DAMPING_DECAY

    def __post_init__(self) -> None:
        require_positive("Arm length", self.arm_length)
        require_unit_interval("Damping", self.damping)
        require_unit_interval("Damping decay", self.damping_decay)
        self.anchor = f64(self.anchor)

    def update(self) -> None:
        """Advance one frame."""
        alpha = -self.gravity * float(np.sin(self.angle)) / self.arm_length
        angular_euler_step(self, alpha)

    @property
    def bob_position(self) -> np.ndarray:
        """World position of the bob."""
        offset = np.array([np.sin(self.angle), np.cos(self.angle)], dtype=np.float64)
        return self.anchor + self.arm_length * offset


@dataclass
class Oscillator:
    """
    Two independent sinusoids, one per axis.

    Attributes:
        amplitude: Peak displacement [ax, ay].
        angular_velocity: Phase advance per frame [wx, wy].
        angle: Current phase [θx, θy].
    """
    amplitude: np.ndarray | tuple[float, float]
    angular_velocity: np.ndarray | tuple[float, float]
    angle: np.ndarray | tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.amplitude = f64(self.amplitude)
        self.angular_velocity = f64(self.angular_velocity)
        self.angle = f64(self.angle)

    def update(self) -> None:
        self.angle += self.angular_velocity

    @property
    def offset(self) -> np.ndarray:
        return np.sin(self.angle) * self.amplitude
