# MIT License (see LICENSE)
"""
Per-frame integrators.

The sketches advance in whole frames (dt = 1), so integration is the
semi-implicit (symplectic) Euler scheme: velocity is updated first and the
new velocity moves the position.

    v ← (v + a) · damping
    x ← x + v

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..oscillators import Pendulum
    from ..types import KinematicBody


def euler_step(body: "KinematicBody") -> None:
    """
    Advance a body by one frame and clear its force accumulator.

    Args:
        body: Body to integrate (modified in-place).

    Note:
        Damping is applied after the acceleration is added, so a single
        force F on mass M changes velocity by exactly F/M before attenuation.
    """
    body.velocity += body.acceleration
    body.velocity *= body.damping
    body.position += body.velocity
    body.acceleration[:] = 0.0


def angular_euler_step(pendulum: "Pendulum", angular_acceleration: float) -> None:
    """
    Advance a 1-DOF angular state by one frame.

    The pendulum's damping factor is applied to the angular velocity, then
    itself decays geometrically so energy keeps leaking out over time.
    """
    pendulum.angular_acceleration = angular_acceleration
    pendulum.angular_velocity += angular_acceleration
    pendulum.angular_velocity *= pendulum.damping
    pendulum.damping *= pendulum.damping_decay
    pendulum.angle += pendulum.angular_velocity
