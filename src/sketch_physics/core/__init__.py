# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Force generators: Spring, Repeller, gravity, friction, drag, attraction.
    - Integrators: per-frame semi-implicit Euler for bodies and pendulums.
    - Invariants: energy and momentum bookkeeping for tests.

Typical usage:
    from sketch_physics.core import Spring, apply_gravity

    spring = Spring(anchor=(200, 0), rest_length=100)
    spring.connect(bob)
    apply_gravity(bob, (0, 0.1))
    bob.update()
"""
from .forces import (
    Spring,
    Repeller,
    apply_gravity,
    apply_friction,
    apply_drag,
    attraction,
)
from .integrators import euler_step, angular_euler_step
from .invariants import kinetic_energy, linear_momentum, pendulum_energy

__all__ = [
    # Forces
    "Spring",
    "Repeller",
    "apply_gravity",
    "apply_friction",
    "apply_drag",
    "attraction",
    # Integrators
    "euler_step",
    "angular_euler_step",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "pendulum_energy",
]
