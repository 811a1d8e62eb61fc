# MIT License (see LICENSE)
"""
sketch_physics - Small frame-stepped physics sketches.

Movers, springs, repellers, pendulums, particle emitters and steering
agents, each advanced one frame at a time with semi-implicit Euler.
Rigid bodies (boxes, polygons, ragdolls) are delegated to pymunk.

Main entry points:
    - KinematicBody, Mover: force-driven point masses.
    - Spring, Repeller: force fields.
    - Vehicle: seek / wander / boundary-avoiding agent.
    - Particle, Emitter: fading particles and their spawner.
    - Pendulum, Oscillator: angular oscillators.
    - World, RigidShape, Ragdoll: pymunk-backed rigid bodies.
    - Sketch: container running one frame of everything per step().

Submodules:
    - core: Force generators, integrators and energy bookkeeping.
    - renderer: Optional drawing adapters.

Example:
    from sketch_physics import KinematicBody, Spring

    bob = KinematicBody(position=(0, 150), mass=2.0, damping=0.98)
    spring = Spring(anchor=(0, 0), rest_length=100, stiffness=0.2)
    for _ in range(60):
        spring.connect(bob)
        bob.update()
"""
import logging

from .errors import InvalidParameter
from .types import KinematicBody, Mover
from .core.forces import Spring, Repeller
from .steering import Vehicle
from .particles import Particle, ParticleKind, Emitter
from .oscillators import Pendulum, Oscillator
from .world import World, RigidShape, Ragdoll
from .scene import Sketch
from .util import make_rng

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidParameter",
    # Bodies
    "KinematicBody",
    "Mover",
    # Forces
    "Spring",
    "Repeller",
    # Agents and systems
    "Vehicle",
    "Particle",
    "ParticleKind",
    "Emitter",
    "Pendulum",
    "Oscillator",
    # Rigid bodies
    "World",
    "RigidShape",
    "Ragdoll",
    # Driver
    "Sketch",
    "make_rng",
]
