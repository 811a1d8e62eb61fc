# MIT License (see LICENSE)
"""
The sketch container and its frame loop.

The Sketch plays the role of the animation loop's "draw" callback minus
the drawing: one call to step() advances every entity by exactly one
frame, strictly in order, with no overlapping updates.

Frame order:
    1. Movers: global gravity, spring and repeller forces, then update.
    2. Vehicles: wander + boundary avoidance, then update.
    3. Emitters: repellers push particles, emitters step, empty
       (dead) emitters are dropped.
    4. Pendulums and oscillators update.
    5. The rigid-body world, if any, steps; released shapes are dropped.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging

import numpy as np

from .core.forces import Repeller, Spring, apply_gravity
from .oscillators import Oscillator, Pendulum
from .particles import Emitter
from .steering import Vehicle
from .types import KinematicBody
from .util import f64
from .world import Ragdoll, RigidShape, World

logger = logging.getLogger(__name__)


@dataclass
class Sketch:
    """
    A canvas-sized simulation.

    Attributes:
        width, height: World size in pixels, used for boundary avoidance.
        gravity: Acceleration applied to movers every frame (mass-scaled).
        wander_radius: Radius passed to Vehicle.wander.
        boundary_offset: Distance from an edge that triggers avoidance.
        world: Optional rigid-body world stepped once per frame.
        shapes: Rigid shapes and ragdolls living in world, kept for display.
                Released ones are dropped at the end of each step.
        frame: Number of completed frames.
    """
    width: float = 640.0
    height: float = 360.0
    gravity: tuple[float, float] = (0.0, 0.0)
    wander_radius: float = 25.0
    boundary_offset: float = 25.0
    world: World | None = None

    movers: list[KinematicBody] = field(default_factory=list)
    vehicles: list[Vehicle] = field(default_factory=list)
    emitters: list[Emitter] = field(default_factory=list)
    pendulums: list[Pendulum] = field(default_factory=list)
    oscillators: list[Oscillator] = field(default_factory=list)
    springs: list[Spring] = field(default_factory=list)
    repellers: list[Repeller] = field(default_factory=list)
    shapes: list[RigidShape | Ragdoll] = field(default_factory=list)
    frame: int = 0

    def __post_init__(self) -> None:
        self._g = f64(self.gravity)

    def add(self, entity) -> None:
        """
        File an entity under the right list.

        Raises:
            TypeError: For unsupported entity types.
            ValueError: For a rigid shape from another world.
        """
        if isinstance(entity, Vehicle):
            self.vehicles.append(entity)
        elif isinstance(entity, KinematicBody):
            self.movers.append(entity)
        elif isinstance(entity, Emitter):
            self.emitters.append(entity)
        elif isinstance(entity, Pendulum):
            self.pendulums.append(entity)
        elif isinstance(entity, Oscillator):
            self.oscillators.append(entity)
        elif isinstance(entity, Spring):
            self.springs.append(entity)
        elif isinstance(entity, Repeller):
            self.repellers.append(entity)
        elif isinstance(entity, (RigidShape, Ragdoll)):
            if entity.world is not self.world:
                raise ValueError("Rigid shape belongs to a different world")
            self.shapes.append(entity)
        else:
            raise TypeError(f"Unsupported entity type: {type(entity)}")

    def _step_movers(self) -> None:
        apply_g = bool(np.any(self._g))
        for m in self.movers:
            if apply_g:
                apply_gravity(m, self._g)
            for s in self.springs:
                s.connect(m)
            for r in self.repellers:
                m.apply_force(r.force_on(m))
            m.update()

    def _step_vehicles(self) -> None:
        for v in self.vehicles:
            v.wander(self.wander_radius)
            v.avoid_boundaries(self.boundary_offset, self.width, self.height)
            v.update()

    def _step_emitters(self) -> None:
        for e in self.emitters:
            for r in self.repellers:
                e.apply_repeller(r)
            e.step()
        alive = [e for e in self.emitters if not e.is_dead()]
        if len(alive) != len(self.emitters):
            logger.debug("Dropped %d finished emitter(s) at frame %d",
                         len(self.emitters) - len(alive), self.frame)
        self.emitters = alive

    def step(self) -> None:
        """Advance the whole sketch by one frame."""
        self._step_movers()
        self._step_vehicles()
        self._step_emitters()
        for p in self.pendulums:
            p.update()
        for o in self.oscillators:
            o.update()
        if self.world is not None:
            self.world.step()
            self.shapes = [s for s in self.shapes if not s.released]
        self.frame += 1
