# MIT License (see LICENSE)
"""
Particles and the emitter that owns them.

A particle is a kinematic body with a fading lifespan:

    Alive (lifespan > 0) --update--> ... --update--> Dead (lifespan <= 0)

Dead is terminal: lifespan only ever decreases.

Particle variants (plain circle, square, spinning confetti) share one record
and are told apart by a ParticleKind tag; renderers dispatch on the tag.

The Emitter spawns one particle per step at its origin until it has held
MAX_PARTICLES at once. From then on it is "dying": it never spawns again,
but keeps ageing and culling until it is empty.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import TYPE_CHECKING, Sequence

import numpy as np

from .constants import (
    EMITTER_GRAVITY,
    LIFESPAN_DECAY,
    MAX_PARTICLES,
    PARTICLE_LIFESPAN,
    PARTICLE_MAX_SPIN,
    PARTICLE_SPIN_SPEED,
    SPAWN_VX_RANGE,
    SPAWN_VY_RANGE,
)
from .errors import InvalidParameter, require_positive
from .types import KinematicBody
from .util import f64, make_rng, remap

if TYPE_CHECKING:
    from .core.forces import Repeller

logger = logging.getLogger(__name__)


class ParticleKind(Enum):
    """Display variant of a particle."""
    CIRCLE = "circle"
    SQUARE = "square"
    CONFETTI = "confetti"


@dataclass
class Particle:
    """
    A short-lived body.

    Attributes:
        body: Kinematic state.
        lifespan: Remaining opacity; the particle is dead once <= 0.
        decay: Amount subtracted from lifespan every update.
        kind: Display variant.
        angle: Orientation in radians, recomputed from speed every update.
    """
    body: KinematicBody = field(default_factory=KinematicBody)
    lifespan: float = PARTICLE_LIFESPAN
    decay: float = LIFESPAN_DECAY
    kind: ParticleKind = ParticleKind.CIRCLE
    angle: float = 0.0

    def __post_init__(self) -> None:
        require_positive("Decay", self.decay)

    @property
    def position(self) -> np.ndarray:
        return self.body.position

    def apply_force(self, force: np.ndarray | tuple[float, float]) -> None:
        self.body.apply_force(force)

    def update(self) -> None:
        """Integrate, derive the spin angle from speed, then age."""
        self.body.update()
        self.angle = remap(self.body.speed, 0.0, PARTICLE_SPIN_SPEED, 0.0, PARTICLE_MAX_SPIN)
        self.lifespan -= self.decay

    def is_dead(self) -> bool:
        return self.lifespan <= 0.0


@dataclass
class Emitter:
    """
    Spawns, ages and culls particles.

    Attributes:
        origin: Spawn point [x, y].
        rng: Random source for spawn velocities.
        max_particles: Population ceiling that switches the emitter to dying.
        lifespan: Initial lifespan of spawned particles.
        gravity: Force applied to every particle each step.
        kinds: Variants handed out to new particles, in rotation.
        particles: Live particles, oldest first.
        dying: Set once the population ceiling has been reached. Never cleared.
    """
    origin: np.ndarray | tuple[float, float]
    rng: np.random.Generator = field(default_factory=make_rng)
    max_particles: int = MAX_PARTICLES
    lifespan: float = PARTICLE_LIFESPAN
    gravity: np.ndarray | tuple[float, float] = EMITTER_GRAVITY
    kinds: Sequence[ParticleKind] = (ParticleKind.CIRCLE,)
    particles: list[Particle] = field(default_factory=list)
    dying: bool = False
    _spawned: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        require_positive("Max particles", self.max_particles)
        require_positive("Lifespan", self.lifespan)
        if not self.kinds:
            raise InvalidParameter("Emitter needs at least one particle kind")
        self.origin = f64(self.origin)
        self.gravity = f64(self.gravity)

    def __len__(self) -> int:
        return len(self.particles)

    def spawn(self) -> Particle:
        """Add one particle at the origin with a random initial velocity."""
        velocity = (
            float(self.rng.uniform(*SPAWN_VX_RANGE)),
            float(self.rng.uniform(*SPAWN_VY_RANGE)),
        )
        kind = self.kinds[self._spawned % len(self.kinds)]
        p = Particle(
            body=KinematicBody(position=self.origin, velocity=velocity),
            lifespan=self.lifespan,
            kind=kind,
        )
        self._spawned += 1
        self.particles.append(p)
        return p

    def apply_force(self, force: np.ndarray | tuple[float, float]) -> None:
        """Push every particle with the same force."""
        for p in self.particles:
            p.apply_force(force)

    def apply_repeller(self, repeller: "Repeller") -> None:
        """Push every particle away from a repeller."""
        for p in self.particles:
            p.apply_force(repeller.force_on(p.body))

    def step(self) -> None:
        """
        Run one frame: maybe spawn, then age everything and drop the dead.

        The ceiling is checked against the population at the start of the
        step, before this step's spawn.
        """
        if not self.dying and len(self.particles) >= self.max_particles:
            self.dying = True
            logger.debug("Emitter at %s reached %d particles, no longer spawning",
                         self.origin.tolist(), len(self.particles))
        if not self.dying:
            self.spawn()

        for p in self.particles:
            p.apply_force(self.gravity)
            p.update()

        had_particles = bool(self.particles)
        self.particles = [p for p in self.particles if not p.is_dead()]
        if had_particles and not self.particles:
            logger.debug("Emitter at %s is empty", self.origin.tolist())

    def is_dead(self) -> bool:
        """True when no particles remain."""
        return not self.particles
