# MIT License (see LICENSE)
"""
Steering behaviours for autonomous agents ("organisms").

A Vehicle wraps a KinematicBody and turns a desired velocity into a
steering force:

    steer = limit(desired - velocity, max_force)

Behaviours:
- seek: head for a target, slowing down inside ARRIVAL_RADIUS.
- flee: head directly away from a target at full speed.
- wander: seek a jittered point on a circle projected ahead of the agent.
- avoid_boundaries: turn back inward when close to a world edge.

Wandering is the only stochastic behaviour; its random source is the
injected numpy Generator so runs are reproducible with a fixed seed.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import ARRIVAL_RADIUS, MAX_FORCE, MAX_SPEED, WANDER_DISTANCE
from .errors import require_positive
from .types import KinematicBody
from .util import f64, from_angle, heading, limit, make_rng, norm, remap, set_mag, unit


@dataclass
class Vehicle:
    """
    An agent steering a kinematic body.

    Attributes:
        body: The body being steered (owned by the vehicle).
        max_speed: Cap on desired speed, must be > 0.
        max_force: Cap on steering force magnitude, must be > 0.
        rng: Random source for wander.
        combine_axes: When True, a corner violation in avoid_boundaries
                      corrects both axes at once. When False the vertical
                      correction replaces the horizontal one.
        wander_target: Point chosen by the most recent wander() call.
    """
    body: KinematicBody = field(default_factory=KinematicBody)
    max_speed: float = MAX_SPEED
    max_force: float = MAX_FORCE
    rng: np.random.Generator = field(default_factory=make_rng)
    combine_axes: bool = True
    wander_target: np.ndarray | None = None

    def __post_init__(self) -> None:
        require_positive("Max speed", self.max_speed)
        require_positive("Max force", self.max_force)

    @property
    def position(self) -> np.ndarray:
        return self.body.position

    @property
    def velocity(self) -> np.ndarray:
        return self.body.velocity

    def steer_towards(self, desired: np.ndarray) -> np.ndarray:
        """
        Apply and return the bounded force turning velocity into desired.
        """
        steer = limit(desired - self.body.velocity, self.max_force)
        self.body.apply_force(steer)
        return steer

    def seek(self, target: np.ndarray | tuple[float, float]) -> np.ndarray:
        """
        Steer toward target with arrival.

        Desired speed ramps linearly from 0 at the target to max_speed at
        ARRIVAL_RADIUS, and stays at max_speed beyond it.

        Returns:
            The applied steering force.
        """
        desired = f64(target) - self.body.position
        distance = norm(desired)
        if distance < ARRIVAL_RADIUS:
            speed = remap(distance, 0.0, ARRIVAL_RADIUS, 0.0, self.max_speed)
        else:
            speed = self.max_speed
        return self.steer_towards(set_mag(desired, speed))

    def flee(self, target: np.ndarray | tuple[float, float]) -> np.ndarray:
        """Steer directly away from target at full speed."""
        desired = set_mag(self.body.position - f64(target), self.max_speed)
        return self.steer_towards(desired)

    def wander(self, radius: float) -> np.ndarray:
        """
        Seek a random point on a circle projected ahead of the agent.

        The circle is centred WANDER_DISTANCE ahead along the current
        heading; the point on it is within ±90° of that heading. A body at
        rest has heading 0 and projects nothing ahead.

        Returns:
            The chosen wander target.
        """
        center = self.body.position + unit(self.body.velocity) * WANDER_DISTANCE
        theta = heading(self.body.velocity) + float(self.rng.uniform(-np.pi / 2, np.pi / 2))
        target = center + from_angle(theta, radius)
        self.wander_target = target
        self.seek(target)
        return target

    def avoid_boundaries(self, offset: float, width: float, height: float) -> np.ndarray | None:
        """
        Steer back inside the world when within offset of any edge.

        Returns:
            The applied steering force, or None when no edge is violated.
        """
        x, y = self.body.position
        vx, vy = self.body.velocity

        desired = None
        if x < offset:
            desired = np.array([self.max_speed, vy], dtype=np.float64)
        elif x > width - offset:
            desired = np.array([-self.max_speed, vy], dtype=np.float64)

        vertical = None
        if y < offset:
            vertical = self.max_speed
        elif y > height - offset:
            vertical = -self.max_speed

        if vertical is not None:
            if desired is not None and self.combine_axes:
                desired[1] = vertical
            else:
                desired = np.array([vx, vertical], dtype=np.float64)

        if desired is None:
            return None
        return self.steer_towards(set_mag(desired, self.max_speed))

    def update(self) -> None:
        self.body.update()
