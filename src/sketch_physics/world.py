# MIT License (see LICENSE)
"""
Rigid bodies backed by the pymunk engine.

Collision detection, contact resolution and joints are entirely pymunk's
job; this module only builds bodies, tracks ownership and exposes read-only
state for display.

Ownership model:
- World owns a pymunk.Space and an arena of bodies keyed by integer handle.
- RigidShape and Ragdoll hold handles, never pymunk objects, and must be
  released from the world before being dropped. Used as context managers
  they release on every exit path:

    with RigidShape.box(world, (200, 50), 40, 20) as crate:
        for _ in range(60):
            world.step()
        print(crate.position)
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Sequence

import numpy as np
import pymunk

from .errors import InvalidParameter, require_positive

logger = logging.getLogger(__name__)

Point = tuple[float, float]


def _point(p) -> Point:
    return (float(p[0]), float(p[1]))


@dataclass
class World:
    """
    Arena of pymunk bodies addressed by integer handles.

    Attributes:
        gravity: Gravity vector for the space (y grows downward on screen).
        dt: Default timestep for step().
        space: The underlying pymunk.Space.
    """
    gravity: Point = (0.0, 0.0)
    dt: float = 1 / 60
    space: pymunk.Space = field(default_factory=pymunk.Space)

    def __post_init__(self) -> None:
        self.space.gravity = _point(self.gravity)
        self._bodies: dict[int, pymunk.Body] = {}
        self._next_handle = 1

    def __len__(self) -> int:
        return len(self._bodies)

    def __contains__(self, handle: int) -> bool:
        return handle in self._bodies

    def add(self, body: pymunk.Body, *shapes: pymunk.Shape) -> int:
        """
        Register a body and its shapes.

        Returns:
            The handle for the body.
        """
        handle = self._next_handle
        self._next_handle += 1
        self.space.add(body, *shapes)
        self._bodies[handle] = body
        logger.debug("Added body %d with %d shape(s)", handle, len(shapes))
        return handle

    def get(self, handle: int) -> pymunk.Body:
        """
        Look up a live body.

        Raises:
            KeyError: If the handle is unknown or already released.
        """
        return self._bodies[handle]

    def add_constraint(self, constraint: pymunk.Constraint) -> None:
        self.space.add(constraint)

    def release(self, handle: int) -> bool:
        """
        Remove a body, its shapes and any joints attached to it.

        Returns:
            False if the handle was not live (nothing removed).
        """
        body = self._bodies.pop(handle, None)
        if body is None:
            logger.warning("Release of unknown body handle %d ignored", handle)
            return False
        in_space = set(self.space.constraints)
        joints = [c for c in body.constraints if c in in_space]
        self.space.remove(*joints, *body.shapes, body)
        logger.debug("Released body %d (%d joint(s))", handle, len(joints))
        return True

    def step(self, dt: float | None = None) -> None:
        self.space.step(float(self.dt if dt is None else dt))


class RigidShape:
    """
    Display-side view of a single pymunk body.

    Build with the factory classmethods rather than the constructor.
    Once released, every accessor raises RuntimeError.
    """

    def __init__(self, world: World, handle: int):
        self.world = world
        self.handle: int | None = handle

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_vertices(
        cls,
        world: World,
        position: Point,
        vertices: Sequence[Point],
        mass: float = 1.0,
        friction: float = 0.5,
        elasticity: float = 0.2,
    ) -> "RigidShape":
        """Convex polygon; vertices are relative to position."""
        return cls.compound(world, position, [vertices], mass, friction, elasticity)

    @classmethod
    def box(
        cls,
        world: World,
        position: Point,
        width: float,
        height: float,
        mass: float = 1.0,
        friction: float = 0.5,
        elasticity: float = 0.2,
    ) -> "RigidShape":
        require_positive("Width", width)
        require_positive("Height", height)
        hw, hh = width / 2, height / 2
        verts = [(-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh)]
        return cls.from_vertices(world, position, verts, mass, friction, elasticity)

    @classmethod
    def circle(
        cls,
        world: World,
        position: Point,
        radius: float,
        mass: float = 1.0,
        friction: float = 0.5,
        elasticity: float = 0.2,
    ) -> "RigidShape":
        require_positive("Mass", mass)
        require_positive("Radius", radius)
        body = pymunk.Body(mass, pymunk.moment_for_circle(mass, 0, radius))
        body.position = _point(position)
        shape = pymunk.Circle(body, radius)
        shape.friction = friction
        shape.elasticity = elasticity
        return cls(world, world.add(body, shape))

    @classmethod
    def compound(
        cls,
        world: World,
        position: Point,
        polygons: Sequence[Sequence[Point]],
        mass: float = 1.0,
        friction: float = 0.5,
        elasticity: float = 0.2,
    ) -> "RigidShape":
        """
        Several convex polygons welded into one body.

        Mass is shared out in proportion to polygon area.

        Raises:
            InvalidParameter: For non-positive mass, an empty polygon list,
                              a polygon with fewer than 3 vertices or zero area.
        """
        require_positive("Mass", mass)
        if not polygons:
            raise InvalidParameter("Compound body needs at least one polygon")
        polys = [[_point(v) for v in verts] for verts in polygons]
        areas = []
        for verts in polys:
            if len(verts) < 3:
                raise InvalidParameter(f"Polygon must have at least 3 vertices, got {len(verts)}")
            area = abs(pymunk.area_for_poly(verts))
            if area <= 0:
                raise InvalidParameter("Polygon has zero area")
            areas.append(area)

        total = sum(areas)
        moment = sum(
            pymunk.moment_for_poly(mass * a / total, verts)
            for verts, a in zip(polys, areas)
        )
        body = pymunk.Body(mass, moment)
        body.position = _point(position)
        shapes = []
        for verts in polys:
            shape = pymunk.Poly(body, verts)
            shape.friction = friction
            shape.elasticity = elasticity
            shapes.append(shape)
        return cls(world, world.add(body, *shapes))

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def released(self) -> bool:
        return self.handle is None

    @property
    def body(self) -> pymunk.Body:
        if self.handle is None:
            raise RuntimeError("Shape has been removed from its world")
        return self.world.get(self.handle)

    @property
    def position(self) -> np.ndarray:
        return np.array(tuple(self.body.position), dtype=np.float64)

    @property
    def angle(self) -> float:
        return float(self.body.angle)

    @property
    def vertices(self) -> list[np.ndarray]:
        """World-space outline of every polygon on the body, [N, 2] each."""
        body = self.body
        out = []
        for shape in body.shapes:
            if isinstance(shape, pymunk.Poly):
                pts = [tuple(body.local_to_world(v)) for v in shape.get_vertices()]
                out.append(np.array(pts, dtype=np.float64))
        return out

    def set_velocity(self, velocity: Point) -> None:
        self.body.velocity = _point(velocity)

    def set_angular_velocity(self, omega: float) -> None:
        self.body.angular_velocity = float(omega)

    # ------------------------------------------------------------------
    # Release
    # ------------------------------------------------------------------

    def remove_body(self, world: World) -> None:
        """
        Deregister from world. Calling it again is a no-op.

        Raises:
            ValueError: If world is not the world this shape lives in.
        """
        if world is not self.world:
            raise ValueError("Shape belongs to a different world")
        if self.handle is None:
            return
        world.release(self.handle)
        self.handle = None

    def __enter__(self) -> "RigidShape":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.remove_body(self.world)


class Ragdoll:
    """
    A crude figure: circular head, box torso and two box arms held together
    by pivot joints.

    Attributes:
        head, torso, left_arm, right_arm: The parts.
    """

    def __init__(self, world: World, position: Point, scale: float = 1.0, mass: float = 1.0):
        require_positive("Scale", scale)
        require_positive("Mass", mass)
        self.world = world
        x, y = _point(position)
        s = scale

        self.torso = RigidShape.box(world, (x, y), 20 * s, 40 * s, mass=mass)
        self.head = RigidShape.circle(world, (x, y - 30 * s), 10 * s, mass=0.3 * mass)
        self.left_arm = RigidShape.box(world, (x - 20 * s, y - 10 * s), 20 * s, 6 * s, mass=0.2 * mass)
        self.right_arm = RigidShape.box(world, (x + 20 * s, y - 10 * s), 20 * s, 6 * s, mass=0.2 * mass)

        torso = self.torso.body
        for part, pivot in (
            (self.head, (x, y - 20 * s)),
            (self.left_arm, (x - 10 * s, y - 10 * s)),
            (self.right_arm, (x + 10 * s, y - 10 * s)),
        ):
            joint = pymunk.PivotJoint(torso, part.body, pivot)
            joint.collide_bodies = False
            world.add_constraint(joint)

    @property
    def parts(self) -> list[RigidShape]:
        return [self.torso, self.head, self.left_arm, self.right_arm]

    @property
    def released(self) -> bool:
        return all(p.released for p in self.parts)

    def set_velocity(self, velocity: Point) -> None:
        for p in self.parts:
            p.set_velocity(velocity)

    def remove_body(self, world: World) -> None:
        """Release every part; joints go with them."""
        for p in self.parts:
            p.remove_body(world)

    def __enter__(self) -> "Ragdoll":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.remove_body(self.world)
