# MIT License (see LICENSE)
"""
Default tuning values shared by the sketches.

Units are pixels and frames: one call to `update()` or `step()` advances
one frame, and velocities are expressed in pixels per frame.
"""
from __future__ import annotations
import math

# Particles and emitters.
# A particle starts fully opaque and fades by LIFESPAN_DECAY every frame.
PARTICLE_LIFESPAN: float = 255.0
LIFESPAN_DECAY: float = 2.0
# Once an emitter has held this many particles it stops spawning for good.
MAX_PARTICLES: int = 250
EMITTER_GRAVITY: tuple[float, float] = (0.0, 0.05)
SPAWN_VX_RANGE: tuple[float, float] = (-1.0, 1.0)
SPAWN_VY_RANGE: tuple[float, float] = (-2.0, 0.0)
# Speed at which a particle's spin reaches PARTICLE_MAX_SPIN.
PARTICLE_SPIN_SPEED: float = 10.0
PARTICLE_MAX_SPIN: float = 4.0 * math.pi

# Steering.
# Within ARRIVAL_RADIUS of the target, desired speed ramps down linearly.
ARRIVAL_RADIUS: float = 100.0
WANDER_DISTANCE: float = 80.0
MAX_SPEED: float = 4.0
MAX_FORCE: float = 0.1

# Repeller distance clamp: avoids the singularity at r -> 0 and keeps
# long-range pushes bounded.
REPELLER_MIN_DISTANCE: float = 5.0
REPELLER_MAX_DISTANCE: float = 50.0

# Attraction distance clamp (mover/attractor sketches).
ATTRACTOR_MIN_DISTANCE: float = 5.0
ATTRACTOR_MAX_DISTANCE: float = 25.0

# Pendulum.
PENDULUM_GRAVITY: float = 0.4
PENDULUM_DAMPING: float = 0.995
PENDULUM_DAMPING_DECAY: float = 0.99999

# Mover rotation.
MOVER_SPIN_FACTOR: float = 10.0
MOVER_MAX_SPIN: float = 0.1
