from sketch_physics.core.forces import Spring, apply_gravity
from sketch_physics.types import KinematicBody
import numpy as np

spring = Spring(anchor=(320.0, 10.0), rest_length=100.0, stiffness=0.2)
bob = KinematicBody(position=(350.0, 100.0), mass=24.0 / 12, damping=0.98)

for _ in range(300):
    apply_gravity(bob, (0.0, 0.1))
    spring.connect(bob)
    spring.constrain_length(bob, 30.0, 200.0)
    bob.update()

print("bob position:", bob.position, "length:", float(np.linalg.norm(bob.position - spring.anchor)))
