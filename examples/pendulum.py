# examples/pendulum.py
from sketch_physics.oscillators import Pendulum
from sketch_physics.core.invariants import pendulum_energy
import numpy as np

p = Pendulum(anchor=(320.0, 0.0), arm_length=175.0, angle=np.pi / 4)

for frame in range(600):
    p.update()
    if frame % 100 == 0:
        print(f"frame {frame:4d}  angle {p.angle:+.4f}  energy {pendulum_energy(p):.5f}")

print("bob position:", p.bob_position, "damping:", p.damping)
