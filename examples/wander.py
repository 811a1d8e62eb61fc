from sketch_physics.renderer import DebugRenderer
from sketch_physics.scene import Sketch
from sketch_physics.steering import Vehicle
from sketch_physics.types import KinematicBody
from sketch_physics.util import make_rng

rng = make_rng(7)
sketch = Sketch(width=640, height=360, wander_radius=25.0, boundary_offset=25.0)
for i in range(3):
    body = KinematicBody(position=(100.0 + 200.0 * i, 180.0), velocity=(1.0, 0.0))
    sketch.add(Vehicle(body=body, max_speed=3.0, max_force=0.15, rng=rng))

renderer = DebugRenderer()
for _ in range(300):
    sketch.step()
    if sketch.frame % 100 == 0:
        renderer.render_sketch(sketch)
