from sketch_physics.core.forces import Repeller
from sketch_physics.particles import Emitter, ParticleKind
from sketch_physics.renderer import BufferedRenderer
from sketch_physics.scene import Sketch
from sketch_physics.util import make_rng

rng = make_rng(2024)
sketch = Sketch(width=640, height=360)
sketch.add(Emitter(origin=(320.0, 50.0), rng=rng, lifespan=600.0,
                   kinds=(ParticleKind.CIRCLE, ParticleKind.CONFETTI)))
sketch.add(Repeller(position=(320.0, 200.0), power=5.0, radius=132.0))

renderer = BufferedRenderer()
while sketch.emitters:
    sketch.step()
    renderer.render_sketch(sketch)

peak = max(len(f["entities"]) for f in renderer.frames)
print("frames:", sketch.frame, "peak particles:", peak)
