import io

import numpy as np
import pytest

from sketch_physics.core.forces import Repeller, Spring
from sketch_physics.oscillators import Oscillator, Pendulum
from sketch_physics.particles import Emitter, Particle, ParticleKind
from sketch_physics.renderer import BufferedRenderer, DebugRenderer, describe
from sketch_physics.scene import Sketch
from sketch_physics.steering import Vehicle
from sketch_physics.types import KinematicBody, Mover
from sketch_physics.world import Ragdoll, RigidShape, World


def test_gravity_is_applied_to_movers():
    sketch = Sketch(gravity=(0.0, 0.1))
    light, heavy = KinematicBody(mass=1.0), KinematicBody(mass=3.0)
    sketch.add(light)
    sketch.add(heavy)
    sketch.step()
    assert np.allclose(light.velocity, [0.0, 0.1])
    assert np.allclose(heavy.velocity, [0.0, 0.1])
    assert sketch.frame == 1


def test_springs_and_repellers_act_on_movers():
    sketch = Sketch()
    bob = KinematicBody(position=(20.0, 0.0))
    sketch.add(bob)
    sketch.add(Spring(anchor=(0.0, 0.0), rest_length=10.0, stiffness=0.1))
    sketch.add(Repeller(position=(0.0, 0.0), power=5.0, radius=132.0))
    sketch.step()
    # spring -1.0, repeller: r = 20, 5 * 132 / 400 = 1.65 away from origin
    assert np.allclose(bob.velocity, [0.65, 0.0])


def test_vehicles_stay_near_the_canvas():
    sketch = Sketch(width=640.0, height=360.0)
    rng = np.random.default_rng(11)
    for _ in range(5):
        start = rng.uniform((50, 50), (590, 310))
        sketch.add(Vehicle(body=KinematicBody(position=start, velocity=(1.0, 0.0)),
                           max_speed=3.0, max_force=0.3, rng=rng))
    for _ in range(1000):
        sketch.step()
    for v in sketch.vehicles:
        assert -150.0 < v.position[0] < 790.0
        assert -150.0 < v.position[1] < 510.0


def test_finished_emitters_are_dropped():
    sketch = Sketch()
    spent = Emitter(origin=(0.0, 0.0), dying=True)
    spent.particles = [Particle(lifespan=1.0)]
    live = Emitter(origin=(100.0, 0.0), rng=np.random.default_rng(0))
    sketch.add(spent)
    sketch.add(live)
    sketch.step()
    assert len(sketch.emitters) == 1
    assert sketch.emitters[0] is live


def test_pendulums_oscillators_and_world_advance():
    world = World(dt=1 / 60)
    sketch = Sketch(world=world)
    p = Pendulum(anchor=(0.0, 0.0), arm_length=100.0, angle=0.5)
    o = Oscillator(amplitude=(10.0, 10.0), angular_velocity=(0.1, 0.2))
    sketch.add(p)
    sketch.add(o)
    with RigidShape.circle(world, (0.0, 0.0), 5.0) as ball:
        ball.set_velocity((60.0, 0.0))
        sketch.step()
        assert ball.position[0] == pytest.approx(1.0)
    assert p.angle < 0.5
    assert np.allclose(o.angle, [0.1, 0.2])


def test_add_rejects_unknown_entities():
    with pytest.raises(TypeError):
        Sketch().add("not an entity")


def test_buffered_renderer_records_every_entity():
    sketch = Sketch()
    sketch.add(Mover(position=(5.0, 5.0)))
    sketch.add(Vehicle())
    sketch.add(Pendulum(anchor=(0.0, 0.0), arm_length=50.0))
    sketch.add(Emitter(origin=(0.0, 0.0), rng=np.random.default_rng(1),
                       kinds=(ParticleKind.SQUARE, ParticleKind.CONFETTI)))
    renderer = BufferedRenderer()
    for _ in range(3):
        sketch.step()
        renderer.render_sketch(sketch)

    assert [f["frame"] for f in renderer.frames] == [1, 2, 3]
    last = renderer.frames[-1]["entities"]
    types = [e["type"] for e in last]
    assert types == ["mover", "vehicle", "particle", "particle", "particle", "pendulum"]
    primitives = [e["primitive"] for e in last if e["type"] == "particle"]
    assert primitives == ["rect", "rotated_rect", "rect"]

    renderer.clear()
    assert renderer.frames == []


def test_debug_renderer_writes_one_line_per_entity():
    out = io.StringIO()
    renderer = DebugRenderer(output=out)
    sketch = Sketch()
    sketch.add(KinematicBody(position=(1.0, 2.0)))
    sketch.add(Pendulum(anchor=(0.0, 0.0), arm_length=10.0, angle=0.0))
    renderer.render_sketch(sketch)
    lines = out.getvalue().splitlines()
    assert lines[0] == "=== Frame 0 ==="
    assert lines[1] == "body circle @ (1.00, 2.00)"
    assert lines[2].startswith("pendulum line @ (0.00, 10.00)")


def test_describe_rigid_shape_and_unknown():
    world = World()
    with RigidShape.box(world, (10.0, 10.0), 4.0, 2.0) as crate:
        d = describe(crate)
        assert d["primitive"] == "polygon"
        assert len(d["vertices"][0]) == 4
    with pytest.raises(TypeError):
        describe(object())


def test_rigid_shapes_and_ragdolls_are_drawn():
    world = World()
    sketch = Sketch(world=world)
    crate = RigidShape.box(world, (100.0, 50.0), 20.0, 20.0)
    doll = Ragdoll(world, (200.0, 50.0))
    sketch.add(crate)
    sketch.add(doll)
    renderer = BufferedRenderer()
    sketch.step()
    renderer.render_sketch(sketch)
    rigid = [e for e in renderer.frames[-1]["entities"] if e["type"] == "rigid"]
    assert len(rigid) == 1 + len(doll.parts)

    doll.remove_body(world)
    sketch.step()
    assert sketch.shapes == [crate]
    renderer.render_sketch(sketch)
    assert len(renderer.frames[-1]["entities"]) == 1
    crate.remove_body(world)


def test_add_rejects_shape_from_another_world():
    sketch = Sketch(world=World())
    with RigidShape.circle(World(), (0.0, 0.0), 5.0) as ball:
        with pytest.raises(ValueError):
            sketch.add(ball)
