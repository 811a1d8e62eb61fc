import pymunk

from sketch_physics.world import Ragdoll, RigidShape, World

world = World(gravity=(0.0, 300.0), dt=1 / 60)

with RigidShape.box(world, (320.0, 340.0), 600.0, 20.0, mass=1000.0) as floor, \
        Ragdoll(world, (320.0, 100.0)) as doll:
    floor.body.body_type = pymunk.Body.KINEMATIC
    doll.set_velocity((40.0, 0.0))
    for _ in range(180):
        world.step()
    print("torso:", doll.torso.position, "angle:", doll.torso.angle)
    print("head:", doll.head.position)

print("bodies left in world:", len(world))
