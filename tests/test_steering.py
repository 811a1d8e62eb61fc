import numpy as np
import pytest

from sketch_physics.errors import InvalidParameter
from sketch_physics.steering import Vehicle
from sketch_physics.types import KinematicBody
from sketch_physics.util import heading, norm


class MidpointRng:
    """Stand-in random source that always returns the middle of the range."""

    def uniform(self, low, high):
        return 0.5 * (low + high)


def vehicle(position=(0.0, 0.0), velocity=(0.0, 0.0), **kw):
    return Vehicle(body=KinematicBody(position=position, velocity=velocity), **kw)


def test_seek_far_target_uses_max_speed():
    v = vehicle(max_speed=4.0, max_force=10.0)
    f = v.seek((200.0, 0.0))
    assert np.allclose(f, [4.0, 0.0])
    assert np.allclose(v.body.acceleration, [4.0, 0.0])


def test_seek_arrival_ramps_speed_down():
    """Inside the arrival radius desired speed = max_speed * d / 100."""
    v = vehicle(max_speed=4.0, max_force=10.0)
    f = v.seek((50.0, 0.0))
    assert np.allclose(f, [2.0, 0.0])


def test_seek_subtracts_current_velocity():
    v = vehicle(velocity=(0.0, 3.0), max_speed=4.0, max_force=10.0)
    f = v.seek((0.0, 500.0))
    assert np.allclose(f, [0.0, 1.0])


def test_seek_force_is_bounded():
    v = vehicle(velocity=(-4.0, 0.0), max_speed=4.0, max_force=0.1)
    f = v.seek((500.0, 500.0))
    assert norm(f) == pytest.approx(0.1)


def test_seek_on_target_brakes():
    v = vehicle(position=(10.0, 10.0), velocity=(1.0, 0.0), max_force=10.0)
    f = v.seek((10.0, 10.0))
    assert np.allclose(f, [-1.0, 0.0])


def test_flee_points_away():
    v = vehicle(position=(10.0, 0.0), max_speed=4.0, max_force=10.0)
    f = v.flee((0.0, 0.0))
    assert np.allclose(f, [4.0, 0.0])


def test_seek_converges_on_target():
    v = vehicle(position=(0.0, 0.0), max_speed=4.0, max_force=0.2)
    target = (300.0, 150.0)
    for _ in range(600):
        v.seek(target)
        v.update()
    assert norm(v.position - np.array(target)) < 1.0


def test_wander_target_with_fixed_rng():
    """
    Heading 0, midpoint jitter 0: the target sits straight ahead,
    WANDER_DISTANCE + radius in front of the vehicle.
    """
    v = vehicle(position=(100.0, 100.0), velocity=(2.0, 0.0), rng=MidpointRng())
    target = v.wander(25.0)
    assert np.allclose(target, [205.0, 100.0])
    assert np.allclose(v.wander_target, target)


def test_wander_from_rest_is_finite():
    v = vehicle(position=(100.0, 100.0), rng=MidpointRng())
    target = v.wander(25.0)
    assert np.allclose(target, [125.0, 100.0])
    v.update()
    assert np.all(np.isfinite(v.position))


def test_wander_stays_within_half_turn_of_heading():
    v = vehicle(position=(0.0, 0.0), velocity=(0.0, 3.0), rng=np.random.default_rng(3))
    for _ in range(200):
        center = v.position + 80.0 * v.velocity / norm(v.velocity)
        h = heading(v.velocity)
        target = v.wander(30.0)
        offset = heading(target - center) - h
        offset = (offset + np.pi) % (2 * np.pi) - np.pi
        assert abs(offset) <= np.pi / 2 + 1e-9
        v.update()


def test_wander_is_reproducible_with_seeded_rng():
    runs = []
    for _ in range(2):
        v = vehicle(position=(320.0, 180.0), velocity=(1.0, 0.0), rng=np.random.default_rng(42))
        for _ in range(100):
            v.wander(25.0)
            v.update()
        runs.append(v.position.copy())
    assert np.array_equal(runs[0], runs[1])


def test_default_rng_follows_seed_variable(monkeypatch):
    monkeypatch.setenv("SKETCH_PHYSICS_SEED", "123")
    first = vehicle(position=(320.0, 180.0), velocity=(1.0, 0.0))
    second = vehicle(position=(320.0, 180.0), velocity=(1.0, 0.0))
    assert np.array_equal(first.wander(25.0), second.wander(25.0))


def test_no_boundary_force_inside_world():
    v = vehicle(position=(320.0, 180.0))
    assert v.avoid_boundaries(25.0, 640.0, 360.0) is None
    assert np.array_equal(v.body.acceleration, [0.0, 0.0])


@pytest.mark.parametrize("position, expected", [
    ((10.0, 180.0), [4.0, 0.0]),
    ((630.0, 180.0), [-4.0, 0.0]),
    ((320.0, 10.0), [0.0, 4.0]),
    ((320.0, 350.0), [0.0, -4.0]),
])
def test_boundary_force_points_inward(position, expected):
    v = vehicle(position=position, max_speed=4.0, max_force=10.0)
    f = v.avoid_boundaries(25.0, 640.0, 360.0)
    assert np.allclose(f, expected)


def test_corner_combines_both_axes():
    v = vehicle(position=(10.0, 10.0), max_speed=4.0, max_force=10.0)
    f = v.avoid_boundaries(25.0, 640.0, 360.0)
    assert np.allclose(f, [4.0 / np.sqrt(2), 4.0 / np.sqrt(2)])


def test_corner_overwrite_mode_keeps_vertical_only():
    v = vehicle(position=(10.0, 10.0), max_speed=4.0, max_force=10.0, combine_axes=False)
    f = v.avoid_boundaries(25.0, 640.0, 360.0)
    assert np.allclose(f, [0.0, 4.0])


def test_boundary_keeps_tangential_velocity():
    v = vehicle(position=(10.0, 180.0), velocity=(0.0, 3.0), max_speed=5.0, max_force=10.0)
    f = v.avoid_boundaries(25.0, 640.0, 360.0)
    # desired = set_mag((5, 3), 5)
    desired = np.array([5.0, 3.0]) * 5.0 / np.sqrt(34.0)
    assert np.allclose(f, desired - np.array([0.0, 3.0]))


@pytest.mark.parametrize("kw", [{"max_speed": 0.0}, {"max_force": -1.0}])
def test_limits_must_be_positive(kw):
    with pytest.raises(InvalidParameter):
        Vehicle(**kw)
