import numpy as np
import pytest

from sketch_physics.core.invariants import pendulum_energy
from sketch_physics.errors import InvalidParameter
from sketch_physics.oscillators import Oscillator, Pendulum


def test_single_step_matches_pendulum_equation():
    """
    θ = π/2, L = 100, g = 0.4, no damping:
      α = -0.4 * sin(π/2) / 100 = -0.004
      ω = -0.004, θ = π/2 - 0.004
    """
    p = Pendulum(anchor=(0.0, 0.0), arm_length=100.0, angle=np.pi / 2,
                 gravity=0.4, damping=1.0, damping_decay=1.0)
    p.update()
    assert p.angular_acceleration == pytest.approx(-0.004)
    assert p.angular_velocity == pytest.approx(-0.004)
    assert p.angle == pytest.approx(np.pi / 2 - 0.004)


def test_damping_decays_geometrically():
    p = Pendulum(anchor=(0.0, 0.0), arm_length=100.0, damping=0.995)
    previous = p.damping
    for _ in range(10):
        p.update()
        assert p.damping <= previous
        previous = p.damping
    assert p.damping == pytest.approx(0.995 * 0.99999 ** 10)


def test_energy_drains_over_time():
    p = Pendulum(anchor=(320.0, 0.0), arm_length=100.0, angle=np.pi / 4)
    energies = []
    for frame in range(2000):
        if frame % 100 == 0:
            energies.append(pendulum_energy(p))
        p.update()
    assert all(a > b for a, b in zip(energies, energies[1:]))


def test_swing_amplitude_never_grows():
    """Peak |θ| at each turning point shrinks swing after swing."""
    p = Pendulum(anchor=(0.0, 0.0), arm_length=100.0, angle=np.pi / 3)
    peaks = []
    last_omega = p.angular_velocity
    for _ in range(3000):
        p.update()
        if last_omega != 0.0 and np.sign(p.angular_velocity) != np.sign(last_omega):
            peaks.append(abs(p.angle))
        last_omega = p.angular_velocity
    assert len(peaks) > 5
    assert all(a >= b for a, b in zip(peaks, peaks[1:]))


def test_large_swing_comes_to_rest_downward():
    p = Pendulum(anchor=(0.0, 0.0), arm_length=100.0, angle=3.0)
    for _ in range(8000):
        p.update()
    assert abs(p.angle) < 1e-3
    assert abs(p.angular_velocity) < 1e-3


def test_bob_position():
    p = Pendulum(anchor=(10.0, 20.0), arm_length=50.0, angle=0.0)
    assert np.allclose(p.bob_position, [10.0, 70.0])
    p.angle = np.pi / 2
    assert np.allclose(p.bob_position, [60.0, 20.0])


def test_pendulum_parameters_validated():
    with pytest.raises(InvalidParameter):
        Pendulum(anchor=(0.0, 0.0), arm_length=0.0)
    with pytest.raises(InvalidParameter):
        Pendulum(anchor=(0.0, 0.0), arm_length=10.0, damping=1.2)


def test_oscillator_offset():
    o = Oscillator(amplitude=(100.0, 50.0), angular_velocity=(np.pi / 4, np.pi / 2))
    o.update()
    assert np.allclose(o.offset, [100.0 * np.sin(np.pi / 4), 50.0])
    o.update()
    assert np.allclose(o.offset, [100.0, 0.0], atol=1e-9)
