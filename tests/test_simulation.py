import numpy as np
import pytest

from constants import FIELD_COLOR_REPULSIVE
from particle import Particle, ParticleSystem
from simulation import Simulation
from vector import Vector


def make_simulation(max_particles=10000, width=1200, height=800, **params):
    params.setdefault('seed', 3)
    return Simulation(ParticleSystem(max_particles), params, width, height)


def test_default_emitter_placement():
    sim = make_simulation()
    assert len(sim.emitters) == 1
    emitter = sim.emitters[0]
    assert emitter.position == Vector(450, 400)
    assert emitter.velocity == Vector(2.0, 0.0)
    assert sim.mass == 200


def test_emission_count_grows_per_tick():
    sim = make_simulation()
    for n in range(1, 6):
        sim.step()
        assert sim.particles.particle_count == n * 10 * len(sim.emitters)
    assert sim.tick == 5


def test_emission_scales_with_emitter_count():
    sim = make_simulation(emission_rate=4)
    sim.emitters.append(sim.emitters[0])
    sim.step()
    sim.step()
    assert sim.particles.particle_count == 2 * 4 * 2


def test_emission_stops_once_over_capacity():
    sim = make_simulation(max_particles=25)
    counts = []
    for _ in range(5):
        sim.step()
        counts.append(sim.particles.particle_count)
    # 0, 10 and 20 are within capacity; 30 is over it.
    assert counts == [10, 20, 30, 30, 30]


def test_emission_at_exact_capacity_still_happens():
    sim = make_simulation(max_particles=10)
    sim.step()
    assert sim.add_new_particles() == 10
    assert sim.add_new_particles() == 0


def test_plot_particles_culls_and_moves():
    sim = make_simulation(width=100, height=100, emission_rate=0)
    sim.particles.extend([
        Particle(Vector(50, 50), Vector(1, 0)),
        Particle(Vector(150, 50), Vector(1, 0)),
    ])
    culled = sim.plot_particles()
    assert culled == 1
    np.testing.assert_array_equal(sim.particles.positions, [[51, 50]])


def test_fields_bend_particles():
    sim = make_simulation(width=1000, height=1000, emission_rate=0)
    sim.particles.extend([Particle(Vector(0, 0))])
    sim.place_field(100, 0)
    sim.plot_particles()
    assert sim.particles.accelerations[0, 0] == pytest.approx(0.02)
    assert sim.particles.velocities[0, 0] == pytest.approx(0.02)
    assert sim.particles.positions[0, 0] == pytest.approx(0.02)


def test_time_scale_multiplies_delta_time():
    sim = make_simulation(width=1000, height=1000, emission_rate=0, delta_time=1.0)
    sim.particles.extend([Particle(Vector(10, 10), Vector(2, 0))])
    sim.step(time_scale=0.5)
    assert sim.particles.positions[0, 0] == pytest.approx(11.0)


def test_mass_controls():
    sim = make_simulation()
    sim.increase_mass()
    assert sim.mass == 300
    sim.decrease_mass()
    sim.decrease_mass()
    sim.decrease_mass()
    assert sim.mass == 0
    sim.decrease_mass()
    f = sim.place_field(10, 20)
    assert f.mass == -100
    assert f.draw_color == FIELD_COLOR_REPULSIVE
    assert f.position == Vector(10, 20)


def test_placed_fields_keep_their_mass():
    sim = make_simulation()
    first = sim.place_field(1, 1)
    sim.increase_mass()
    assert first.mass == 200
    assert sim.place_field(2, 2).mass == 300


def test_reset_clears_fields_and_restores_mass():
    sim = make_simulation()
    sim.increase_mass()
    sim.place_field(1, 1)
    sim.place_field(2, 2)
    sim.reset_fields()
    assert sim.fields == []
    assert sim.mass == 200


def test_statistics():
    sim = make_simulation()
    sim.place_field(5, 5)
    sim.step()
    stats = sim.statistics()
    assert stats['tick'] == 1
    assert stats['particles'] == 10
    assert stats['fields'] == 1
    assert stats['emitters'] == 1
    assert stats['mass'] == 200
    assert stats['mean_speed'] > 0


def test_invalid_parameters_raise():
    with pytest.raises(ValueError):
        make_simulation(min_field_distance=0)


def test_seed_makes_runs_reproducible():
    a = make_simulation(seed=11)
    b = make_simulation(seed=11)
    for _ in range(3):
        a.step()
        b.step()
    np.testing.assert_array_equal(a.particles.positions, b.particles.positions)
