import numpy as np
import pytest

from hambody import (
    ConfigurationError,
    GeneratorConfig,
    InitialConditionGenerator,
    SpecializedGenerators,
    central_pair_cloud,
    generate_particles,
    total_momentum,
)


def test_particles_respect_box_and_mass_range():
    q, p, m = generate_particles(50, xmax=20.0, ymax=10.0, mmin=0.2, mmax=1.0, seed=0)
    assert q.shape == (50, 2) and p.shape == (50, 2) and m.shape == (50,)
    assert np.all(np.abs(q[:, 0]) <= 10.0)
    assert np.all(np.abs(q[:, 1]) <= 5.0)
    assert np.all((m >= 0.2) & (m <= 1.0))
    # |v| per component is at most vmax / 2
    assert np.all(np.abs(p / m[:, None]) <= 0.5)


def test_seed_makes_draw_reproducible():
    a = generate_particles(10, seed=42)
    b = generate_particles(10, seed=42)
    c = generate_particles(10, seed=43)
    for x, y in zip(a, b):
        np.testing.assert_array_equal(x, y)
    assert not np.array_equal(a[0], c[0])


def test_velocity_field_evaluated_on_unit_box():
    q, p, m = generate_particles(20, xmax=2000.0, ymax=1000.0, vmax=0.0, V=lambda x, y: (-y, x), seed=5)
    v = p / m[:, None]
    np.testing.assert_allclose(v[:, 0], -q[:, 1] / 1000.0)
    np.testing.assert_allclose(v[:, 1], q[:, 0] / 2000.0)


def test_three_dimensional_cloud():
    gen = InitialConditionGenerator(GeneratorConfig(xmax=2.0, ymax=2.0, zmax=6.0, seed=3))
    system, state = gen.create_state(7)
    assert state.positions.shape == (7, 3)
    assert system.dimension == 3
    assert np.all(np.abs(state.positions[:, 2]) <= 3.0)


def test_central_pair_overrides():
    system, state = central_pair_cloud(20, seed=11)
    assert system.n_bodies == 20
    np.testing.assert_array_equal(system.masses[:2], [1000.0, 1000.0])
    np.testing.assert_array_equal(state.positions[0], [0.0, 0.0])
    np.testing.assert_array_equal(state.positions[1], [1000.0, 0.0])
    assert np.all(system.masses[2:] <= 5.0)


def test_invalid_generator_settings():
    with pytest.raises(ConfigurationError):
        InitialConditionGenerator(GeneratorConfig(mmin=0.0))
    with pytest.raises(ConfigurationError):
        InitialConditionGenerator(GeneratorConfig(mmin=2.0, mmax=1.0))
    gen = InitialConditionGenerator(GeneratorConfig(seed=0))
    with pytest.raises(ConfigurationError):
        gen.generate_single(0)
    m, q, _ = gen.generate_single(3)
    with pytest.raises(ConfigurationError):
        gen.override_body(m, q, 5, mass=1.0)
    with pytest.raises(ConfigurationError):
        gen.override_body(m, q, 0, mass=-1.0)


def test_validate_system_reports_energy_budget():
    gen = InitialConditionGenerator(GeneratorConfig(seed=8, G=1.0))
    m, q, p = gen.generate_single(6)
    info = gen.validate_system(m, q, p)
    assert info["potential_energy"] < 0.0
    np.testing.assert_allclose(info["total_energy"], info["kinetic_energy"] + info["potential_energy"])
    assert set(info) >= {"virial_ratio", "angular_momentum", "is_bound", "total_momentum"}


def test_specialized_generators_have_no_net_momentum():
    m, q, v = SpecializedGenerators.generate_equal_mass_polygon(6)
    np.testing.assert_allclose(total_momentum(m[:, None] * v), 0.0, atol=1e-14)
    m, q, v = SpecializedGenerators.generate_kepler_pair(m1=3.0, m2=1.0, separation=2.0)
    np.testing.assert_allclose(total_momentum(m[:, None] * v), 0.0, atol=1e-14)
    np.testing.assert_allclose(np.sum(m[:, None] * q, axis=0), 0.0, atol=1e-14)
    np.testing.assert_allclose(q[1, 0] - q[0, 0], 2.0)
