import dataclasses
import logging

import numpy as np
import pytest

from hambody import (
    Body,
    ConfigurationError,
    SimConfig,
    SimulationValidator,
    State,
    System,
    build_state,
)


def test_config_defaults_and_overrides():
    cfg = SimConfig(dt=0.01, tmax=1.0)
    assert cfg.G is None and cfg.softening is None
    resolved = cfg.resolve(System(np.ones(2)))
    assert resolved.G == 1.0 and resolved.softening == 0.0
    assert cfg.resolve(System(np.ones(2), G=3.0, softening=0.2)).softening == 0.2
    assert cfg.scheme == "verlet"
    assert cfg.tnum == 101
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.dt = 0.1
    other = cfg.with_overrides(softening=0.2)
    assert other.softening == 0.2 and cfg.softening is None
    with pytest.raises(ConfigurationError):
        other.resolve(System(np.ones(2), softening=0.3))
    assert cfg.copy() == cfg


def test_config_validation():
    assert SimConfig(dt=1.0, tmax=2.0).validate().tnum == 3
    for bad in (
        dict(dt=0.0, tmax=1.0),
        dict(dt=1.0, tmax=-1.0),
        dict(dt=float("nan"), tmax=1.0),
        dict(dt=1.0, tmax=1.0, G=-1.0),
        dict(dt=1.0, tmax=1.0, softening=-0.1),
        dict(dt=1.0, tmax=1.0, dimension=1),
        dict(dt=1.0, tmax=1.0, scheme="yoshida"),
    ):
        with pytest.raises(ConfigurationError):
            SimConfig(**bad).validate()


def test_body_mass_is_fixed():
    b = Body.from_velocity(2.0, [1.0, 0.0], [0.0, 3.0], label="a")
    np.testing.assert_allclose(b.momentum, [0.0, 6.0])
    np.testing.assert_allclose(b.velocity, [0.0, 3.0])
    assert b.dimension == 2
    with pytest.raises(AttributeError):
        b.mass = 5.0


def test_build_state_from_bodies():
    bodies = [
        Body(1.0, [0.0, 0.0, 0.0], label="sun"),
        Body(0.5, [1.0, 0.0, 0.0], [0.0, 0.5, 0.0]),
    ]
    system, state = build_state(bodies, G=2.0, softening=0.01)
    np.testing.assert_array_equal(system.masses, [1.0, 0.5])
    assert system.labels == ("sun", "body 1")
    assert system.dimension == 3
    np.testing.assert_array_equal(state.momenta[1], [0.0, 0.5, 0.0])

    bodies[1].position[0] = 99.0
    assert state.positions[1, 0] == 1.0


def test_state_arrays_are_copies():
    q = np.array([[0.0, 1.0], [1.0, 0.0]])
    state = State(q, np.zeros((2, 2)))
    q[0, 0] = 7.0
    assert state.positions[0, 0] == 0.0
    with pytest.raises(ValueError):
        state.positions[0, 0] = 1.0
    np.testing.assert_array_equal(state.reversed().momenta, -state.momenta)


def test_validator_bool_and_report(caplog):
    assert SimulationValidator.state_is_valid(np.zeros((2, 2)), np.zeros((2, 2)), [1.0, 1.0])
    assert not SimulationValidator.state_is_valid(np.zeros((2, 2)), np.zeros((2, 2)), [1.0, -1.0])
    with caplog.at_level(logging.WARNING, logger="hambody"):
        SimulationValidator.report_invalid_state(
            "bad cloud",
            masses=[1.0, -1.0],
            positions=[[0.0, np.nan], [1.0, 1.0]],
        )
    assert "bad cloud" in caplog.text
    assert "mass[1]" in caplog.text
    assert "positions[0] is not finite" in caplog.text
