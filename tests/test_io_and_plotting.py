import numpy as np
import pytest

from hambody import (
    ConfigurationError,
    integrate,
    load_trajectory,
    outer_solar_system,
    save_trajectory,
    two_body_test,
)
from hambody.plotting import animate_paths, plot_paths, plot_state


@pytest.fixture
def solar_traj():
    system, state = outer_solar_system()
    return integrate(state, system, 10.0, 400.0)


@pytest.fixture
def pair_traj():
    system, state = two_body_test(momentum=1.0e-3)
    return integrate(state, system, 0.05, 1.0)


def test_save_and_load_trajectory(tmp_path, solar_traj):
    fname = save_trajectory(solar_traj, tmp_path / "planets.npz")
    loaded = load_trajectory(fname)
    np.testing.assert_array_equal(loaded.Q, solar_traj.Q)
    np.testing.assert_array_equal(loaded.P, solar_traj.P)
    assert loaded.labels == solar_traj.labels
    assert loaded.dt == 10.0
    assert loaded.G == solar_traj.G


def test_load_rejects_incomplete_archive(tmp_path):
    fname = tmp_path / "broken.npz"
    np.savez(fname, Q=np.zeros((2, 2, 2)))
    with pytest.raises(ConfigurationError):
        load_trajectory(fname)


def test_plot_paths_2d_and_3d(tmp_path, pair_traj, solar_traj):
    out2 = plot_paths(pair_traj, tmp_path / "particles.png")
    out3 = plot_paths(solar_traj, tmp_path / "planets.png")
    assert out2.exists() and out2.stat().st_size > 0
    assert out3.exists() and out3.stat().st_size > 0


def test_plot_state(tmp_path, pair_traj):
    out = plot_state(pair_traj.Q[-1], tmp_path / "state.png", masses=pair_traj.masses)
    assert out.exists()


def test_animate_paths_gif(tmp_path, pair_traj, solar_traj):
    out = animate_paths(pair_traj, tmp_path / "particles.gif", tskip=4, taillength=3)
    assert out.exists() and out.stat().st_size > 0
    out3 = animate_paths(solar_traj, tmp_path / "planets.gif", tskip=10, taillength=5, bounds=40.0)
    assert out3.exists()


def test_scenarios_run_and_render(tmp_path):
    from hambody.scenarios import run_particle_cloud, run_solar_system, run_two_body_test

    traj = run_two_body_test(dt=0.01, tmax=1.0, plot=tmp_path / "pair.png")
    assert traj.tnum == 101
    assert (tmp_path / "pair.png").exists()

    cloud = run_particle_cloud(6, dt=0.1, tmax=1.0, seed=0, softening=1.0)
    assert cloud.n_bodies == 6 and cloud.is_finite()

    planets = run_solar_system(tmax=200.0, animation=tmp_path / "planets.gif")
    assert planets.n_bodies == 6
    assert (tmp_path / "planets.gif").exists()


def test_solar_system_animation_keeps_every_fiftieth_state(tmp_path, monkeypatch):
    import hambody.scenarios as scenarios

    calls = []
    monkeypatch.setattr(scenarios, "animate_paths", lambda traj, fname, **kw: calls.append(kw))
    scenarios.run_solar_system(tmax=1000.0, animation=tmp_path / "planets.gif")
    assert len(calls) == 1
    # animate_paths advances tskip + 1 states per frame
    assert calls[0]["tskip"] + 1 == 50
    assert calls[0]["taillength"] == 1500
