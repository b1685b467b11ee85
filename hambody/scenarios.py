"""
This module wires presets, the integrator, diagnostics and the plotting helpers into
complete runs. run_two_body_test integrates the slow equal-mass pair, run_particle_cloud
integrates a random cloud orbiting two heavy central bodies, and run_solar_system
integrates the outer planets for five centuries in ten-day steps. Each returns the
Trajectory and, when output paths are given, writes the path plot and the animation.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from .diagnostics import Diagnostics
from .integrator import integrate
from .plotting import animate_paths, plot_paths
from .presets import central_pair_cloud, outer_solar_system, two_body_test
from .simulation_state import Trajectory

logger = logging.getLogger(__name__)


def _render(
	traj: Trajectory,
	plot: Optional[Path | str],
	animation: Optional[Path | str],
	**anim_kwargs,
) -> None:
	if plot is not None:
		plot_paths(traj, plot)
	if animation is not None:
		animate_paths(traj, animation, **anim_kwargs)


def run_two_body_test(
	*,
	dt: float = 0.001,
	tmax: float = 100.0,
	plot: Optional[Path | str] = None,
	animation: Optional[Path | str] = None,
) -> Trajectory:
	system, state = two_body_test()
	traj = integrate(state, system, dt, tmax)
	logger.info("two-body test finished: %s", Diagnostics(traj, stride=100).summary())
	_render(traj, plot, animation, tskip=round(tmax / dt / 100))
	return traj


def run_particle_cloud(
	n_bodies: int = 20,
	*,
	dt: float = 0.01,
	tmax: float = 1000.0,
	seed: Optional[int] = None,
	softening: float = 0.0,
	plot: Optional[Path | str] = None,
	animation: Optional[Path | str] = None,
) -> Trajectory:
	system, state = central_pair_cloud(n_bodies, seed=seed, softening=softening)
	traj = integrate(state, system, dt, tmax)
	logger.info("particle cloud run finished: %d bodies, %d states", traj.n_bodies, traj.tnum)
	_render(traj, plot, animation, tskip=round(tmax / dt / 100), bounds=2000.0)
	return traj


def run_solar_system(
	*,
	dt: float = 10.0,
	tmax: float = 500 * 365.0,
	plot: Optional[Path | str] = None,
	animation: Optional[Path | str] = None,
) -> Trajectory:
	system, state = outer_solar_system()
	traj = integrate(state, system, dt, tmax)
	logger.info("outer solar system finished: %s", Diagnostics(traj, stride=50).summary())
	_render(traj, plot, animation, tskip=49, taillength=1500)
	return traj
