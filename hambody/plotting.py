"""
This module renders trajectories with matplotlib. It is a read-only consumer of a
Trajectory: plot_paths draws every body's path as a line, plot_state scatters one set of
positions, and animate_paths records a moving scatter with a fading tail per body.
Two-dimensional trajectories are drawn on plain axes and three-dimensional ones on 3-D
axes. Body labels, when the trajectory carries them, become the legend. Long runs are
thinned with tskip so the number of animation frames stays manageable. Every function
writes to a file, logs where it went, and closes its figure.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation

from .simulation_state import Trajectory

logger = logging.getLogger(__name__)


def _axes(fig, dimension: int):
	if dimension == 3:
		return fig.add_subplot(111, projection="3d")
	return fig.add_subplot(111)


def _set_limits(ax, Q: np.ndarray, bounds: float = 0.0) -> None:
	dim = Q.shape[-1]
	setters = [ax.set_xlim, ax.set_ylim] + ([ax.set_zlim] if dim == 3 else [])
	for d, setter in enumerate(setters):
		if bounds:
			setter(-bounds, bounds)
		else:
			lo = float(np.nanmin(Q[..., d]))
			hi = float(np.nanmax(Q[..., d]))
			if lo == hi:
				lo, hi = lo - 1.0, hi + 1.0
			setter(lo, hi)


def plot_paths(
	trajectory: Trajectory,
	fname: str | Path = "particles.png",
	*,
	labels: Optional[Sequence[str]] = None,
	title: Optional[str] = None,
) -> Path:
	Q = trajectory.Q
	if labels is None and trajectory.labels is not None:
		labels = trajectory.labels

	fig = plt.figure()
	ax = _axes(fig, trajectory.dimension)
	for k in range(trajectory.n_bodies):
		coords = [Q[:, k, d] for d in range(trajectory.dimension)]
		label = labels[k] if labels is not None else None
		ax.plot(*coords, label=label)
	if labels is not None:
		ax.legend(title="Bodies", loc="best")
	if title:
		ax.set_title(title)

	fname = Path(fname)
	fig.savefig(fname)
	plt.close(fig)
	logger.info("Saved plot as %s", fname)
	return fname


def plot_state(
	q: np.ndarray,
	fname: str | Path = "particles.png",
	*,
	masses: Optional[np.ndarray] = None,
) -> Path:
	q = np.asarray(q, dtype=float)
	fig = plt.figure()
	ax = _axes(fig, q.shape[1])
	sizes = None
	if masses is not None:
		m = np.asarray(masses, dtype=float)
		sizes = 20.0 * m / float(np.max(m))
	ax.scatter(*[q[:, d] for d in range(q.shape[1])], s=sizes)

	fname = Path(fname)
	fig.savefig(fname)
	plt.close(fig)
	logger.info("Saved plot as %s", fname)
	return fname


def animate_paths(
	trajectory: Trajectory,
	fname: str | Path = "particles.mp4",
	*,
	tskip: int = 0,
	taillength: int = 5,
	bounds: float = 0.0,
	framerate: int = 20,
) -> Path:
	Q = trajectory.Q
	dim = trajectory.dimension
	taillength = max(1, min(int(taillength), trajectory.tnum))
	frames = range(taillength - 1, trajectory.tnum, int(tskip) + 1)

	fig = plt.figure()
	ax = _axes(fig, dim)
	_set_limits(ax, Q, bounds)

	t0 = frames[0]
	heads = ax.plot(*[Q[t0, :, d] for d in range(dim)], linestyle="", marker="o")[0]
	tails = [ax.plot(*[Q[:t0 + 1, k, d] for d in range(dim)])[0] for k in range(trajectory.n_bodies)]
	labels = trajectory.body_labels() if trajectory.labels is not None else None
	if labels is not None:
		for line, label in zip(tails, labels):
			line.set_label(label)
		ax.legend(title="Bodies", loc="upper right")

	def update(t):
		lo = t - taillength + 1
		if dim == 3:
			heads.set_data_3d(Q[t, :, 0], Q[t, :, 1], Q[t, :, 2])
			for k, line in enumerate(tails):
				line.set_data_3d(Q[lo:t + 1, k, 0], Q[lo:t + 1, k, 1], Q[lo:t + 1, k, 2])
		else:
			heads.set_data(Q[t, :, 0], Q[t, :, 1])
			for k, line in enumerate(tails):
				line.set_data(Q[lo:t + 1, k, 0], Q[lo:t + 1, k, 1])
		ax.set_title(f"t = {t * trajectory.dt:.2f}")
		return [heads, *tails]

	anim = matplotlib.animation.FuncAnimation(
		fig=fig, func=update, frames=frames, blit=False, interval=1000 // max(1, framerate)
	)

	fname = Path(fname)
	if fname.suffix.lower() == ".gif":
		writer = matplotlib.animation.PillowWriter(fps=framerate)
	else:
		writer = matplotlib.animation.FFMpegWriter(fps=framerate)
	anim.save(str(fname), writer=writer)
	plt.close(fig)
	logger.info("Saved animation to %s", fname)
	return fname
