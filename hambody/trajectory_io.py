"""
This module stores trajectories as compressed numpy archives so long runs can be plotted
or analysed later without integrating again. save_trajectory writes the position and
momentum histories together with the masses, step size, gravitational constant,
softening floor and body labels; load_trajectory reads such an archive back into a
read-only Trajectory and raises ConfigurationError when a required array is missing.
"""

from __future__ import annotations
import logging
from pathlib import Path

import numpy as np

from .errors import ConfigurationError
from .simulation_state import Trajectory

logger = logging.getLogger(__name__)

_REQUIRED = ("Q", "P", "masses", "dt")


def save_trajectory(trajectory: Trajectory, fname: str | Path) -> Path:
	fname = Path(fname)
	arrays = dict(
		Q=trajectory.Q,
		P=trajectory.P,
		masses=trajectory.masses,
		dt=np.float64(trajectory.dt),
		G=np.float64(trajectory.G),
		softening=np.float64(trajectory.softening),
	)
	if trajectory.labels is not None:
		arrays["labels"] = np.array(trajectory.labels, dtype=str)
	with fname.open("wb") as fh:
		np.savez_compressed(fh, **arrays)
	logger.info("Saved trajectory (%d states, %d bodies) to %s", trajectory.tnum, trajectory.n_bodies, fname)
	return fname


def load_trajectory(fname: str | Path) -> Trajectory:
	with np.load(Path(fname), allow_pickle=False) as data:
		missing = [k for k in _REQUIRED if k not in data.files]
		if missing:
			raise ConfigurationError(f"{fname} is missing trajectory arrays: {', '.join(missing)}")
		labels = tuple(data["labels"].tolist()) if "labels" in data.files else None
		return Trajectory(
			Q=data["Q"],
			P=data["P"],
			masses=data["masses"],
			dt=float(data["dt"]),
			G=float(data["G"]) if "G" in data.files else 1.0,
			softening=float(data["softening"]) if "softening" in data.files else 0.0,
			labels=labels,
		)
