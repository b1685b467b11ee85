from __future__ import annotations
import logging
from typing import Tuple
import numpy as np

from .potential import kinetic_energy, potential_energy
from .physics_utils import total_momentum, angular_momentum, center_of_mass
from .simulation_state import Trajectory

"""
This module computes conserved quantities and health metrics over a finished trajectory. The Diagnostics class evaluates kinetic, potential and total energy at every stored time index (with the same softening floor the run used), the relative energy error against index 0, its maximum and the slope of a least-squares line through it (a bounded oscillation has a slope near zero, a non-symplectic scheme shows a steady trend), total linear momentum and its largest deviation from the initial value, angular momentum, the centre of mass, and the first time index holding a non-finite value. Energy series are cached after the first evaluation; the trajectory itself is never modified. summary collects the scalar metrics into one dictionary and logs it.

"""

logger = logging.getLogger(__name__)


class Diagnostics:
	def __init__(self, trajectory: Trajectory, *, stride: int = 1):
		self.traj = trajectory
		self.stride = max(1, int(stride))
		self._T: np.ndarray | None = None
		self._U: np.ndarray | None = None

	def _indices(self) -> np.ndarray:
		idx = np.arange(0, self.traj.tnum, self.stride)
		if idx[-1] != self.traj.tnum - 1:
			idx = np.append(idx, self.traj.tnum - 1)
		return idx

	def times(self) -> np.ndarray:
		return self._indices() * self.traj.dt

	def kinetic_energy(self) -> np.ndarray:
		if self._T is None:
			P = self.traj.P[self._indices()]
			self._T = np.asarray(kinetic_energy(P, self.traj.masses), dtype=float)
		return self._T

	def potential_energy(self) -> np.ndarray:
		if self._U is None:
			Q = self.traj.Q[self._indices()]
			self._U = np.asarray(
				potential_energy(Q, self.traj.masses, self.traj.G, self.traj.softening),
				dtype=float,
			)
		return self._U

	def energy(self) -> np.ndarray:
		return self.kinetic_energy() + self.potential_energy()

	def relative_energy_error(self) -> np.ndarray:
		E = self.energy()
		E0 = E[0]
		if E0 == 0.0:
			return E - E0
		return (E - E0) / abs(E0)

	def max_energy_error(self) -> float:
		return float(np.max(np.abs(self.relative_energy_error())))

	def energy_drift_slope(self) -> float:
		err = self.relative_energy_error()
		t = self.times()
		if t.size < 2:
			return 0.0
		slope, _ = np.polyfit(t, err, 1)
		return float(slope)

	def total_momentum(self) -> np.ndarray:
		return total_momentum(self.traj.P)

	def momentum_drift(self) -> float:
		ptot = self.total_momentum()
		return float(np.max(np.linalg.norm(ptot - ptot[0], axis=-1)))

	def angular_momentum(self) -> np.ndarray:
		return angular_momentum(self.traj.Q, self.traj.P)

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		return center_of_mass(self.traj.masses, self.traj.Q, self.traj.P)

	def first_non_finite_index(self) -> int | None:
		return self.traj.first_non_finite_index()

	def summary(self) -> dict:
		bad = self.first_non_finite_index()
		out = {
			"tnum": self.traj.tnum,
			"n_bodies": self.traj.n_bodies,
			"dimension": self.traj.dimension,
			"finite": bad is None,
			"first_non_finite_index": bad,
		}
		if bad is None:
			E = self.energy()
			out.update(
				initial_energy=float(E[0]),
				final_energy=float(E[-1]),
				max_relative_energy_error=self.max_energy_error(),
				energy_drift_slope=self.energy_drift_slope(),
				momentum_drift=self.momentum_drift(),
			)
		logger.info("trajectory diagnostics: %s", out)
		return out
