import numpy as np
from typing import Tuple

"""
This module provides the conserved-quantity helpers shared by the diagnostics and the initial-condition generators. remove_center_of_mass_velocity subtracts the centre-of-mass velocity from a velocity array, total_momentum sums momenta over bodies, center_of_mass returns the mass-weighted mean position and velocity, and angular_momentum returns sum_k q_k x p_k (a scalar per state in two dimensions, a vector in three). The momentum and angular momentum helpers accept either one (N, D) state or a stacked (T, N, D) trajectory.


"""

def remove_center_of_mass_velocity(
	masses: np.ndarray, velocities: np.ndarray
) -> np.ndarray:
	if len(masses) == 1:
		return velocities.copy()
	total_mass = float(np.sum(masses))
	if total_mass == 0 or velocities.size == 0:
		return velocities.copy()
	v_cm = np.sum(masses[:, None] * velocities, axis=0) / total_mass
	return velocities - v_cm


def total_momentum(momenta: np.ndarray) -> np.ndarray:
	return np.sum(np.asarray(momenta, dtype=float), axis=-2)


def center_of_mass(
	masses: np.ndarray, positions: np.ndarray, momenta: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
	m = np.asarray(masses, dtype=float)
	M = float(np.sum(m))
	com_pos = np.sum(m[:, None] * np.asarray(positions, dtype=float), axis=-2) / M
	com_vel = total_momentum(momenta) / M
	return com_pos, com_vel


def angular_momentum(positions: np.ndarray, momenta: np.ndarray) -> np.ndarray:
	q = np.asarray(positions, dtype=float)
	p = np.asarray(momenta, dtype=float)
	if q.shape[-1] == 2:
		return np.sum(q[..., 0] * p[..., 1] - q[..., 1] * p[..., 0], axis=-1)
	return np.sum(np.cross(q, p), axis=-2)
