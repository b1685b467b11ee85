import math
import numpy as np
from typing import Tuple
from .physics_utils import remove_center_of_mass_velocity

"""
This module provides deterministic initial conditions with known analytic behaviour. The SpecializedGenerators class offers static methods for a circular two-body (Kepler) pair in its centre-of-mass frame, whose orbit closes after kepler_period, and an equal-mass polygon with a tunable rotation speed. Each generator returns masses, positions and velocities, removes any centre-of-mass drift, and can embed the configuration in three dimensions (z = 0) for testing the 3-D code paths.

"""


def _embed(arr: np.ndarray, dimension: int) -> np.ndarray:
	if dimension == 2:
		return arr
	return np.column_stack([arr, np.zeros(arr.shape[0])])


class SpecializedGenerators:

	@staticmethod
	def kepler_period(separation: float, m1: float, m2: float, G: float = 1.0) -> float:
		return 2.0 * math.pi * math.sqrt(separation ** 3 / (G * (m1 + m2)))

	@staticmethod
	def generate_kepler_pair(
		m1: float = 1.0,
		m2: float = 1.0e-6,
		separation: float = 1.0,
		G: float = 1.0,
		*,
		dimension: int = 2,
	) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:

		masses = np.array([m1, m2], dtype=float)
		M = m1 + m2

		x1 = -m2 * separation / M
		x2 = m1 * separation / M
		positions = np.array([
			[x1, 0.0],
			[x2, 0.0],
		])

		v_rel = math.sqrt(G * M / separation)
		velocities = np.array([
			[0.0, -m2 * v_rel / M],
			[0.0, m1 * v_rel / M],
		])

		velocities = remove_center_of_mass_velocity(masses, velocities)
		return masses, _embed(positions, dimension), _embed(velocities, dimension)

	@staticmethod
	def generate_equal_mass_polygon(
		n_bodies: int,
		radius: float = 1.0,
		rotation_fraction: float = 0.5,
		G: float = 1.0,
		*,
		dimension: int = 2,
	) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:

		masses = np.ones(n_bodies)

		angles = np.linspace(0.0, 2.0 * np.pi, n_bodies, endpoint=False)
		positions = np.column_stack([
			radius * np.cos(angles),
			radius * np.sin(angles)
		])

		total_mass = float(np.sum(masses))
		v_scale = np.sqrt(G * total_mass / radius) * rotation_fraction

		velocities = np.column_stack([
			-v_scale * np.sin(angles),
			 v_scale * np.cos(angles)
		])

		velocities = remove_center_of_mass_velocity(masses, velocities)
		return masses, _embed(positions, dimension), _embed(velocities, dimension)
