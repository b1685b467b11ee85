"""
This module generates random initial conditions for particle-cloud simulations.

The InitialConditionGenerator class samples positions uniformly in a box centred on the
origin (side lengths xmax, ymax and, in three dimensions, zmax), masses uniformly in
[mmin, mmax] and velocities uniformly in [-vmax/2, vmax/2] per component. An optional
velocity field V is added to the sampled velocities; it is evaluated at the unit-box
coordinates (before the positions are stretched to the box size), so a rotational field
such as V(x, y) = (-y, x) adds speeds of order one whatever the box size. Velocities are
converted to momenta with the sampled masses. Individual bodies can then be overridden
with a fixed mass and/or position, e.g. to place heavy central bodies. The GeneratorConfig
dataclass encapsulates the sampling parameters; a seed makes the draw reproducible
without touching numpy's global random state. validate_system reports the energy budget
of a generated system.
"""

from __future__ import annotations

import numpy as np
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from .errors import ConfigurationError
from .potential import kinetic_energy, potential_energy
from .physics_utils import total_momentum, angular_momentum
from .simulation_state import State, System, build_state


VelocityField = Callable[..., Sequence[float]]


@dataclass
class BodyOverride:
	index: int
	mass: Optional[float] = None
	position: Optional[Sequence[float]] = None


@dataclass
class GeneratorConfig:
	xmax: float = 20.0
	ymax: float = 20.0
	zmax: Optional[float] = None
	mmin: float = 0.2
	mmax: float = 1.0
	vmax: float = 1.0
	velocity_field: Optional[VelocityField] = None
	momentum_scale: float = 1.0
	overrides: List[BodyOverride] = field(default_factory=list)
	G: float = 1.0
	softening: float = 0.0
	seed: Optional[int] = None

	@property
	def dimension(self) -> int:
		return 2 if self.zmax is None else 3


class InitialConditionGenerator:

	def __init__(self, config: GeneratorConfig | None = None):
		self.config: GeneratorConfig = config or GeneratorConfig()
		cfg = self.config
		if not (cfg.mmin > 0.0 and cfg.mmax >= cfg.mmin):
			raise ConfigurationError(
				f"mass range must satisfy 0 < mmin <= mmax, got ({cfg.mmin}, {cfg.mmax})"
			)
		self.rng = np.random.RandomState(cfg.seed)

	def _box(self) -> np.ndarray:
		cfg = self.config
		if cfg.zmax is None:
			return np.array([cfg.xmax, cfg.ymax], dtype=float)
		return np.array([cfg.xmax, cfg.ymax, cfg.zmax], dtype=float)

	def _generate_masses(self, n: int) -> np.ndarray:
		cfg = self.config
		return self.rng.rand(n) * (cfg.mmax - cfg.mmin) + cfg.mmin

	def _generate_unit_positions(self, n: int) -> np.ndarray:
		return self.rng.rand(n, self.config.dimension) - 0.5

	def _generate_velocities(self, unit_pos: np.ndarray) -> np.ndarray:
		cfg = self.config
		n, dim = unit_pos.shape
		vel = (self.rng.rand(n, dim) - 0.5) * cfg.vmax
		if cfg.velocity_field is not None:
			vel += np.array([cfg.velocity_field(*row) for row in unit_pos], dtype=float).reshape(n, dim)
		return vel

	def override_body(
		self,
		masses: np.ndarray,
		positions: np.ndarray,
		index: int,
		*,
		mass: Optional[float] = None,
		position: Optional[Sequence[float]] = None,
	) -> None:
		if not -len(masses) <= index < len(masses):
			raise ConfigurationError(f"override index {index} out of range for {len(masses)} bodies")
		if mass is not None:
			if not mass > 0.0:
				raise ConfigurationError(f"override mass must be positive, got {mass}")
			masses[index] = float(mass)
		if position is not None:
			positions[index, :] = np.asarray(position, dtype=float)

	def generate_single(self, n_bodies: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		if n_bodies < 1:
			raise ConfigurationError(f"n_bodies must be at least 1, got {n_bodies}")
		unit_pos = self._generate_unit_positions(n_bodies)
		m = self._generate_masses(n_bodies)
		v = self._generate_velocities(unit_pos)
		q = unit_pos * self._box()
		p = v * m[:, None] * self.config.momentum_scale
		for ov in self.config.overrides:
			self.override_body(m, q, ov.index, mass=ov.mass, position=ov.position)
		return m, q, p

	def create_state(
		self,
		n_bodies: int,
		labels: Sequence[str] | None = None,
	) -> Tuple[System, State]:
		m, q, p = self.generate_single(n_bodies)
		return build_state(
			masses=m,
			positions=q,
			momenta=p,
			G=self.config.G,
			softening=self.config.softening,
			labels=labels,
		)

	def validate_system(
		self,
		masses: np.ndarray,
		positions: np.ndarray,
		momenta: np.ndarray,
	) -> Dict[str, float]:
		KE = kinetic_energy(momenta, masses)
		PE = potential_energy(positions, masses, self.config.G, self.config.softening)
		E_tot = KE + PE
		if PE:
			virial = 2 * KE / abs(PE)
		else:
			virial = np.inf
		L = angular_momentum(positions, momenta)

		return {
			"kinetic_energy": KE,
			"potential_energy": PE,
			"total_energy": E_tot,
			"virial_ratio": virial,
			"angular_momentum": L,
			"total_momentum": float(np.linalg.norm(total_momentum(momenta))),
			"is_bound": bool(E_tot < 0),
		}


def generate_particles(
	n: int,
	*,
	xmax: float = 20.0,
	ymax: float = 20.0,
	mmin: float = 0.2,
	mmax: float = 1.0,
	vmax: float = 1.0,
	V: Optional[VelocityField] = None,
	seed: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
	gen = InitialConditionGenerator(
		GeneratorConfig(xmax=xmax, ymax=ymax, mmin=mmin, mmax=mmax, vmax=vmax, velocity_field=V, seed=seed)
	)
	m, q, p = gen.generate_single(n)
	return q, p, m
