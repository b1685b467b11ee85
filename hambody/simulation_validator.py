"""
This module provides validation utilities for integration inputs.

The SimulationValidator class offers static methods that check an initial state and its
system for physical and structural consistency (at least one body, two- or
three-dimensional vectors, matching position/momentum/mass body counts, positive finite
masses, finite initial coordinates) and raise ConfigurationError on the first problem
found, before any trajectory storage is allocated. state_is_valid gives the same
verdict as a boolean and report_invalid_state logs a detailed breakdown of an offending
state for debugging.
"""

from __future__ import annotations
import logging
from typing import Tuple
import numpy as np

from .errors import ConfigurationError
from .sim_config import SimConfig, _ALLOWED_DIMENSIONS

logger = logging.getLogger(__name__)


class SimulationValidator:
	@staticmethod
	def check_arrays(
		positions,
		momenta,
		masses,
		dimension: int | None = None,
	) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		q = np.asarray(positions, dtype=float)
		p = np.asarray(momenta, dtype=float)
		m = np.asarray(masses, dtype=float)

		if m.ndim != 1:
			raise ConfigurationError(f"masses must be a 1-d array, got shape {m.shape}")
		if q.ndim != 2:
			raise ConfigurationError(f"positions must be an (N, D) array, got shape {q.shape}")
		if q.shape[0] < 1:
			raise ConfigurationError("at least one body is required")
		if q.shape[1] not in _ALLOWED_DIMENSIONS:
			raise ConfigurationError(
				f"positions must have D in {_ALLOWED_DIMENSIONS} columns, got {q.shape[1]}"
			)
		if dimension is not None and q.shape[1] != int(dimension):
			raise ConfigurationError(
				f"positions are {q.shape[1]}-dimensional but dimension={dimension} was requested"
			)
		if p.shape != q.shape:
			raise ConfigurationError(
				f"momenta shape {p.shape} does not match positions shape {q.shape}"
			)
		if m.size != q.shape[0]:
			raise ConfigurationError(
				f"{m.size} masses given for {q.shape[0]} bodies"
			)
		if not np.all(np.isfinite(m)) or np.any(m <= 0.0):
			raise ConfigurationError("all masses must be positive finite numbers")
		if not np.all(np.isfinite(q)) or not np.all(np.isfinite(p)):
			raise ConfigurationError("initial positions and momenta must be finite")
		return q, p, m

	@staticmethod
	def check_run(state, system, config: SimConfig) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		config.validate()
		dimension = config.dimension
		if dimension is None:
			dimension = getattr(system, "dimension", None)
		elif system.dimension is not None and system.dimension != dimension:
			raise ConfigurationError(
				f"system dimension {system.dimension} conflicts with configured dimension {dimension}"
			)
		return SimulationValidator.check_arrays(
			state.positions, state.momenta, system.masses, dimension
		)

	@staticmethod
	def state_is_valid(positions, momenta, masses) -> bool:
		try:
			SimulationValidator.check_arrays(positions, momenta, masses)
		except ConfigurationError:
			return False
		return True

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		momenta=None,
	) -> None:
		logger.warning("[invalid] %s", label)
		if masses is not None:
			m = np.asarray(masses, dtype=float)
			logger.warning("masses %s", m)
			bad = np.flatnonzero(~np.isfinite(m) | (m <= 0.0)) if m.ndim == 1 else []
			for i in bad:
				logger.warning("  mass[%d] = %r is not a positive finite number", i, m[i])
		for name, arr in (("positions", positions), ("momenta", momenta)):
			if arr is None:
				continue
			a = np.asarray(arr, dtype=float)
			logger.warning("%s shape %s", name, a.shape)
			if a.ndim == 2 and a.shape[1] not in _ALLOWED_DIMENSIONS:
				logger.warning("  %s have %d dimensions (expected 2 or 3)", name, a.shape[1])
			if a.ndim == 2:
				for i in np.flatnonzero(~np.all(np.isfinite(a), axis=1)):
					logger.warning("  %s[%d] is not finite", name, i)
