from __future__ import annotations
import logging
from typing import Callable, Optional, Tuple
import numpy as np

from .errors import ConfigurationError
from .sim_config import SimConfig
from .simulation_state import State, System, Trajectory
from .simulation_validator import SimulationValidator
from .integration_scheme_base import IntegrationScheme
from .verlet_scheme import VerletScheme
from .euler_scheme import EulerScheme

"""
This central module implements the Integrator class that drives fixed-step time integration of an N-body system. An Integrator is built from a System (masses, gravitational constant, softening floor) and a SimConfig (step size, horizon, scheme); the gravitational constant and softening always come from the System, and a SimConfig that sets different values is rejected. Each call to run validates the initial state, allocates the (tnum, N, D) position and momentum storage, writes the initial condition at index 0 and fills every later index by applying one scheme step to the working arrays, so no state survives from one run to the next. Runs can be stopped cooperatively between completed steps through a should_stop callback, in which case the trajectory is truncated to the finished entries. The integrate function is the functional entry point taking an initial State and a System; stormer and euler take bare arrays and return the Q and P histories.

"""

logger = logging.getLogger(__name__)

StopCallback = Callable[[int], bool]


class Integrator:
	def __init__(self, system: System, config: SimConfig) -> None:
		self.system = system
		self.config = config.validate().resolve(system)

		self.masses = np.asarray(system.masses, dtype=float)
		self.G = float(self.config.G)
		self.softening = float(self.config.softening)
		self.n_bodies = int(self.masses.size)

		self._q: np.ndarray | None = None
		self._p: np.ndarray | None = None

		self._scheme: IntegrationScheme = self._make_scheme(self.config.scheme)

	def _make_scheme(self, mode: str) -> IntegrationScheme:
		if mode == "verlet":
			return VerletScheme(self)
		if mode == "euler":
			return EulerScheme(self)
		raise ConfigurationError(f"unknown integration scheme {mode!r}")

	@property
	def scheme(self) -> IntegrationScheme:
		return self._scheme

	def step(self, q: np.ndarray, p: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
		self._q = np.array(q, dtype=float)
		self._p = np.array(p, dtype=float)
		self._scheme.step(self.config.dt)
		q_new, p_new = self._q, self._p
		self._q = self._p = None
		return q_new, p_new

	def run(
		self,
		initial_state: State,
		*,
		should_stop: Optional[StopCallback] = None,
	) -> Trajectory:
		cfg = self.config
		q0, p0, _ = SimulationValidator.check_run(initial_state, self.system, cfg)

		tnum = cfg.tnum
		n, dim = q0.shape
		logger.debug(
			"integrating N=%d D=%d tnum=%d dt=%g scheme=%s (symplectic=%s) softening=%g",
			n, dim, tnum, cfg.dt, cfg.scheme, self._scheme.symplectic, self.softening,
		)

		Q = np.empty((tnum, n, dim), dtype=np.float64)
		P = np.empty((tnum, n, dim), dtype=np.float64)
		Q[0] = q0
		P[0] = p0

		self._q = q0.copy()
		self._p = p0.copy()
		completed = tnum
		try:
			for t in range(1, tnum):
				if should_stop is not None and should_stop(t):
					completed = t
					logger.debug("run stopped before step %d of %d", t, tnum - 1)
					break
				self._scheme.step(cfg.dt)
				Q[t] = self._q
				P[t] = self._p
		finally:
			self._q = self._p = None

		if completed < tnum:
			Q = Q[:completed]
			P = P[:completed]

		traj = Trajectory(
			Q=Q,
			P=P,
			masses=self.masses,
			dt=cfg.dt,
			G=self.G,
			softening=self.softening,
			labels=self.system.labels,
			metadata={
				"scheme": cfg.scheme,
				"symplectic": self._scheme.symplectic,
				"tmax": cfg.tmax,
				"completed": completed == tnum,
			},
		)
		bad = traj.first_non_finite_index() if cfg.check_finite else None
		if bad is not None:
			logger.warning(
				"trajectory contains non-finite values from time index %d on "
				"(softening=%g); check for colliding bodies",
				bad, self.softening,
			)
		logger.debug("integration finished with %d stored states", traj.tnum)
		return traj


def integrate(
	initial_state: State,
	system_params: System,
	dt: float | None = None,
	tmax: float | None = None,
	*,
	config: SimConfig | None = None,
	scheme: str = "verlet",
	should_stop: Optional[StopCallback] = None,
) -> Trajectory:
	if config is None:
		if dt is None or tmax is None:
			raise ConfigurationError("integrate needs dt and tmax, or a SimConfig")
		config = SimConfig(
			dt=float(dt),
			tmax=float(tmax),
			dimension=system_params.dimension,
			scheme=scheme,
		)
	elif dt is not None or tmax is not None:
		raise ConfigurationError("pass dt and tmax either directly or through config, not both")
	return Integrator(system_params, config).run(initial_state, should_stop=should_stop)


def _run_arrays(q0, p0, m, tmax, dt, G, eps, scheme) -> Tuple[np.ndarray, np.ndarray]:
	system = System(np.asarray(m, dtype=float), G=G, softening=eps)
	cfg = SimConfig(dt=dt, tmax=tmax, G=G, softening=eps, scheme=scheme)
	traj = Integrator(system, cfg).run(State(q0, p0))
	return traj.Q, traj.P


def stormer(q0, p0, m, tmax: float, *, dt: float = 0.1, G: float = 1.0, eps: float = 0.0):
	return _run_arrays(q0, p0, m, tmax, dt, G, eps, "verlet")


def euler(q0, p0, m, tmax: float, *, dt: float = 0.1, G: float = 1.0, eps: float = 0.0):
	return _run_arrays(q0, p0, m, tmax, dt, G, eps, "euler")
