"""
This base class defines the interface for the fixed-step integration schemes.

The IntegrationScheme class provides the two Hamiltonian flows every scheme is built
from: drift advances the working positions along dH/dp (the body velocities) and kick
advances the working momenta against dH/dq (the gravitational gradient). Both update the
parent integrator's working arrays in place. Subclasses implement step, one full time
step of length h composed from these operators. The class assumes the parent
integrator holds valid working arrays, masses and force parameters for the current run.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np

from .forces import Hp, Hq

if TYPE_CHECKING:
	from .integrator import Integrator


class IntegrationScheme:
	name = "base"
	symplectic = False

	def __init__(self, integrator: "Integrator") -> None:
		self.integ = integrator

	def velocity(self) -> np.ndarray:
		integ = self.integ
		return Hp(integ._p, integ.masses)

	def gradient(self) -> np.ndarray:
		integ = self.integ
		return Hq(integ._q, integ.masses, integ.G, integ.softening)

	def drift(self, h: float) -> None:
		self.integ._q += float(h) * self.velocity()

	def kick(self, h: float) -> None:
		integ = self.integ
		if integ.n_bodies >= 2:
			integ._p -= float(h) * self.gradient()

	def step(self, h: float) -> None:
		raise NotImplementedError
