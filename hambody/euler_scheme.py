"""
This module implements the explicit Euler scheme used as a non-symplectic baseline.

Both updates of an EulerScheme step read the state at the start of the step: the
momenta are kicked with the gradient at the old positions and the positions are drifted
with the old momenta. The scheme is first order and does not conserve energy; it exists
to contrast the steady energy drift it produces with the bounded error of Störmer–Verlet.
"""

from __future__ import annotations
from .integration_scheme_base import IntegrationScheme


class EulerScheme(IntegrationScheme):
	name = "euler"

	def step(self, h: float) -> None:
		integ = self.integ
		if integ.n_bodies >= 2:
			grad = self.gradient()
		else:
			grad = None
		self.drift(h)
		if grad is not None:
			integ._p -= float(h) * grad
