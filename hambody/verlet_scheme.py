"""
This module implements the Störmer–Verlet (leapfrog) integration scheme.

The VerletScheme class extends IntegrationScheme with the position-momentum-position
splitting: a half-step drift with the current momenta, a full-step kick evaluated at the
half-stepped positions, and a closing half-step drift with the updated momenta. The
operator order is fixed; the kick must see the half-stepped positions and the closing
drift must see the new momenta, otherwise the map is no longer symplectic and the energy
error drifts secularly instead of oscillating.
"""

from __future__ import annotations
from .integration_scheme_base import IntegrationScheme


class VerletScheme(IntegrationScheme):
	name = "verlet"
	symplectic = True

	def step(self, h: float) -> None:
		h2 = 0.5 * h
		self.drift(h2)
		self.kick(h)
		self.drift(h2)
