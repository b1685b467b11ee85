"""
This module defines the Body class, a simple data container for an individual point
mass before it is packed into the array layout used during integration.

The class stores the mass as a float and the position and momentum as float vectors of
two or three components, plus an optional label used by plots and exports. The mass is
fixed at construction; position and momentum are copied in so later edits to the
caller's arrays do not leak into the body. The class makes no assumptions about units,
leaving those decisions to the preset or generator that creates it.
"""

from __future__ import annotations
from typing import Sequence
import numpy as np


class Body:
	__slots__ = ("_mass", "position", "momentum", "label")

	def __init__(
		self,
		mass: float,
		position: Sequence[float],
		momentum: Sequence[float] | None = None,
		label: str | None = None,
	):
		self._mass = float(mass)
		self.position = np.array(position, dtype=float)
		if momentum is None:
			self.momentum = np.zeros_like(self.position)
		else:
			self.momentum = np.array(momentum, dtype=float)
		self.label = label

	@classmethod
	def from_velocity(
		cls,
		mass: float,
		position: Sequence[float],
		velocity: Sequence[float],
		label: str | None = None,
	) -> "Body":
		return cls(mass, position, float(mass) * np.asarray(velocity, dtype=float), label)

	@property
	def mass(self) -> float:
		return self._mass

	@property
	def velocity(self) -> np.ndarray:
		return self.momentum / self._mass

	@property
	def dimension(self) -> int:
		return int(self.position.shape[0])

	def __repr__(self) -> str:
		return (
			f"Body(mass={self._mass}, position={self.position.tolist()}, "
			f"momentum={self.momentum.tolist()}, label={self.label!r})"
		)
