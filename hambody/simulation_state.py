"""
This module defines the value types exchanged between the integrator and its callers.

State holds the N×D position and momentum arrays of one instant, System holds the
length-N mass array together with the gravitational constant, the softening floor and
optional per-body labels, and Trajectory holds the full (tnum, N, D) position and
momentum history of a finished run. All three share one body-index ordering. Arrays are
copied on construction, Trajectory arrays are marked read-only and its metadata is a
read-only mapping, so a returned run can be handed to any number of consumers.
build_state packs a list of Body objects (or parallel arrays) into a System and an
initial State.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
	from .body import Body


def _readonly(arr, copy: bool = True) -> np.ndarray:
	if copy:
		out = np.array(arr, dtype=np.float64)
	else:
		out = np.asarray(arr, dtype=np.float64)
	out.setflags(write=False)
	return out


@dataclass(frozen=True)
class State:
	positions: np.ndarray
	momenta: np.ndarray

	def __post_init__(self):
		object.__setattr__(self, "positions", _readonly(self.positions))
		object.__setattr__(self, "momenta", _readonly(self.momenta))

	@property
	def n_bodies(self) -> int:
		return int(self.positions.shape[0]) if self.positions.ndim >= 1 else 0

	@property
	def dimension(self) -> int:
		return int(self.positions.shape[1]) if self.positions.ndim == 2 else 0

	def velocities(self, masses: np.ndarray) -> np.ndarray:
		return self.momenta / np.asarray(masses, dtype=float)[:, None]

	def reversed(self) -> "State":
		return State(self.positions, -self.momenta)


@dataclass(frozen=True)
class System:
	masses: np.ndarray
	G: float = 1.0
	softening: float = 0.0
	labels: Tuple[str, ...] | None = None
	dimension: int | None = None

	def __post_init__(self):
		object.__setattr__(self, "masses", _readonly(np.asarray(self.masses, dtype=float).ravel()))
		object.__setattr__(self, "G", float(self.G))
		object.__setattr__(self, "softening", float(self.softening))
		if self.labels is not None:
			object.__setattr__(self, "labels", tuple(str(s) for s in self.labels))

	@property
	def n_bodies(self) -> int:
		return int(self.masses.size)


@dataclass(frozen=True)
class Trajectory:
	Q: np.ndarray
	P: np.ndarray
	masses: np.ndarray
	dt: float
	G: float = 1.0
	softening: float = 0.0
	labels: Tuple[str, ...] | None = None
	metadata: Mapping = field(default_factory=dict)

	def __post_init__(self):
		object.__setattr__(self, "Q", _readonly(self.Q, copy=False))
		object.__setattr__(self, "P", _readonly(self.P, copy=False))
		object.__setattr__(self, "masses", _readonly(self.masses))
		object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
		if self.labels is not None:
			object.__setattr__(self, "labels", tuple(str(s) for s in self.labels))

	@property
	def tnum(self) -> int:
		return int(self.Q.shape[0])

	@property
	def n_bodies(self) -> int:
		return int(self.Q.shape[1])

	@property
	def dimension(self) -> int:
		return int(self.Q.shape[2])

	@property
	def times(self) -> np.ndarray:
		return np.arange(self.tnum, dtype=float) * self.dt

	def state(self, t: int) -> State:
		return State(self.Q[t], self.P[t])

	def velocities(self) -> np.ndarray:
		return self.P / self.masses[None, :, None]

	def is_finite(self) -> bool:
		return bool(np.all(np.isfinite(self.Q)) and np.all(np.isfinite(self.P)))

	def first_non_finite_index(self) -> int | None:
		ok = np.all(np.isfinite(self.Q), axis=(1, 2)) & np.all(np.isfinite(self.P), axis=(1, 2))
		bad = np.flatnonzero(~ok)
		if bad.size == 0:
			return None
		return int(bad[0])

	def body_labels(self) -> List[str]:
		if self.labels is not None:
			return list(self.labels)
		return [f"body {k}" for k in range(self.n_bodies)]


def reverse_state(state: State) -> State:
	return state.reversed()


def build_state(
	bodies: Sequence["Body"] | None = None,
	*,
	masses=None,
	positions=None,
	momenta=None,
	velocities=None,
	G: float = 1.0,
	softening: float = 0.0,
	labels: Sequence[str] | None = None,
) -> Tuple[System, State]:
	if bodies is not None:
		m = np.array([b.mass for b in bodies], dtype=float)
		q = np.array([b.position for b in bodies], dtype=float)
		p = np.array([b.momentum for b in bodies], dtype=float)
		if labels is None and any(b.label is not None for b in bodies):
			labels = [b.label if b.label is not None else f"body {k}" for k, b in enumerate(bodies)]
	else:
		if masses is None or positions is None:
			raise TypeError("build_state needs either bodies or masses and positions")
		m = np.asarray(masses, dtype=float).ravel()
		q = np.asarray(positions, dtype=float)
		if momenta is not None:
			p = np.asarray(momenta, dtype=float)
		elif velocities is not None:
			p = np.asarray(velocities, dtype=float) * m[:, None]
		else:
			p = np.zeros_like(q)

	dim = int(q.shape[1]) if q.ndim == 2 else None
	system = System(m, G=G, softening=softening, labels=labels, dimension=dim)
	return system, State(q, p)
