"""
This module implements the partial derivatives of the N-body Hamiltonian
H(q, p) = sum_k |p_k|^2 / (2 m_k) - sum_{i<k} G m_i m_k / max(|q_i - q_k|, eps).

Hp returns dH/dp, the velocity of every body. Hq returns dH/dq: for body k the sum over
all other bodies i of G m_k m_i (q_k - q_i) / max(|q_i - q_k|, eps)^3, which is minus the
gravitational force, so an integrator subtracts it from the momentum. The all-pairs sum
is O(N^2) and evaluated with numpy broadcasting over the buffers produced by
geometry_buffers. pairwise_terms exposes the individual (k, i) contributions, which are
antisymmetric in (k, i). When eps is 0 no floor is applied and coincident bodies give
non-finite values that propagate to the caller; numpy's floating-point warnings for
that case are silenced here. Positions may be two- or three-dimensional.
"""

from __future__ import annotations
import numpy as np
from numpy.typing import NDArray
from typing import Tuple
from .geometry_cache import geometry_buffers


def Hp(p: NDArray[np.floating], m: NDArray[np.floating]) -> NDArray[np.floating]:
    p = np.asarray(p, dtype=float)
    m = np.asarray(m, dtype=float)
    return p / m[:, None]


def pairwise_terms(
    q: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float = 1.0,
    eps: float = 0.0,
) -> NDArray[np.floating]:
    q = np.asarray(q, dtype=float)
    m = np.asarray(m, dtype=float)

    dr, _, inv_r3 = geometry_buffers(q, float(eps))
    coeff = float(G) * (m[:, None] * m[None, :]) * inv_r3
    with np.errstate(invalid="ignore"):
        return coeff[..., None] * dr


def Hq(
    q: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float = 1.0,
    eps: float = 0.0,
) -> NDArray[np.floating]:
    q = np.asarray(q, dtype=float)
    if q.shape[0] < 2:
        return np.zeros_like(q)
    return pairwise_terms(q, m, G, eps).sum(axis=1)


def hamiltonian_gradients(
    q: NDArray[np.floating],
    p: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float = 1.0,
    eps: float = 0.0,
) -> Tuple[NDArray[np.floating], NDArray[np.floating]]:
    return Hq(q, m, G, eps), Hp(p, m)


def gravitational_force(q: np.ndarray,
                        m: np.ndarray,
                        eps: float = 0.0,
                        G: float = 1.0) -> np.ndarray:
    return -Hq(q, m, G, eps)
