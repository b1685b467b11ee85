from __future__ import annotations
import numpy as np
from numpy.typing import NDArray
from .geometry_cache import floored_distances

"""
This module computes the energy terms of the N-body Hamiltonian. kinetic_energy returns sum_k |p_k|^2 / (2 m_k), potential_energy returns -sum_{i<k} G m_i m_k / max(|q_i - q_k|, eps) using the same distance floor as the gradient, and total_energy is their sum. Each accepts a single (N, D) state or a stacked (T, N, D) trajectory, in which case a length-T array is returned. Single bodies have zero potential energy.

"""

__all__ = ["kinetic_energy", "potential_energy", "total_energy"]


def kinetic_energy(
    p: NDArray[np.floating],
    m: NDArray[np.floating],
):
    p_arr = np.asarray(p, dtype=float)
    m_arr = np.asarray(m, dtype=float).ravel()
    T = 0.5 * np.sum(np.sum(p_arr * p_arr, axis=-1) / m_arr, axis=-1)
    if p_arr.ndim == 2:
        return float(T)
    return T


def _potential_single(q: np.ndarray, m: np.ndarray, G: float, eps: float) -> float:
    n = int(q.shape[0])
    if n < 2:
        return 0.0

    _, r = floored_distances(q, eps)
    iu = np.triu_indices(n, 1)
    with np.errstate(divide="ignore"):
        term = (m[iu[0]] * m[iu[1]]) / r[iu]
    return -float(G) * float(np.sum(term))


def potential_energy(
    q: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float = 1.0,
    eps: float = 0.0,
):
    q_arr = np.asarray(q, dtype=float)
    m_arr = np.asarray(m, dtype=float).ravel()

    if q_arr.ndim == 2:
        return _potential_single(q_arr, m_arr, G, eps)
    return np.array([_potential_single(qt, m_arr, G, eps) for qt in q_arr], dtype=float)


def total_energy(
    q: NDArray[np.floating],
    p: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float = 1.0,
    eps: float = 0.0,
):
    return kinetic_energy(p, m) + potential_energy(q, m, G, eps)
