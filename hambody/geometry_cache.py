from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the shared geometric kernel for N-body gradient and energy computations. The geometry_buffers function computes pairwise position differences, Euclidean separations floored at the softening distance, and inverse cubed floored separations in a single pass, using Einstein summation for the squared norms. The diagonal is zeroed so a body never interacts with itself. With a zero floor a coincident off-diagonal pair yields an infinite inverse distance, which is left in place for the caller to propagate. Positions may be two- or three-dimensional.

"""


__all__ = ["geometry_buffers", "floored_distances"]


def floored_distances(
    pos: np.ndarray,
    eps: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=float)

    diff = pos[:, None, :] - pos[None, :, :]
    r2 = np.einsum("ijk,ijk->ij", diff, diff)
    r = np.sqrt(r2)
    if eps > 0.0:
        r = np.maximum(r, eps)
    return diff, r


def geometry_buffers(
    pos: np.ndarray,
    eps: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    diff, r = floored_distances(pos, eps)

    with np.errstate(divide="ignore"):
        inv_r3 = 1.0 / (r * r * r)

    np.fill_diagonal(inv_r3, 0.0)
    return diff, r, inv_r3
