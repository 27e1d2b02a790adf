"""Parallel axis theorem for inertia tensors.

    I_shifted = I_cm + M * [ (R . R) E - R (x) R ]

where R . R is the inner product, R (x) R the outer product and E the
identity. Both shift functions update the tensor in place and also return it.
They accept a single (3, 3) tensor with a (3,) shift and scalar mass, or a
stack of (T, 3, 3) tensors with (T, 3) shifts and (T,) masses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def compute_point_inertia(
    point: npt.ArrayLike, mass: float | npt.ArrayLike
) -> npt.NDArray[np.float64]:
    """Inertia of a point mass about the origin: M * [ (R . R) E - R (x) R ]."""
    point = np.asarray(point, dtype=np.float64)
    mass = np.asarray(mass, dtype=np.float64)
    distance_squared = np.einsum("...i,...i->...", point, point)
    outer = np.einsum("...i,...j->...ij", point, point)
    return mass[..., None, None] * (
        distance_squared[..., None, None] * np.eye(3) - outer
    )


def _shift(inertia, shift, mass, sign: float):
    shift = np.asarray(shift, dtype=np.float64)
    distance_squared = np.einsum("...i,...i->...", shift, shift)

    if inertia.ndim == 2:
        if distance_squared > 0.0:
            inertia += sign * compute_point_inertia(shift, mass)
        return inertia

    # rows with a zero offset are left untouched
    moving = distance_squared > 0.0
    if np.any(moving):
        mass = np.broadcast_to(np.asarray(mass, dtype=np.float64), moving.shape)
        inertia[moving] += sign * compute_point_inertia(shift[moving], mass[moving])
    return inertia


def apply_parallel_axis_theorem(
    inertia: npt.NDArray[np.float64],
    shift: npt.ArrayLike,
    mass: float | npt.ArrayLike,
) -> npt.NDArray[np.float64]:
    """Move a tensor taken about the center of mass to a frame offset by ``shift``."""
    return _shift(inertia, shift, mass, 1.0)


def apply_inverse_parallel_axis_theorem(
    inertia: npt.NDArray[np.float64],
    shift: npt.ArrayLike,
    mass: float | npt.ArrayLike,
) -> npt.NDArray[np.float64]:
    """Recover the center of mass tensor from one taken about an offset origin.

        I_cm = I_shifted - M * [ (R . R) E - R (x) R ]
    """
    return _shift(inertia, shift, mass, -1.0)
