"""Volume and inertia of a single tetrahedron.

Both functions take the four vertices as an array of shape (4, 3), or a stack
of tetrahedra of shape (T, 4, 3) to evaluate many at once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def compute_tetrahedron_volume(points: npt.ArrayLike) -> float | npt.NDArray[np.float64]:
    """Signed volume of the tetrahedron (p0, p1, p2, p3).

    Triangle (p1, p2, p3) is assumed to be wound by the right-hand rule, with
    its normal pointing away from p0's side of the solid. The volume is
    negative when p0 lies in front of that face, in which case the
    tetrahedron contributes negatively to any totals.

        volume = (face_area * face_normal) . (p3 - p0) / 3
        face_area * face_normal = (p2 - p1) x (p3 - p2) / 2
    """
    points = np.asarray(points, dtype=np.float64)
    p0, p1, p2, p3 = (points[..., n, :] for n in range(4))
    volume = np.einsum("...i,...i->...", np.cross(p2 - p1, p3 - p2), p3 - p0) / 6.0
    if points.ndim == 2:
        return float(volume)
    return volume


def _pairwise_sum(a: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    # a0(a0 + a1 + a2 + a3) + a1(a1 + a2 + a3) + a2(a2 + a3) + a3 a3
    a0, a1, a2, a3 = (a[..., n] for n in range(4))
    return (
        a0 * (a0 + a1 + a2 + a3)
        + a1 * (a1 + a2 + a3)
        + a2 * (a2 + a3)
        + a3 * a3
    )


def compute_tetrahedron_inertia(
    mass: float | npt.ArrayLike, points: npt.ArrayLike
) -> npt.NDArray[np.float64]:
    """Inertia tensor of a tetrahedron about its own center of mass.

    The points must already be expressed in the tetrahedron's center of mass
    frame (their sum is the origin); the formulas are wrong otherwise. Mass
    may be negative, as it is for the signed tetrahedra of a mesh
    decomposition.

    The analytic expressions follow F. Tonon, "Explicit exact formulas for
    the 3-D tetrahedron inertia tensor in terms of its vertex coordinates",
    J. Math. Stat. 1 (2005). The printed paper has a typo in its final
    formulas; these are verified against brute-force integration instead.

    The tensor has the form

        | a  f  e |
        | f  b  d |
        | e  d  c |

    and each pass of the loop below fills one diagonal entry and the
    off-diagonal pair on the other two axes.
    """
    points = np.asarray(points, dtype=np.float64)
    mass = np.asarray(mass, dtype=np.float64)
    inertia = np.zeros(points.shape[:-2] + (3, 3))

    for i in range(3):
        j = (i + 1) % 3
        k = (j + 1) % 3
        pj = points[..., :, j]
        pk = points[..., :, k]

        inertia[..., i, i] = mass * 0.1 * (_pairwise_sum(pj) + _pairwise_sum(pk))

        # 2 * sum(pj_a * pk_a) + sum over a != b of pj_a * pk_b
        same = np.sum(pj * pk, axis=-1)
        mixed = np.sum(pj * (np.sum(pk, axis=-1, keepdims=True) - pk), axis=-1)
        off_diagonal = -mass * 0.05 * (2.0 * same + mixed)
        inertia[..., j, k] = off_diagonal
        inertia[..., k, j] = off_diagonal

    return inertia
