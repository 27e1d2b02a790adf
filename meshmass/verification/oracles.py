"""Reference inertia computations used to check the analytic formulas.

These are independent of the mesh decomposition and far too slow (brute
force) or too narrow (boxes only) for production use.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from meshmass.core.config import settings
from meshmass.geometry.parallel_axis import compute_point_inertia

if TYPE_CHECKING:
    import numpy.typing as npt

# Outward-wound faces of a tetrahedron (0, 1, 2, 3), up to orientation
_TETRAHEDRON_FACES = np.array([
    [0, 2, 1],
    [0, 3, 2],
    [0, 1, 3],
    [1, 2, 3],
])

# Box corners as (x, y, z) sign bits, and 12 outward-wound triangles over them
_BOX_CORNERS = np.array([
    [-1, -1, -1],
    [1, -1, -1],
    [1, 1, -1],
    [-1, 1, -1],
    [-1, -1, 1],
    [1, -1, 1],
    [1, 1, 1],
    [-1, 1, 1],
], dtype=np.float64)

_BOX_TRIANGLES = np.array([
    0, 2, 1,  0, 3, 2,  # -z
    4, 5, 6,  4, 6, 7,  # +z
    0, 1, 5,  0, 5, 4,  # -y
    3, 7, 6,  3, 6, 2,  # +y
    0, 4, 7,  0, 7, 3,  # -x
    1, 2, 6,  1, 6, 5,  # +x
])


def compute_box_inertia(mass: float, diagonal: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Inertia of a solid axis-aligned box about its center.

                      | y^2 + z^2    0          0       |
        inertia = M/12 |    0      z^2 + x^2     0       |
                      |    0         0       x^2 + y^2   |

    where (x, y, z) is the full-extent ``diagonal`` of the box.
    """
    x, y, z = mass / 12.0 * np.square(np.asarray(diagonal, dtype=np.float64))
    return np.diag([y + z, z + x, x + y])


def build_box_mesh(
    diagonal: npt.ArrayLike, center: npt.ArrayLike = (0.0, 0.0, 0.0)
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.intp]]:
    """Vertices and flat outward-wound triangle indices of an axis-aligned box."""
    half = 0.5 * np.asarray(diagonal, dtype=np.float64)
    points = _BOX_CORNERS * half + np.asarray(center, dtype=np.float64)
    return points, _BOX_TRIANGLES.copy()


def compute_tetrahedron_inertia_by_brute_force(
    points: npt.ArrayLike, resolution: int | None = None
) -> npt.NDArray[np.float64]:
    """Approximate inertia of a unit-density tetrahedron about the frame origin.

    Voxelizes the bounding box so that its longest side spans ``resolution``
    cells, and sums the point inertia of every voxel center lying behind all
    four face planes. Cost grows with ``resolution ** 3``.
    """
    points = np.asarray(points, dtype=np.float64)
    resolution = resolution or settings.BRUTE_FORCE_RESOLUTION

    # face normals, flipped where needed so they point away from the center
    center = points.mean(axis=0)
    face_points = points[_TETRAHEDRON_FACES]
    p0, p1, p2 = face_points[:, 0], face_points[:, 1], face_points[:, 2]
    normals = np.cross(p1 - p0, p2 - p1)
    normals /= np.linalg.norm(normals, axis=1, keepdims=True)
    inward = np.einsum("ij,ij->i", normals, p0 - center) < 0.0
    normals[inward] *= -1.0
    offsets = np.einsum("ij,ij->i", normals, p0)

    # bounds of integration
    box_min = points.min(axis=0)
    box_max = points.max(axis=0)
    delta = (box_max - box_min).max() / resolution
    delta_volume = delta ** 3
    counts = np.ceil((box_max - box_min) / delta).astype(int)
    xs, ys, zs = (
        box_min[axis] + (np.arange(counts[axis]) + 0.5) * delta for axis in range(3)
    )
    grid_y, grid_z = np.meshgrid(ys, zs, indexing="ij")
    slab = np.column_stack([np.zeros(grid_y.size), grid_y.ravel(), grid_z.ravel()])

    inertia = np.zeros((3, 3))
    for x in xs:
        slab[:, 0] = x
        # inside means behind every face plane
        inside = np.all(slab @ normals.T <= offsets, axis=1)
        if not np.any(inside):
            continue
        inertia += compute_point_inertia(slab[inside], delta_volume).sum(axis=0)

    return inertia
