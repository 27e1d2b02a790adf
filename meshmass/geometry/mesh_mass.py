"""Mass properties of a closed triangle mesh.

The mesh is processed one triangle at a time. Each triangle defines a
tetrahedron with the local origin as its fourth point, and each tetrahedron
contributes to three totals: volume, center of mass and inertia tensor.

Triangles must be wound by the right-hand rule, so the points of each
triangle circle counter-clockwise about its outward face normal. Tetrahedra
whose apex lies behind a face then carry negative volume, which cancels the
space outside the solid for any closed mesh, convex or not.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from meshmass.core.config import settings
from meshmass.core.exceptions import DegenerateMeshError, InvalidMeshError
from meshmass.core.logging import get_logger
from meshmass.geometry.parallel_axis import (
    apply_inverse_parallel_axis_theorem,
    apply_parallel_axis_theorem,
)
from meshmass.geometry.tetrahedron import (
    compute_tetrahedron_inertia,
    compute_tetrahedron_volume,
)
from meshmass.schemas.mass_properties import MassProperties

if TYPE_CHECKING:
    import numpy.typing as npt

log = get_logger(__name__)


def _invalid(message: str) -> InvalidMeshError:
    log.warning("invalid_mesh", reason=message)
    return InvalidMeshError(message)


def _prepare_buffers(points, triangle_indices, check: bool):
    points = np.asarray(points, dtype=np.float64)
    indices = np.asarray(triangle_indices)

    if check:
        if points.ndim != 2 or points.shape[1] != 3:
            raise _invalid(f"points must have shape (N, 3), got {points.shape}")
        if indices.size and not np.issubdtype(indices.dtype, np.integer):
            raise _invalid(f"triangle indices must be integers, got {indices.dtype}")
        if indices.size % 3 != 0:
            raise _invalid(
                f"triangle index count must be a multiple of 3, got {indices.size}"
            )
        if indices.size and (indices.min() < 0 or indices.max() >= len(points)):
            raise _invalid(
                f"triangle indices must lie in [0, {len(points)}), "
                f"got range [{indices.min()}, {indices.max()}]"
            )

    triangles = indices.astype(np.intp, copy=False).reshape(-1, 3)
    return points, triangles


def _accumulate(points, triangles):
    """Volume, volume-weighted center and origin-frame inertia of a batch of triangles."""
    tetra_points = np.zeros((len(triangles), 4, 3))
    tetra_points[:, 1:, :] = points[triangles]

    volume = compute_tetrahedron_volume(tetra_points)

    # tetra_points[:, 0] is the origin, so it drops out of the sum
    center = 0.25 * tetra_points[:, 1:, :].sum(axis=1)

    # inertia about each tetrahedron's own center, then moved to the origin
    tetra_points -= center[:, None, :]
    inertia = compute_tetrahedron_inertia(volume, tetra_points)
    apply_parallel_axis_theorem(inertia, center, volume)

    return volume.sum(), (volume[:, None] * center).sum(axis=0), inertia.sum(axis=0)


def compute_mass_properties(
    points: npt.ArrayLike,
    triangle_indices: npt.ArrayLike,
    *,
    chunk_size: int | None = None,
    check_preconditions: bool | None = None,
    degenerate_rtol: float | None = None,
) -> MassProperties:
    """Volume, center of mass and inertia of a closed mesh under unit density.

    Args:
        points: Vertex buffer, shape (N, 3).
        triangle_indices: Flat index buffer of length 3T (or shape (T, 3)),
            each triple an outward-wound triangle.
        chunk_size: Triangles evaluated per vectorised batch.
        check_preconditions: Validate buffer shapes and index ranges first.
        degenerate_rtol: Relative volume threshold below which the mesh is
            rejected as degenerate.

    Raises:
        InvalidMeshError: If the buffers break the input contract.
        DegenerateMeshError: If the mesh encloses no measurable volume.

    Returns:
        MassProperties with the inertia tensor about the center of mass.
    """
    chunk_size = settings.CHUNK_SIZE if chunk_size is None else chunk_size
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be a positive integer, got {chunk_size}")
    check = settings.CHECK_PRECONDITIONS if check_preconditions is None else check_preconditions
    rtol = settings.DEGENERATE_VOLUME_RTOL if degenerate_rtol is None else degenerate_rtol

    points, triangles = _prepare_buffers(points, triangle_indices, check)

    total_volume = 0.0
    weighted_center = np.zeros(3)
    inertia = np.zeros((3, 3))
    for start in range(0, len(triangles), chunk_size):
        volume, center, tetra_inertia = _accumulate(points, triangles[start:start + chunk_size])
        total_volume += volume
        weighted_center += center
        inertia += tetra_inertia

    # unused vertices do not count towards the size of the mesh
    used = points[np.unique(triangles)]
    max_extent = float(np.ptp(used, axis=0).max()) if len(used) else 0.0
    threshold = rtol * max_extent ** 3
    if not np.isfinite(total_volume) or abs(total_volume) <= threshold:
        log.warning(
            "degenerate_mesh",
            volume=float(total_volume),
            threshold=threshold,
            triangles=len(triangles),
        )
        raise DegenerateMeshError(float(total_volume), threshold)

    center_of_mass = weighted_center / total_volume
    apply_inverse_parallel_axis_theorem(inertia, center_of_mass, total_volume)

    log.debug(
        "mass_properties_computed",
        triangles=len(triangles),
        volume=float(total_volume),
        center_of_mass=center_of_mass.tolist(),
    )
    return MassProperties.from_arrays(total_volume, center_of_mass, inertia)


class MeshMassProperties:
    """Mass properties of a mesh, computed on construction.

    Exposes ``volume``, ``center_of_mass`` and ``inertia`` as plain attributes
    (the latter two as numpy arrays) and the full result as ``properties``.
    """

    def __init__(self, points: npt.ArrayLike, triangle_indices: npt.ArrayLike, **options):
        self.properties = compute_mass_properties(points, triangle_indices, **options)
        self.volume = self.properties.volume
        self.center_of_mass = self.properties.center_of_mass_array
        self.inertia = self.properties.inertia_tensor

    def __repr__(self) -> str:
        return (
            f"MeshMassProperties(volume={self.volume!r}, "
            f"center_of_mass={self.center_of_mass.tolist()!r})"
        )
