"""Compute mass properties of in-memory trimesh geometry."""

import trimesh

from meshmass.geometry.mesh_mass import compute_mass_properties
from meshmass.schemas.mass_properties import MassProperties


def mass_properties_from_trimesh(mesh, **options) -> MassProperties:
    """Mass properties of a ``trimesh.Trimesh`` or ``trimesh.Scene``.

    Scene geometry is concatenated in its own local frames. The mesh is used
    as-is: no repair, no watertightness check.
    """
    if isinstance(mesh, trimesh.Scene):
        meshes = list(mesh.geometry.values())
        mesh = trimesh.util.concatenate(meshes) if meshes else None

    if mesh is None:
        raise ValueError("No geometry for mass property computation")

    return compute_mass_properties(mesh.vertices, mesh.faces, **options)
