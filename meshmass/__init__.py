"""Volume, center of mass and inertia tensor of closed triangle meshes."""

from meshmass.core.exceptions import DegenerateMeshError, InvalidMeshError, MeshMassError
from meshmass.geometry.mesh_mass import MeshMassProperties, compute_mass_properties
from meshmass.geometry.parallel_axis import (
    apply_inverse_parallel_axis_theorem,
    apply_parallel_axis_theorem,
    compute_point_inertia,
)
from meshmass.geometry.tetrahedron import (
    compute_tetrahedron_inertia,
    compute_tetrahedron_volume,
)
from meshmass.schemas.mass_properties import MassProperties

__version__ = "0.1.0"

__all__ = [
    "MassProperties",
    "MeshMassProperties",
    "compute_mass_properties",
    "compute_tetrahedron_volume",
    "compute_tetrahedron_inertia",
    "compute_point_inertia",
    "apply_parallel_axis_theorem",
    "apply_inverse_parallel_axis_theorem",
    "MeshMassError",
    "InvalidMeshError",
    "DegenerateMeshError",
]
