from typing import Annotated

import numpy as np
from pydantic import BaseModel, Field

Vector3 = Annotated[list[float], Field(min_length=3, max_length=3)]


class MassProperties(BaseModel):
    """Volume, center of mass and inertia of a solid.

    ``inertia`` is taken about ``center_of_mass`` in the mesh's own axes.
    Under unit density ``mass`` equals ``volume``; use :meth:`scaled` to apply
    a real density.
    """

    volume: float
    mass: float
    center_of_mass: Vector3
    inertia: list[Vector3] = Field(min_length=3, max_length=3)

    model_config = {"frozen": True}

    @classmethod
    def from_arrays(
        cls, volume: float, center_of_mass: np.ndarray, inertia: np.ndarray
    ) -> "MassProperties":
        return cls(
            volume=float(volume),
            mass=float(volume),
            center_of_mass=np.asarray(center_of_mass, dtype=np.float64).tolist(),
            inertia=np.asarray(inertia, dtype=np.float64).tolist(),
        )

    @property
    def center_of_mass_array(self) -> np.ndarray:
        return np.array(self.center_of_mass, dtype=np.float64)

    @property
    def inertia_tensor(self) -> np.ndarray:
        return np.array(self.inertia, dtype=np.float64)

    @property
    def ixx(self) -> float:
        return self.inertia[0][0]

    @property
    def iyy(self) -> float:
        return self.inertia[1][1]

    @property
    def izz(self) -> float:
        return self.inertia[2][2]

    @property
    def ixy(self) -> float:
        return self.inertia[0][1]

    @property
    def ixz(self) -> float:
        return self.inertia[0][2]

    @property
    def iyz(self) -> float:
        return self.inertia[1][2]

    def scaled(self, density: float) -> "MassProperties":
        """Same solid with a uniform ``density``; volume and center are unchanged.

        The density replaces, rather than multiplies, any density already applied.
        """
        if self.mass == 0.0:
            raise ValueError("Cannot rescale mass properties with zero mass")
        ratio = density * self.volume / self.mass
        return MassProperties(
            volume=self.volume,
            mass=self.volume * density,
            center_of_mass=list(self.center_of_mass),
            inertia=(self.inertia_tensor * ratio).tolist(),
        )

    def principal_axes(self) -> dict:
        """Principal moments (ascending) and axes (columns) of the inertia tensor."""
        eigenvalues, eigenvectors = np.linalg.eigh(self.inertia_tensor)
        return {
            "moments": eigenvalues.tolist(),
            "axes": eigenvectors.tolist(),
        }

    def to_dict(self) -> dict:
        return {
            "volume": self.volume,
            "mass": self.mass,
            "center_of_mass": list(self.center_of_mass),
            "inertia_tensor": [list(row) for row in self.inertia],
            "ixx": self.ixx,
            "iyy": self.iyy,
            "izz": self.izz,
            "ixy": self.ixy,
            "ixz": self.ixz,
            "iyz": self.iyz,
            "principal_axes": self.principal_axes(),
        }
