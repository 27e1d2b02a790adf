"""Errors raised by mass property computations."""


class MeshMassError(ValueError):
    """Base class for all meshmass errors."""


class InvalidMeshError(MeshMassError):
    """The vertex or triangle buffers break the input contract.

    Raised for a vertex buffer that is not (N, 3), non-integer indices, an
    index count that is not a multiple of 3, or indices outside [0, N).
    """


class DegenerateMeshError(MeshMassError):
    """The mesh encloses (almost) no volume, so its center of mass is undefined."""

    def __init__(self, volume: float, threshold: float):
        self.volume = volume
        self.threshold = threshold
        super().__init__(volume, threshold)

    def __str__(self) -> str:
        return (
            f"Mesh volume {self.volume!r} is degenerate (|volume| <= {self.threshold!r}); "
            "is the mesh closed and consistently wound?"
        )
