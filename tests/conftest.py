import numpy as np
import pytest

from meshmass.verification.oracles import build_box_mesh


@pytest.fixture
def unit_cube():
    """Cube with corners at (+-0.5, +-0.5, +-0.5)."""
    return build_box_mesh([1.0, 1.0, 1.0])


@pytest.fixture
def regular_tetrahedron():
    """Regular tetrahedron centered at the origin, edge length 2 * sqrt(2)."""
    return np.array([
        [1.0, 1.0, 1.0],
        [1.0, -1.0, -1.0],
        [-1.0, 1.0, -1.0],
        [-1.0, -1.0, 1.0],
    ])


@pytest.fixture
def irregular_tetrahedron():
    return np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.2, 2.0, 0.0],
        [0.3, 0.4, 3.0],
    ])
