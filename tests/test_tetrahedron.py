"""Signed volume and closed-form inertia of single tetrahedra."""

import numpy as np
import pytest

from meshmass.geometry.tetrahedron import (
    compute_tetrahedron_inertia,
    compute_tetrahedron_volume,
)


class TestTetrahedronVolume:
    def test_regular_tetrahedron_matches_triple_product(self, regular_tetrahedron):
        p0, p1, p2, p3 = regular_tetrahedron
        expected = np.dot(p1 - p0, np.cross(p2 - p0, p3 - p0)) / 6.0

        volume = compute_tetrahedron_volume(regular_tetrahedron)

        assert volume == pytest.approx(expected)
        # edge a = 2 * sqrt(2): a^3 / (6 * sqrt(2)) = 8 / 3
        assert abs(volume) == pytest.approx(8.0 / 3.0)

    def test_outward_winding_is_positive(self):
        # triangle (1, 2, 3) circles counter-clockwise seen from +z, apex below
        points = [[0, 0, -1], [0, 0, 0], [1, 0, 0], [0, 1, 0]]
        assert compute_tetrahedron_volume(points) == pytest.approx(1.0 / 6.0)

    def test_apex_in_front_of_face_is_negative(self):
        points = [[0, 0, 1], [0, 0, 0], [1, 0, 0], [0, 1, 0]]
        assert compute_tetrahedron_volume(points) == pytest.approx(-1.0 / 6.0)

    @pytest.mark.parametrize("swap", [(1, 2), (2, 3), (1, 3)])
    def test_swapping_face_vertices_negates(self, irregular_tetrahedron, swap):
        swapped = irregular_tetrahedron.copy()
        a, b = swap
        swapped[[a, b]] = swapped[[b, a]]

        assert compute_tetrahedron_volume(swapped) == pytest.approx(
            -compute_tetrahedron_volume(irregular_tetrahedron)
        )

    def test_cyclic_rotation_of_face_is_invariant(self, irregular_tetrahedron):
        rotated = irregular_tetrahedron[[0, 2, 3, 1]]
        assert compute_tetrahedron_volume(rotated) == pytest.approx(
            compute_tetrahedron_volume(irregular_tetrahedron)
        )

    def test_batched_input_returns_array(self, regular_tetrahedron, irregular_tetrahedron):
        batch = np.stack([regular_tetrahedron, irregular_tetrahedron])

        volumes = compute_tetrahedron_volume(batch)

        assert volumes.shape == (2,)
        assert volumes[0] == pytest.approx(compute_tetrahedron_volume(regular_tetrahedron))
        assert volumes[1] == pytest.approx(compute_tetrahedron_volume(irregular_tetrahedron))

    def test_flat_tetrahedron_has_zero_volume(self):
        points = [[0, 0, 0], [1, 0, 0], [0, 1, 0], [1, 1, 0]]
        assert compute_tetrahedron_volume(points) == 0.0


class TestTetrahedronInertia:
    def test_regular_tetrahedron(self, regular_tetrahedron):
        # regular tetrahedron: I = m a^2 / 20 on every axis, no products
        mass = 8.0 / 3.0
        expected = mass * 8.0 / 20.0

        inertia = compute_tetrahedron_inertia(mass, regular_tetrahedron)

        np.testing.assert_allclose(inertia, expected * np.eye(3), atol=1e-12)

    def test_is_symmetric(self, irregular_tetrahedron):
        centered = irregular_tetrahedron - irregular_tetrahedron.mean(axis=0)

        inertia = compute_tetrahedron_inertia(1.0, centered)

        assert np.array_equal(inertia, inertia.T)
        assert np.any(inertia[~np.eye(3, dtype=bool)] != 0.0)

    def test_scales_linearly_with_mass(self, irregular_tetrahedron):
        centered = irregular_tetrahedron - irregular_tetrahedron.mean(axis=0)

        np.testing.assert_allclose(
            compute_tetrahedron_inertia(-2.5, centered),
            -2.5 * compute_tetrahedron_inertia(1.0, centered),
        )

    def test_independent_of_vertex_order(self, irregular_tetrahedron):
        centered = irregular_tetrahedron - irregular_tetrahedron.mean(axis=0)

        np.testing.assert_allclose(
            compute_tetrahedron_inertia(1.0, centered[[3, 1, 0, 2]]),
            compute_tetrahedron_inertia(1.0, centered),
        )

    def test_batched_matches_single(self, regular_tetrahedron, irregular_tetrahedron):
        centered = irregular_tetrahedron - irregular_tetrahedron.mean(axis=0)
        batch = np.stack([regular_tetrahedron, centered])
        masses = np.array([2.0, -0.5])

        inertia = compute_tetrahedron_inertia(masses, batch)

        assert inertia.shape == (2, 3, 3)
        np.testing.assert_allclose(inertia[0], compute_tetrahedron_inertia(2.0, regular_tetrahedron))
        np.testing.assert_allclose(inertia[1], compute_tetrahedron_inertia(-0.5, centered))
