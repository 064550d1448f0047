import numpy as np
import pytest

from coordshape.core.domain.implementations.kabsch_rotation import (
    cross_covariance,
    jacobi_svd_3x3,
    kabsch_rotation,
)
from coordshape.core.domain.models.exceptions import ShapeInputError
from coordshape.core.utils.rotations import euler_xyz_matrix, is_proper_rotation


@pytest.fixture
def points():
    rng = np.random.default_rng(7)
    return rng.normal(size=(7, 3))


class TestJacobiSVD:
    def test_reconstructs_matrix(self):
        rng = np.random.default_rng(3)
        for _ in range(20):
            matrix = rng.normal(size=(3, 3))
            u, s, v, converged = jacobi_svd_3x3(matrix)

            assert converged
            assert np.allclose(u @ np.diag(s) @ v.T, matrix, atol=1e-9)
            assert np.allclose(u.T @ u, np.eye(3), atol=1e-9)
            assert np.allclose(v.T @ v, np.eye(3), atol=1e-9)
            assert np.all(s >= 0)
            assert np.all(np.diff(s) <= 1e-12)

    def test_singular_values_match_numpy(self):
        matrix = np.array([[2.0, -1.0, 0.5], [0.3, 0.0, 4.0], [1.0, 1.0, 1.0]])
        _, s, _, _ = jacobi_svd_3x3(matrix)
        assert np.allclose(s, np.linalg.svd(matrix, compute_uv=False))

    def test_reports_non_convergence(self):
        matrix = np.array([[1.0, 2.0, 0.0], [0.5, 1.0, 3.0], [0.0, 1.0, 1.0]])
        _, _, _, converged = jacobi_svd_3x3(matrix, max_sweeps=0)
        assert not converged


class TestKabschRotation:
    def test_recovers_known_rotation(self, points):
        rotation = euler_xyz_matrix(0.3, 1.2, -0.7)
        fit = kabsch_rotation(points, points @ rotation.T)

        assert fit.converged
        assert fit.rank == 3
        assert np.allclose(fit.rotation, rotation, atol=1e-8)

    def test_mirror_image_gives_proper_rotation(self, points):
        mirrored = points * np.array([1.0, 1.0, -1.0])
        fit = kabsch_rotation(points, mirrored)

        assert is_proper_rotation(fit.rotation)
        assert np.linalg.det(fit.rotation) == pytest.approx(1.0)

    def test_uses_correspondence(self, points):
        rotation = euler_xyz_matrix(-0.5, 0.2, 0.9)
        perm = np.array([3, 0, 6, 1, 5, 2, 4])
        reference = np.empty_like(points)
        reference[perm] = points @ rotation.T

        fit = kabsch_rotation(points, reference, perm)
        assert np.allclose(fit.rotation, rotation, atol=1e-8)

    def test_collinear_points_are_aligned(self):
        actual = np.array([[1.0, 0.0, 0.0], [-2.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
        reference = np.array([[0.0, 1.0, 0.0], [0.0, -2.0, 0.0], [0.0, 0.0, 0.0]])

        fit = kabsch_rotation(actual, reference)
        assert fit.rank == 1
        assert is_proper_rotation(fit.rotation)
        assert np.allclose(actual @ fit.rotation.T, reference, atol=1e-9)

    def test_planar_points_have_rank_two(self):
        actual = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [-1.0, -1.0, 0.0]])
        rotation = euler_xyz_matrix(1.0, 0.4, 0.2)

        fit = kabsch_rotation(actual, actual @ rotation.T)
        assert fit.rank == 2
        assert np.allclose(fit.rotation, rotation, atol=1e-8)

    def test_negligible_vectors_are_ignored(self):
        actual = np.array([[1e-6, 0.0, 0.0], [0.0, 0.0, 0.0]])
        reference = np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0]])

        assert np.allclose(cross_covariance(actual, reference), 0.0)
        fit = kabsch_rotation(actual, reference)
        assert fit.rank == 0
        assert np.allclose(fit.rotation, np.eye(3))

    def test_is_deterministic(self, points):
        reference = points[::-1].copy()
        first = kabsch_rotation(points, reference)
        second = kabsch_rotation(points, reference)
        assert np.array_equal(first.rotation, second.rotation)

    def test_rejects_non_permutation(self, points):
        with pytest.raises(ShapeInputError):
            kabsch_rotation(points, points, np.array([0, 0, 1, 2, 3, 4, 5]))
