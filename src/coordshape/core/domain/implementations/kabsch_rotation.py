"""Optimal superposition rotation via a two-sided Jacobi SVD."""

import logging
from typing import Optional, Tuple

import numpy as np

from ..models.exceptions import ShapeInputError
from ..models.point_set import MIN_VECTOR_LENGTH_SQ
from ..models.shape_result import RotationFit
from ...utils.rotations import align_vectors
from .hungarian_assignment import is_bijection

logger = logging.getLogger(__name__)

JACOBI_TOLERANCE = 1e-10
JACOBI_MAX_SWEEPS = 100
RANK_TOLERANCE = 1e-8

_PLANES = ((0, 1), (0, 2), (1, 2))


def cross_covariance(actual: np.ndarray, reference: np.ndarray) -> np.ndarray:
    """
    Sum of outer products of matched point pairs.

    Pairs in which either vector is negligibly short are left out; their
    contribution to the squared deviation does not depend on the rotation.

    Args:
        actual: Actual points, shape (N, 3)
        reference: Reference points matched row by row, shape (N, 3)

    Returns:
        3x3 matrix H = sum(actual_i outer reference_i)
    """
    usable = (np.sum(actual**2, axis=1) >= MIN_VECTOR_LENGTH_SQ) & (
        np.sum(reference**2, axis=1) >= MIN_VECTOR_LENGTH_SQ
    )
    return actual[usable].T @ reference[usable]


def _plane_rotation(p: int, q: int, angle: float) -> np.ndarray:
    c, s = np.cos(angle), np.sin(angle)
    rotation = np.eye(3)
    rotation[p, p] = c
    rotation[p, q] = -s
    rotation[q, p] = s
    rotation[q, q] = c
    return rotation


def _off_diagonal_max(matrix: np.ndarray) -> float:
    return float(np.max(np.abs(matrix - np.diag(np.diag(matrix)))))


def jacobi_svd_3x3(
    matrix: np.ndarray,
    tolerance: float = JACOBI_TOLERANCE,
    max_sweeps: int = JACOBI_MAX_SWEEPS,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, bool]:
    """
    Singular value decomposition of a 3x3 matrix by cyclic two-sided Jacobi.

    Each step diagonalizes one 2x2 block with a closed-form pair of plane
    rotations, one applied from each side.

    Args:
        matrix: Matrix to decompose
        tolerance: Largest off-diagonal magnitude accepted as converged
        max_sweeps: Maximum number of full sweeps over the three planes

    Returns:
        Tuple (U, s, V, converged) with matrix = U @ diag(s) @ V.T, s
        non-negative and sorted in descending order
    """
    s_matrix = np.array(matrix, dtype=float)
    u = np.eye(3)
    v = np.eye(3)

    converged = _off_diagonal_max(s_matrix) < tolerance
    sweeps = 0
    while not converged and sweeps < max_sweeps:
        for p, q in _PLANES:
            a, b = s_matrix[p, p], s_matrix[p, q]
            c, d = s_matrix[q, p], s_matrix[q, q]

            e = (a + d) / 2.0
            f = (a - d) / 2.0
            g = (c + b) / 2.0
            h = (c - b) / 2.0
            a1 = np.arctan2(g, f)
            a2 = np.arctan2(h, e)

            left = _plane_rotation(p, q, (a2 + a1) / 2.0)
            right = _plane_rotation(p, q, -(a2 - a1) / 2.0)

            s_matrix = left.T @ s_matrix @ right
            u = u @ left
            v = v @ right

        sweeps += 1
        converged = _off_diagonal_max(s_matrix) < tolerance

    singular_values = np.diag(s_matrix).copy()
    negative = singular_values < 0
    singular_values[negative] *= -1.0
    v[:, negative] *= -1.0

    order = np.argsort(-singular_values, kind="stable")
    return u[:, order], singular_values[order], v[:, order], converged


def rotation_from_svd(
    u: np.ndarray, singular_values: np.ndarray, v: np.ndarray
) -> Tuple[np.ndarray, int]:
    """
    Proper rotation R = V U^T from an SVD of the cross-covariance matrix.

    Rank-deficient decompositions are completed deterministically.

    Returns:
        Tuple (rotation, rank)
    """
    largest = singular_values[0]
    if largest <= 0.0:
        return np.eye(3), 0

    rank = int(np.sum(singular_values > RANK_TOLERANCE * largest))
    if rank == 1:
        return align_vectors(u[:, 0], v[:, 0]), rank

    u = u.copy()
    v = v.copy()
    if rank == 2:
        u[:, 2] = np.cross(u[:, 0], u[:, 1])
        v[:, 2] = np.cross(v[:, 0], v[:, 1])

    rotation = v @ u.T
    if np.linalg.det(rotation) < 0:
        v[:, 2] *= -1.0
        rotation = v @ u.T
    return rotation, rank


def kabsch_rotation(
    actual: np.ndarray,
    reference: np.ndarray,
    correspondence: Optional[np.ndarray] = None,
    max_sweeps: int = JACOBI_MAX_SWEEPS,
) -> RotationFit:
    """
    Rotation minimizing the squared deviation between matched point sets.

    Args:
        actual: Actual points, shape (N, 3)
        reference: Reference points, shape (N, 3)
        correspondence: Reference index for each actual point; rows are
            matched in order if omitted
        max_sweeps: Sweep cap of the Jacobi SVD

    Returns:
        RotationFit with the rotation applied as ``actual @ rotation.T``

    Raises:
        ShapeInputError: If the correspondence is not a permutation
    """
    if correspondence is not None and not is_bijection(correspondence, len(actual)):
        raise ShapeInputError("Correspondence must be a permutation of the point indices")

    matched = reference if correspondence is None else reference[correspondence]
    u, singular_values, v, converged = jacobi_svd_3x3(
        cross_covariance(actual, matched), max_sweeps=max_sweeps
    )

    if not converged:
        logger.warning(
            f"Jacobi SVD did not converge in {max_sweeps} sweeps; "
            "using the last iterate"
        )

    rotation, rank = rotation_from_svd(u, singular_values, v)
    return RotationFit(
        rotation=rotation,
        converged=converged,
        rank=rank,
        singular_values=singular_values,
    )
