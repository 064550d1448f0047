"""Optimal point correspondence by the Hungarian method."""

from typing import Tuple

import numpy as np
from scipy.optimize import linear_sum_assignment


def squared_distance_matrix(points: np.ndarray, reference: np.ndarray) -> np.ndarray:
    """Matrix of squared distances between every point and every reference point."""
    diff = points[:, np.newaxis, :] - reference[np.newaxis, :, :]
    return np.einsum("ijk,ijk->ij", diff, diff)


def solve_assignment(cost: np.ndarray) -> Tuple[np.ndarray, float]:
    """
    Minimum-cost perfect matching on a square cost matrix.

    Ties between equally cheap matchings are broken the same way on every
    call for the same matrix.

    Args:
        cost: Square matrix, ``cost[i, j]`` the cost of matching row i to column j

    Returns:
        Tuple (perm, total_cost) where ``perm[i]`` is the column matched to row i
    """
    rows, cols = linear_sum_assignment(cost)
    perm = np.empty(len(rows), dtype=int)
    perm[rows] = cols
    return perm, float(cost[rows, cols].sum())


def assign(
    actual: np.ndarray, reference: np.ndarray, rotation: np.ndarray
) -> Tuple[np.ndarray, float]:
    """
    Best correspondence between rotated actual points and reference points.

    Returns:
        Tuple (perm, sum of squared deviations)
    """
    return solve_assignment(squared_distance_matrix(actual @ rotation.T, reference))


def is_bijection(perm: np.ndarray, size: int) -> bool:
    """Whether ``perm`` maps range(size) one-to-one onto itself."""
    perm = np.asarray(perm)
    return perm.shape == (size,) and np.array_equal(np.sort(perm), np.arange(size))
