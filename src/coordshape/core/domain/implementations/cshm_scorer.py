"""Continuous shape measure scoring."""

from typing import Tuple

import numpy as np

from ..models.exceptions import DegeneratePointSetError
from .hungarian_assignment import solve_assignment, squared_distance_matrix


def shape_measure(
    rotated: np.ndarray, reference: np.ndarray, correspondence: np.ndarray
) -> float:
    """
    Continuous shape measure of already rotated points.

    CShM = 100 * sum(|R a_i - q_perm(i)|^2) / sum(|q_i|^2)
    """
    norm = float(np.sum(reference**2))
    if norm <= 0.0:
        raise DegeneratePointSetError("reference points have zero norm")
    diff = rotated - reference[correspondence]
    return 100.0 * float(np.sum(diff**2)) / norm


def aligned_points(rotated: np.ndarray, correspondence: np.ndarray) -> np.ndarray:
    """Rotated actual points reordered to follow the reference order."""
    ordered = np.empty_like(rotated)
    ordered[correspondence] = rotated
    return ordered


class ShapeScorer:
    """Evaluates the shape measure of one actual/reference pair."""

    def __init__(self, actual: np.ndarray, reference: np.ndarray):
        """
        Initialize scorer for a pair of equally sized point sets.

        Args:
            actual: Actual points, shape (N, 3)
            reference: Reference points, shape (N, 3)
        """
        self.actual = actual
        self.reference = reference
        norm = float(np.sum(reference**2))
        if norm <= 0.0:
            raise DegeneratePointSetError("reference points have zero norm")
        self._scale = 100.0 / norm
        self.evaluations = 0

    def measure(self, rotation: np.ndarray, correspondence: np.ndarray) -> float:
        """Shape measure for a rotation under a fixed correspondence."""
        self.evaluations += 1
        diff = self.actual @ rotation.T - self.reference[correspondence]
        return self._scale * float(np.sum(diff**2))

    def assign(self, rotation: np.ndarray) -> Tuple[np.ndarray, float]:
        """Best correspondence for a rotation and the resulting shape measure."""
        self.evaluations += 1
        cost = squared_distance_matrix(self.actual @ rotation.T, self.reference)
        perm, total = solve_assignment(cost)
        return perm, self._scale * total
