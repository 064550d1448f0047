"""Interface for continuous shape measure strategies."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from ..models.shape_result import ShapeMeasureResult


class ShapeMeasurer(ABC):
    """Abstract base class for shape measure strategies."""

    @abstractmethod
    def measure(
        self,
        actual_points: np.ndarray,
        reference_points: np.ndarray,
        seed_candidates: Sequence[np.ndarray] = (),
        rng: Optional[np.random.Generator] = None,
    ) -> ShapeMeasureResult:
        """
        Measure how far a point set deviates from a reference shape.

        Args:
            actual_points: Observed coordinates, shape (N, 3)
            reference_points: Ideal coordinates, shape (N, 3)
            seed_candidates: Rotations to try before the built-in orientations
            rng: Random generator for the stochastic stages

        Returns:
            ShapeMeasureResult with the best alignment found
        """
        pass
