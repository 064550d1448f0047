"""Local alignment by alternating rotation and correspondence updates."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .cshm_scorer import ShapeScorer
from .kabsch_rotation import JACOBI_MAX_SWEEPS, kabsch_rotation

DEFAULT_MAX_ALTERNATIONS = 50
DEFAULT_TOLERANCE = 1e-10


@dataclass(frozen=True)
class RefinedAlignment:
    """Local optimum reached by the refiner."""

    rotation: np.ndarray
    correspondence: np.ndarray
    measure: float
    iterations: int
    approximate: bool = False


class AlignmentRefiner:
    """Alternates Hungarian assignment and Kabsch rotation until neither improves."""

    def __init__(
        self,
        scorer: ShapeScorer,
        max_alternations: int = DEFAULT_MAX_ALTERNATIONS,
        tolerance: float = DEFAULT_TOLERANCE,
        max_sweeps: int = JACOBI_MAX_SWEEPS,
    ):
        self._scorer = scorer
        self._max_alternations = max_alternations
        self._tolerance = tolerance
        self._max_sweeps = max_sweeps

    def refine(
        self, rotation: np.ndarray, correspondence: Optional[np.ndarray] = None
    ) -> RefinedAlignment:
        """
        Descend from an initial rotation to a local minimum of the measure.

        The measure never increases between accepted steps.

        Args:
            rotation: Starting rotation
            correspondence: Starting correspondence, solved from the rotation if omitted

        Returns:
            RefinedAlignment at the local minimum
        """
        scorer = self._scorer
        if correspondence is None:
            correspondence, measure = scorer.assign(rotation)
        else:
            measure = scorer.measure(rotation, correspondence)

        approximate = False
        iterations = 0
        while iterations < self._max_alternations:
            iterations += 1
            fit = kabsch_rotation(
                scorer.actual, scorer.reference, correspondence, self._max_sweeps
            )
            approximate = approximate or not fit.converged

            new_correspondence, new_measure = scorer.assign(fit.rotation)
            improvement = measure - new_measure
            if improvement >= 0.0:
                rotation, correspondence, measure = (
                    fit.rotation,
                    new_correspondence,
                    new_measure,
                )
            if improvement < self._tolerance:
                break

        return RefinedAlignment(
            rotation=rotation,
            correspondence=correspondence,
            measure=measure,
            iterations=iterations,
            approximate=approximate,
        )
