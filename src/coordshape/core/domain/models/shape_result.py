"""Domain models for shape measure results."""

from dataclasses import dataclass

import numpy as np


def _frozen_array(values, dtype=float) -> np.ndarray:
    array = np.array(values, dtype=dtype, copy=True)
    array.setflags(write=False)
    return array


@dataclass(frozen=True)
class RotationFit:
    """Optimal rotation for a fixed correspondence."""

    rotation: np.ndarray
    converged: bool
    rank: int
    singular_values: np.ndarray


@dataclass(frozen=True)
class SearchProgress:
    """Progress snapshot passed to search callbacks."""

    stage: str
    percentage: float
    current: int
    total: int
    best_measure: float


@dataclass(frozen=True)
class ShapeMeasureResult:
    """
    Outcome of one shape measure computation.

    ``correspondence[i]`` is the reference index matched to actual point ``i``
    and ``aligned_points`` lists the rotated actual points in reference order.
    """

    measure: float
    rotation: np.ndarray
    correspondence: np.ndarray
    aligned_points: np.ndarray
    approximate: bool = False
    stage: str = ""
    evaluations: int = 0

    def __post_init__(self):
        object.__setattr__(self, "rotation", _frozen_array(self.rotation))
        object.__setattr__(
            self, "correspondence", _frozen_array(self.correspondence, dtype=int)
        )
        object.__setattr__(self, "aligned_points", _frozen_array(self.aligned_points))
