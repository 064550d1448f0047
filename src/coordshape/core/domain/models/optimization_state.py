"""Mutable bookkeeping for a single rotation search."""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class OptimizationState:
    """
    Position of the current walk and best alignment found during one search call.

    The ``current_*`` fields and ``temperature`` belong to the annealing or
    refinement walk in progress; ``start_walk`` resets them for each run. The
    ``best_*`` fields only ever improve.
    """

    best_rotation: np.ndarray
    best_correspondence: Optional[np.ndarray] = None
    best_measure: float = float("inf")
    current_rotation: Optional[np.ndarray] = None
    current_correspondence: Optional[np.ndarray] = None
    current_measure: float = float("inf")
    temperature: float = 0.0
    steps: int = 0
    accepted_steps: int = 0
    approximate: bool = False

    @classmethod
    def initial(cls) -> "OptimizationState":
        return cls(best_rotation=np.eye(3))

    def consider(
        self, rotation: np.ndarray, correspondence: np.ndarray, measure: float
    ) -> bool:
        """
        Record a candidate alignment if it beats the current best.

        Args:
            rotation: Candidate rotation matrix
            correspondence: Candidate correspondence
            measure: Shape measure of the candidate

        Returns:
            True if the candidate became the new best
        """
        if measure < self.best_measure:
            self.best_rotation = np.array(rotation, copy=True)
            self.best_correspondence = np.array(correspondence, copy=True)
            self.best_measure = float(measure)
            return True
        return False

    def start_walk(
        self,
        rotation: np.ndarray,
        correspondence: np.ndarray,
        measure: float,
        temperature: float,
    ) -> None:
        """Place the walk at a starting alignment."""
        self.current_rotation = rotation
        self.current_correspondence = correspondence
        self.current_measure = float(measure)
        self.temperature = temperature

    def propose(self) -> None:
        """Count one proposed move."""
        self.steps += 1

    def move_to(
        self, rotation: np.ndarray, correspondence: np.ndarray, measure: float
    ) -> None:
        """Accept a proposed move as the new walk position."""
        self.current_rotation = rotation
        self.current_correspondence = correspondence
        self.current_measure = float(measure)
        self.accepted_steps += 1

    @property
    def acceptance_rate(self) -> float:
        return self.accepted_steps / self.steps if self.steps else 0.0
