"""Interface for initial rotation suggestion strategies."""

from abc import ABC, abstractmethod
from typing import List

import numpy as np


class AlignmentAdvisor(ABC):
    """Abstract base class for strategies that propose starting rotations."""

    @abstractmethod
    def suggest(self, actual: np.ndarray, reference: np.ndarray) -> List[np.ndarray]:
        """
        Propose rotations likely to bring ``actual`` close to ``reference``.

        Args:
            actual: Centred actual points
            reference: Centred reference points

        Returns:
            List of 3x3 rotation matrices, most promising first
        """
        pass
