#!/usr/bin/env python3
# src/coordshape/core/domain/models/reference_geometry.py

"""
Domain model for an ideal reference polyhedron.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class ReferenceGeometry:
    """An ideal coordination polyhedron with its central atom as the last point."""

    code: str
    name: str
    coordination_number: int
    point_group: str
    points: np.ndarray

    @property
    def size(self) -> int:
        return len(self.points)

    @property
    def ligands(self) -> np.ndarray:
        return self.points[:-1]

    @property
    def center(self) -> np.ndarray:
        return self.points[-1]
