#!/usr/bin/env python3
# src/coordshape/core/domain/models/search_mode.py

"""
Search effort levels and the tuning constants of the staged search.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class SearchBudget:
    """Work allotted to each stage of the rotation search."""

    grid_steps: int
    grid_stride: int
    num_restarts: int
    steps_per_run: int
    refinement_steps: int
    initial_temperature: float = 20.0
    reassignment_interval: int = 5
    no_improvement_limit: int = 500
    svd_max_sweeps: int = 100

    @property
    def grid_points(self) -> int:
        """Number of Euler grid points visited by the grid stage."""
        per_axis = len(range(0, self.grid_steps, self.grid_stride))
        return per_axis**3


@dataclass(frozen=True)
class EarlyStopThresholds:
    """Measure values below which a stage ends the search early."""

    key_orientations: float = 0.01
    grid_search: float = 0.05
    annealing_run: float = 0.001
    annealing_stage: float = 0.01
    refinement: float = 0.01


@dataclass(frozen=True)
class AnnealingSchedule:
    """Temperature and step-size constants for annealing and refinement."""

    min_temperature: float = 0.001
    step_size_factor: float = 0.12
    step_size_randomness: float = 0.2
    refinement_temperature: float = 3.0
    refinement_step_factor: float = 0.02
    refinement_decay: float = 0.999


class SearchStage(str, Enum):
    """Stages of the rotation search, in execution order."""

    KEY_ORIENTATIONS = "key_orientations"
    GRID_SEARCH = "grid_search"
    ANNEALING = "annealing"
    REFINEMENT = "refinement"


class SearchMode(str, Enum):
    """Effort level of a shape measure computation."""

    FAST = "fast"
    DEFAULT = "default"
    INTENSIVE = "intensive"

    @property
    def budget(self) -> SearchBudget:
        return _BUDGETS[self]

    @classmethod
    def from_name(cls, name: str) -> "SearchMode":
        """
        Look up a mode by its case-insensitive name.

        Args:
            name: One of "fast", "default" or "intensive"

        Returns:
            Matching SearchMode

        Raises:
            ValueError: If the name is unknown
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown search mode '{name}' (expected {choices})")


# Grid lattices nest: every fast grid point is a default grid point and every
# default grid point is an intensive one.
_BUDGETS = {
    SearchMode.FAST: SearchBudget(
        grid_steps=6,
        grid_stride=2,
        num_restarts=1,
        steps_per_run=100,
        refinement_steps=50,
        reassignment_interval=10,
    ),
    SearchMode.DEFAULT: SearchBudget(
        grid_steps=18,
        grid_stride=3,
        num_restarts=6,
        steps_per_run=3000,
        refinement_steps=2000,
        reassignment_interval=5,
    ),
    SearchMode.INTENSIVE: SearchBudget(
        grid_steps=36,
        grid_stride=3,
        num_restarts=12,
        steps_per_run=8000,
        refinement_steps=6000,
        initial_temperature=30.0,
        reassignment_interval=1,
    ),
}
