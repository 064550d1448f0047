"""Domain model classes."""

from .exceptions import (
    ShapeInputError,
    SizeMismatchError,
    DegeneratePointSetError,
    NonFinitePointsError,
)
from .search_mode import (
    SearchMode,
    SearchBudget,
    SearchStage,
    EarlyStopThresholds,
    AnnealingSchedule,
)
from .shape_result import RotationFit, SearchProgress, ShapeMeasureResult
from .optimization_state import OptimizationState
from .reference_geometry import ReferenceGeometry
from .geometry_match import GeometryMatch

__all__ = [
    "ShapeInputError",
    "SizeMismatchError",
    "DegeneratePointSetError",
    "NonFinitePointsError",
    "SearchMode",
    "SearchBudget",
    "SearchStage",
    "EarlyStopThresholds",
    "AnnealingSchedule",
    "RotationFit",
    "SearchProgress",
    "ShapeMeasureResult",
    "OptimizationState",
    "ReferenceGeometry",
    "GeometryMatch",
]
