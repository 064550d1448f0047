"""Continuous shape measures of coordination polyhedra."""

from .core.domain.implementations.staged_search_measurer import (
    StagedSearchMeasurer,
    compute,
)
from .core.domain.implementations.smart_alignment_advisor import SmartAlignmentAdvisor
from .core.domain.models import (
    DegeneratePointSetError,
    GeometryMatch,
    NonFinitePointsError,
    ReferenceGeometry,
    SearchMode,
    ShapeInputError,
    ShapeMeasureResult,
    SizeMismatchError,
)
from .core.services.shape_analysis_service import ShapeAnalysisService
from .infrastructure.parallel.shape_worker_pool import ShapeWorkerPool
from .infrastructure.repositories.geometry_repository import ReferenceGeometryRepository

__version__ = "0.1.0"

__all__ = [
    "compute",
    "StagedSearchMeasurer",
    "SmartAlignmentAdvisor",
    "SearchMode",
    "ShapeMeasureResult",
    "ReferenceGeometry",
    "GeometryMatch",
    "ShapeInputError",
    "SizeMismatchError",
    "DegeneratePointSetError",
    "NonFinitePointsError",
    "ShapeAnalysisService",
    "ShapeWorkerPool",
    "ReferenceGeometryRepository",
]
