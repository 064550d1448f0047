"""Core business logic services."""

from .shape_analysis_service import ShapeAnalysisService
from .quality_metrics_service import quality_metrics, QualityMetrics

__all__ = [
    "ShapeAnalysisService",
    "quality_metrics",
    "QualityMetrics",
]
