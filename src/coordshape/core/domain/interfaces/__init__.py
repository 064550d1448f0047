"""Strategy interfaces."""

from .shape_measurer import ShapeMeasurer
from .alignment_advisor import AlignmentAdvisor

__all__ = ["ShapeMeasurer", "AlignmentAdvisor"]
