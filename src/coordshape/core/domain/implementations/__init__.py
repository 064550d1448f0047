"""Concrete shape measure and alignment strategies."""

from .staged_search_measurer import StagedSearchMeasurer, compute
from .smart_alignment_advisor import SmartAlignmentAdvisor

__all__ = ["StagedSearchMeasurer", "compute", "SmartAlignmentAdvisor"]
