"""Domain model pairing a reference geometry with its measured fit."""

from dataclasses import dataclass

from .reference_geometry import ReferenceGeometry
from .shape_result import ShapeMeasureResult


@dataclass(frozen=True)
class GeometryMatch:
    """Shape measure of a coordination environment against one reference."""

    geometry: ReferenceGeometry
    result: ShapeMeasureResult
    elapsed: float = 0.0

    @property
    def code(self) -> str:
        return self.geometry.code

    @property
    def measure(self) -> float:
        return self.result.measure
