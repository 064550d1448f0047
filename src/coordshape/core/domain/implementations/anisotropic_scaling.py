"""
Flexible shape measure: the rigid measure after stretching the reference.

The reference is scaled independently along three orthogonal axes, the
principal axes of the rigidly aligned actual points, and the scale factors are
annealed to minimize the measure. A low flexible measure with a high rigid one
marks a distorted instance of the reference rather than a different shape.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from ..models.search_mode import SearchMode
from ..models.shape_result import ShapeMeasureResult
from .alignment_refiner import AlignmentRefiner
from .cshm_scorer import ShapeScorer
from .smart_alignment_advisor import principal_axes

logger = logging.getLogger(__name__)

SCALE_BOUNDS = (0.4, 2.5)
EARLY_STOP_MEASURE = 0.01
STEP_FACTOR = 0.2


@dataclass(frozen=True)
class ScalingSchedule:
    """Annealing constants of the scale-factor search."""

    restarts: int
    iterations: int
    initial_temperature: float
    cooling_rate: float


SCALING_SCHEDULES = {
    SearchMode.FAST: ScalingSchedule(
        restarts=2, iterations=500, initial_temperature=0.5, cooling_rate=0.94
    ),
    SearchMode.DEFAULT: ScalingSchedule(
        restarts=3, iterations=1000, initial_temperature=0.5, cooling_rate=0.94
    ),
    SearchMode.INTENSIVE: ScalingSchedule(
        restarts=5, iterations=2000, initial_temperature=0.8, cooling_rate=0.96
    ),
}


class DistortionCategory(str, Enum):
    """Reading of a rigid/flexible measure pair."""

    WRONG_GEOMETRY = "wrong_geometry"
    RIGID_MATCH = "rigid_match"
    SLIGHT_DISTORTION = "slight_distortion"
    MODERATE_DISTORTION = "moderate_distortion"
    HIGH_DISTORTION = "high_distortion"


def scale_along_axes(points: np.ndarray, axes: np.ndarray, scales) -> np.ndarray:
    """
    Scale points by ``scales[k]`` along the k-th row of ``axes``.

    Args:
        points: Coordinates, shape (N, 3)
        axes: Orthonormal axes as rows, shape (3, 3)
        scales: Three scale factors

    Returns:
        Scaled coordinates, shape (N, 3)
    """
    return (points @ axes.T) * np.asarray(scales, dtype=float) @ axes


def distortion_index(scales) -> float:
    """
    Spread of the scale factors around their geometric mean, times 100.

    Zero for isotropic scaling.
    """
    scales = np.asarray(scales, dtype=float)
    relative = scales / np.prod(scales) ** (1.0 / 3.0)
    return 100.0 * float(np.sqrt(np.mean((relative - 1.0) ** 2)))


def describe_scaling(scales, tolerance: float = 0.05) -> str:
    """Short human-readable summary of a set of scale factors."""
    scales = np.asarray(scales, dtype=float)
    if np.ptp(scales) < tolerance:
        mean = float(np.mean(scales))
        if abs(mean - 1.0) < tolerance:
            return "No scaling"
        percent = round(abs(mean - 1.0) * 100)
        if mean > 1.0:
            return f"Uniformly expanded ({percent}%)"
        return f"Uniformly compressed ({percent}%)"

    parts = []
    largest, smallest = int(np.argmax(scales)), int(np.argmin(scales))
    if scales[largest] > 1.0 + tolerance:
        percent = round((scales[largest] - 1.0) * 100)
        parts.append(f"elongated along axis {largest + 1} (+{percent}%)")
    if scales[smallest] < 1.0 - tolerance:
        percent = round((1.0 - scales[smallest]) * 100)
        parts.append(f"compressed along axis {smallest + 1} (-{percent}%)")
    return ", ".join(parts) if parts else "Anisotropic scaling"


def classify_distortion(
    rigid_measure: float, flexible_measure: float, distortion: float
) -> DistortionCategory:
    """
    Interpret the gap between rigid and flexible measures.

    Args:
        rigid_measure: Shape measure against the ideal reference
        flexible_measure: Shape measure against the best stretched reference
        distortion: Distortion index of the stretch

    Returns:
        DistortionCategory
    """
    if flexible_measure > 10.0:
        return DistortionCategory.WRONG_GEOMETRY

    delta = rigid_measure - flexible_measure
    improvement = 100.0 * delta / rigid_measure if rigid_measure > 0 else 0.0
    if delta < 1.0 or improvement < 10.0:
        return DistortionCategory.RIGID_MATCH
    if distortion < 5.0:
        return DistortionCategory.SLIGHT_DISTORTION
    if distortion < 15.0:
        return DistortionCategory.MODERATE_DISTORTION
    return DistortionCategory.HIGH_DISTORTION


@dataclass(frozen=True)
class FlexibleShapeResult:
    """Rigid measure and the measure against the best stretched reference."""

    rigid: ShapeMeasureResult
    measure: float
    scales: np.ndarray
    axes: np.ndarray
    rotation: np.ndarray
    correspondence: np.ndarray

    @property
    def delta(self) -> float:
        return self.rigid.measure - self.measure

    @property
    def improvement(self) -> float:
        """Relative drop of the measure, in percent."""
        if self.rigid.measure <= 0:
            return 0.0
        return 100.0 * self.delta / self.rigid.measure

    @property
    def distortion(self) -> float:
        return distortion_index(self.scales)

    @property
    def description(self) -> str:
        return describe_scaling(self.scales)

    @property
    def category(self) -> DistortionCategory:
        return classify_distortion(self.rigid.measure, self.measure, self.distortion)


class AnisotropicScalingFit:
    """Anneals per-axis scale factors of a reference around a rigid alignment."""

    def __init__(
        self,
        mode: SearchMode = SearchMode.DEFAULT,
        schedule: Optional[ScalingSchedule] = None,
        bounds: Tuple[float, float] = SCALE_BOUNDS,
    ):
        self.schedule = schedule or SCALING_SCHEDULES[SearchMode(mode)]
        self.bounds = bounds

    def fit(
        self,
        actual: np.ndarray,
        reference: np.ndarray,
        rigid: ShapeMeasureResult,
        rng: Optional[np.random.Generator] = None,
    ) -> FlexibleShapeResult:
        """
        Find the stretch of ``reference`` that best fits ``actual``.

        The rotation stays at the rigid optimum while the scales are annealed;
        the best stretch is then polished with the alignment refiner, so the
        flexible measure never exceeds the rigid one.

        Args:
            actual: Normalized actual points, shape (N, 3)
            reference: Normalized reference points, shape (N, 3)
            rigid: Result of the rigid search for the same pair
            rng: Random generator for restarts and proposals

        Returns:
            FlexibleShapeResult
        """
        rng = rng if rng is not None else np.random.default_rng()
        rotation = rigid.rotation
        axes = principal_axes(actual @ rotation.T).axes

        def evaluate(scales):
            scorer = ShapeScorer(actual, scale_along_axes(reference, axes, scales))
            return scorer.assign(rotation)[1]

        best_scales, best_measure = np.ones(3), evaluate(np.ones(3))
        for restart in range(self.schedule.restarts):
            scales, measure = self._anneal(evaluate, restart, rng)
            if measure < best_measure:
                best_scales, best_measure = scales, measure
            if best_measure < EARLY_STOP_MEASURE:
                break

        scaled = scale_along_axes(reference, axes, best_scales)
        refined = AlignmentRefiner(ShapeScorer(actual, scaled)).refine(rotation)
        logger.debug(
            f"Flexible measure {refined.measure:.4f} (rigid {rigid.measure:.4f}) "
            f"with scales {np.round(best_scales, 3).tolist()}"
        )
        return FlexibleShapeResult(
            rigid=rigid,
            measure=refined.measure,
            scales=best_scales,
            axes=axes,
            rotation=refined.rotation,
            correspondence=refined.correspondence,
        )

    def _anneal(self, evaluate, restart: int, rng: np.random.Generator):
        low, high = self.bounds
        schedule = self.schedule
        if restart == 0:
            scales = np.ones(3)
        else:
            scales = rng.uniform(low, high, size=3)

        measure = evaluate(scales)
        best_scales, best_measure = scales, measure
        temperature = schedule.initial_temperature

        for _ in range(schedule.iterations):
            step = temperature * STEP_FACTOR
            candidate = np.clip(scales + rng.uniform(-step, step, size=3), low, high)
            candidate_measure = evaluate(candidate)

            delta = candidate_measure - measure
            if delta < 0 or rng.random() < np.exp(-delta / temperature):
                scales, measure = candidate, candidate_measure
                if measure < best_measure:
                    best_scales, best_measure = scales, measure

            temperature *= schedule.cooling_rate
            if best_measure < EARLY_STOP_MEASURE:
                break

        return best_scales, best_measure
