#!/usr/bin/env python3
# src/coordshape/core/domain/implementations/staged_search_measurer.py

"""
Continuous shape measure by a staged search over rotation space.

The measure is minimized over rotations and point correspondences. Since the
landscape is non-convex, the search runs four stages, each seeded with the
best alignment found so far:

1. key orientations (caller seeds plus canonical rotations), each refined
2. a nested Euler grid, each point refined
3. simulated annealing restarts with periodic correspondence updates
4. greedy local refinement until it plateaus

Any stage may end the search early once the measure is small enough.
"""

import itertools
import logging
from typing import Callable, Optional, Sequence

import numpy as np

from ..interfaces.shape_measurer import ShapeMeasurer
from ..models.exceptions import NonFinitePointsError, ShapeInputError
from ..models.optimization_state import OptimizationState
from ..models.point_set import validate_point_sets
from ..models.search_mode import (
    AnnealingSchedule,
    EarlyStopThresholds,
    SearchBudget,
    SearchMode,
    SearchStage,
)
from ..models.shape_result import SearchProgress, ShapeMeasureResult
from ...utils.benchmarking import PerformanceStats, Timer
from ...utils.rotations import (
    axis_angle_matrix,
    euler_xyz_matrix,
    is_proper_rotation,
    random_euler_rotation,
    random_unit_vector,
)
from .alignment_refiner import AlignmentRefiner, RefinedAlignment
from .cshm_scorer import ShapeScorer, aligned_points

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[SearchProgress], None]

_HALF_PI = np.pi / 2
_QUARTER_PI = np.pi / 4
_THIRD_PI = np.pi / 3

# Euler XYZ angles tried before the grid search.
KEY_ORIENTATIONS = (
    (0.0, 0.0, 0.0),
    (_HALF_PI, 0.0, 0.0),
    (0.0, _HALF_PI, 0.0),
    (0.0, 0.0, _HALF_PI),
    (np.pi, 0.0, 0.0),
    (0.0, np.pi, 0.0),
    (0.0, 0.0, np.pi),
    (_HALF_PI, _HALF_PI, 0.0),
    (_HALF_PI, 0.0, _HALF_PI),
    (0.0, _HALF_PI, _HALF_PI),
    (_QUARTER_PI, 0.0, 0.0),
    (0.0, _QUARTER_PI, 0.0),
    (0.0, 0.0, _QUARTER_PI),
    (_QUARTER_PI, _QUARTER_PI, 0.0),
    (_QUARTER_PI, 0.0, _QUARTER_PI),
    (0.0, _QUARTER_PI, _QUARTER_PI),
    (_QUARTER_PI, _QUARTER_PI, _QUARTER_PI),
    (_THIRD_PI, _THIRD_PI, _THIRD_PI),
)

KEY_PROGRESS_INTERVAL = 6
GRID_PROGRESS_INTERVAL = 50
REFINEMENT_PROGRESS_INTERVAL = 500


class StagedSearchMeasurer(ShapeMeasurer):
    """Measure shapes by key orientations, grid search, annealing and refinement."""

    def __init__(
        self,
        mode: SearchMode = SearchMode.DEFAULT,
        seed: Optional[int] = None,
        progress_callback: Optional[ProgressCallback] = None,
        budget: Optional[SearchBudget] = None,
        thresholds: Optional[EarlyStopThresholds] = None,
        schedule: Optional[AnnealingSchedule] = None,
    ):
        """
        Initialize measurer with a search effort level.

        Args:
            mode: Effort level selecting the default search budget
            seed: Seed for the random generator created on each call
            progress_callback: Receives SearchProgress updates
            budget: Overrides the budget of ``mode``
            thresholds: Overrides the early-stop thresholds
            schedule: Overrides the annealing constants
        """
        self.mode = SearchMode(mode)
        self.budget = budget or self.mode.budget
        self.thresholds = thresholds or EarlyStopThresholds()
        self.schedule = schedule or AnnealingSchedule()
        self._seed = seed
        self._progress_callback = progress_callback

    def measure(
        self,
        actual_points: np.ndarray,
        reference_points: np.ndarray,
        seed_candidates: Sequence[np.ndarray] = (),
        rng: Optional[np.random.Generator] = None,
    ) -> ShapeMeasureResult:
        """
        Compute the continuous shape measure of ``actual_points``.

        Args:
            actual_points: Observed coordinates, shape (N, 3)
            reference_points: Ideal coordinates at unit RMS radius, shape (N, 3)
            seed_candidates: Rotations tried first, e.g. from an AlignmentAdvisor
            rng: Random generator; a fresh one from the configured seed if omitted

        Returns:
            ShapeMeasureResult with the best alignment found

        Raises:
            ShapeInputError: If the point sets or seed rotations are invalid
        """
        actual, reference = validate_point_sets(actual_points, reference_points)
        seeds = [_as_seed_rotation(candidate) for candidate in seed_candidates]
        if rng is None:
            rng = np.random.default_rng(self._seed)

        search = _StagedSearch(
            actual,
            reference,
            budget=self.budget,
            thresholds=self.thresholds,
            schedule=self.schedule,
            rng=rng,
            progress_callback=self._progress_callback,
        )
        return search.run(seeds)


def _as_seed_rotation(candidate) -> np.ndarray:
    rotation = np.asarray(candidate, dtype=float)
    if not is_proper_rotation(rotation):
        raise ShapeInputError("Seed candidates must be proper 3x3 rotation matrices")
    return rotation


class _StagedSearch:
    """State of one search call; discarded when the call returns."""

    def __init__(
        self,
        actual: np.ndarray,
        reference: np.ndarray,
        budget: SearchBudget,
        thresholds: EarlyStopThresholds,
        schedule: AnnealingSchedule,
        rng: np.random.Generator,
        progress_callback: Optional[ProgressCallback],
    ):
        self.actual = actual
        self.budget = budget
        self.thresholds = thresholds
        self.schedule = schedule
        self.rng = rng
        self.scorer = ShapeScorer(actual, reference)
        self.refiner = AlignmentRefiner(self.scorer, max_sweeps=budget.svd_max_sweeps)
        self.state = OptimizationState.initial()
        self.stats = PerformanceStats()
        self._progress_callback = progress_callback

    def run(self, seeds) -> ShapeMeasureResult:
        stages = (
            (SearchStage.KEY_ORIENTATIONS, lambda: self._key_orientations(seeds),
             self.thresholds.key_orientations),
            (SearchStage.GRID_SEARCH, self._grid_search, self.thresholds.grid_search),
            (SearchStage.ANNEALING, self._annealing, self.thresholds.annealing_stage),
            (SearchStage.REFINEMENT, self._refinement, None),
        )

        final_stage = SearchStage.REFINEMENT
        for stage, run_stage, threshold in stages:
            evaluations_before = self.scorer.evaluations
            with Timer(stage.value) as stage_timer:
                run_stage()
            self.stats.add_timing(
                stage.value,
                stage_timer.elapsed(),
                self.scorer.evaluations - evaluations_before,
            )
            logger.debug(
                f"Stage {stage.value} finished with best measure "
                f"{self.state.best_measure:.6f}"
            )
            if threshold is not None and self.state.best_measure < threshold:
                logger.debug(f"Early exit after {stage.value} (below {threshold})")
                final_stage = stage
                break

        self._accept(self.refiner.refine(self.state.best_rotation))
        logger.debug(f"Search timings:\n{self.stats.report()}")
        return self._result(final_stage)

    def _report(self, stage: SearchStage, current: int, total: int) -> None:
        if self._progress_callback is None:
            return
        percentage = 100.0 * current / total if total > 0 else 100.0
        self._progress_callback(
            SearchProgress(
                stage=stage.value,
                percentage=percentage,
                current=current,
                total=total,
                best_measure=self.state.best_measure,
            )
        )

    def _accept(self, refined: RefinedAlignment) -> bool:
        self.state.approximate = self.state.approximate or refined.approximate
        return self.state.consider(
            refined.rotation, refined.correspondence, refined.measure
        )

    def _key_orientations(self, seeds) -> None:
        candidates = list(seeds) + [euler_xyz_matrix(*angles) for angles in KEY_ORIENTATIONS]
        total = len(candidates)
        self._report(SearchStage.KEY_ORIENTATIONS, 0, total)

        for index, rotation in enumerate(candidates, 1):
            self._accept(self.refiner.refine(rotation))
            if self.state.best_measure < self.thresholds.key_orientations:
                break
            if index % KEY_PROGRESS_INTERVAL == 0:
                self._report(SearchStage.KEY_ORIENTATIONS, index, total)

        self._report(SearchStage.KEY_ORIENTATIONS, total, total)

    def _grid_search(self) -> None:
        budget = self.budget
        angles = [
            2.0 * np.pi * i / budget.grid_steps
            for i in range(0, budget.grid_steps, budget.grid_stride)
        ]
        total = budget.grid_points
        self._report(SearchStage.GRID_SEARCH, 0, total)

        for index, (x, y, z) in enumerate(itertools.product(angles, repeat=3), 1):
            self._accept(self.refiner.refine(euler_xyz_matrix(x, y, z)))
            if self.state.best_measure < self.thresholds.grid_search:
                break
            if index % GRID_PROGRESS_INTERVAL == 0:
                self._report(SearchStage.GRID_SEARCH, index, total)

        self._report(SearchStage.GRID_SEARCH, total, total)

    def _restart_rotation(self, restart: int) -> np.ndarray:
        if restart == 0:
            return self.state.best_rotation.copy()
        if restart < self.budget.num_restarts / 2:
            axis = random_unit_vector(self.rng)
            angle = (self.rng.random() - 0.5) * np.pi
            return axis_angle_matrix(axis, angle) @ self.state.best_rotation
        return random_euler_rotation(self.rng)

    def _annealing(self) -> None:
        budget = self.budget
        total = budget.num_restarts
        self._report(SearchStage.ANNEALING, 0, total)

        for restart in range(budget.num_restarts):
            run_best = self._anneal(self._restart_rotation(restart))
            self._accept(self.refiner.refine(run_best))
            self._report(SearchStage.ANNEALING, restart + 1, total)
            if self.state.best_measure < self.thresholds.annealing_stage:
                break

    def _anneal(self, rotation: np.ndarray) -> np.ndarray:
        """Run one annealing trajectory and return its best rotation."""
        budget, schedule, rng, state = self.budget, self.schedule, self.rng, self.state
        steps = budget.steps_per_run
        cooling = (schedule.min_temperature / budget.initial_temperature) ** (
            1.0 / max(steps, 1)
        )

        correspondence, measure = self.scorer.assign(rotation)
        state.start_walk(rotation, correspondence, measure, budget.initial_temperature)
        best_rotation, best_measure = rotation, measure

        for step in range(steps):
            step_size = (
                state.temperature
                * schedule.step_size_factor
                * (1.0 + schedule.step_size_randomness * rng.random())
            )
            perturbation = axis_angle_matrix(
                random_unit_vector(rng), rng.uniform(-step_size, step_size)
            )
            candidate = perturbation @ state.current_rotation
            state.propose()

            if step % budget.reassignment_interval == 0:
                candidate_correspondence, candidate_measure = self.scorer.assign(candidate)
            else:
                candidate_correspondence = state.current_correspondence
                candidate_measure = self.scorer.measure(
                    candidate, state.current_correspondence
                )

            delta = candidate_measure - state.current_measure
            if delta < 0 or rng.random() < np.exp(-delta / state.temperature):
                state.move_to(candidate, candidate_correspondence, candidate_measure)
                if candidate_measure < best_measure:
                    best_rotation, best_measure = candidate, candidate_measure
                    if best_measure < self.thresholds.annealing_run:
                        break

            state.temperature *= cooling

        return best_rotation

    def _refinement(self) -> None:
        budget, schedule, rng, state = self.budget, self.schedule, self.rng, self.state
        total = budget.refinement_steps
        self._report(SearchStage.REFINEMENT, 0, total)

        state.start_walk(
            state.best_rotation,
            state.best_correspondence,
            state.best_measure,
            schedule.refinement_temperature,
        )
        stale_steps = 0

        for step in range(1, total + 1):
            step_size = state.temperature * schedule.refinement_step_factor
            perturbation = axis_angle_matrix(
                random_unit_vector(rng), rng.uniform(-step_size, step_size)
            )
            candidate = perturbation @ state.current_rotation
            state.propose()
            correspondence, candidate_measure = self.scorer.assign(candidate)

            if candidate_measure < state.current_measure:
                state.move_to(candidate, correspondence, candidate_measure)
                state.consider(candidate, correspondence, candidate_measure)
                stale_steps = 0
            else:
                stale_steps += 1

            if stale_steps >= budget.no_improvement_limit:
                logger.debug(f"Refinement plateaued after {step} steps")
                break
            if state.best_measure < self.thresholds.refinement:
                break
            if step % REFINEMENT_PROGRESS_INTERVAL == 0:
                self._report(SearchStage.REFINEMENT, step, total)

            state.temperature *= schedule.refinement_decay

        self._report(SearchStage.REFINEMENT, total, total)
        logger.debug(
            f"Walk acceptance rate {state.acceptance_rate:.2f} "
            f"over {state.steps} proposals"
        )

    def _result(self, stage: SearchStage) -> ShapeMeasureResult:
        state = self.state
        if not np.isfinite(state.best_measure):
            raise NonFinitePointsError("Shape measure evaluated to a non-finite value")

        rotated = self.actual @ state.best_rotation.T
        return ShapeMeasureResult(
            measure=max(0.0, state.best_measure),
            rotation=state.best_rotation,
            correspondence=state.best_correspondence,
            aligned_points=aligned_points(rotated, state.best_correspondence),
            approximate=state.approximate,
            stage=stage.value,
            evaluations=self.scorer.evaluations,
        )


def compute(
    actual_points,
    reference_points,
    mode: SearchMode = SearchMode.DEFAULT,
    seed_candidates: Sequence[np.ndarray] = (),
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> ShapeMeasureResult:
    """
    Continuous shape measure of a point set against a reference shape.

    Both sets must have the same number of points; the reference is expected at
    unit RMS radius. No scaling is applied to either set.

    Args:
        actual_points: Observed coordinates, shape (N, 3)
        reference_points: Ideal coordinates, shape (N, 3)
        mode: Search effort level
        seed_candidates: Rotations tried before the built-in orientations
        seed: Seed for a fresh random generator, ignored when ``rng`` is given
        rng: Random generator used by the stochastic stages
        progress_callback: Receives SearchProgress updates

    Returns:
        ShapeMeasureResult with measure, rotation, correspondence and aligned points
    """
    measurer = StagedSearchMeasurer(
        mode=mode, seed=seed, progress_callback=progress_callback
    )
    return measurer.measure(
        actual_points, reference_points, seed_candidates=seed_candidates, rng=rng
    )
