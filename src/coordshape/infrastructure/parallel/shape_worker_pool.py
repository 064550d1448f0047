#!/usr/bin/env python3
# src/coordshape/infrastructure/parallel/shape_worker_pool.py
"""
Parallel shape measures across reference geometries.

One search runs per reference geometry on a process pool owned by the
caller. Each geometry draws from its own seed stream, so results do not
depend on the number of workers or on completion order.
"""

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from ...core.domain.implementations.staged_search_measurer import StagedSearchMeasurer
from ...core.domain.interfaces.alignment_advisor import AlignmentAdvisor
from ...core.domain.models.geometry_match import GeometryMatch
from ...core.domain.models.reference_geometry import ReferenceGeometry
from ...core.domain.models.search_mode import SearchMode
from ...core.domain.models.shape_result import ShapeMeasureResult
from ...core.services.shape_analysis_service import spawn_seed_sequences
from ...core.utils.benchmarking import PerformanceStats, Timer

logger = logging.getLogger(__name__)

MatchCallback = Callable[[int, int, GeometryMatch], None]


def measure_geometry(
    task: Tuple[int, np.ndarray, np.ndarray, str, List[np.ndarray], np.random.SeedSequence],
) -> Tuple[int, ShapeMeasureResult, float]:
    """Run one shape measure search.

    Args:
        task: Tuple containing (index, actual_points, reference_points, mode,
            seed_candidates, seed_sequence)

    Returns:
        Tuple (index, result, elapsed seconds)
    """
    index, actual, reference, mode, seed_candidates, seed_sequence = task
    with Timer(str(index)) as t:
        result = StagedSearchMeasurer(mode=SearchMode(mode)).measure(
            actual,
            reference,
            seed_candidates=seed_candidates,
            rng=np.random.default_rng(seed_sequence),
        )
    return index, result, t.elapsed()


class ShapeWorkerPool:
    """Process pool for ranking reference geometries; start and stop it explicitly."""

    def __init__(
        self,
        max_workers: Optional[int] = None,
        mode: SearchMode = SearchMode.DEFAULT,
        advisor: Optional[AlignmentAdvisor] = None,
    ):
        """
        Initialize an idle pool.

        Args:
            max_workers: Number of worker processes, os.cpu_count() if omitted
            mode: Search effort level for every task
            advisor: Optional strategy proposing starting rotations
        """
        self.max_workers = max_workers
        self.mode = SearchMode(mode)
        self.advisor = advisor
        self.stats = PerformanceStats()
        self._executor: Optional[ProcessPoolExecutor] = None

    @property
    def running(self) -> bool:
        return self._executor is not None

    def start(self) -> "ShapeWorkerPool":
        """Launch the worker processes; a no-op if already running."""
        if self._executor is None:
            self._executor = ProcessPoolExecutor(max_workers=self.max_workers)
            logger.debug(f"Started shape worker pool (max_workers={self.max_workers})")
        return self

    def stop(self, cancel_pending: bool = True) -> None:
        """Shut the workers down, dropping queued tasks unless told otherwise."""
        if self._executor is not None:
            self._executor.shutdown(wait=True, cancel_futures=cancel_pending)
            self._executor = None
            logger.debug("Stopped shape worker pool")

    def __enter__(self) -> "ShapeWorkerPool":
        return self.start()

    def __exit__(self, *args) -> None:
        self.stop()

    def rank(
        self,
        actual_points: np.ndarray,
        geometries: Sequence[ReferenceGeometry],
        seed: Optional[int] = None,
        progress_callback: Optional[MatchCallback] = None,
        show_progress: bool = False,
    ) -> List[GeometryMatch]:
        """
        Measure prepared points against several geometries in parallel.

        Args:
            actual_points: Normalized points including the central atom
            geometries: Reference geometries of matching size
            seed: Base seed; each geometry gets its own derived stream
            progress_callback: Called as (completed, total, match) for each result
            show_progress: Display a tqdm progress bar

        Returns:
            Matches sorted by increasing shape measure

        Raises:
            RuntimeError: If the pool has not been started
        """
        if self._executor is None:
            raise RuntimeError("Shape worker pool is not running; call start() first")

        streams = spawn_seed_sequences(seed, len(geometries))
        futures = {}
        for index, (geometry, stream) in enumerate(zip(geometries, streams)):
            seeds = (
                self.advisor.suggest(actual_points, geometry.points)
                if self.advisor is not None
                else []
            )
            task = (index, actual_points, geometry.points, self.mode.value, seeds, stream)
            futures[self._executor.submit(measure_geometry, task)] = geometry

        matches: List[GeometryMatch] = []
        with tqdm(
            total=len(futures), desc="Reference geometries", disable=not show_progress
        ) as pbar:
            for future in as_completed(futures):
                geometry = futures[future]
                try:
                    _, result, elapsed = future.result()
                except Exception as e:
                    logger.error(f"Shape measure against {geometry.code} failed: {e}")
                    for pending in futures:
                        pending.cancel()
                    raise

                match = GeometryMatch(geometry=geometry, result=result, elapsed=elapsed)
                matches.append(match)
                self.stats.add_timing(geometry.code, elapsed, result.evaluations)
                pbar.update(1)
                pbar.set_postfix(best=f"{min(m.measure for m in matches):.3f}")
                if progress_callback is not None:
                    progress_callback(len(matches), len(futures), match)

        order = {geometry.code: i for i, geometry in enumerate(geometries)}
        return sorted(matches, key=lambda m: (m.measure, order[m.code]))
