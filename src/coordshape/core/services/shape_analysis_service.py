"""Service for classifying coordination environments by shape measure."""

import logging
from typing import Callable, List, Optional, Sequence

import numpy as np

from ..domain.implementations.anisotropic_scaling import (
    AnisotropicScalingFit,
    FlexibleShapeResult,
)
from ..domain.implementations.staged_search_measurer import StagedSearchMeasurer
from ..domain.interfaces.alignment_advisor import AlignmentAdvisor
from ..domain.interfaces.shape_measurer import ShapeMeasurer
from ..domain.models.geometry_match import GeometryMatch
from ..domain.models.point_set import prepare_coordination_points
from ..domain.models.reference_geometry import ReferenceGeometry
from ..domain.models.search_mode import SearchMode
from ..domain.models.shape_result import SearchProgress
from ..interfaces.repository import Repository
from ..utils.benchmarking import Timer


def spawn_seed_sequences(seed: Optional[int], count: int) -> List[np.random.SeedSequence]:
    """
    Independent seed streams, one per reference geometry.

    The i-th stream depends only on ``seed`` and ``i``, so serial and parallel
    rankings draw identical random numbers for each geometry.
    """
    return np.random.SeedSequence(seed).spawn(count)


class ShapeAnalysisService:
    """Service for measuring ligand arrangements against reference polyhedra."""

    def __init__(
        self,
        repository: Repository[ReferenceGeometry],
        mode: SearchMode = SearchMode.DEFAULT,
        measurer: Optional[ShapeMeasurer] = None,
        advisor: Optional[AlignmentAdvisor] = None,
        progress_callback: Optional[Callable[[SearchProgress], None]] = None,
    ):
        """
        Initialize service with a reference library and search strategy.

        Args:
            repository: Source of reference geometries
            mode: Search effort level used when no measurer is given
            measurer: Shape measure strategy
            advisor: Optional strategy proposing starting rotations
            progress_callback: Receives search progress for each geometry
        """
        self._repository = repository
        self._mode = SearchMode(mode)
        self._measurer = measurer or StagedSearchMeasurer(
            mode=mode, progress_callback=progress_callback
        )
        self._advisor = advisor
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def prepare_points(ligand_positions, center=None) -> np.ndarray:
        """
        Build the normalized point set for a coordination environment.

        Args:
            ligand_positions: Coordinates of the coordinating atoms
            center: Position of the central atom, the origin if omitted

        Returns:
            Ligands plus central atom, centred at unit RMS radius
        """
        return prepare_coordination_points(ligand_positions, center)

    def seed_candidates(self, actual: np.ndarray, geometry: ReferenceGeometry):
        """Starting rotations suggested by the advisor, if one is configured."""
        if self._advisor is None:
            return []
        return self._advisor.suggest(actual, geometry.points)

    def measure(
        self,
        ligand_positions,
        geometry: ReferenceGeometry,
        center=None,
        rng: Optional[np.random.Generator] = None,
    ) -> GeometryMatch:
        """
        Measure a coordination environment against one reference geometry.

        Args:
            ligand_positions: Coordinates of the coordinating atoms
            geometry: Reference polyhedron with matching coordination number
            center: Position of the central atom, the origin if omitted
            rng: Random generator for the search

        Returns:
            GeometryMatch with the shape measure result
        """
        actual = self.prepare_points(ligand_positions, center)
        return self._measure_prepared(actual, geometry, rng)

    def measure_flexible(
        self,
        ligand_positions,
        geometry: ReferenceGeometry,
        center=None,
        rng: Optional[np.random.Generator] = None,
    ) -> FlexibleShapeResult:
        """
        Rigid measure plus the measure against the best stretched reference.

        Args:
            ligand_positions: Coordinates of the coordinating atoms
            geometry: Reference polyhedron with matching coordination number
            center: Position of the central atom, the origin if omitted
            rng: Random generator shared by the rigid and scaling searches

        Returns:
            FlexibleShapeResult carrying the rigid result
        """
        rng = rng if rng is not None else np.random.default_rng()
        actual = self.prepare_points(ligand_positions, center)
        rigid = self._measure_prepared(actual, geometry, rng)
        flexible = AnisotropicScalingFit(self._mode).fit(
            actual, geometry.points, rigid.result, rng
        )
        self.logger.info(
            f"{geometry.code}: flexible CShM = {flexible.measure:.4f} "
            f"({flexible.description})"
        )
        return flexible

    def _measure_prepared(
        self,
        actual: np.ndarray,
        geometry: ReferenceGeometry,
        rng: Optional[np.random.Generator],
    ) -> GeometryMatch:
        with Timer(geometry.code) as t:
            result = self._measurer.measure(
                actual,
                geometry.points,
                seed_candidates=self.seed_candidates(actual, geometry),
                rng=rng,
            )
        self.logger.info(
            f"{geometry.code}: CShM = {result.measure:.4f} ({t.elapsed():.2f}s)"
        )
        return GeometryMatch(geometry=geometry, result=result, elapsed=t.elapsed())

    def candidate_geometries(
        self, coordination_number: int, codes: Optional[Sequence[str]] = None
    ) -> List[ReferenceGeometry]:
        """
        Reference geometries to compare against.

        Args:
            coordination_number: Number of ligands
            codes: Restrict to these SHAPE codes

        Returns:
            Matching geometries in library order

        Raises:
            ValueError: If a requested code is unknown or has another coordination number
        """
        if codes is None:
            return self._repository.list_by_coordination(coordination_number)

        geometries = []
        for code in codes:
            geometry = self._repository.get(code)
            if geometry is None:
                raise ValueError(f"Unknown reference geometry {code}")
            if geometry.coordination_number != coordination_number:
                raise ValueError(
                    f"{code} has coordination number {geometry.coordination_number}, "
                    f"expected {coordination_number}"
                )
            geometries.append(geometry)
        return geometries

    def rank(
        self,
        ligand_positions,
        center=None,
        codes: Optional[Sequence[str]] = None,
        seed: Optional[int] = None,
    ) -> List[GeometryMatch]:
        """
        Measure against every reference geometry of the same coordination number.

        Args:
            ligand_positions: Coordinates of the coordinating atoms
            center: Position of the central atom, the origin if omitted
            codes: Restrict to these SHAPE codes
            seed: Base seed; each geometry gets its own derived stream

        Returns:
            Matches sorted by increasing shape measure
        """
        actual = self.prepare_points(ligand_positions, center)
        coordination_number = len(actual) - 1
        geometries = self.candidate_geometries(coordination_number, codes)
        if not geometries:
            self.logger.warning(
                f"No reference geometries for coordination number {coordination_number}"
            )
            return []

        streams = spawn_seed_sequences(seed, len(geometries))
        matches = [
            self._measure_prepared(actual, geometry, np.random.default_rng(stream))
            for geometry, stream in zip(geometries, streams)
        ]
        return sorted(matches, key=lambda match: match.measure)
