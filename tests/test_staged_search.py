import dataclasses
import logging

import numpy as np
import pytest

from coordshape import compute
from coordshape.core.domain.implementations.staged_search_measurer import (
    KEY_ORIENTATIONS,
    StagedSearchMeasurer,
)
from coordshape.core.domain.models.exceptions import (
    DegeneratePointSetError,
    NonFinitePointsError,
    ShapeInputError,
    SizeMismatchError,
)
from coordshape.core.domain.models.point_set import prepare_coordination_points
from coordshape.core.domain.models.search_mode import SearchMode, SearchStage
from coordshape.core.utils.rotations import euler_xyz_matrix, is_proper_rotation


@pytest.fixture
def distorted_octahedron(octahedron_ligands):
    return prepare_coordination_points(octahedron_ligands)


@pytest.fixture
def octahedron(repository):
    return repository.get("OC-6").points


class TestMeasureProperties:
    def test_self_match_is_zero(self, repository):
        for geometry in repository.list():
            result = compute(geometry.points, geometry.points, SearchMode.FAST, seed=0)
            assert result.measure < 1e-3, geometry.code

    def test_self_match_exits_after_key_orientations(self, octahedron):
        result = compute(octahedron, octahedron, SearchMode.DEFAULT, seed=0)
        assert result.stage == SearchStage.KEY_ORIENTATIONS.value

    def test_rotation_invariance(self, distorted_octahedron, octahedron):
        rotated = distorted_octahedron @ euler_xyz_matrix(0.9, -0.4, 2.2).T

        first = compute(distorted_octahedron, octahedron, SearchMode.DEFAULT, seed=1)
        second = compute(rotated, octahedron, SearchMode.DEFAULT, seed=2)
        assert first.measure == pytest.approx(second.measure, abs=1e-6)

    def test_permutation_invariance(self, distorted_octahedron, octahedron):
        order = np.array([5, 2, 6, 0, 3, 1, 4])
        first = compute(distorted_octahedron, octahedron, SearchMode.DEFAULT, seed=3)
        second = compute(distorted_octahedron[order], octahedron, SearchMode.DEFAULT, seed=3)
        assert first.measure == pytest.approx(second.measure, abs=1e-6)

    def test_measure_is_non_negative(self, repository):
        actual = repository.get("SS-4").points
        for geometry in repository.list_by_coordination(4):
            result = compute(actual, geometry.points, SearchMode.FAST, seed=4)
            assert result.measure >= 0.0

    def test_effort_monotonicity(self, repository):
        actual = repository.get("SS-4").points
        reference = repository.get("T-4").points

        fast = compute(actual, reference, SearchMode.FAST, seed=5).measure
        default = compute(actual, reference, SearchMode.DEFAULT, seed=5).measure
        intensive = compute(actual, reference, SearchMode.INTENSIVE, seed=5).measure

        assert intensive <= default + 1e-6
        assert default <= fast + 1e-6

    @pytest.mark.parametrize(
        "regular, johnson",
        [("TBPY-5", "JTBPY-5"), ("OC-6", "TPR-6"), ("CU-8", "SAPR-8")],
    )
    def test_distinct_references_are_far_apart(self, repository, regular, johnson):
        result = compute(
            repository.get(johnson).points,
            repository.get(regular).points,
            SearchMode.DEFAULT,
            seed=6,
        )
        assert result.measure > 0.5


class TestResult:
    def test_result_fields_are_consistent(self, distorted_octahedron, octahedron):
        result = compute(distorted_octahedron, octahedron, SearchMode.FAST, seed=7)

        assert is_proper_rotation(result.rotation)
        assert sorted(result.correspondence.tolist()) == list(range(7))

        rotated = distorted_octahedron @ result.rotation.T
        assert np.allclose(result.aligned_points[result.correspondence], rotated)

        deviation = np.sum((result.aligned_points - octahedron) ** 2)
        expected = 100.0 * deviation / np.sum(octahedron**2)
        assert result.measure == pytest.approx(expected)

    def test_converged_search_is_exact(self, distorted_octahedron, octahedron):
        result = compute(distorted_octahedron, octahedron, SearchMode.FAST, seed=0)
        assert result.approximate is False

    def test_unconverged_rotation_fit_marks_result_approximate(
        self, distorted_octahedron, octahedron, caplog
    ):
        budget = dataclasses.replace(SearchMode.FAST.budget, svd_max_sweeps=0)
        measurer = StagedSearchMeasurer(mode=SearchMode.FAST, seed=0, budget=budget)

        with caplog.at_level(logging.WARNING):
            result = measurer.measure(distorted_octahedron, octahedron)

        assert result.approximate is True
        assert result.measure >= 0.0
        assert is_proper_rotation(result.rotation)
        assert "did not converge in 0 sweeps" in caplog.text

    def test_result_arrays_are_read_only(self, octahedron):
        result = compute(octahedron, octahedron, SearchMode.FAST, seed=0)
        with pytest.raises(ValueError):
            result.rotation[0, 0] = 2.0

    def test_same_seed_same_result(self, distorted_octahedron, repository):
        reference = repository.get("TPR-6").points
        first = compute(distorted_octahedron, reference, SearchMode.FAST, seed=42)
        second = compute(distorted_octahedron, reference, SearchMode.FAST, seed=42)

        assert first.measure == second.measure
        assert np.array_equal(first.rotation, second.rotation)

    def test_measurer_holds_no_state_between_calls(self, distorted_octahedron, repository):
        reference = repository.get("TPR-6").points
        measurer = StagedSearchMeasurer(SearchMode.FAST, seed=9)

        first = measurer.measure(distorted_octahedron, reference)
        second = measurer.measure(distorted_octahedron, reference)
        assert first.measure == second.measure

    def test_injected_generator(self, distorted_octahedron, repository):
        reference = repository.get("TPR-6").points
        first = compute(
            distorted_octahedron, reference, SearchMode.FAST, rng=np.random.default_rng(8)
        )
        second = compute(
            distorted_octahedron, reference, SearchMode.FAST, rng=np.random.default_rng(8)
        )
        assert first.measure == second.measure

    def test_progress_callback_does_not_change_result(self, distorted_octahedron, repository):
        reference = repository.get("TPR-6").points
        updates = []

        silent = compute(distorted_octahedron, reference, SearchMode.FAST, seed=10)
        observed = compute(
            distorted_octahedron,
            reference,
            SearchMode.FAST,
            seed=10,
            progress_callback=updates.append,
        )

        assert observed.measure == silent.measure
        assert np.array_equal(observed.rotation, silent.rotation)
        assert updates
        assert updates[0].stage == SearchStage.KEY_ORIENTATIONS.value
        assert all(0.0 <= update.percentage <= 100.0 for update in updates)

    def test_seed_candidates_are_tried_first(self, distorted_octahedron, octahedron):
        rotation = euler_xyz_matrix(0.5, 0.5, 0.5)
        rotated = distorted_octahedron @ rotation
        result = compute(rotated, octahedron, SearchMode.FAST, seed_candidates=[rotation], seed=0)
        plain = compute(distorted_octahedron, octahedron, SearchMode.FAST, seed=0)
        assert result.measure == pytest.approx(plain.measure, abs=1e-6)

    def test_key_orientations_are_rotations(self):
        assert len(KEY_ORIENTATIONS) == 18
        for angles in KEY_ORIENTATIONS:
            assert is_proper_rotation(euler_xyz_matrix(*angles))


class TestInputErrors:
    def test_size_mismatch(self, octahedron, repository):
        with pytest.raises(SizeMismatchError):
            compute(octahedron, repository.get("TBPY-5").points)

    def test_degenerate_point_set(self, repository):
        reference = repository.get("TP-3").points
        collapsed = np.array([[1.0, 0.0, 0.0], [2.0, 0.0, 0.0], [3.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
        with pytest.raises(DegeneratePointSetError):
            compute(collapsed, reference)

    def test_nan_is_input_error(self, octahedron):
        actual = octahedron.copy()
        actual[2, 1] = np.nan
        with pytest.raises(NonFinitePointsError):
            compute(actual, octahedron)

    def test_invalid_seed_candidate(self, octahedron):
        with pytest.raises(ShapeInputError):
            compute(octahedron, octahedron, seed_candidates=[2.0 * np.eye(3)])
