import logging

import numpy as np
import pytest

from coordshape.core.domain.implementations.alignment_refiner import AlignmentRefiner
from coordshape.core.domain.implementations.cshm_scorer import ShapeScorer
from coordshape.core.utils.rotations import euler_xyz_matrix, is_proper_rotation


@pytest.fixture
def octahedron(repository):
    return repository.get("OC-6").points


def test_refines_rotated_permuted_copy_to_zero(octahedron):
    rotation = euler_xyz_matrix(0.15, -0.1, 0.2)
    order = np.array([3, 1, 6, 0, 2, 5, 4])
    actual = (octahedron @ rotation)[order]

    refined = AlignmentRefiner(ShapeScorer(actual, octahedron)).refine(np.eye(3))

    assert refined.measure < 1e-10
    assert np.allclose(refined.rotation, rotation, atol=1e-6)
    assert np.array_equal(refined.correspondence, order)


def test_measure_never_increases(repository):
    reference = repository.get("TPR-6").points
    actual = repository.get("OC-6").points
    scorer = ShapeScorer(actual, reference)

    start = euler_xyz_matrix(0.7, 0.3, -1.2)
    _, initial = scorer.assign(start)
    refined = AlignmentRefiner(scorer).refine(start)

    assert refined.measure <= initial + 1e-12
    assert is_proper_rotation(refined.rotation)
    assert sorted(refined.correspondence.tolist()) == list(range(7))


def test_respects_alternation_cap(octahedron):
    actual = octahedron @ euler_xyz_matrix(1.0, 2.0, 0.5)
    refined = AlignmentRefiner(ShapeScorer(actual, octahedron), max_alternations=1).refine(
        np.eye(3)
    )
    assert refined.iterations == 1


def test_unconverged_rotation_fit_is_flagged(repository, caplog):
    actual = repository.get("TPR-6").points
    reference = repository.get("OC-6").points
    refiner = AlignmentRefiner(ShapeScorer(actual, reference), max_sweeps=0)

    with caplog.at_level(logging.WARNING):
        refined = refiner.refine(euler_xyz_matrix(0.3, 0.2, -0.4))

    assert refined.approximate is True
    assert is_proper_rotation(refined.rotation)
    assert "did not converge" in caplog.text


def test_converged_refinement_is_exact(octahedron):
    actual = octahedron @ euler_xyz_matrix(0.1, 0.2, 0.3)
    refined = AlignmentRefiner(ShapeScorer(actual, octahedron)).refine(np.eye(3))
    assert refined.approximate is False
