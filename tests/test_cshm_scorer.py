import numpy as np
import pytest

from coordshape.core.domain.implementations.cshm_scorer import (
    ShapeScorer,
    aligned_points,
    shape_measure,
)
from coordshape.core.domain.models.exceptions import DegeneratePointSetError


def test_shape_measure_formula():
    reference = np.array([[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0]])
    rotated = np.array([[1.0, 0.1, 0.0], [-1.0, 0.0, 0.0]])

    # 100 * 0.01 / 2
    assert shape_measure(rotated, reference, np.array([0, 1])) == pytest.approx(0.5)


def test_shape_measure_uses_correspondence():
    reference = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    rotated = reference[::-1].copy()

    assert shape_measure(rotated, reference, np.array([1, 0])) == 0.0
    assert shape_measure(rotated, reference, np.array([0, 1])) > 0.0


def test_aligned_points_follow_reference_order():
    rotated = np.array([[0.0, 0.0, 1.0], [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    ordered = aligned_points(rotated, np.array([2, 0, 1]))

    assert np.array_equal(ordered, [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])


def test_scorer_assign_matches_measure():
    rng = np.random.default_rng(5)
    actual = rng.normal(size=(5, 3))
    reference = rng.normal(size=(5, 3))
    scorer = ShapeScorer(actual, reference)

    perm, measure = scorer.assign(np.eye(3))
    assert measure == pytest.approx(scorer.measure(np.eye(3), perm))
    assert scorer.evaluations == 2


def test_zero_reference_is_rejected():
    with pytest.raises(DegeneratePointSetError):
        ShapeScorer(np.eye(3), np.zeros((3, 3)))
