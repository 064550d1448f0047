import numpy as np
import pytest

from coordshape.core.domain.models.exceptions import (
    DegeneratePointSetError,
    NonFinitePointsError,
    ShapeInputError,
    SizeMismatchError,
)
from coordshape.core.domain.models.point_set import (
    as_point_array,
    count_distinct_directions,
    normalize_point_set,
    prepare_coordination_points,
    rms_radius,
    validate_point_sets,
    with_central_atom,
)


def test_normalize_centres_and_scales():
    points = np.array([[3.0, 1.0, 0.0], [1.0, 1.0, 0.0], [2.0, 4.0, 1.0]])
    normalized = normalize_point_set(points)

    assert np.allclose(normalized.mean(axis=0), 0.0)
    assert rms_radius(normalized) == pytest.approx(1.0)


def test_normalize_leaves_collapsed_set_unscaled():
    normalized = normalize_point_set(np.ones((3, 3)))
    assert np.allclose(normalized, 0.0)


def test_as_point_array_rejects_bad_shapes():
    with pytest.raises(ShapeInputError):
        as_point_array([[1.0, 2.0], [3.0, 4.0]])
    with pytest.raises(ShapeInputError):
        as_point_array([])


def test_non_finite_points_are_input_errors():
    points = [[0.0, 0.0, 1.0], [np.nan, 0.0, 0.0]]
    with pytest.raises(NonFinitePointsError):
        as_point_array(points)
    with pytest.raises(ShapeInputError):
        as_point_array([[np.inf, 0.0, 0.0]])


def test_linear_set_has_two_directions():
    linear = np.array([[1.0, 0.0, 0.0], [-1.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
    assert count_distinct_directions(linear) == 2


def test_validate_size_mismatch():
    with pytest.raises(SizeMismatchError) as excinfo:
        validate_point_sets(np.eye(3), np.eye(4)[:, :3])
    assert excinfo.value.actual_size == 3
    assert excinfo.value.reference_size == 4


def test_validate_single_direction_is_degenerate():
    collinear = np.array([[1.0, 0.0, 0.0], [2.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
    with pytest.raises(DegeneratePointSetError):
        validate_point_sets(collinear, np.eye(3))


def test_with_central_atom_appends_origin():
    center = np.array([1.0, 2.0, 3.0])
    ligands = center + np.eye(3)
    points = with_central_atom(ligands, center)

    assert points.shape == (4, 3)
    assert np.allclose(points[:3], np.eye(3))
    assert np.allclose(points[3], 0.0)


def test_ligand_on_centre_is_degenerate():
    with pytest.raises(DegeneratePointSetError):
        with_central_atom([[1.0, 0.0, 0.0], [0.0, 0.0, 0.0]])


def test_prepare_coordination_points_is_translation_and_scale_free():
    ligands = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.2]])
    shifted = 2.5 * ligands + np.array([4.0, -1.0, 0.5])

    first = prepare_coordination_points(ligands)
    second = prepare_coordination_points(shifted, center=np.array([4.0, -1.0, 0.5]))

    assert np.allclose(first, second)
