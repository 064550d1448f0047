#!/usr/bin/env python3
# src/coordshape/core/domain/models/point_set.py

"""
Validation and normalization of point sets.

The shape measure uses the extensive convention: a coordination polyhedron is
represented by its ligand positions plus the central atom, centred on the
centroid of all points and scaled to unit RMS radius.
"""

from typing import Optional, Tuple

import numpy as np

from .exceptions import (
    DegeneratePointSetError,
    NonFinitePointsError,
    ShapeInputError,
    SizeMismatchError,
)

MIN_VECTOR_LENGTH_SQ = 1e-8
ZERO_SCALE = 1e-10
DIRECTION_TOLERANCE = 1e-6


def as_point_array(points, name: str = "points") -> np.ndarray:
    """
    Coerce input to a float array of shape (N, 3).

    Args:
        points: Sequence of 3D coordinates
        name: Label used in error messages

    Returns:
        Float array of shape (N, 3)

    Raises:
        ShapeInputError: If the input is not an (N, 3) array
        NonFinitePointsError: If any coordinate is NaN or infinite
    """
    try:
        array = np.array(points, dtype=float)
    except (TypeError, ValueError) as e:
        raise ShapeInputError(f"{name} are not numeric coordinates: {e}")

    if array.ndim != 2 or array.shape[1] != 3 or len(array) == 0:
        raise ShapeInputError(f"{name} must have shape (N, 3), got {array.shape}")
    if not np.all(np.isfinite(array)):
        raise NonFinitePointsError(f"{name} contain NaN or infinite coordinates")
    return array


def center_points(points: np.ndarray) -> np.ndarray:
    """Translate points so their centroid is the origin."""
    return points - points.mean(axis=0)


def rms_radius(points: np.ndarray) -> float:
    """Root-mean-square distance of the points from the origin."""
    return float(np.sqrt(np.mean(np.sum(points**2, axis=1))))


def normalize_point_set(points) -> np.ndarray:
    """
    Centre a point set and scale it to unit RMS radius.

    A set whose RMS radius is effectively zero is returned centred but unscaled.
    """
    centered = center_points(as_point_array(points))
    radius = rms_radius(centered)
    if radius < ZERO_SCALE:
        return centered
    return centered / radius


def count_distinct_directions(points: np.ndarray) -> int:
    """Count distinct unit directions among the non-negligible vectors."""
    lengths_sq = np.sum(points**2, axis=1)
    vectors = points[lengths_sq >= MIN_VECTOR_LENGTH_SQ]
    directions = []
    for vector in vectors / np.linalg.norm(vectors, axis=1, keepdims=True):
        if not any(np.dot(vector, seen) > 1.0 - DIRECTION_TOLERANCE for seen in directions):
            directions.append(vector)
    return len(directions)


def validate_point_sets(actual, reference) -> Tuple[np.ndarray, np.ndarray]:
    """
    Check that two point sets can be compared.

    Args:
        actual: Observed coordinates
        reference: Ideal coordinates

    Returns:
        Both sets as float arrays of shape (N, 3)

    Raises:
        SizeMismatchError: If the sets differ in cardinality
        DegeneratePointSetError: If a set spans fewer than two directions
        NonFinitePointsError: If a set contains NaN or infinite values
    """
    actual = as_point_array(actual, "actual points")
    reference = as_point_array(reference, "reference points")

    if len(actual) != len(reference):
        raise SizeMismatchError(len(actual), len(reference))

    for label, points in (("actual", actual), ("reference", reference)):
        if count_distinct_directions(points) < 2:
            raise DegeneratePointSetError(
                f"{label} points span fewer than two distinct directions"
            )

    return actual, reference


def with_central_atom(ligands, center: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Express ligand positions relative to the central atom and append it.

    Args:
        ligands: Ligand coordinates
        center: Central atom position, the origin if omitted

    Returns:
        Array of shape (CN + 1, 3) whose last row is the central atom at the origin

    Raises:
        DegeneratePointSetError: If a ligand coincides with the central atom
    """
    ligands = as_point_array(ligands, "ligand positions")
    origin = np.zeros(3) if center is None else as_point_array([center], "center")[0]

    vectors = ligands - origin
    too_close = np.flatnonzero(np.sum(vectors**2, axis=1) < MIN_VECTOR_LENGTH_SQ)
    if len(too_close) > 0:
        raise DegeneratePointSetError(
            f"Ligand(s) {too_close.tolist()} coincide with the central atom"
        )

    return np.vstack([vectors, np.zeros((1, 3))])


def prepare_coordination_points(ligands, center: Optional[np.ndarray] = None) -> np.ndarray:
    """Build the normalized point set (ligands plus centre) for measuring."""
    return normalize_point_set(with_central_atom(ligands, center))
