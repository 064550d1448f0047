"""Rotation matrix helpers shared by the search and alignment code."""

import numpy as np

PARALLEL_TOLERANCE = 1e-6


def euler_xyz_matrix(x: float, y: float, z: float) -> np.ndarray:
    """Rotation matrix for intrinsic XYZ Euler angles in radians."""
    a, b = np.cos(x), np.sin(x)
    c, d = np.cos(y), np.sin(y)
    e, f = np.cos(z), np.sin(z)

    ae, af, be, bf = a * e, a * f, b * e, b * f

    return np.array(
        [
            [c * e, -c * f, d],
            [af + be * d, ae - bf * d, -b * c],
            [bf - ae * d, be + af * d, a * c],
        ]
    )


def axis_angle_matrix(axis: np.ndarray, angle: float) -> np.ndarray:
    """Rotation matrix for a right-handed turn of ``angle`` about a unit axis."""
    x, y, z = axis
    c, s = np.cos(angle), np.sin(angle)
    t = 1.0 - c
    tx, ty = t * x, t * y

    return np.array(
        [
            [tx * x + c, tx * y - s * z, tx * z + s * y],
            [tx * y + s * z, ty * y + c, ty * z - s * x],
            [tx * z - s * y, ty * z + s * x, t * z * z + c],
        ]
    )


def random_unit_vector(rng: np.random.Generator) -> np.ndarray:
    """Uniformly distributed direction on the unit sphere."""
    while True:
        vector = rng.normal(size=3)
        norm = np.linalg.norm(vector)
        if norm > 1e-12:
            return vector / norm


def random_euler_rotation(rng: np.random.Generator) -> np.ndarray:
    """Rotation from Euler angles drawn uniformly from [0, 2*pi)."""
    x, y, z = rng.uniform(0.0, 2.0 * np.pi, size=3)
    return euler_xyz_matrix(x, y, z)


def perpendicular_axis(vector: np.ndarray) -> np.ndarray:
    """A unit vector orthogonal to ``vector``."""
    helper = np.array([1.0, 0.0, 0.0]) if abs(vector[0]) < 0.9 else np.array([0.0, 1.0, 0.0])
    axis = np.cross(vector, helper)
    return axis / np.linalg.norm(axis)


def align_vectors(source: np.ndarray, target: np.ndarray) -> np.ndarray:
    """
    Smallest rotation carrying the direction of ``source`` onto ``target``.

    Antiparallel vectors are related by a half turn about a perpendicular axis.

    Args:
        source: Vector to rotate
        target: Direction to rotate onto

    Returns:
        3x3 rotation matrix
    """
    source = np.asarray(source, dtype=float)
    target = np.asarray(target, dtype=float)
    source = source / np.linalg.norm(source)
    target = target / np.linalg.norm(target)

    axis = np.cross(source, target)
    axis_length = np.linalg.norm(axis)
    if axis_length < PARALLEL_TOLERANCE:
        if np.dot(source, target) > 0:
            return np.eye(3)
        return axis_angle_matrix(perpendicular_axis(source), np.pi)

    angle = np.arccos(np.clip(np.dot(source, target), -1.0, 1.0))
    return axis_angle_matrix(axis / axis_length, angle)


def is_proper_rotation(matrix: np.ndarray, tolerance: float = 1e-6) -> bool:
    """Whether ``matrix`` is orthogonal with determinant +1."""
    matrix = np.asarray(matrix, dtype=float)
    if matrix.shape != (3, 3) or not np.all(np.isfinite(matrix)):
        return False
    orthogonal = np.allclose(matrix @ matrix.T, np.eye(3), atol=tolerance)
    return orthogonal and abs(np.linalg.det(matrix) - 1.0) < tolerance
