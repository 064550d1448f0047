"""Starting rotations derived from geometric properties of both point sets."""

import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from ..interfaces.alignment_advisor import AlignmentAdvisor
from ...utils.rotations import align_vectors, axis_angle_matrix


_DIAGONAL_AXES = tuple(
    np.array(axis) / np.linalg.norm(axis)
    for axis in ((1.0, 1.0, 0.0), (1.0, 0.0, 1.0), (0.0, 1.0, 1.0), (1.0, 1.0, 1.0))
)
_DEDUP_TEST_POINT = np.array([1.0, 0.5, 0.3])


@dataclass(frozen=True)
class PrincipalAxes:
    """Eigenvectors of the second-moment tensor, largest eigenvalue first."""

    axes: np.ndarray
    eigenvalues: np.ndarray

    @property
    def anisotropy(self) -> float:
        """0 for an isotropic cloud, approaching 1 for a highly directional one."""
        total = float(np.sum(self.eigenvalues))
        return 1.0 - 3.0 * float(self.eigenvalues[2]) / total if total > 0 else 0.0


@dataclass(frozen=True)
class CoplanarLayer:
    """A plane holding at least three of the points."""

    normal: np.ndarray
    offset: float
    indices: List[int]


@dataclass(frozen=True)
class SymmetryAxis:
    """An approximate n-fold rotation axis."""

    axis: np.ndarray
    order: int
    score: float


def principal_axes(points: np.ndarray) -> PrincipalAxes:
    """
    Principal axes of a centred point cloud.

    Args:
        points: Centred coordinates

    Returns:
        PrincipalAxes with axes as rows
    """
    tensor = points.T @ points / len(points)
    eigenvalues, eigenvectors = np.linalg.eigh(tensor)
    order = np.argsort(-eigenvalues, kind="stable")
    return PrincipalAxes(axes=eigenvectors[:, order].T, eigenvalues=eigenvalues[order])


def coplanar_layers(points: np.ndarray, tolerance: float = 0.15) -> List[CoplanarLayer]:
    """
    Group points into planes defined by non-collinear triples.

    Args:
        points: Coordinates
        tolerance: Maximum distance of a point from a plane

    Returns:
        Layers sorted by size, largest first
    """
    n = len(points)
    layers: List[CoplanarLayer] = []
    assigned = set()

    for i in range(n):
        if i in assigned:
            continue
        found = False
        for j in range(i + 1, n):
            if j in assigned:
                continue
            for k in range(j + 1, n):
                if k in assigned:
                    continue
                normal = np.cross(points[j] - points[i], points[k] - points[i])
                length = np.linalg.norm(normal)
                if length < 1e-6:
                    continue
                normal = normal / length
                offset = float(np.dot(normal, points[i]))

                members = [
                    m
                    for m in range(n)
                    if m not in assigned
                    and abs(np.dot(normal, points[m]) - offset) < tolerance
                ]
                if len(members) >= 3:
                    assigned.update(members)
                    layers.append(CoplanarLayer(normal, offset, members))
                    found = True
                    break
            if found:
                break

    layers.sort(key=lambda layer: len(layer.indices), reverse=True)
    return layers


def _matched_fraction(points: np.ndarray, rotated: np.ndarray, tolerance: float) -> float:
    matched = set()
    for point in rotated:
        for j, other in enumerate(points):
            if j not in matched and np.linalg.norm(point - other) < tolerance:
                matched.add(j)
                break
    return len(matched) / len(points)


def symmetry_axes(
    points: np.ndarray,
    max_order: int = 8,
    tolerance: float = 0.2,
    min_fraction: float = 0.8,
) -> List[SymmetryAxis]:
    """
    Detect approximate rotation axes of orders 2 to ``max_order``.

    Coordinate axes, principal axes and face/body diagonals are tested.

    Args:
        points: Centred coordinates
        max_order: Highest rotation order tested
        tolerance: Distance within which a rotated point matches an unrotated one
        min_fraction: Fraction of points that must match

    Returns:
        Distinct axes sorted by score, best first
    """
    candidates = [np.eye(3)[i] for i in range(3)]
    candidates.extend(principal_axes(points).axes)
    candidates.extend(_DIAGONAL_AXES)

    found: List[SymmetryAxis] = []
    for axis in candidates:
        for order in range(2, max_order + 1):
            rotated = points @ axis_angle_matrix(axis, 2.0 * np.pi / order).T
            score = _matched_fraction(points, rotated, tolerance)
            if score < min_fraction:
                continue
            duplicate = any(
                known.order == order and abs(np.dot(known.axis, axis)) > 0.95
                for known in found
            )
            if not duplicate:
                found.append(SymmetryAxis(np.array(axis), order, score))

    found.sort(key=lambda symmetry: symmetry.score, reverse=True)
    return found


class SmartAlignmentAdvisor(AlignmentAdvisor):
    """Propose rotations that match layers, symmetry axes and principal axes."""

    def __init__(
        self,
        max_candidates: int = 20,
        duplicate_distance: float = 0.1,
        min_anisotropy: float = 0.1,
    ):
        self.max_candidates = max_candidates
        self.duplicate_distance = duplicate_distance
        self.min_anisotropy = min_anisotropy
        self.logger = logging.getLogger(__name__)

    def suggest(self, actual: np.ndarray, reference: np.ndarray) -> List[np.ndarray]:
        """
        Propose starting rotations for the shape measure search.

        Args:
            actual: Centred actual points
            reference: Centred reference points

        Returns:
            Up to ``max_candidates`` distinct rotations, identity first
        """
        rotations = [np.eye(3)]
        rotations.extend(self._layer_alignments(actual, reference))
        rotations.extend(self._symmetry_alignments(actual, reference))
        if principal_axes(actual).anisotropy > self.min_anisotropy:
            rotations.extend(self._principal_axis_alignments(actual, reference))

        unique = self._deduplicate(rotations)
        self.logger.debug(
            f"Suggested {len(unique)} rotations from {len(rotations)} candidates"
        )
        return unique[: self.max_candidates]

    def _layer_alignments(self, actual, reference) -> List[np.ndarray]:
        actual_layers = coplanar_layers(actual)
        reference_layers = coplanar_layers(reference)

        rotations = []
        for actual_layer in actual_layers[:2]:
            for reference_layer in reference_layers[:2]:
                normal = reference_layer.normal
                direct = align_vectors(actual_layer.normal, normal)
                rotations.append(direct)
                rotations.append(align_vectors(actual_layer.normal, -normal))
                rotations.append(axis_angle_matrix(normal, np.pi) @ direct)
        return rotations

    def _symmetry_alignments(self, actual, reference) -> List[np.ndarray]:
        actual_axes = symmetry_axes(actual)
        reference_axes = symmetry_axes(reference)

        rotations = []
        for actual_axis in actual_axes[:3]:
            for reference_axis in reference_axes[:3]:
                low, high = sorted((actual_axis.order, reference_axis.order))
                if high % low != 0:
                    continue
                direct = align_vectors(actual_axis.axis, reference_axis.axis)
                rotations.append(direct)
                rotations.append(align_vectors(actual_axis.axis, -reference_axis.axis))

                if actual_axis.order == reference_axis.order:
                    step = 2.0 * np.pi / actual_axis.order
                    for k in range(1, actual_axis.order):
                        turn = axis_angle_matrix(reference_axis.axis, k * step)
                        rotations.append(turn @ direct)
        return rotations

    def _principal_axis_alignments(self, actual, reference) -> List[np.ndarray]:
        actual_axes = principal_axes(actual).axes
        reference_axes = principal_axes(reference).axes

        rotations = []
        for first, second in ((0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1)):
            primary = align_vectors(actual_axes[first], reference_axes[0])
            moved = primary @ actual_axes[second]
            secondary = align_vectors(moved, reference_axes[1])
            rotations.append(secondary @ primary)
        return rotations

    def _deduplicate(self, rotations: List[np.ndarray]) -> List[np.ndarray]:
        unique: List[np.ndarray] = []
        images: List[np.ndarray] = []
        for rotation in rotations:
            image = rotation @ _DEDUP_TEST_POINT
            if all(np.linalg.norm(image - seen) >= self.duplicate_distance for seen in images):
                unique.append(rotation)
                images.append(image)
        return unique

