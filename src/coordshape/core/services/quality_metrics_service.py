"""Descriptive statistics and quality indices for coordination environments."""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..domain.models.point_set import as_point_array, with_central_atom
from ..domain.models.reference_geometry import ReferenceGeometry


@dataclass(frozen=True)
class BondStatistics:
    """Distribution of central atom to ligand distances."""

    mean: float
    variance: float
    std_dev: float
    min: float
    max: float


@dataclass(frozen=True)
class AngleStatistics:
    """Distribution of ligand-centre-ligand angles in degrees."""

    count: int
    mean: float
    std_dev: float
    min: float
    max: float


@dataclass(frozen=True)
class QualityMetrics:
    """How closely a coordination environment follows its best reference shape."""

    bonds: BondStatistics
    angles: AngleStatistics
    angular_distortion: float
    bond_length_uniformity: float
    shape_deviation: float
    quality_score: float


def bond_vectors(ligand_positions, center=None) -> np.ndarray:
    """Vectors from the central atom to each ligand."""
    return with_central_atom(ligand_positions, center)[:-1]


def pairwise_angles(vectors: np.ndarray) -> np.ndarray:
    """All angles between pairs of vectors, in degrees."""
    unit = vectors / np.linalg.norm(vectors, axis=1, keepdims=True)
    cosines = np.clip(unit @ unit.T, -1.0, 1.0)
    upper = np.triu_indices(len(vectors), k=1)
    return np.degrees(np.arccos(cosines[upper]))


def bond_statistics(ligand_positions, center=None) -> BondStatistics:
    """
    Statistics of the bond lengths.

    Args:
        ligand_positions: Coordinates of the coordinating atoms
        center: Position of the central atom, the origin if omitted

    Returns:
        BondStatistics using the population variance
    """
    lengths = np.linalg.norm(bond_vectors(ligand_positions, center), axis=1)
    return BondStatistics(
        mean=float(lengths.mean()),
        variance=float(lengths.var()),
        std_dev=float(lengths.std()),
        min=float(lengths.min()),
        max=float(lengths.max()),
    )


def angle_statistics(ligand_positions, center=None) -> AngleStatistics:
    """Statistics of the ligand-centre-ligand angles."""
    angles = pairwise_angles(bond_vectors(ligand_positions, center))
    if len(angles) == 0:
        return AngleStatistics(count=0, mean=0.0, std_dev=0.0, min=0.0, max=0.0)
    return AngleStatistics(
        count=len(angles),
        mean=float(angles.mean()),
        std_dev=float(angles.std()),
        min=float(angles.min()),
        max=float(angles.max()),
    )


def angular_distortion(vectors: np.ndarray, geometry: ReferenceGeometry) -> float:
    """Mean absolute difference between sorted actual and ideal angles."""
    ideal = np.sort(pairwise_angles(geometry.ligands - geometry.center))
    actual = np.sort(pairwise_angles(vectors))
    if len(ideal) == 0 or len(ideal) != len(actual):
        return 0.0
    return float(np.mean(np.abs(ideal - actual)))


def quality_metrics(
    ligand_positions,
    geometry: ReferenceGeometry,
    measure: float,
    center: Optional[np.ndarray] = None,
) -> QualityMetrics:
    """
    Quality indices of a coordination environment against its reference.

    Args:
        ligand_positions: Coordinates of the coordinating atoms
        geometry: Best matching reference geometry
        measure: Shape measure against ``geometry``
        center: Position of the central atom, the origin if omitted

    Returns:
        QualityMetrics with a 0-100 overall score
    """
    ligand_positions = as_point_array(ligand_positions, "ligand positions")
    vectors = bond_vectors(ligand_positions, center)
    lengths = np.linalg.norm(vectors, axis=1)

    distortion = angular_distortion(vectors, geometry)
    relative_deviation = np.abs(lengths - lengths.mean()) / lengths.mean()
    uniformity = 100.0 * (1.0 - float(relative_deviation.mean()))
    score = 100.0 - 2.0 * measure - 0.5 * distortion - 0.3 * (100.0 - uniformity)

    return QualityMetrics(
        bonds=bond_statistics(ligand_positions, center),
        angles=angle_statistics(ligand_positions, center),
        angular_distortion=distortion,
        bond_length_uniformity=uniformity,
        shape_deviation=float(np.sqrt(max(measure, 0.0) / 100.0)),
        quality_score=float(np.clip(score, 0.0, 100.0)),
    )
