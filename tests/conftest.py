import numpy as np
import pytest

from coordshape.core.utils.rotations import euler_xyz_matrix
from coordshape.infrastructure.repositories.geometry_repository import (
    ReferenceGeometryRepository,
)


@pytest.fixture(scope="session")
def repository():
    return ReferenceGeometryRepository()


@pytest.fixture
def random_rotation():
    return euler_xyz_matrix(0.4, -1.1, 2.3)


@pytest.fixture
def octahedron_ligands():
    """Slightly distorted octahedron around a metal at the origin (Angstrom)."""
    return np.array(
        [
            [2.05, 0.02, 0.0],
            [-1.98, 0.0, 0.05],
            [0.03, 2.10, 0.0],
            [0.0, -2.0, -0.04],
            [0.0, 0.06, 1.95],
            [-0.05, 0.0, -2.08],
        ]
    )


def pyramid_ligands(angle_deg, bond=1.0):
    """Three ligands with equal bonds and a common L-M-L angle."""
    cos_theta = np.cos(np.radians(angle_deg))
    sin_alpha = np.sqrt((1.0 - cos_theta) / 1.5)
    cos_alpha = np.sqrt(1.0 - sin_alpha**2)
    return bond * np.array(
        [
            [sin_alpha * np.cos(phi), sin_alpha * np.sin(phi), cos_alpha]
            for phi in (0.0, 2 * np.pi / 3, 4 * np.pi / 3)
        ]
    )
