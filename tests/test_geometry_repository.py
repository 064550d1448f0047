import numpy as np
import pytest

from coordshape.core.domain.models.exceptions import DegeneratePointSetError
from coordshape.core.domain.models.reference_geometry import ReferenceGeometry
from coordshape.infrastructure.repositories.geometry_repository import (
    ReferenceGeometryRepository,
)


@pytest.fixture
def mutable_repository():
    return ReferenceGeometryRepository()


def _custom_geometry(code="XTP-3", scale=5.0, offset=(1.0, 2.0, 3.0)):
    ligands = scale * np.array([[1.0, 0.0, 0.2], [-0.5, 0.8, 0.2], [-0.5, -0.8, 0.2]])
    points = np.vstack([ligands, np.zeros((1, 3))]) + np.asarray(offset)
    return ReferenceGeometry(
        code=code,
        name="Custom flattened pyramid",
        coordination_number=3,
        point_group="C3v",
        points=points,
    )


def test_library_contents(repository):
    assert len(repository.list()) == 91
    assert repository.coordination_numbers() == [
        2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 20, 24, 48, 60
    ]
    assert [g.code for g in repository.list_by_coordination(4)] == [
        "SP-4",
        "T-4",
        "SS-4",
        "vTBPY-4",
    ]


@pytest.mark.parametrize(
    "coordination_number, count",
    [
        (2, 3), (3, 4), (4, 4), (5, 5), (6, 5), (7, 7), (8, 12), (9, 13),
        (10, 13), (11, 7), (12, 13), (20, 1), (24, 2), (48, 1), (60, 1),
    ],
)
def test_shapes_per_coordination_number(repository, coordination_number, count):
    geometries = repository.list_by_coordination(coordination_number)
    assert len(geometries) == count
    assert all(g.coordination_number == coordination_number for g in geometries)


def test_high_coordination_shapes(repository):
    assert [g.code for g in repository.list_by_coordination(24)] == ["TCU-24", "TOC-24"]
    for code in ("COC-12", "ACOC-12", "IC-12", "DD-20", "TCOC-48", "TIC-60"):
        geometry = repository.get(code)
        radii = np.linalg.norm(geometry.ligands - geometry.center, axis=1)
        assert np.allclose(radii, radii[0], rtol=1e-4), code


def test_regular_polygons_are_planar(repository):
    for code in ("DP-10", "HP-11", "DP-12"):
        points = repository.get(code).points
        assert np.allclose(points[:, 2], 0.0, atol=1e-12), code
        assert repository.get(code).point_group == f"D{len(points) - 1}h"


def test_geometries_are_normalized(repository):
    for geometry in repository.list():
        points = geometry.points
        assert len(points) == geometry.coordination_number + 1
        assert np.allclose(points.mean(axis=0), 0.0, atol=1e-9), geometry.code
        assert np.sqrt(np.mean(np.sum(points**2, axis=1))) == pytest.approx(1.0)
        assert not points.flags.writeable


def test_central_atom_is_last(repository):
    octahedron = repository.get("OC-6")
    assert np.allclose(octahedron.center, 0.0, atol=1e-9)
    assert np.allclose(np.linalg.norm(octahedron.ligands, axis=1), np.sqrt(7.0 / 6.0))


def test_unknown_code(repository):
    assert repository.get("XX-99") is None


def test_custom_geometry_lifecycle(mutable_repository):
    stored = mutable_repository.create(_custom_geometry())

    assert mutable_repository.get("XTP-3") is stored
    assert np.allclose(stored.points.mean(axis=0), 0.0, atol=1e-9)
    assert "XTP-3" in [g.code for g in mutable_repository.list_by_coordination(3)]

    updated = mutable_repository.update(_custom_geometry(scale=2.0))
    assert mutable_repository.get("XTP-3") is updated

    mutable_repository.delete("XTP-3")
    assert mutable_repository.get("XTP-3") is None


def test_duplicate_code_is_rejected(mutable_repository):
    mutable_repository.create(_custom_geometry())
    with pytest.raises(ValueError, match="already exists"):
        mutable_repository.create(_custom_geometry())


def test_bundled_geometries_are_read_only(mutable_repository):
    with pytest.raises(ValueError, match="read-only"):
        mutable_repository.delete("OC-6")
    with pytest.raises(ValueError, match="read-only"):
        mutable_repository.update(_custom_geometry(code="TP-3"))
    with pytest.raises(ValueError, match="not found"):
        mutable_repository.delete("XTP-3")


def test_custom_geometry_with_ligand_on_centre(mutable_repository):
    geometry = _custom_geometry(scale=0.0)
    with pytest.raises(DegeneratePointSetError):
        mutable_repository.create(geometry)
