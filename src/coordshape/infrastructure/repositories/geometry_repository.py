# src/coordshape/infrastructure/repositories/geometry_repository.py
"""Repository implementation for reference polyhedra."""

import logging
from typing import Dict, List, Optional, Iterable

import numpy as np

from ...core.interfaces.repository import Repository
from ...core.domain.models.point_set import normalize_point_set, with_central_atom
from ...core.domain.models.reference_geometry import ReferenceGeometry
from ..data.reference_polyhedra import REFERENCE_POLYHEDRA, PolyhedronRecord


def build_reference_geometry(
    code: str,
    name: str,
    point_group: str,
    ligands,
    center=None,
) -> ReferenceGeometry:
    """
    Create a normalized reference geometry from raw ligand coordinates.

    Args:
        code: Short SHAPE code, e.g. "OC-6"
        name: Descriptive name
        point_group: Schoenflies symbol of the ideal shape
        ligands: Ligand positions
        center: Central atom position, the origin if omitted

    Returns:
        ReferenceGeometry whose points include the central atom last
    """
    points = normalize_point_set(with_central_atom(ligands, center))
    points.setflags(write=False)
    return ReferenceGeometry(
        code=code,
        name=name,
        coordination_number=len(points) - 1,
        point_group=point_group,
        points=points,
    )


class ReferenceGeometryRepository(Repository[ReferenceGeometry]):
    """Repository of ideal polyhedra, keyed by SHAPE code."""

    def __init__(self, records: Optional[Iterable[PolyhedronRecord]] = None):
        """
        Initialize repository with the bundled reference set.

        Args:
            records: Polyhedron records to load instead of the bundled set
        """
        self.logger = logging.getLogger(__name__)
        self._geometries: Dict[str, ReferenceGeometry] = {}
        self._builtin_codes = set()

        for record in REFERENCE_POLYHEDRA if records is None else records:
            geometry = build_reference_geometry(
                record.code,
                record.name,
                record.point_group,
                record.ligands,
                np.asarray(record.center, dtype=float),
            )
            self._geometries[geometry.code] = geometry
            self._builtin_codes.add(geometry.code)

        self.logger.debug(f"Loaded {len(self._geometries)} reference geometries")

    def get(self, id: str) -> Optional[ReferenceGeometry]:
        """
        Retrieve a reference geometry by code.

        Args:
            id: SHAPE code, e.g. "TBPY-5"

        Returns:
            ReferenceGeometry or None if the code is unknown
        """
        return self._geometries.get(id)

    def list(self) -> List[ReferenceGeometry]:
        """List all geometries ordered by coordination number."""
        return sorted(
            self._geometries.values(), key=lambda g: g.coordination_number
        )

    def list_by_coordination(self, coordination_number: int) -> List[ReferenceGeometry]:
        """List geometries with the given number of ligands."""
        return [
            geometry
            for geometry in self.list()
            if geometry.coordination_number == coordination_number
        ]

    def coordination_numbers(self) -> List[int]:
        """Coordination numbers covered by the repository."""
        return sorted({g.coordination_number for g in self._geometries.values()})

    def create(self, entity: ReferenceGeometry) -> ReferenceGeometry:
        """
        Register a user-defined geometry.

        The geometry's points are re-normalized; the last point is taken as
        the central atom.

        Raises:
            ValueError: If the code is already taken
        """
        if entity.code in self._geometries:
            raise ValueError(f"Reference geometry {entity.code} already exists")
        return self._store(entity)

    def update(self, entity: ReferenceGeometry) -> ReferenceGeometry:
        """
        Replace a user-defined geometry.

        Raises:
            ValueError: If the code is unknown or belongs to a bundled geometry
        """
        self._check_mutable(entity.code)
        return self._store(entity)

    def delete(self, id: str) -> None:
        """
        Remove a user-defined geometry.

        Raises:
            ValueError: If the code is unknown or belongs to a bundled geometry
        """
        self._check_mutable(id)
        del self._geometries[id]

    def _check_mutable(self, code: str) -> None:
        if code not in self._geometries:
            raise ValueError(f"Reference geometry {code} not found")
        if code in self._builtin_codes:
            raise ValueError(f"Reference geometry {code} is bundled and read-only")

    def _store(self, entity: ReferenceGeometry) -> ReferenceGeometry:
        points = np.asarray(entity.points, dtype=float)
        geometry = build_reference_geometry(
            entity.code,
            entity.name,
            entity.point_group,
            points[:-1],
            points[-1],
        )
        self._geometries[geometry.code] = geometry
        return geometry
