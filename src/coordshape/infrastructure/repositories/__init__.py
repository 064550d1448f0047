"""Repository implementations."""

from .geometry_repository import ReferenceGeometryRepository

__all__ = ["ReferenceGeometryRepository"]
