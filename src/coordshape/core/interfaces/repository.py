"""Abstract storage interface for reference shapes."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Keyed collection of reference shapes.

    Entries are addressed by their SHAPE code. Implementations may ship a
    read-only bundled set and accept user-defined entries alongside it.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Entry stored under ``id``, or None."""
        pass

    @abstractmethod
    def list(self) -> List[T]:
        """All entries in library order."""
        pass

    @abstractmethod
    def list_by_coordination(self, coordination_number: int) -> List[T]:
        """Entries with ``coordination_number`` ligands, in library order."""
        pass

    @abstractmethod
    def create(self, entity: T) -> T:
        """Add a user-defined entry and return the stored form."""
        pass

    @abstractmethod
    def update(self, entity: T) -> T:
        """Replace a user-defined entry and return the stored form."""
        pass

    @abstractmethod
    def delete(self, id: str) -> None:
        """Remove a user-defined entry."""
        pass
