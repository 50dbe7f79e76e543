"""Abstract store for one entity kind.

Defined in the domain layer so the application pipelines never depend on
infrastructure. The in-memory implementation lives in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ResourceStore(ABC, Generic[T]):

    @abstractmethod
    def append(self, entity: T) -> None:
        """Add an entity at the end. Id uniqueness is the caller's job."""

    @abstractmethod
    def find_by_id(self, entity_id: str) -> T | None:
        """Return the first entity with the given id, or None if not found."""

    @abstractmethod
    def find_index_by_id(self, entity_id: str) -> int | None:
        """Return the position of the entity with the given id, or None."""

    @abstractmethod
    def remove_at(self, index: int) -> T:
        """Remove and return the entity at *index*.

        Raises IndexError when *index* is out of range.
        """

    @abstractmethod
    def update(self, entity: T, **changes: Any) -> T:
        """Overwrite fields of a stored entity in place."""

    @abstractmethod
    def list_all(self) -> tuple[T, ...]:
        """Return a snapshot of every entity, in insertion order."""

    @abstractmethod
    def locked(self) -> AbstractContextManager[Any]:
        """Hold exclusive access to the store for a whole request."""

    def __len__(self) -> int:
        return len(self.list_all())
