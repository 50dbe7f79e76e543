"""In-process implementation of ResourceStore.

Entities live in a plain list guarded by a re-entrant lock. Synchronous
FastAPI endpoints run on a worker thread pool, so every mutation, and every
request pipeline as a whole, holds the lock.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from contextlib import AbstractContextManager
from typing import Any, TypeVar

from grubdash.domain.repository.resource_store import ResourceStore

T = TypeVar("T")


class InMemoryStore(ResourceStore[T]):

    def __init__(self, entities: Iterable[T] | None = None) -> None:
        self._entities: list[T] = list(entities or [])
        self._lock = threading.RLock()

    # --- ResourceStore interface ----------------------------------------------

    def append(self, entity: T) -> None:
        with self._lock:
            self._entities.append(entity)

    def find_by_id(self, entity_id: str) -> T | None:
        with self._lock:
            for entity in self._entities:
                if entity.id == entity_id:  # type: ignore[attr-defined]
                    return entity
        return None

    def find_index_by_id(self, entity_id: str) -> int | None:
        with self._lock:
            for index, entity in enumerate(self._entities):
                if entity.id == entity_id:  # type: ignore[attr-defined]
                    return index
        return None

    def remove_at(self, index: int) -> T:
        with self._lock:
            if not 0 <= index < len(self._entities):
                raise IndexError(f"No entity at position {index}")
            return self._entities.pop(index)

    def update(self, entity: T, **changes: Any) -> T:
        if "id" in changes:
            raise ValueError("Entity ids are immutable")
        with self._lock:
            for name, value in changes.items():
                if not hasattr(entity, name):
                    raise AttributeError(
                        f"{type(entity).__name__} has no field '{name}'"
                    )
                setattr(entity, name, value)
        return entity

    def list_all(self) -> tuple[T, ...]:
        with self._lock:
            return tuple(self._entities)

    def locked(self) -> AbstractContextManager[Any]:
        return self._lock
