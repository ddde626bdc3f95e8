"""In-memory repositories guarded by per-collection locks"""

import threading
from dataclasses import replace
from typing import Any, Dict, Generic, List, Optional, TypeVar

from collection_gateway.domain.exceptions import ConflictError
from collection_gateway.domain.repositories import Repositories

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """
    Dict-backed repository. Entities are copied on the way in and out so
    callers never share state with the store.
    """

    def __init__(self):
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    def get(self, entity_id: str) -> Optional[T]:
        with self._lock:
            entity = self._items.get(entity_id)
            return replace(entity) if entity is not None else None

    def find(self, **criteria: Any) -> List[T]:
        with self._lock:
            return [
                replace(entity)
                for entity in self._items.values()
                if all(getattr(entity, field) == value for field, value in criteria.items())
            ]

    def list(self) -> List[T]:
        with self._lock:
            return [replace(entity) for entity in self._items.values()]

    def insert(self, entity: T) -> T:
        with self._lock:
            if entity.id in self._items:
                raise ConflictError(f"Duplicate id: {entity.id}")
            self._items[entity.id] = replace(entity)
            return replace(entity)

    def update(self, entity: T) -> Optional[T]:
        """Replace the stored entity; returns None if the id is unknown"""
        with self._lock:
            if entity.id not in self._items:
                return None
            self._items[entity.id] = replace(entity)
            return replace(entity)

    def delete(self, entity_id: str) -> bool:
        with self._lock:
            return self._items.pop(entity_id, None) is not None


def build_memory_repositories() -> Repositories:
    return Repositories(
        students=InMemoryRepository(),
        debts=InMemoryRepository(),
        collectors=InMemoryRepository(),
        appointments=InMemoryRepository(),
    )
