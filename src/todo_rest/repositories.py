from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from threading import RLock
from typing import List, Optional

from .models import TodoEntity
from .schemas import TodoCreate

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class Repository(ABC):
    """Abstract repository contract for todo storage backends."""

    @abstractmethod
    def list(self) -> List[TodoEntity]:
        """Return every stored TodoEntity."""

    @abstractmethod
    def create(self, data: TodoCreate) -> TodoEntity:
        """Assign the next id, store and return a new TodoEntity."""

    @abstractmethod
    def get(self, todo_id: int) -> Optional[TodoEntity]:
        """Return a TodoEntity by id, or None if not found."""

    @abstractmethod
    def toggle(self, todo_id: int) -> Optional[TodoEntity]:
        """Flip the completed flag of a TodoEntity. Return updated entity or None if not found."""

    @abstractmethod
    def delete(self, todo_id: int) -> bool:
        """Delete a TodoEntity by id. Return True if deleted, False if not found."""


class InMemoryRepository(Repository):
    """
    Thread-safe in-memory repository.

    A single lock serializes every operation, reads included. Ids come from
    a counter starting at 1 and are never reused.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: dict[int, TodoEntity] = {}
        self._next_id = 1

    def list(self) -> List[TodoEntity]:
        with self._lock:
            # Return copies to avoid external mutation
            return [t.copy() for t in self._items.values()]

    def create(self, data: TodoCreate) -> TodoEntity:
        with self._lock:
            entity: TodoEntity = {
                "id": self._next_id,
                "title": data.title,
                "completed": data.completed,
            }
            self._next_id += 1
            self._items[entity["id"]] = entity
            logger.info("Created todo %d", entity["id"])
            return entity.copy()

    def get(self, todo_id: int) -> Optional[TodoEntity]:
        with self._lock:
            item = self._items.get(todo_id)
            return None if item is None else item.copy()

    def toggle(self, todo_id: int) -> Optional[TodoEntity]:
        with self._lock:
            existing = self._items.get(todo_id)
            if existing is None:
                return None
            existing["completed"] = not existing["completed"]
            return existing.copy()

    def delete(self, todo_id: int) -> bool:
        with self._lock:
            deleted = self._items.pop(todo_id, None) is not None
        if deleted:
            logger.info("Deleted todo %d", todo_id)
        return deleted
