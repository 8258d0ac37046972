from __future__ import annotations

from threading import Lock
from typing import Iterable, List, Optional

from .models import TodoEntity

SEED_TODOS: List[TodoEntity] = [
    {"id": 1, "title": "Learn Go", "completed": False},
    {"id": 2, "title": "Build a GraphQL Server", "completed": False},
    {"id": 3, "title": "Buy milk", "completed": True},
]


# PUBLIC_INTERFACE
class TodoStore:
    """
    Ordered in-memory collection of todos backing the GraphQL resolvers.

    Lookups are linear scans over the list. A lock guards every access so
    concurrent requests never observe a half-applied update.
    """

    def __init__(self, todos: Optional[Iterable[TodoEntity]] = None) -> None:
        self._lock = Lock()
        source = SEED_TODOS if todos is None else todos
        self._todos: List[TodoEntity] = [t.copy() for t in source]

    def all(self) -> List[TodoEntity]:
        with self._lock:
            return [t.copy() for t in self._todos]

    def find(self, todo_id: int) -> Optional[TodoEntity]:
        with self._lock:
            for todo in self._todos:
                if todo["id"] == todo_id:
                    return todo.copy()
        return None

    def set_completed(self, todo_id: int, completed: bool) -> Optional[TodoEntity]:
        """Overwrite the completed flag in place; None when the id is absent."""
        with self._lock:
            for todo in self._todos:
                if todo["id"] == todo_id:
                    todo["completed"] = completed
                    return todo.copy()
        return None
