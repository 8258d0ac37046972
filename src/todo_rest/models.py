from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain model representing a Todo item held by a repository.

    Fields:
    - id: Unique integer identifier, assigned by the repository
    - title: Free-form title
    - completed: Boolean completion flag
    """

    id: int
    title: str
    completed: bool
