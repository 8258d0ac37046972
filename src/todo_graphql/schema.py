import logging
from typing import List, Optional

import strawberry
from graphql import GraphQLError
from strawberry.types import ExecutionContext, Info

from .models import TodoEntity
from .store import TodoStore

logger = logging.getLogger(__name__)


@strawberry.type(description="A single todo item")
class Todo:
    id: Optional[int] = None
    title: Optional[str] = None
    completed: Optional[bool] = None

    @classmethod
    def from_entity(cls, entity: TodoEntity) -> "Todo":
        return cls(id=entity["id"], title=entity["title"], completed=entity["completed"])


def _store(info: Info) -> TodoStore:
    return info.context["store"]


@strawberry.type
class Query:
    @strawberry.field(description="Get a single todo by ID")
    def todo(self, info: Info, id: int) -> Optional[Todo]:
        entity = _store(info).find(id)
        return None if entity is None else Todo.from_entity(entity)

    @strawberry.field(description="Get all todos")
    def todos(self, info: Info) -> Optional[List[Optional[Todo]]]:
        return [Todo.from_entity(t) for t in _store(info).all()]


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Update a todo's completed status by its ID")
    def update_todo(self, info: Info, id: int, completed: bool) -> Optional[Todo]:
        entity = _store(info).set_completed(id, completed)
        if entity is None:
            # Unknown ids yield a zero-valued Todo, not null or an error
            return Todo(id=0, title="", completed=False)
        return Todo.from_entity(entity)


class TodoSchema(strawberry.Schema):
    """Schema that reports execution errors through this package's logger."""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        logger.error("GraphQL errors: %s", [error.message for error in errors])


# PUBLIC_INTERFACE
schema = TodoSchema(query=Query, mutation=Mutation)
