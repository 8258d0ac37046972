from typing import Optional

from fastapi import FastAPI

from todo_common.settings import get_settings
from todo_common.web import add_cors

from .routers import graphql as graphql_router
from .store import TodoStore

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "graphql", "description": "GraphQL queries and mutations over the todo list."},
]


def health_check():
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health.
    """
    return {"message": "Healthy", "service": "graphql"}


# PUBLIC_INTERFACE
def create_app(store: Optional[TodoStore] = None) -> FastAPI:
    """
    Build the GraphQL Todo application around the given store.

    A freshly seeded TodoStore is created when none is supplied.
    """
    application = FastAPI(
        title="Todo GraphQL Service",
        description="In-memory todo list exposed through a GraphQL endpoint.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    application.state.store = store if store is not None else TodoStore()

    add_cors(application, get_settings())

    application.add_api_route("/", health_check, methods=["GET"], summary="Health Check", tags=["health"])
    application.include_router(graphql_router.router)
    return application


app = create_app()
