import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_common.settings import get_settings
from todo_common.web import add_cors

from .repositories import InMemoryRepository, Repository
from .routers import todos as todos_router

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "List, create, fetch, toggle and delete Todo items."},
]


# Request bodies that fail to decode are client errors
async def decode_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a consistent JSON structure for request bodies that cannot be decoded.

    Response format:
        {
            "error": "DecodeError",
            "message": "Request body could not be decoded",
            "detail": [... pydantic/fastapi error details ...]
        }
    """
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=400,
        content={
            "error": "DecodeError",
            "message": "Request body could not be decoded",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def health_check():
    """
    Health check endpoint.

    Returns:
        A JSON object indicating service health.
    """
    return {"message": "Healthy", "service": "rest"}


# PUBLIC_INTERFACE
def create_app(repository: Optional[Repository] = None) -> FastAPI:
    """
    Build the REST Todo application around the given repository.

    Each application owns exactly one repository; a fresh InMemoryRepository
    is created when none is supplied.
    """
    application = FastAPI(
        title="Todo REST Service",
        description="In-memory todo list exposed over a REST-style HTTP API.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    application.state.repository = repository if repository is not None else InMemoryRepository()

    add_cors(application, get_settings())

    application.add_exception_handler(RequestValidationError, decode_exception_handler)
    application.add_api_route("/", health_check, methods=["GET"], summary="Health Check", tags=["health"])
    application.include_router(todos_router.router)
    return application


app = create_app()
