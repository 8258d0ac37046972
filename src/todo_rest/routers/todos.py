from __future__ import annotations

import re
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ..repositories import Repository
from ..schemas import TodoCreate, TodoOut, decode_todo_create

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def _get_repo(request: Request) -> Repository:
    """
    Dependency returning the repository owned by the running application.
    """
    return request.app.state.repository


def _parse_id(raw: str) -> int:
    """
    Parse the trailing path segment as a signed decimal integer.

    Anything that is not one (empty, nested path, letters) is reported as
    not found rather than as a client error.
    """
    if _ID_PATTERN.fullmatch(raw):
        try:
            return int(raw)
        except ValueError:
            # Digit strings beyond the interpreter's int conversion limit
            pass
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")


async def _decode_payload(request: Request) -> TodoCreate:
    """
    Dependency decoding the request body as a TodoCreate regardless of Content-Type.

    Decode failures surface as RequestValidationError so the app-level handler
    answers them with the 400 DecodeError envelope.
    """
    raw = await request.body()
    try:
        return decode_todo_create(raw)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False), body=raw) from exc


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoOut],
    summary="List Todos",
    description="Return every Todo item. Order follows the underlying store.",
    responses={200: {"description": "List retrieved successfully"}},
)
def list_todos(repo: Repository = Depends(_get_repo)) -> List[TodoOut]:
    """
    List all todos.
    """
    return [TodoOut(**it) for it in repo.list()]  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new Todo item. Any id in the payload is ignored.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": TodoCreate.model_json_schema()}},
        }
    },
    responses={
        201: {"description": "Todo created successfully"},
        400: {"description": "Request body could not be decoded"},
    },
)
def create_todo(payload: TodoCreate = Depends(_decode_payload), repo: Repository = Depends(_get_repo)) -> TodoOut:
    """
    Create a new Todo.
    """
    created = repo.create(payload)
    return TodoOut(**created)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id:path}",
    response_model=TodoOut,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses={
        200: {"description": "Todo found"},
        404: {"description": "Todo not found"},
    },
)
def get_todo(todo_id: str, repo: Repository = Depends(_get_repo)) -> TodoOut:
    """
    Retrieve a single Todo item by its ID.
    """
    item = repo.get(_parse_id(todo_id))
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return TodoOut(**item)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id:path}",
    response_model=TodoOut,
    summary="Toggle Todo",
    description="Flip the completed flag of a Todo item. The request body is ignored.",
    responses={
        200: {"description": "Todo toggled"},
        404: {"description": "Todo not found"},
    },
)
def toggle_todo(todo_id: str, repo: Repository = Depends(_get_repo)) -> TodoOut:
    """
    Toggle the completion status of a Todo item.
    """
    updated = repo.toggle(_parse_id(todo_id))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return TodoOut(**updated)  # type: ignore[arg-type]


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses={
        204: {"description": "Todo deleted"},
        404: {"description": "Todo not found"},
    },
)
def delete_todo(todo_id: str, repo: Repository = Depends(_get_repo)) -> Response:
    """
    Delete a Todo. Returns 204 on success, 404 if not found.
    """
    ok = repo.delete(_parse_id(todo_id))
    if not ok:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
