from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.

    Missing fields fall back to their zero values and unknown fields are
    ignored. Types are checked strictly, so a numeric title or a string
    "true" for completed is rejected. Any id sent by the client is accepted
    but discarded; the repository assigns ids.
    """

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "completed": False,
            }
        },
    )

    id: Optional[int] = Field(default=None, description="Ignored; ids are assigned by the server")
    title: str = Field(default="", description="Free-form title for the todo item")
    completed: bool = Field(default=False, description="Completion status flag")

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """
        Treat explicit nulls as absent so those fields keep their zero values.
        """
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


# A literal `null` document decodes to None rather than failing
_todo_create_adapter: TypeAdapter[Optional[TodoCreate]] = TypeAdapter(Optional[TodoCreate])


# PUBLIC_INTERFACE
def decode_todo_create(raw: bytes) -> TodoCreate:
    """
    Decode a raw JSON request body into a TodoCreate.

    The body is parsed as JSON whatever its declared content type. A `null`
    document yields an all-default TodoCreate.

    Raises:
        pydantic.ValidationError: if the body is not JSON or has the wrong shape.
    """
    decoded = _todo_create_adapter.validate_json(raw)
    return decoded if decoded is not None else TodoCreate()


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy groceries",
                "completed": False,
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Free-form title for the todo item")
    completed: bool = Field(..., description="Completion status flag")
