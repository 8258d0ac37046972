from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from strawberry.exceptions import MissingQueryError

from ..schema import schema

logger = logging.getLogger(__name__)

router = APIRouter(tags=["graphql"])


class GraphQLRequest(BaseModel):
    """
    JSON body accepted on POST /graphql.
    """

    model_config = ConfigDict(
        strict=True,
        populate_by_name=True,
        json_schema_extra={"example": {"query": "{ todos { id title completed } }"}},
    )

    query: str = Field(default="", description="GraphQL document to execute")
    variables: Optional[Dict[str, Any]] = Field(default=None, description="Variable values for the document")
    operation_name: Optional[str] = Field(
        default=None, alias="operationName", description="Operation to run when the document holds several"
    )

    @field_validator("query", mode="before")
    @classmethod
    def null_query_is_empty(cls, v: Any) -> Any:
        """
        A JSON null query decodes as an empty document rather than a bad body.
        """
        return "" if v is None else v


async def _decode_body(request: Request) -> Optional[GraphQLRequest]:
    """
    Decode the POST body, returning None when it is not a valid GraphQL request.
    """
    raw = await request.body()
    try:
        return GraphQLRequest.model_validate_json(raw)
    except ValidationError as exc:
        logger.debug("Ignoring undecodable GraphQL body: %s", exc.errors())
        return None


# PUBLIC_INTERFACE
@router.api_route(
    "/graphql",
    methods=["GET", "POST"],
    summary="Execute GraphQL",
    description=(
        "Execute a GraphQL query or mutation.\n\n"
        "- GET: the document is read from the `query` URL parameter\n"
        "- POST: the document is read from the JSON body field `query`; a body that "
        "cannot be decoded is ignored and the URL parameter is used instead\n\n"
        "Always answers 200 with the standard `{data, errors}` envelope."
    ),
)
async def graphql_endpoint(
    request: Request,
    query: str = Query("", description="GraphQL document for GET requests"),
) -> JSONResponse:
    """
    Run a single GraphQL operation against the application's store.
    """
    params = GraphQLRequest(query=query)
    if request.method == "POST":
        decoded = await _decode_body(request)
        if decoded is not None:
            params = decoded

    try:
        result = await schema.execute(
            params.query,
            variable_values=params.variables,
            context_value={"store": request.app.state.store},
            operation_name=params.operation_name,
        )
    except MissingQueryError as exc:
        logger.error("GraphQL errors: %s", [str(exc)])
        return JSONResponse({"data": None, "errors": [{"message": str(exc)}]})

    envelope: Dict[str, Any] = {"data": result.data}
    if result.errors:
        envelope["errors"] = [error.formatted for error in result.errors]
    return JSONResponse(envelope)
