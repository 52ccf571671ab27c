"""Translate command results into HTTP responses."""

from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from bookstore.commands.results import CommandResult, ResultKind
from bookstore.constants import ERROR_500_MESSAGE


def _serialize(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    if isinstance(body, list):
        return [_serialize(item) for item in body]
    return body


def server_error_response() -> JSONResponse:
    """500 response with the fixed, non-identifying message."""
    return JSONResponse(
        status_code=ResultKind.SERVER_ERROR.http_status,
        content={"detail": ERROR_500_MESSAGE},
    )


def to_http_response(
    result: CommandResult, location: str | None = None
) -> Response:
    """
    Build the HTTP response for a command result.

    Args:
        result: Outcome returned by a command.
        location: Value of the Location header for CREATED results.

    Returns:
        JSONResponse for OK and CREATED, the fixed error body for
        SERVER_ERROR, and an empty response for every other kind.
    """
    if result.kind is ResultKind.SERVER_ERROR:
        return server_error_response()

    if result.kind in (ResultKind.OK, ResultKind.CREATED):
        response = JSONResponse(
            status_code=result.kind.http_status,
            content=_serialize(result.body),
        )
        if result.kind is ResultKind.CREATED and location:
            response.headers["Location"] = location
        return response

    return Response(status_code=result.kind.http_status)
