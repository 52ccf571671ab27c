from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):  # type: ignore[misc]
    """Body of every error response that carries one."""

    detail: str | list[dict[str, Any]]


class HealthResponse(BaseModel):  # type: ignore[misc]
    """Response model for health check endpoint."""

    status: str
    database: str
