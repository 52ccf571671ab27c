"""
Outcomes of the author commands.

Every command returns exactly one ``CommandResult``; its ``kind`` decides
the HTTP status and whether a body is sent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fastapi import status


class ResultKind(str, Enum):
    """All outcomes a command can produce."""

    OK = "ok"
    NO_CONTENT = "no_content"
    CREATED = "created"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ResultKind.OK: status.HTTP_200_OK,
    ResultKind.NO_CONTENT: status.HTTP_204_NO_CONTENT,
    ResultKind.CREATED: status.HTTP_201_CREATED,
    ResultKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ResultKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ResultKind.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class CommandResult:
    """
    Result of a command.

    Attributes:
        kind: Outcome category.
        body: Read view or list of read views for OK and CREATED,
            None otherwise.
        resource_id: ID of the created resource for CREATED.
    """

    kind: ResultKind
    body: Any = None
    resource_id: int | None = None

    @classmethod
    def ok(cls, body: Any) -> "CommandResult":
        return cls(ResultKind.OK, body)

    @classmethod
    def no_content(cls) -> "CommandResult":
        return cls(ResultKind.NO_CONTENT)

    @classmethod
    def created(cls, body: Any, resource_id: int) -> "CommandResult":
        return cls(ResultKind.CREATED, body, resource_id)

    @classmethod
    def bad_request(cls) -> "CommandResult":
        return cls(ResultKind.BAD_REQUEST)

    @classmethod
    def not_found(cls) -> "CommandResult":
        return cls(ResultKind.NOT_FOUND)

    @classmethod
    def server_error(cls) -> "CommandResult":
        return cls(ResultKind.SERVER_ERROR)
