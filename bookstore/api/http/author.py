"""
Author endpoints using Repository + Command + Dependency Injection.

Each endpoint builds its command with the injected repository, executes it
and turns the CommandResult into a response. No business logic lives here.
"""

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from bookstore.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    ListAuthorsCommand,
    UpdateAuthorCommand,
    UpdateAuthorInput,
)
from bookstore.commands.results import ResultKind
from bookstore.constants import AUTHOR_ID_MAX, AUTHOR_ID_MIN
from bookstore.dependencies import AuthorRepoDep
from bookstore.schemas.author import (
    AuthorCreateView,
    AuthorReadView,
    AuthorUpdateView,
)
from bookstore.schemas.response import ErrorResponse
from bookstore.utils.responses import to_http_response

router = APIRouter(prefix="/authors", tags=["authors"])

AuthorIdPath = Annotated[
    int, Path(ge=AUTHOR_ID_MIN, le=AUTHOR_ID_MAX, description="Author ID")
]

SERVER_ERROR_RESPONSE = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {
        "model": ErrorResponse,
        "description": "Unexpected store failure",
    }
}
NOT_FOUND_RESPONSE = {
    status.HTTP_404_NOT_FOUND: {"description": "Author not found"}
}
BAD_REQUEST_RESPONSE = {
    status.HTTP_400_BAD_REQUEST: {
        "description": "Invalid ID or body, or route/body ID mismatch"
    }
}


@router.get(
    "",
    response_model=list[AuthorReadView],
    summary="List authors",
    responses=SERVER_ERROR_RESPONSE,
)
async def get_authors(repo: AuthorRepoDep) -> Response:
    """
    Get all authors in the order the database returns them.

    An empty catalog yields ``200 []``.
    """
    result = await ListAuthorsCommand(repo).execute()
    return to_http_response(result)


@router.get(
    "/{author_id}",
    response_model=AuthorReadView,
    summary="Get an author",
    responses={
        **BAD_REQUEST_RESPONSE,
        **NOT_FOUND_RESPONSE,
        **SERVER_ERROR_RESPONSE,
    },
)
async def get_author(author_id: AuthorIdPath, repo: AuthorRepoDep) -> Response:
    """
    Get one author by ID.

    Example:
        GET /api/authors/7
    """
    result = await GetAuthorCommand(repo).execute(author_id)
    return to_http_response(result)


@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace an author",
    responses={
        **BAD_REQUEST_RESPONSE,
        **NOT_FOUND_RESPONSE,
        **SERVER_ERROR_RESPONSE,
    },
)
async def update_author(
    author_id: AuthorIdPath,
    author_data: AuthorUpdateView,
    repo: AuthorRepoDep,
) -> Response:
    """
    Replace every mapped field of an author.

    The ``id`` in the body must equal the route ID.

    Example:
        PUT /api/authors/7
        {
            "id": 7,
            "firstName": "Jane",
            "lastName": "Austen",
            "bio": null
        }
    """
    command = UpdateAuthorCommand(repo)
    result = await command.execute(
        UpdateAuthorInput(id=author_id, author=author_data)
    )
    return to_http_response(result)


@router.post(
    "",
    response_model=AuthorReadView,
    status_code=status.HTTP_201_CREATED,
    summary="Create an author",
    responses={**BAD_REQUEST_RESPONSE, **SERVER_ERROR_RESPONSE},
)
async def create_author(
    author_data: AuthorCreateView,
    request: Request,
    repo: AuthorRepoDep,
) -> Response:
    """
    Create a new author.

    The response carries the stored author and a Location header pointing
    at ``GET /authors/{id}``.

    Example:
        POST /api/authors
        {
            "firstName": "Jane",
            "lastName": "Austen"
        }
    """
    result = await CreateAuthorCommand(repo).execute(author_data)

    location = None
    if result.kind is ResultKind.CREATED:
        location = request.app.url_path_for(
            "get_author", author_id=str(result.resource_id)
        )
    return to_http_response(result, location=location)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    responses={
        **BAD_REQUEST_RESPONSE,
        **NOT_FOUND_RESPONSE,
        **SERVER_ERROR_RESPONSE,
    },
)
async def delete_author(
    author_id: AuthorIdPath, repo: AuthorRepoDep
) -> Response:
    """
    Delete an author.

    Example:
        DELETE /api/authors/7
    """
    result = await DeleteAuthorCommand(repo).execute(author_id)
    return to_http_response(result)
