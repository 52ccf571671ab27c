"""
Dependency injection configuration for FastAPI.

Handlers receive the persistence gateway through these aliases, never
through module globals, so tests can swap the session with
``app.dependency_overrides[get_session]``.

Example:
    ```python
    from bookstore.dependencies import AuthorRepoDep

    @router.get("/authors")
    async def list_authors(repo: AuthorRepoDep) -> Response:
        return to_http_response(await ListAuthorsCommand(repo).execute())
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.repositories.author_repository import AuthorRepository
from bookstore.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(session: SessionDep) -> AuthorRepository:
    """
    Get author repository with injected database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        AuthorRepository bound to the request's session.
    """
    return AuthorRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
