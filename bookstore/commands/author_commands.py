"""
Commands for Author operations.

Each command implements one verb of the authors resource and returns a
CommandResult. Expected outcomes (missing record, id mismatch, store
failure) are results, never exceptions, so the HTTP layer only has to map
result kinds to responses.

Example:
    ```python
    from bookstore.commands.author_commands import GetAuthorCommand
    from bookstore.repositories.author_repository import AuthorRepository

    async with async_session() as session:
        result = await GetAuthorCommand(AuthorRepository(session)).execute(7)
        if result.kind is ResultKind.OK:
            print(result.body.first_name)
    ```
"""

from pydantic import BaseModel, Field

from bookstore.commands.base import BaseCommand
from bookstore.commands.results import CommandResult
from bookstore.constants import (
    AUTHOR_ID_MAX,
    AUTHOR_ID_MIN,
    RECORD_NOT_FOUND_MESSAGE,
)
from bookstore.exceptions import ConcurrencyConflictError, StoreFailureError
from bookstore.logging import logger
from bookstore.mappers import (
    apply_update_view,
    from_create_view,
    to_read_view,
    to_read_views,
)
from bookstore.models.author import Author
from bookstore.protocols import Repository
from bookstore.schemas.author import AuthorCreateView, AuthorUpdateView


# ============================================================================
# Input Models
# ============================================================================


class UpdateAuthorInput(BaseModel):  # type: ignore[misc]
    """Input model for replacing an author."""

    id: int = Field(
        ...,
        ge=AUTHOR_ID_MIN,
        le=AUTHOR_ID_MAX,
        description="Author ID taken from the route",
    )
    author: AuthorUpdateView = Field(..., description="Replacement data")


# ============================================================================
# Helpers
# ============================================================================


def _log_not_found(operation: str, author_id: int) -> None:
    logger.warning(
        f"{RECORD_NOT_FOUND_MESSAGE} in {operation} - ID: {author_id}",
        extra={"operation": operation, "author_id": author_id},
    )


def _log_store_failure(operation: str, author_id: int | None = None) -> None:
    suffix = f" - ID: {author_id}" if author_id is not None else ""
    logger.error(
        f"Error performing {operation}{suffix}",
        exc_info=True,
        extra={"operation": operation, "author_id": author_id},
    )


async def _resolve_conflict(
    repository: Repository[Author],
    operation: str,
    author_id: int,
    error: ConcurrencyConflictError,
) -> CommandResult:
    """
    Decide the outcome of a write rejected by the row version check.

    A row that no longer exists was deleted concurrently and is reported as
    not found. A row that still exists was changed by someone else, which
    is reported as a server error.
    """
    try:
        still_exists = await repository.exists(author_id)
    except StoreFailureError:
        _log_store_failure(operation, author_id)
        return CommandResult.server_error()

    if not still_exists:
        _log_not_found(operation, author_id)
        return CommandResult.not_found()

    logger.error(
        f"Concurrency conflict in {operation} - ID: {author_id}",
        exc_info=error,
        extra={"operation": operation, "author_id": author_id},
    )
    return CommandResult.server_error()


# ============================================================================
# Commands
# ============================================================================


class ListAuthorsCommand(BaseCommand[None, CommandResult]):
    """Command to list every author in store order."""

    operation = "ListAuthors"

    def __init__(self, repository: Repository[Author]):
        """
        Initialize command with repository.

        Args:
            repository: Author repository for data access.
        """
        self.repository = repository

    async def execute(self, input_data: None = None) -> CommandResult:
        """
        Execute command to list authors.

        Returns:
            OK with a (possibly empty) list of read views, or SERVER_ERROR.
        """
        try:
            authors = await self.repository.get_all()
        except StoreFailureError:
            _log_store_failure(self.operation)
            return CommandResult.server_error()

        return CommandResult.ok(to_read_views(authors))


class GetAuthorCommand(BaseCommand[int, CommandResult]):
    """Command to fetch one author by ID."""

    operation = "GetAuthor"

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, author_id: int) -> CommandResult:
        """
        Execute command to fetch an author.

        Args:
            author_id: ID from the route.

        Returns:
            OK with the read view, NOT_FOUND, or SERVER_ERROR.
        """
        try:
            author = await self.repository.get_by_id(author_id)
        except StoreFailureError:
            _log_store_failure(self.operation, author_id)
            return CommandResult.server_error()

        if author is None:
            _log_not_found(self.operation, author_id)
            return CommandResult.not_found()

        return CommandResult.ok(to_read_view(author))


class UpdateAuthorCommand(BaseCommand[UpdateAuthorInput, CommandResult]):
    """
    Command to replace the fields of an existing author.

    The body ID is checked against the route ID before the repository is
    touched. Conflicts reported by the store on commit are resolved with an
    existence re-check.
    """

    operation = "UpdateAuthor"

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: UpdateAuthorInput) -> CommandResult:
        """
        Execute command to update an author.

        Args:
            input_data: Route ID and replacement view.

        Returns:
            NO_CONTENT, BAD_REQUEST, NOT_FOUND, or SERVER_ERROR.

        Example:
            ```python
            view = AuthorUpdateView(id=1, first_name="Jane", last_name="Doe")
            result = await command.execute(UpdateAuthorInput(id=1, author=view))
            ```
        """
        author_id = input_data.id
        view = input_data.author

        if view.id != author_id:
            logger.warning(
                f"Update ID invalid in {self.operation} - ID: {author_id}",
                extra={
                    "operation": self.operation,
                    "author_id": author_id,
                    "body_id": view.id,
                },
            )
            return CommandResult.bad_request()

        try:
            author = await self.repository.get_by_id(author_id)
            if author is None:
                _log_not_found(self.operation, author_id)
                return CommandResult.not_found()

            apply_update_view(view, author)
            await self.repository.commit()
        except ConcurrencyConflictError as ex:
            return await _resolve_conflict(
                self.repository, self.operation, author_id, ex
            )
        except StoreFailureError:
            _log_store_failure(self.operation, author_id)
            return CommandResult.server_error()

        return CommandResult.no_content()


class CreateAuthorCommand(BaseCommand[AuthorCreateView, CommandResult]):
    """Command to insert a new author."""

    operation = "CreateAuthor"

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: AuthorCreateView) -> CommandResult:
        """
        Execute command to create an author.

        Args:
            input_data: Author data without ID.

        Returns:
            CREATED with the read view and the new ID, or SERVER_ERROR.
        """
        author = from_create_view(input_data)

        try:
            await self.repository.add(author)
            await self.repository.commit()
        except StoreFailureError:
            _log_store_failure(self.operation)
            return CommandResult.server_error()

        # The row is committed and its id assigned; a failed reload only
        # means the response is built from the values that were sent.
        try:
            await self.repository.refresh(author)
        except StoreFailureError:
            logger.warning(
                f"Could not reload created author - ID: {author.id}",
                exc_info=True,
                extra={"operation": self.operation, "author_id": author.id},
            )

        logger.info(
            f"Created author - ID: {author.id}",
            extra={"operation": self.operation, "author_id": author.id},
        )
        return CommandResult.created(to_read_view(author), author.id)


class DeleteAuthorCommand(BaseCommand[int, CommandResult]):
    """Command to delete an author by ID."""

    operation = "DeleteAuthor"

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, author_id: int) -> CommandResult:
        """
        Execute command to delete an author.

        Deleting an ID that is already gone yields NOT_FOUND, so repeated
        deletes never produce a server error.

        Args:
            author_id: ID from the route.

        Returns:
            NO_CONTENT, NOT_FOUND, or SERVER_ERROR.
        """
        try:
            author = await self.repository.get_by_id(author_id)
            if author is None:
                _log_not_found(self.operation, author_id)
                return CommandResult.not_found()

            await self.repository.remove(author)
            await self.repository.commit()
        except ConcurrencyConflictError as ex:
            return await _resolve_conflict(
                self.repository, self.operation, author_id, ex
            )
        except StoreFailureError:
            _log_store_failure(self.operation, author_id)
            return CommandResult.server_error()

        return CommandResult.no_content()
