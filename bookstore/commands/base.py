"""
Base command for encapsulating business operations.

The Command pattern keeps the request contract (validation order, store
calls, outcome selection) out of the HTTP layer so it can be tested
against a mocked repository.

Example:
    ```python
    class GetAuthorCommand(BaseCommand[int, CommandResult]):
        def __init__(self, repository: Repository[Author]):
            self.repository = repository

        async def execute(self, author_id: int) -> CommandResult:
            author = await self.repository.get_by_id(author_id)
            if author is None:
                return CommandResult.not_found()
            return CommandResult.ok(to_read_view(author))


    @router.get("/authors/{author_id}")
    async def get_author(author_id: int, repo: AuthorRepoDep) -> Response:
        result = await GetAuthorCommand(repo).execute(author_id)
        return to_http_response(result)
    ```
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TInput = TypeVar("TInput")
TOutput = TypeVar("TOutput")


class BaseCommand(ABC, Generic[TInput, TOutput]):
    """
    Base command for business operations.

    Commands depend on repositories for data access, receive them through
    the constructor and hold no other state.

    Type Parameters:
        TInput: Input data type.
        TOutput: Output data type.
    """

    @abstractmethod
    async def execute(self, input_data: TInput) -> TOutput:
        """
        Execute the command.

        Args:
            input_data: Input data for the command.

        Returns:
            Result of the command execution.
        """
        pass
