"""
Mock factory functions for repository testing.

Provides pre-configured repository mocks with common method stubs.
"""

from unittest.mock import AsyncMock

from bookstore.repositories.author_repository import AuthorRepository


def create_mock_author_repository():
    """
    Creates a mock AuthorRepository with every gateway method stubbed.

    Defaults describe an empty store where every write succeeds.

    Returns:
        AsyncMock: Mocked AuthorRepository instance
    """
    repo_mock = AsyncMock(spec=AuthorRepository)
    repo_mock.get_by_id = AsyncMock(return_value=None)
    repo_mock.get_all = AsyncMock(return_value=[])
    repo_mock.add = AsyncMock()
    repo_mock.remove = AsyncMock()
    repo_mock.commit = AsyncMock()
    repo_mock.refresh = AsyncMock()
    repo_mock.exists = AsyncMock(return_value=False)
    return repo_mock
