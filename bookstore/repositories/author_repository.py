"""
Repository for the Author entity.

Example:
    ```python
    from bookstore.repositories.author_repository import AuthorRepository
    from bookstore.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await repo.get_all()
    ```
"""

from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.models.author import Author
from bookstore.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    All operations are inherited from BaseRepository.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Author)
