"""
Base repository with common CRUD operations.

The Repository pattern separates data access logic from business logic.
Repositories are the only place that touches the SQLAlchemy session; every
driver or ORM error is translated here into StoreFailureError or
ConcurrencyConflictError so callers never depend on SQLAlchemy exceptions.

Example:
    ```python
    from bookstore.repositories.base import BaseRepository
    from bookstore.models.author import Author


    class AuthorRepository(BaseRepository[Author]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Author)
    ```
"""

from contextlib import suppress
from typing import Generic, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from bookstore.exceptions import ConcurrencyConflictError, StoreFailureError
from bookstore.logging import logger

T = TypeVar("T")

# Errors raised by the ORM or by the driver before SQLAlchemy wraps them
# (e.g. connection refused while the pool opens a connection)
STORE_ERRORS = (SQLAlchemyError, OSError)


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Type Parameters:
        T: The SQLModel type this repository manages. It must have an
            integer ``id`` primary key.

    Attributes:
        session: The database session for executing queries.
        model: The SQLModel class this repository manages.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """
        Initialize repository with session and model.

        Args:
            session: Database session for executing queries.
            model: The SQLModel class to manage.
        """
        self.session = session
        self.model = model

    @property
    def model_name(self) -> str:
        return self.model.__name__

    async def get_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.

        Raises:
            StoreFailureError: If the query fails.
        """
        try:
            return await self.session.get(self.model, id)
        except STORE_ERRORS as e:
            logger.error(f"Error retrieving {self.model_name} {id}: {e}")
            raise StoreFailureError(
                f"Could not load {self.model_name} {id}"
            ) from e

    async def get_all(self) -> list[T]:
        """
        Get all entities in the order the store returns them.

        Returns:
            List of entities, possibly empty.

        Raises:
            StoreFailureError: If the query fails.
        """
        try:
            result = await self.session.exec(select(self.model))
            return list(result.all())
        except STORE_ERRORS as e:
            logger.error(f"Error retrieving {self.model_name} list: {e}")
            raise StoreFailureError(
                f"Could not list {self.model_name}"
            ) from e

    async def add(self, entity: T) -> None:
        """
        Stage an insert. The primary key is assigned on commit.

        Args:
            entity: The new entity instance.
        """
        self.session.add(entity)

    async def remove(self, entity: T) -> None:
        """
        Stage a delete.

        Args:
            entity: A persistent entity instance.

        Raises:
            StoreFailureError: If the session cannot stage the delete.
        """
        try:
            await self.session.delete(entity)
        except STORE_ERRORS as e:
            logger.error(f"Error deleting {self.model_name}: {e}")
            raise StoreFailureError(
                f"Could not delete {self.model_name}"
            ) from e

    async def commit(self) -> None:
        """
        Flush and commit all staged changes in one transaction.

        The transaction is rolled back on any failure, leaving the session
        usable for follow-up reads.

        Raises:
            ConcurrencyConflictError: If an UPDATE or DELETE matched no row
                because the row version changed or the row was deleted.
            StoreFailureError: For any other persistence fault.
        """
        try:
            await self.session.commit()
        except StaleDataError as e:
            await self._rollback()
            logger.warning(f"Concurrency conflict on {self.model_name}: {e}")
            raise ConcurrencyConflictError(
                f"{self.model_name} was modified or deleted concurrently"
            ) from e
        except STORE_ERRORS as e:
            await self._rollback()
            logger.error(f"Error committing {self.model_name}: {e}")
            raise StoreFailureError(
                f"Could not commit {self.model_name} changes"
            ) from e

    async def _rollback(self) -> None:
        # A dead connection fails the rollback too; the commit error is
        # the one reported
        with suppress(*STORE_ERRORS):
            await self.session.rollback()

    async def refresh(self, entity: T) -> T:
        """
        Reload entity state from the database.

        Args:
            entity: A persistent entity instance.

        Returns:
            The same instance with current column values.

        Raises:
            StoreFailureError: If the reload fails.
        """
        try:
            await self.session.refresh(entity)
            return entity
        except STORE_ERRORS as e:
            logger.error(f"Error refreshing {self.model_name}: {e}")
            raise StoreFailureError(
                f"Could not refresh {self.model_name}"
            ) from e

    async def exists(self, id: int) -> bool:
        """
        Check whether a row with the given primary key exists.

        Always queries the database, bypassing the identity map.

        Args:
            id: Primary key value.

        Returns:
            True if the row exists, False otherwise.

        Raises:
            StoreFailureError: If the query fails.
        """
        try:
            pk = self.model.id  # type: ignore[attr-defined]
            result = await self.session.exec(select(pk).where(pk == id))
            return result.first() is not None
        except STORE_ERRORS as e:
            logger.error(
                f"Error checking existence of {self.model_name} {id}: {e}"
            )
            raise StoreFailureError(
                f"Could not check {self.model_name} {id}"
            ) from e
