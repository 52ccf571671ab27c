"""
Protocol classes for structural subtyping (duck typing with type safety).

Commands depend on the Repository protocol rather than a concrete class,
so tests can hand them any object with the same async methods.

Example:
    ```python
    from bookstore.protocols import Repository
    from bookstore.models.author import Author


    async def count_authors(repo: Repository[Author]) -> int:
        return len(await repo.get_all())
    ```
"""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """
    Protocol for the persistence gateway.

    Reads return entities; writes are staged with ``add``/``remove`` and
    persisted by ``commit``.

    Type Parameters:
        T: The entity type this repository manages.
    """

    async def get_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Returns:
            Entity if found, None otherwise.
        """
        ...

    async def get_all(self) -> list[T]:
        """
        Get all entities in the store's natural order.
        """
        ...

    async def add(self, entity: T) -> None:
        """
        Stage an insert. The ID is assigned on commit.
        """
        ...

    async def remove(self, entity: T) -> None:
        """
        Stage a delete.
        """
        ...

    async def commit(self) -> None:
        """
        Persist staged changes.

        Raises:
            ConcurrencyConflictError: If a row changed or vanished since it
                was read.
            StoreFailureError: For any other persistence fault.
        """
        ...

    async def refresh(self, entity: T) -> T:
        """
        Reload entity state from the store after a commit.
        """
        ...

    async def exists(self, id: int) -> bool:
        """
        Check whether an entity with the given ID exists.
        """
        ...
