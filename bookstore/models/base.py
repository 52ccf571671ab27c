"""
Base model for all database tables with async relationship support.

All SQLModel table models inherit from BaseModel, which mixes in
SQLAlchemy's AsyncAttrs so lazy-loaded relationships can be awaited
(``await author.awaitable_attrs.books``) instead of raising
MissingGreenlet inside async sessions.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """Base model for all database tables with async relationship support."""

    pass
