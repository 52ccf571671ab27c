from sqlalchemy import Column, Integer
from sqlmodel import Field

from bookstore.constants import AUTHOR_BIO_MAX_LENGTH, AUTHOR_NAME_MAX_LENGTH
from bookstore.models.base import BaseModel

# Row version counter. Shared between the table definition and the mapper
# so SQLAlchemy adds "AND version = :old" to every UPDATE/DELETE.
version_column = Column("version", Integer, nullable=False)


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Attributes:
        id: Primary key, generated by the database
        first_name: Given name of the author
        last_name: Family name of the author
        bio: Optional short biography
        version: Optimistic concurrency token, managed by SQLAlchemy
    """

    __mapper_args__ = {"version_id_col": version_column}

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    last_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    bio: str | None = Field(default=None, max_length=AUTHOR_BIO_MAX_LENGTH)
    version: int | None = Field(default=None, sa_column=version_column)
