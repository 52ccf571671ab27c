"""
Transport views of the Author entity.

Views serialise with camelCase keys (``firstName``) and accept either
camelCase or snake_case on input.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bookstore.constants import (
    AUTHOR_BIO_MAX_LENGTH,
    AUTHOR_ID_MAX,
    AUTHOR_ID_MIN,
    AUTHOR_NAME_MAX_LENGTH,
)


class AuthorBaseView(BaseModel):  # type: ignore[misc]
    """Fields shared by every author view."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=AUTHOR_NAME_MAX_LENGTH,
        description="Author first name",
    )
    last_name: str = Field(
        ...,
        min_length=1,
        max_length=AUTHOR_NAME_MAX_LENGTH,
        description="Author last name",
    )
    bio: str | None = Field(
        default=None,
        max_length=AUTHOR_BIO_MAX_LENGTH,
        description="Short biography",
    )


class AuthorCreateView(AuthorBaseView):
    """Input for creating an author. The id is assigned by the database."""


class AuthorUpdateView(AuthorBaseView):
    """Input for replacing an author. ``id`` must match the route id."""

    id: int = Field(
        ...,
        ge=AUTHOR_ID_MIN,
        le=AUTHOR_ID_MAX,
        description="Author ID, must equal the route ID",
    )


class AuthorReadView(AuthorBaseView):
    """Author as returned to clients."""

    id: int
