"""
Mapping between the Author entity and its transport views.

Pure functions without I/O. A wrong argument type is a programming error
and surfaces as a normal Python exception.
"""

from typing import Iterable

from bookstore.models.author import Author
from bookstore.schemas.author import (
    AuthorCreateView,
    AuthorReadView,
    AuthorUpdateView,
)

# Fields copied from update views onto the entity. Identity and row version
# belong to the store.
_IMMUTABLE_FIELDS = {"id", "version"}


def to_read_view(author: Author) -> AuthorReadView:
    """Project a persisted author onto the view returned to clients."""
    return AuthorReadView.model_validate(author)


def to_read_views(authors: Iterable[Author]) -> list[AuthorReadView]:
    """Project authors onto read views, keeping their order."""
    return [to_read_view(author) for author in authors]


def from_create_view(view: AuthorCreateView) -> Author:
    """Build a new, not yet persisted author from a create view."""
    return Author(**view.model_dump(exclude=_IMMUTABLE_FIELDS))


def apply_update_view(view: AuthorUpdateView, author: Author) -> Author:
    """
    Overwrite the mapped fields of ``author`` with the values of ``view``.

    This is a full replace: an optional field missing from the view is
    reset to its default on the entity. ``id`` and ``version`` are never
    touched.

    Args:
        view: Validated update payload.
        author: Persistent author loaded in the current session.

    Returns:
        The same ``author`` instance.
    """
    for field, value in view.model_dump(exclude=_IMMUTABLE_FIELDS).items():
        setattr(author, field, value)
    return author
