"""Paginated results."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Pagination(BaseModel, frozen=True):
    """Page-size hint sent with a list query."""

    per_page: int | None = Field(default=None, ge=1)
    """Number of items per page. If None, the server default applies."""


class Page(BaseModel, Generic[T]):
    """One batch of listing results with the cursors to move around the listing.

    Cursors are opaque URLs issued by the server. They are only meant to be
    passed back, unmodified, in a page query.
    """

    items: list[T] = Field(default_factory=list)
    """Items in server order."""

    first: str | None = None
    """Cursor of the first page."""

    next: str | None = None
    """Cursor of the following page. None when this is the last page."""

    last: str | None = None
    """Cursor of the last page."""
