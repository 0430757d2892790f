"""
Response schemas for the catalogue routes.

``PaginatedBooks`` flattens a ``PageResult`` into the shape the
front-end expects: the page coordinates, the total number of matches,
the derived page count and the books themselves.
"""

from typing import List

from pydantic import BaseModel

from ..models import Book, PageResult


class PaginatedBooks(BaseModel):
    """A wrapper for paginated results returned from ``/books`` endpoint."""

    page: int
    page_size: int
    total: int
    total_pages: int
    items: List[Book]

    @classmethod
    def from_page(cls, result: PageResult[Book]) -> "PaginatedBooks":
        return cls(
            page=result.request.page,
            page_size=result.request.size,
            total=result.total,
            total_pages=result.total_pages,
            items=result.items,
        )
