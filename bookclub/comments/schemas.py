from typing import List

from pydantic import BaseModel

from ..models import Comment, PageResult


class PaginatedComments(BaseModel):
    """Comments of one book, newest first, with pagination metadata."""

    book_id: int
    page: int
    page_size: int
    total: int
    total_pages: int
    items: List[Comment]

    @classmethod
    def from_page(cls, book_id: int, result: PageResult[Comment]) -> "PaginatedComments":
        return cls(
            book_id=book_id,
            page=result.request.page,
            page_size=result.request.size,
            total=result.total,
            total_pages=result.total_pages,
            items=result.items,
        )
