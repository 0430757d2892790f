# bookclub/models.py
from datetime import datetime
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field
from typing_extensions import Literal  # Py3.8 compatibility


SortField = Literal["title", "author", "year"]

T = TypeVar("T")


class Book(BaseModel):
    id: int
    title: str
    author: str
    year: int


class CreateBookRequest(BaseModel):
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    year: int


class Comment(BaseModel):
    id: int
    book_id: int
    author: str = Field(description="Adresse e-mail de l'auteur du commentaire.")
    text: str
    created_at: datetime


class CreateCommentRequest(BaseModel):
    # No constraints here: presence and content policy are checked by the
    # comment validators so that failures carry their own error kind.
    text: Optional[str] = None


class PageRequest(BaseModel):
    """Pagination and ordering parameters.

    The query engines assume a valid request; use :meth:`clamped` to build
    one from raw user input.
    """

    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, gt=0, le=100)
    sort_by: Optional[SortField] = None
    sort_desc: bool = False

    @classmethod
    def clamped(
        cls,
        page: int,
        size: int,
        sort_by: Optional[str] = None,
        sort_desc: bool = False,
        default_size: int = 20,
        max_size: int = 100,
    ) -> "PageRequest":
        if page < 0:
            page = 0
        if size <= 0 or size > max_size:
            size = default_size
        return cls(page=page, size=size, sort_by=sort_by, sort_desc=sort_desc)

    def slice(self, items: List[T]) -> List[T]:
        """Return the part of ``items`` that falls on this page."""
        total = len(items)
        start = self.page * self.size
        if start >= total:
            return []
        end = min(start + self.size, total)
        return items[start:end]


class PageResult(BaseModel, Generic[T]):
    items: List[T]
    request: PageRequest
    total: int

    @property
    def total_pages(self) -> int:
        return (self.total + self.request.size - 1) // self.request.size
