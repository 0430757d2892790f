# bookclub/storage.py
"""
Persistence ports and their in-memory implementation.

The services only depend on ``CatalogRepository`` and
``CommentRepository``. ``main.py`` picks the implementation when the
application is assembled; the in-memory one below keeps everything in
Python lists and hands out ids from simple counters. A lock serialises
every read-modify-write so that two concurrent deletes of the same
comment end with one removal and one no-op.
"""

import threading
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from .comments.query import filter_comments
from .models import Book, Comment, PageRequest


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CatalogRepository(ABC):
    @abstractmethod
    def fetch_all_books(self) -> List[Book]:
        ...

    @abstractmethod
    def fetch_book(self, book_id: int) -> Optional[Book]:
        ...

    @abstractmethod
    def add_book(self, title: str, author: str, year: int) -> Book:
        ...


class CommentRepository(ABC):
    @abstractmethod
    def fetch_comments_by_filter(
        self,
        book_id: int,
        author: Optional[str],
        since: Optional[datetime],
        request: PageRequest,
    ) -> Tuple[List[Comment], int]:
        ...

    @abstractmethod
    def fetch_comments_by_author(self, author: str) -> List[Comment]:
        ...

    @abstractmethod
    def fetch_comment(self, book_id: int, comment_id: int) -> Optional[Comment]:
        ...

    @abstractmethod
    def add_comment(self, book_id: int, author: str, text: str) -> None:
        ...

    @abstractmethod
    def delete_comment(self, book_id: int, comment_id: int) -> None:
        ...


class InMemoryCatalogRepository(CatalogRepository):
    def __init__(self) -> None:
        self._books: List[Book] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def fetch_all_books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    def fetch_book(self, book_id: int) -> Optional[Book]:
        with self._lock:
            return next((b for b in self._books if b.id == book_id), None)

    def add_book(self, title: str, author: str, year: int) -> Book:
        with self._lock:
            book = Book(id=self._next_id, title=title, author=author, year=year)
            self._books.append(book)
            self._next_id += 1
            return book


class InMemoryCommentRepository(CommentRepository):
    """Comment storage backed by a list.

    ``clock`` supplies the creation timestamp of new comments; tests pass
    a fixed clock to control comment ages.
    """

    def __init__(
        self,
        catalog: CatalogRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._catalog = catalog
        self._clock = clock
        self._comments: List[Comment] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def fetch_comments_by_filter(
        self,
        book_id: int,
        author: Optional[str],
        since: Optional[datetime],
        request: PageRequest,
    ) -> Tuple[List[Comment], int]:
        with self._lock:
            snapshot = list(self._comments)
        page = filter_comments(snapshot, book_id, author, since, request)
        return page.items, page.total

    def fetch_comments_by_author(self, author: str) -> List[Comment]:
        with self._lock:
            found = [c for c in self._comments if c.author == author]
        found.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return found

    def fetch_comment(self, book_id: int, comment_id: int) -> Optional[Comment]:
        with self._lock:
            return next(
                (c for c in self._comments if c.id == comment_id and c.book_id == book_id),
                None,
            )

    def add_comment(self, book_id: int, author: str, text: str) -> None:
        if self._catalog.fetch_book(book_id) is None:
            raise LookupError(f"Book not found: {book_id}")
        with self._lock:
            self._comments.append(
                Comment(
                    id=self._next_id,
                    book_id=book_id,
                    author=author,
                    text=text,
                    created_at=self._clock(),
                )
            )
            self._next_id += 1

    def delete_comment(self, book_id: int, comment_id: int) -> None:
        with self._lock:
            self._comments = [
                c for c in self._comments if not (c.id == comment_id and c.book_id == book_id)
            ]
