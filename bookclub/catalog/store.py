"""
Search engine and service layer for the book catalogue.

``search_books`` works on the complete collection handed to it by the
catalogue repository: storage never paginates, the engine filters, sorts
and slices in memory. ``CatalogService`` wires the engine to a
``CatalogRepository``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..errors import ErrorKind, Outcome
from ..models import Book, PageRequest, PageResult
from ..storage import CatalogRepository
from ..timing import timed

logger = logging.getLogger(__name__)


def _norm(s: Optional[str]) -> str:
    """Normalize a search query for case-insensitive comparison.

    Parameters
    ----------
    s : Optional[str]
        The query to normalize.

    Returns
    -------
    str
        The lowercased query, surrounding whitespace included. An empty
        string is returned when the input is ``None`` or blank.
    """
    if not (s or "").strip():
        return ""
    return s.lower()


def search_books(
    books: Iterable[Book],
    q: Optional[str],
    request: PageRequest,
) -> PageResult[Book]:
    """Filter, sort and paginate a collection of books.

    Parameters
    ----------
    books : Iterable[Book]
        The whole catalogue, in storage order.
    q : Optional[str]
        Text search query. If provided, only books whose title or author
        contains the query (case-insensitive) are kept. Years are never
        searched.
    request : PageRequest
        Page to return and optional sort field/direction. Without a sort
        field the storage order is kept.

    Returns
    -------
    PageResult[Book]
        The books for the requested page and the total number of books
        matching the query (before pagination). Asking for a page past
        the end yields no items but still reports the full total.
    """
    items: List[Book] = list(books)
    nq = _norm(q)

    if nq:
        items = [b for b in items if nq in b.title.lower() or nq in b.author.lower()]

    # Natural ordering of each field: plain string comparison for text,
    # numeric for the year.
    if request.sort_by == "title":
        items.sort(key=lambda b: b.title, reverse=request.sort_desc)
    elif request.sort_by == "author":
        items.sort(key=lambda b: b.author, reverse=request.sort_desc)
    elif request.sort_by == "year":
        items.sort(key=lambda b: b.year, reverse=request.sort_desc)

    return PageResult[Book](items=request.slice(items), request=request, total=len(items))


class CatalogService:
    def __init__(self, repo: CatalogRepository) -> None:
        self.repo = repo

    @timed
    def search_books(self, q: Optional[str], request: PageRequest) -> PageResult[Book]:
        return search_books(self.repo.fetch_all_books(), q, request)

    @timed
    def find_book(self, book_id: int) -> Outcome[Book]:
        book = self.repo.fetch_book(book_id)
        if book is None:
            return Outcome.failure(ErrorKind.not_found, f"Book not found with id: {book_id}")
        return Outcome.success(book)

    @timed
    def add_book(self, title: str, author: str, year: int) -> Outcome[Book]:
        title, author = title.strip(), author.strip()
        if not title:
            return Outcome.failure(ErrorKind.field_validation, "title is required")
        if not author:
            return Outcome.failure(ErrorKind.field_validation, "author is required")
        book = self.repo.add_book(title, author, year)
        logger.info("Book %s added: %r by %s", book.id, book.title, book.author)
        return Outcome.success(book)
