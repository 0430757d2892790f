"""
Filtering and pagination of a book's comments.

Comments are always returned newest first; callers cannot change the
ordering. The author filter behaves like a SQL ``LIKE '%author%'`` match,
ignoring case. Timestamps without an offset are taken as UTC.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable, Optional

from ..models import Comment, PageRequest, PageResult


def _needle(s: Optional[str]) -> str:
    if not (s or "").strip():
        return ""
    return s.lower()


def as_utc(moment: Optional[datetime]) -> Optional[datetime]:
    if moment is not None and moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def filter_comments(
    comments: Iterable[Comment],
    book_id: int,
    author: Optional[str],
    since: Optional[datetime],
    request: PageRequest,
) -> PageResult[Comment]:
    """Select the comments of ``book_id`` matching the optional filters.

    Parameters
    ----------
    comments : Iterable[Comment]
        Every stored comment; entries of other books are skipped.
    book_id : int
        Exact book to list comments for.
    author : Optional[str]
        Substring of the author address. Blank means no author filter.
    since : Optional[datetime]
        Inclusive lower bound on ``created_at``. A naive value is read
        as UTC.
    request : PageRequest
        Page to return. Its sort fields are ignored.

    Returns
    -------
    PageResult[Comment]
        The requested page and the number of matches before pagination.
    """
    needle = _needle(author)
    since = as_utc(since)
    items = [
        c
        for c in comments
        if c.book_id == book_id
        and (not needle or needle in c.author.lower())
        and (since is None or c.created_at >= since)
    ]
    items.sort(key=lambda c: (c.created_at, c.id), reverse=True)

    return PageResult[Comment](items=request.slice(items), request=request, total=len(items))
