"""
Comment lifecycle: creation, listing and moderated deletion.

A comment is created once it passes the field and content checks, stays
listable until it is deleted, and is never edited. Deletion is only
possible within the moderation window, measured from the timestamp that
storage recorded when the comment was created. The administrator check
happens before these methods are called (see ``auth.require_admin``).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from ..errors import ErrorKind, Outcome
from ..models import Comment, PageRequest, PageResult
from ..storage import CatalogRepository, CommentRepository
from ..timing import timed
from .moderation import ModerationPolicy
from .validation import CommentValidator

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CommentService:
    def __init__(
        self,
        comments: CommentRepository,
        catalog: CatalogRepository,
        validator: Optional[CommentValidator] = None,
        policy: Optional[ModerationPolicy] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.comments = comments
        self.catalog = catalog
        self.validator = validator or CommentValidator()
        self.policy = policy or ModerationPolicy()
        self.clock = clock

    def _missing_book(self, book_id: int) -> Optional[Outcome]:
        if self.catalog.fetch_book(book_id) is None:
            return Outcome.failure(ErrorKind.not_found, f"Book not found with id: {book_id}")
        return None

    @timed
    def add_comment(self, book_id: int, author: Optional[str], text: Optional[str]) -> Outcome[None]:
        checked = self.validator.validate_comment_fields(book_id, author, text)
        if not checked.ok:
            return checked

        missing = self._missing_book(book_id)
        if missing is not None:
            return missing

        checked = self.validator.validate_comment_text(text)
        if not checked.ok:
            return checked

        self.comments.add_comment(book_id, author.strip(), text.strip())
        logger.info("Comment added by user '%s' to book %s", author.strip(), book_id)
        return Outcome.success()

    @timed
    def delete_comment(
        self, book_id: int, comment_id: int, now: Optional[datetime] = None
    ) -> Outcome[None]:
        """Delete a comment if it is still inside the moderation window.

        The comment's age is computed from its stored ``created_at``;
        callers cannot supply their own timestamp. ``now`` defaults to
        the service clock.
        """
        if book_id <= 0:
            return Outcome.failure(ErrorKind.precondition_failed, "bookId must be greater than 0")
        if comment_id <= 0:
            return Outcome.failure(
                ErrorKind.precondition_failed, "commentId must be greater than 0"
            )

        missing = self._missing_book(book_id)
        if missing is not None:
            return missing

        comment = self.comments.fetch_comment(book_id, comment_id)
        if comment is None:
            return Outcome.failure(
                ErrorKind.not_found, f"Comment {comment_id} not found for book {book_id}"
            )

        eligible = self.policy.can_delete(comment.created_at, now or self.clock())
        if not eligible.ok:
            return eligible

        self.comments.delete_comment(book_id, comment_id)
        logger.info("Comment %s deleted from book %s", comment_id, book_id)
        return Outcome.success()

    @timed
    def list_comments(
        self,
        book_id: int,
        author: Optional[str],
        since: Optional[datetime],
        request: PageRequest,
    ) -> Outcome[PageResult[Comment]]:
        missing = self._missing_book(book_id)
        if missing is not None:
            return missing

        items, total = self.comments.fetch_comments_by_filter(book_id, author, since, request)
        return Outcome.success(PageResult[Comment](items=items, request=request, total=total))

    @timed
    def comments_by_author(self, author: str) -> List[Comment]:
        return self.comments.fetch_comments_by_author(author.strip())
