"""
Validation rules applied to a comment before it is stored.

Two independent checks exist. ``validate_comment_fields`` verifies that
the required inputs are present; ``validate_comment_text`` enforces the
content policy (maximum length and a list of forbidden words). Both are
pure: they never touch storage and report at most one problem per call.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..errors import ErrorKind, Outcome

DEFAULT_FORBIDDEN_WORDS = ("spam", "viagra", "casino")
DEFAULT_MAX_LENGTH = 1000


def _is_blank(s: Optional[str]) -> bool:
    return s is None or not s.strip()


class CommentValidator:
    """Comment field and content policy checks.

    Parameters
    ----------
    forbidden_words : Iterable[str]
        Banned substrings, matched case-insensitively. They are checked in
        the given order and the first match is the one reported.
    max_length : int
        Maximum number of characters allowed once the text is trimmed.
    """

    def __init__(
        self,
        forbidden_words: Iterable[str] = DEFAULT_FORBIDDEN_WORDS,
        max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        self.forbidden_words: List[str] = [w.lower() for w in forbidden_words if w]
        self.max_length = max_length

    def validate_comment_fields(
        self, book_id: int, author: Optional[str], text: Optional[str]
    ) -> Outcome[None]:
        if book_id <= 0:
            return Outcome.failure(ErrorKind.field_validation, "bookId must be greater than 0")
        if _is_blank(author):
            return Outcome.failure(ErrorKind.field_validation, "author is required")
        if _is_blank(text):
            return Outcome.failure(ErrorKind.field_validation, "text is required")
        return Outcome.success()

    def validate_comment_text(self, text: Optional[str]) -> Outcome[None]:
        if _is_blank(text):
            return Outcome.failure(ErrorKind.content_policy, "Comment text cannot be empty")

        trimmed = text.strip()
        if len(trimmed) > self.max_length:
            return Outcome.failure(
                ErrorKind.content_policy,
                f"Comment text exceeds maximum length of {self.max_length} characters",
            )

        lowered = trimmed.lower()
        for word in self.forbidden_words:
            if word in lowered:
                return Outcome.failure(
                    ErrorKind.content_policy, f"Comment contains forbidden word: {word}"
                )
        return Outcome.success()
