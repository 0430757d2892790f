"""Deletion eligibility for comments.

A comment can be removed by a moderator only during a fixed window after
it was posted (24 hours by default). The boundary is inclusive: a comment
exactly 24h00m00s old may still be deleted.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ..errors import ErrorKind, Outcome


class ModerationPolicy:
    def __init__(self, window: timedelta = timedelta(hours=24)) -> None:
        self.window = window

    def can_delete(self, created_at: Optional[datetime], now: datetime) -> Outcome[None]:
        """Return a successful outcome when the comment is young enough.

        ``now`` is always supplied by the caller so the check stays
        deterministic.
        """
        if created_at is None:
            return Outcome.failure(ErrorKind.precondition_failed, "createdAt is required")

        if now - created_at > self.window:
            hours = int(self.window.total_seconds() // 3600)
            return Outcome.failure(
                ErrorKind.too_old,
                f"Comment was created more than {hours} hours ago and cannot be deleted",
            )
        return Outcome.success()
