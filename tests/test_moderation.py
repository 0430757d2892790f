from datetime import datetime, timedelta, timezone

from bookclub.comments.moderation import ModerationPolicy
from bookclub.errors import ErrorKind

NOW = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def test_recent_comment_can_be_deleted():
    assert ModerationPolicy().can_delete(NOW - timedelta(hours=1), NOW).ok


def test_exactly_24_hours_is_still_eligible():
    assert ModerationPolicy().can_delete(NOW - timedelta(hours=24), NOW).ok


def test_one_second_past_the_window_is_too_old():
    outcome = ModerationPolicy().can_delete(NOW - timedelta(hours=24, seconds=1), NOW)
    assert outcome.error is ErrorKind.too_old
    assert "more than 24 hours" in outcome.message


def test_25_hours_is_too_old():
    outcome = ModerationPolicy().can_delete(NOW - timedelta(hours=25), NOW)
    assert outcome.error is ErrorKind.too_old


def test_missing_created_at_is_a_precondition_failure():
    outcome = ModerationPolicy().can_delete(None, NOW)
    assert outcome.error is ErrorKind.precondition_failed
    assert outcome.message == "createdAt is required"


def test_custom_window():
    policy = ModerationPolicy(timedelta(hours=2))
    assert policy.can_delete(NOW - timedelta(hours=2), NOW).ok
    assert policy.can_delete(NOW - timedelta(hours=3), NOW).error is ErrorKind.too_old
