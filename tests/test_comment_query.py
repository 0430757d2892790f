from datetime import datetime, timedelta, timezone

from bookclub.comments.query import filter_comments
from bookclub.models import Comment, PageRequest

T0 = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


def _comment(cid, book_id=1, author="reader@example.com", minutes=0):
    return Comment(
        id=cid,
        book_id=book_id,
        author=author,
        text=f"comment {cid}",
        created_at=T0 + timedelta(minutes=minutes),
    )


def _comments():
    return [
        _comment(1, minutes=0),
        _comment(2, author="alice@example.com", minutes=30),
        _comment(3, book_id=2, minutes=10),
        _comment(4, author="Alice.B@example.com", minutes=5),
        _comment(5, minutes=60),
    ]


def test_only_requested_book_newest_first():
    result = filter_comments(_comments(), 1, None, None, PageRequest())
    assert [c.id for c in result.items] == [5, 2, 4, 1]
    assert result.total == 4


def test_descending_order_invariant():
    result = filter_comments(_comments(), 1, None, None, PageRequest())
    for earlier, later in zip(result.items, result.items[1:]):
        assert earlier.created_at >= later.created_at


def test_author_substring_ignores_case():
    result = filter_comments(_comments(), 1, "ALICE", None, PageRequest())
    assert [c.id for c in result.items] == [2, 4]


def test_blank_author_filter_is_ignored():
    assert filter_comments(_comments(), 1, "  ", None, PageRequest()).total == 4


def test_since_is_inclusive():
    since = T0 + timedelta(minutes=30)
    result = filter_comments(_comments(), 1, None, since, PageRequest())
    assert [c.id for c in result.items] == [5, 2]


def test_pagination_reports_total_before_slicing():
    result = filter_comments(_comments(), 1, None, None, PageRequest(page=1, size=3))
    assert [c.id for c in result.items] == [1]
    assert result.total == 4
    assert result.total_pages == 2


def test_sort_fields_do_not_change_order():
    request = PageRequest(sort_by="author", sort_desc=False)
    result = filter_comments(_comments(), 1, None, None, request)
    assert [c.id for c in result.items] == [5, 2, 4, 1]


def test_same_timestamp_newest_id_first():
    comments = [_comment(1), _comment(2)]
    result = filter_comments(comments, 1, None, None, PageRequest())
    assert [c.id for c in result.items] == [2, 1]


def test_author_filter_keeps_whitespace():
    assert filter_comments(_comments(), 1, " alice", None, PageRequest()).total == 0


def test_naive_since_is_treated_as_utc():
    since = datetime(2024, 3, 1, 12, 30)
    result = filter_comments(_comments(), 1, None, since, PageRequest())
    assert [c.id for c in result.items] == [5, 2]
