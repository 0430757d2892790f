"""Tests for comment field and content policy validation."""

import pytest

from bookclub.comments.validation import CommentValidator
from bookclub.errors import ErrorKind


@pytest.fixture
def validator():
    return CommentValidator()


def test_fields_ok(validator):
    assert validator.validate_comment_fields(1, "reader@example.com", "Nice book").ok


@pytest.mark.parametrize("book_id", [0, -5])
def test_fields_reject_non_positive_book_id(validator, book_id):
    outcome = validator.validate_comment_fields(book_id, "reader@example.com", "Nice")
    assert outcome.error is ErrorKind.field_validation
    assert outcome.message == "bookId must be greater than 0"


@pytest.mark.parametrize("author", [None, "", "   "])
def test_fields_reject_blank_author(validator, author):
    outcome = validator.validate_comment_fields(1, author, "Nice")
    assert outcome.error is ErrorKind.field_validation
    assert outcome.message == "author is required"


@pytest.mark.parametrize("text", [None, "", "\t \n"])
def test_fields_reject_blank_text(validator, text):
    outcome = validator.validate_comment_fields(1, "reader@example.com", text)
    assert outcome.error is ErrorKind.field_validation
    assert outcome.message == "text is required"


def test_fields_report_first_problem_only(validator):
    outcome = validator.validate_comment_fields(0, None, None)
    assert outcome.message == "bookId must be greater than 0"


@pytest.mark.parametrize("text", [None, "", "    "])
def test_text_empty(validator, text):
    outcome = validator.validate_comment_text(text)
    assert outcome.error is ErrorKind.content_policy
    assert "empty" in outcome.message


def test_text_at_max_length_passes(validator):
    assert validator.validate_comment_text("a" * 1000).ok


def test_text_length_measured_after_trimming(validator):
    assert validator.validate_comment_text("   " + "a" * 1000 + "   ").ok


@pytest.mark.parametrize("text", ["a" * 1001, "spam " * 300, "b" * 5000])
def test_text_too_long_regardless_of_content(validator, text):
    outcome = validator.validate_comment_text(text)
    assert outcome.error is ErrorKind.content_policy
    assert "maximum length of 1000" in outcome.message


@pytest.mark.parametrize(
    "text, word",
    [
        ("This is spam!", "spam"),
        ("Buy VIAGRA now", "viagra"),
        ("Best CaSiNo in town", "casino"),
        ("antispammer", "spam"),
    ],
)
def test_text_forbidden_word_any_case(validator, text, word):
    outcome = validator.validate_comment_text(text)
    assert outcome.error is ErrorKind.content_policy
    assert outcome.message == f"Comment contains forbidden word: {word}"


def test_text_reports_first_word_in_list_order(validator):
    outcome = validator.validate_comment_text("casino and spam")
    assert outcome.message.endswith("spam")


def test_custom_policy_is_injected():
    validator = CommentValidator(forbidden_words=["Spoiler"], max_length=10)
    assert validator.validate_comment_text("no spam").ok
    assert validator.validate_comment_text("a SPOILER").error is ErrorKind.content_policy
    assert "maximum length of 10" in validator.validate_comment_text("x" * 11).message
