"""Outcome type returned by the catalogue and comment services.

Business rule failures are values, not exceptions: every service call
returns an :class:`Outcome` that either carries a result or names one of
the :class:`ErrorKind` members along with a human readable message. The
HTTP layer branches on ``outcome.error`` to pick a status code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    field_validation = "field_validation"
    content_policy = "content_policy"
    precondition_failed = "precondition_failed"
    too_old = "too_old"
    not_found = "not_found"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of a service call."""

    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str) -> "Outcome[T]":
        return cls(error=error, message=message)
