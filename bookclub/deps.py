# bookclub/deps.py
"""Shared FastAPI dependencies: service lookup and outcome translation."""

from typing import Optional, TypeVar

from fastapi import Query, Request

from .errors import ErrorKind, Outcome
from .models import PageRequest

T = TypeVar("T")

# 404 for absent resources, every other business failure is the caller's fault.
STATUS_BY_KIND = {
    ErrorKind.field_validation: 400,
    ErrorKind.content_policy: 400,
    ErrorKind.precondition_failed: 400,
    ErrorKind.too_old: 400,
    ErrorKind.not_found: 404,
}


class OutcomeError(Exception):
    """Raised by :func:`unwrap` and rendered by the handler in ``main``."""

    def __init__(self, outcome: Outcome) -> None:
        super().__init__(outcome.message)
        self.outcome = outcome

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.outcome.error]


def unwrap(outcome: Outcome[T]) -> Optional[T]:
    if not outcome.ok:
        raise OutcomeError(outcome)
    return outcome.value


def get_catalog_service(request: Request):
    return request.app.state.catalog_service


def get_comment_service(request: Request):
    return request.app.state.comment_service


def page_request(
    request: Request,
    page: int = Query(default=0, description="Page index (0-based)"),
    size: Optional[int] = Query(default=None, description="Page size"),
) -> PageRequest:
    """Build a page request from raw query parameters, clamping bad values.

    Limits come from the settings the application was created with.
    """
    settings = request.app.state.settings
    return PageRequest.clamped(
        page,
        size if size is not None else settings.default_page_size,
        default_size=settings.default_page_size,
        max_size=settings.max_page_size,
    )
