"""
Route definitions for book comments.

Endpoints:
- GET    /api/books/{book_id}/comments              : list comments, newest first
- POST   /api/books/{book_id}/comments              : add a comment as the caller
- DELETE /api/books/{book_id}/comments/{comment_id} : delete (administrators only)
- GET    /api/users/{author}/comments               : every comment of one author
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ..auth import CurrentUser, get_current_user, require_admin
from ..deps import get_comment_service, page_request, unwrap
from ..models import Comment, CreateCommentRequest, PageRequest
from .schemas import PaginatedComments
from .service import CommentService

router = APIRouter(prefix="/api", tags=["comments"])


@router.get("/books/{book_id}/comments", response_model=PaginatedComments)
def list_comments(
    book_id: int,
    author: Optional[str] = Query(default=None, description="Filter on part of the author e-mail"),
    since: Optional[datetime] = Query(default=None, description="Only comments created at or after"),
    request: PageRequest = Depends(page_request),
    service: CommentService = Depends(get_comment_service),
    user: CurrentUser = Depends(get_current_user),
) -> PaginatedComments:
    result = unwrap(service.list_comments(book_id, author, since, request))
    return PaginatedComments.from_page(book_id, result)


@router.post("/books/{book_id}/comments", status_code=status.HTTP_201_CREATED)
def add_comment(
    book_id: int,
    req: CreateCommentRequest,
    service: CommentService = Depends(get_comment_service),
    user: CurrentUser = Depends(get_current_user),
):
    unwrap(service.add_comment(book_id, user.email, req.text))
    return {"book_id": book_id, "author": user.email, "text": (req.text or "").strip()}


@router.delete("/books/{book_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    book_id: int,
    comment_id: int,
    service: CommentService = Depends(get_comment_service),
    admin: CurrentUser = Depends(require_admin),
) -> Response:
    unwrap(service.delete_comment(book_id, comment_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/users/{author}/comments", response_model=List[Comment])
def user_comments(
    author: str,
    service: CommentService = Depends(get_comment_service),
    user: CurrentUser = Depends(get_current_user),
) -> List[Comment]:
    return service.comments_by_author(author)
