"""
Route definitions for the catalogue API.

Endpoints under /api/catalog:
- GET  /books            : search books (title/author), sort and paginate
- GET  /books/{book_id}  : get one book
- POST /books            : add a book (administrators only)
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from ..auth import CurrentUser, get_current_user, require_admin
from ..deps import get_catalog_service, page_request, unwrap
from ..models import Book, CreateBookRequest, PageRequest, SortField
from .schemas import PaginatedBooks
from .store import CatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/catalog", tags=["catalog"])


@router.get("/books", response_model=PaginatedBooks)
def list_books(
    q: Optional[str] = Query(default=None, description="Text search (title/author)"),
    sort: Optional[SortField] = Query(default=None, description="Sort field; storage order when absent"),
    desc: bool = Query(default=False, description="Sort descending"),
    paging: PageRequest = Depends(page_request),
    service: CatalogService = Depends(get_catalog_service),
    user: CurrentUser = Depends(get_current_user),
) -> PaginatedBooks:
    """
    Returns a paginated list of books.

    Out-of-range paging values are not rejected: a negative page becomes
    the first page and a size outside (0, max] falls back to the default.
    """
    request = paging.model_copy(update={"sort_by": sort, "sort_desc": desc})
    result = service.search_books(q, request)
    return PaginatedBooks.from_page(result)


@router.get("/books/{book_id}", response_model=Book)
def get_book(
    book_id: int,
    service: CatalogService = Depends(get_catalog_service),
    user: CurrentUser = Depends(get_current_user),
) -> Book:
    return unwrap(service.find_book(book_id))


@router.post("/books", response_model=Book, status_code=status.HTTP_201_CREATED)
def add_book(
    req: CreateBookRequest,
    service: CatalogService = Depends(get_catalog_service),
    admin: CurrentUser = Depends(require_admin),
) -> Book:
    book = unwrap(service.add_book(req.title, req.author, req.year))
    logger.info("Book %s created by %s", book.id, admin.email)
    return book
