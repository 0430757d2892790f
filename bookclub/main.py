# bookclub/main.py
import logging
from datetime import timedelta
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .catalog import catalog_router
from .catalog.store import CatalogService
from .comments.moderation import ModerationPolicy
from .comments.router import router as comments_router
from .comments.service import CommentService
from .comments.validation import CommentValidator
from .config import Settings, get_settings
from .deps import OutcomeError
from .errors import ErrorKind
from .storage import (
    CatalogRepository,
    CommentRepository,
    InMemoryCatalogRepository,
    InMemoryCommentRepository,
)

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = [
    ("The Hobbit", "J. R. R. Tolkien", 1937),
    ("The Fellowship of the Ring", "J. R. R. Tolkien", 1954),
    ("The Silmarillion", "J. R. R. Tolkien", 1977),
    ("Kobzar", "Taras Shevchenko", 1840),
    ("Dune", "Frank Herbert", 1965),
]


def seed_catalog(repo: CatalogRepository) -> None:
    if repo.fetch_all_books():
        logger.info("Catalog already populated, skipping sample data")
        return
    for title, author, year in SAMPLE_BOOKS:
        repo.add_book(title, author, year)
    logger.info("Seeded catalog with %d sample books", len(SAMPLE_BOOKS))


def create_app(
    settings: Optional[Settings] = None,
    catalog_repo: Optional[CatalogRepository] = None,
    comment_repo: Optional[CommentRepository] = None,
) -> FastAPI:
    """Assemble the application and pick the storage implementation."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    catalog_repo = catalog_repo or InMemoryCatalogRepository()
    comment_repo = comment_repo or InMemoryCommentRepository(catalog_repo)

    if settings.seed_sample_data:
        seed_catalog(catalog_repo)
        logger.info("Administrator account expected as %s", settings.admin_email)

    app = FastAPI(
        title="Book catalogue & comments",
        description=(
            "Catalogue de livres avec recherche, tri et pagination, "
            "et commentaires modérés par les administrateurs."
        ),
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.catalog_service = CatalogService(catalog_repo)
    app.state.comment_service = CommentService(
        comment_repo,
        catalog_repo,
        validator=CommentValidator(settings.forbidden_words, settings.max_comment_length),
        policy=ModerationPolicy(timedelta(hours=settings.moderation_window_hours)),
    )

    @app.exception_handler(OutcomeError)
    async def outcome_error_handler(request: Request, exc: OutcomeError) -> JSONResponse:
        outcome = exc.outcome
        if outcome.error is ErrorKind.not_found:
            logger.info("%s %s: %s", request.method, request.url.path, outcome.message)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, outcome.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": outcome.error.value, "detail": outcome.message},
        )

    # 🔹 Route de base pour tester rapidement
    @app.get("/")
    def health_check():
        return {"status": "ok", "message": "Book catalogue live"}

    app.include_router(catalog_router)
    app.include_router(comments_router)
    return app


app = create_app()


if __name__ == "__main__":
    # python -m bookclub.main  (or: uvicorn bookclub.main:app --reload)
    uvicorn.run("bookclub.main:app", host="127.0.0.1", port=8000)
