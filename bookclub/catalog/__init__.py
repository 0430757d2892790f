"""
Catalog package for the book catalogue API.

This package contains the search engine over the book collection
(``store``), the response schemas and the route definitions mounted
under ``/api/catalog``. Searching matches the query against titles and
authors; results can be sorted by title, author or year and are always
paginated.
"""

from .router import router as catalog_router  # noqa: F401
