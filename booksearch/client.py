"""Entry points for searching books by author.

``BookSearchClient`` and ``fetch_books_by_author`` are two shapes over the
same pipeline: resolve the parser, fetch, parse, normalise.
"""

import logging

from httpx import AsyncClient

from booksearch import config
from booksearch.formats import BookFormat
from booksearch.schemas import SearchConfig
from booksearch.services.fetcher import fetch_raw
from booksearch.services.normaliser import BookRecord, normalise
from booksearch.services.parsers import resolve_parser

logger = logging.getLogger(__name__)


async def search_books(
    base_url: str,
    author_name: str,
    limit: int = 10,
    format: BookFormat | str = BookFormat.JSON,
    *,
    http: AsyncClient | None = None,
    timeout: float | None = None,
) -> list[BookRecord]:
    """Run the whole pipeline for one author.

    The format is checked before the request is sent, so an unsupported
    format never costs a round trip. Failures are logged and re-raised as-is.
    """
    try:
        parser = resolve_parser(format)
        raw = await fetch_raw(base_url, author_name, limit, format, http=http, timeout=timeout)
        books = normalise(parser(raw))
    except Exception as e:
        logger.error("Error fetching books by %r: %s", author_name, e)
        raise

    logger.debug("Fetched %d books by %r", len(books), author_name)
    return books


class BookSearchClient:
    """Client bound to one endpoint and response format."""

    def __init__(
        self,
        base_url: str,
        format: BookFormat | str = BookFormat.JSON,
        http: AsyncClient | None = None,
        timeout: float | None = None,
        limit: int = 10,
    ) -> None:
        self.base_url = base_url
        self.format = format
        self.limit = limit
        self.http = http
        self.timeout = timeout

    @classmethod
    def from_env(cls, http: AsyncClient | None = None) -> "BookSearchClient":
        """Build a client from the BOOKSEARCH_* environment settings."""
        settings = config.load_settings()
        return cls(
            settings["base_url"],
            settings["format"],
            http=http,
            timeout=settings["timeout"],
            limit=settings["limit"],
        )

    async def get_books_by_author(self, author_name: str, limit: int | None = None) -> list[BookRecord]:
        """Search by author; ``limit`` defaults to the client's own (10 unless set)."""
        return await search_books(
            self.base_url,
            author_name,
            self.limit if limit is None else limit,
            self.format,
            http=self.http,
            timeout=self.timeout,
        )


async def fetch_books_by_author(
    search: SearchConfig | None = None,
    *,
    http: AsyncClient | None = None,
    **params,
) -> list[BookRecord]:
    """Functional form: pass a SearchConfig or its fields as keywords."""
    if search is None:
        search = SearchConfig(**params)
    return await search_books(
        search.base_url,
        search.author_name,
        search.limit,
        search.format,
        http=http,
        timeout=search.timeout,
    )
