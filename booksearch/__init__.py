from booksearch.client import BookSearchClient, fetch_books_by_author, search_books
from booksearch.errors import (
    BookSearchError,
    ParseError,
    RequestError,
    TransportError,
    UnsupportedFormatError,
)
from booksearch.formats import BookFormat
from booksearch.schemas import SearchConfig
from booksearch.services.normaliser import BookRecord

__all__ = [
    "BookFormat",
    "BookRecord",
    "BookSearchClient",
    "BookSearchError",
    "ParseError",
    "RequestError",
    "SearchConfig",
    "TransportError",
    "UnsupportedFormatError",
    "fetch_books_by_author",
    "search_books",
]
