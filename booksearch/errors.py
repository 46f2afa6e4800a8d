"""Error types raised by the book search pipeline."""


class BookSearchError(Exception):
    """Base class for every failure surfaced by booksearch."""


class TransportError(BookSearchError):
    """The endpoint could not be reached (DNS, refused connection, timeout)."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"Transport error for {url}: {message}")
        self.url = url


class RequestError(BookSearchError):
    """The endpoint answered with a non-2xx status."""

    def __init__(self, status: int, url: str | None = None) -> None:
        super().__init__(f"Request failed with status {status}")
        self.status = status
        self.url = url


class ParseError(BookSearchError):
    """The response body is not valid for its declared format."""

    def __init__(self, format: str, cause: Exception) -> None:
        super().__init__(f"{format.upper()} parsing error: {cause}")
        self.format = format
        self.cause = cause


class UnsupportedFormatError(BookSearchError):
    """No parser is registered for the requested format."""

    def __init__(self, format: object) -> None:
        super().__init__(f"Unsupported format: {format}")
        self.format = format
