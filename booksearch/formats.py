from enum import Enum

from booksearch.errors import UnsupportedFormatError


class BookFormat(str, Enum):
    """Wire encodings the search endpoint can answer with."""

    JSON = "json"
    XML = "xml"
    CSV = "csv"

    @classmethod
    def coerce(cls, value: "BookFormat | str") -> "BookFormat":
        """Exact, case-sensitive lookup; anything else is unsupported."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnsupportedFormatError(value)
