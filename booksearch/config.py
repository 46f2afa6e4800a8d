import os

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_FORMAT = "json"
DEFAULT_LIMIT = 10


def load_settings() -> dict:
    """Read the BOOKSEARCH_* environment variables.

    Only ``BookSearchClient.from_env`` calls this; the search functions never
    look at the environment. A malformed limit or timeout raises ValueError
    here, not at import time.
    """
    timeout = os.environ.get("BOOKSEARCH_TIMEOUT")
    return {
        "base_url": os.environ.get("BOOKSEARCH_BASE_URL", DEFAULT_BASE_URL),
        "format": os.environ.get("BOOKSEARCH_FORMAT", DEFAULT_FORMAT),
        "limit": int(os.environ.get("BOOKSEARCH_LIMIT", DEFAULT_LIMIT)),
        # Unset means no timeout; callers bound latency themselves.
        "timeout": float(timeout) if timeout else None,
    }
