"""HTTP access to the by-author search endpoint."""

import logging

import httpx

from booksearch.errors import RequestError, TransportError
from booksearch.formats import BookFormat

logger = logging.getLogger(__name__)


def build_params(author_name: str, limit: int, format: BookFormat | str) -> dict:
    """Query parameters for a by-author search; httpx handles the encoding."""
    return {"q": author_name, "limit": limit, "format": BookFormat.coerce(format).value}


async def _get_text(http: httpx.AsyncClient, url: str, params: dict) -> str:
    try:
        resp = await http.get(url, params=params, follow_redirects=True)
    except httpx.RequestError as e:
        raise TransportError(url, str(e) or type(e).__name__) from e

    if not resp.is_success:
        logger.warning("Book search request failed: %s -> %d", url, resp.status_code)
        raise RequestError(resp.status_code, url)

    return resp.text


async def fetch_raw(
    base_url: str,
    author_name: str,
    limit: int = 10,
    format: BookFormat | str = BookFormat.JSON,
    *,
    http: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> str:
    """GET ``{base_url}/by-author`` and return the response body as text.

    A caller-owned ``http`` client is reused and left open; otherwise a
    client is opened for this call only. No retries are attempted.
    """
    url = f"{base_url.rstrip('/')}/by-author"
    params = build_params(author_name, limit, format)
    logger.debug("GET %s params=%s", url, params)

    if http is not None:
        return await _get_text(http, url, params)
    async with httpx.AsyncClient(timeout=timeout) as client:
        return await _get_text(client, url, params)
