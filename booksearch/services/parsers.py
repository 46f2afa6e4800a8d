"""Turn raw response bodies into loosely-typed book records."""

import json
import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import Any, Callable

from booksearch.errors import ParseError, UnsupportedFormatError
from booksearch.formats import BookFormat

logger = logging.getLogger(__name__)

RawBookNode = dict[str, Any]
ParseFn = Callable[[str], list[RawBookNode]]


def parse_json(text: str) -> list[RawBookNode]:
    """Decode a JSON array of book objects. Values are left as sent."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(BookFormat.JSON.value, e) from e

    if not isinstance(data, list):
        err = ValueError(f"expected a JSON array, got {type(data).__name__}")
        raise ParseError(BookFormat.JSON.value, err)
    for item in data:
        if not isinstance(item, dict):
            err = ValueError(f"expected book objects, got {type(item).__name__}")
            raise ParseError(BookFormat.JSON.value, err)
    logger.debug("Parsed %d records from JSON", len(data))
    return data


_DECIMAL = r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_WHOLE_NUMBER = re.compile(rf"\s*{_DECIMAL}\s*", re.ASCII)
_LEADING_NUMBER = re.compile(rf"\s*({_DECIMAL})", re.ASCII)


def _to_int(raw: str | None) -> int | float:
    """Whole text must be a decimal number; it is truncated toward zero.

    Blank text counts as 0. Missing or non-numeric text is NaN.
    """
    if raw is None:
        return math.nan
    if not raw.strip():
        return 0
    if not _WHOLE_NUMBER.fullmatch(raw):
        return math.nan
    value = float(raw)
    return int(value) if math.isfinite(value) else math.nan


def _to_float(raw: str | None) -> float:
    """Leading decimal prefix of the text, so "9.99 USD" is 9.99."""
    if raw is None:
        return math.nan
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return math.nan
    return float(match.group(1))


def _child_text(node: ET.Element, tag: str) -> str | None:
    """Text content of the first descendant named ``tag``."""
    child = next(node.iter(tag), None)
    if child is None:
        return None
    return "".join(child.itertext())


def parse_xml(text: str) -> list[RawBookNode]:
    """Collect every <book> element, at any depth, in document order.

    quantity and price are coerced here; text that is missing or not a
    number becomes NaN rather than an error.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise ParseError(BookFormat.XML.value, e) from e

    books = []
    for node in root.iter("book"):
        books.append(
            {
                "title": _child_text(node, "title"),
                "author": _child_text(node, "author"),
                "isbn": _child_text(node, "isbn"),
                "quantity": _to_int(_child_text(node, "quantity")),
                "price": _to_float(_child_text(node, "price")),
            }
        )
    logger.debug("Parsed %d books from XML", len(books))
    return books


# CSV is reserved: declared so it is a known format, but nothing is bound.
PARSERS: dict[BookFormat, ParseFn | None] = {
    BookFormat.JSON: parse_json,
    BookFormat.XML: parse_xml,
    BookFormat.CSV: None,
}


def supported_formats() -> list[str]:
    return sorted(fmt.value for fmt, fn in PARSERS.items() if fn is not None)


def resolve_parser(format: BookFormat | str) -> ParseFn:
    fmt = BookFormat.coerce(format)
    parser = PARSERS.get(fmt)
    if parser is None:
        raise UnsupportedFormatError(fmt.value)
    return parser
