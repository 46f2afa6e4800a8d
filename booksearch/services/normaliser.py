"""Project loosely-typed records onto the canonical book shape."""

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from typing import Any

BOOK_FIELDS = ("title", "author", "isbn", "quantity", "price")


@dataclass(frozen=True)
class BookRecord:
    """A book as returned to callers. Any field may be missing (None)."""

    title: str | None = None
    author: str | None = None
    isbn: str | None = None
    quantity: int | float | None = None
    price: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _get(item: Any, name: str) -> Any:
    if isinstance(item, BookRecord):
        return getattr(item, name)
    if isinstance(item, Mapping):
        return item.get(name)
    return None


def normalise(records: Iterable[Any]) -> list[BookRecord]:
    """One BookRecord per input, in order. Extra fields are dropped."""
    return [BookRecord(**{name: _get(item, name) for name in BOOK_FIELDS}) for item in records]
