"""Data models persisted by the quote store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Iterator

_KNOWN_FIELDS = ("id", "text", "created_at", "author")


@dataclass(frozen=True, slots=True)
class Quote:
    """A single saved quote."""

    id: int
    text: str
    created_at: datetime | None = None
    author: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def from_record(cls, record: Any) -> Quote:
        """Build a quote from one JSON record.

        Raises :class:`ValueError` when the record does not have the expected
        shape. Fields this version does not know about are kept in ``extra``.
        """

        if not isinstance(record, dict):
            raise ValueError(f"expected an object, got {type(record).__name__}")

        quote_id = record.get("id")
        if isinstance(quote_id, bool) or not isinstance(quote_id, int):
            raise ValueError(f"'id' must be an integer, got {quote_id!r}")
        if quote_id < 0:
            raise ValueError(f"'id' must be non-negative, got {quote_id}")

        text = record.get("text")
        if not isinstance(text, str):
            raise ValueError(f"'text' must be a string, got {text!r}")

        author = record.get("author")
        if author is not None and not isinstance(author, str):
            raise ValueError(f"'author' must be a string, got {author!r}")

        created_at = record.get("created_at")
        if created_at is not None:
            if not isinstance(created_at, str):
                raise ValueError(f"'created_at' must be a string, got {created_at!r}")
            created_at = datetime.fromisoformat(created_at)

        extra = {key: value for key, value in record.items() if key not in _KNOWN_FIELDS}
        return cls(id=quote_id, text=text, created_at=created_at, author=author, extra=extra)

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {"id": self.id, "text": self.text}
        if self.created_at is not None:
            record["created_at"] = self.created_at.isoformat()
        if self.author is not None:
            record["author"] = self.author
        record.update(self.extra)
        return record


@dataclass(frozen=True, slots=True)
class QuoteCollection:
    """Ordered, immutable set of quotes with unique ids.

    ``next_id`` is always strictly greater than every id present.
    """

    quotes: tuple[Quote, ...] = ()
    next_id: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for quote in self.quotes:
            if quote.id in seen:
                raise ValueError(f"duplicate quote id {quote.id}")
            seen.add(quote.id)
        floor = max(seen) + 1 if seen else 0
        if self.next_id < floor:
            object.__setattr__(self, "next_id", floor)

    @classmethod
    def from_quotes(cls, quotes: Iterable[Quote]) -> QuoteCollection:
        return cls(quotes=tuple(quotes))

    def __iter__(self) -> Iterator[Quote]:
        return iter(self.quotes)

    def __len__(self) -> int:
        return len(self.quotes)

    def __contains__(self, quote_id: object) -> bool:
        return any(quote.id == quote_id for quote in self.quotes)

    @property
    def ids(self) -> list[int]:
        return [quote.id for quote in self.quotes]

    def get(self, quote_id: int) -> Quote | None:
        for quote in self.quotes:
            if quote.id == quote_id:
                return quote
        return None

    def appended(self, quote: Quote) -> QuoteCollection:
        """Return a copy with ``quote`` added at the end."""

        return QuoteCollection(quotes=(*self.quotes, quote), next_id=max(self.next_id, quote.id + 1))

    def without(self, quote_id: int) -> QuoteCollection:
        """Return a copy without ``quote_id``; the counter is kept."""

        remaining = tuple(quote for quote in self.quotes if quote.id != quote_id)
        return QuoteCollection(quotes=remaining, next_id=self.next_id)

    def to_records(self) -> list[dict[str, Any]]:
        return [quote.to_record() for quote in self.quotes]


__all__ = ["Quote", "QuoteCollection"]
