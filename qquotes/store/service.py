"""JSON-backed quote store with atomic whole-file replace."""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from loguru import logger

from qquotes.errors import CorruptStoreError, NotFoundError, StoreIOError, ValidationError

from .models import Quote, QuoteCollection


class QuoteStore:
    """Load, mutate and persist the quote collection stored at ``data_path``.

    ``add`` and ``remove`` never touch the disk; callers persist the returned
    collection with :meth:`save` once the in-memory change has succeeded.
    """

    def __init__(self, data_path: Path) -> None:
        self.data_path = data_path

    def load(self) -> QuoteCollection:
        """Read the data file; a missing file yields an empty collection."""
        try:
            raw = self.data_path.read_bytes()
        except FileNotFoundError:
            logger.debug("Data file {} does not exist yet", self.data_path)
            return QuoteCollection()
        except OSError as exc:
            raise StoreIOError(f"Cannot read data file {self.data_path}: {exc}") from exc

        try:
            document = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
            raise CorruptStoreError(f"Data file {self.data_path} is not valid JSON: {exc}") from exc

        if not isinstance(document, list):
            raise CorruptStoreError(
                f"Data file {self.data_path} must contain a JSON array, got {type(document).__name__}"
            )

        quotes: list[Quote] = []
        for index, record in enumerate(document):
            try:
                quotes.append(Quote.from_record(record))
            except ValueError as exc:
                raise CorruptStoreError(
                    f"Invalid record #{index} in data file {self.data_path}: {exc}"
                ) from exc

        try:
            collection = QuoteCollection.from_quotes(quotes)
        except ValueError as exc:
            raise CorruptStoreError(f"Data file {self.data_path} is inconsistent: {exc}") from exc

        logger.trace("Loaded {} quotes from {}", len(collection), self.data_path)
        return collection

    def save(self, collection: QuoteCollection) -> None:
        """Atomically replace the data file with ``collection``."""
        payload = json.dumps(collection.to_records(), ensure_ascii=False, indent=2) + "\n"
        directory = self.data_path.parent

        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.data_path.name}.", suffix=".tmp", dir=directory
            )
        except OSError as exc:
            raise StoreIOError(f"Cannot write data file {self.data_path}: {exc}") from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            if self.data_path.exists():
                shutil.copymode(self.data_path, tmp_path)
            os.replace(tmp_path, self.data_path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise StoreIOError(f"Cannot write data file {self.data_path}: {exc}") from exc
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.trace("Saved {} quotes to {}", len(collection), self.data_path)

    def add(
        self,
        collection: QuoteCollection,
        text: str,
        *,
        author: str | None = None,
        now: datetime | None = None,
    ) -> tuple[QuoteCollection, Quote]:
        """Append a new quote and return the updated collection with it."""
        cleaned = text.strip()
        if not cleaned:
            raise ValidationError("Quote text must not be empty")
        _require_utf8(cleaned, "Quote text")
        if author is not None:
            author = author.strip() or None
            if author is not None:
                _require_utf8(author, "Author")

        quote = Quote(
            id=collection.next_id,
            text=cleaned,
            created_at=now or datetime.now(timezone.utc),
            author=author,
        )
        return collection.appended(quote), quote

    def remove(self, collection: QuoteCollection, quote_id: int) -> QuoteCollection:
        """Drop ``quote_id`` from the collection; unknown ids are an error."""
        if quote_id not in collection:
            raise NotFoundError(quote_id)
        return collection.without(quote_id)

    def list(self, collection: QuoteCollection) -> tuple[Quote, ...]:
        return collection.quotes


def _require_utf8(value: str, label: str) -> None:
    # argv that is not valid UTF-8 decodes to lone surrogates
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValidationError(f"{label} is not valid UTF-8") from exc


__all__ = ["QuoteStore"]
