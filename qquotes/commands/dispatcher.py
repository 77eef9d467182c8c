"""Execution of parsed CLI commands against the quote store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Union

from loguru import logger

from qquotes.config import EffectiveConfig
from qquotes.errors import QuotesError
from qquotes.store import Quote, QuoteStore

from .render import render_quotes


@dataclass(frozen=True, slots=True)
class SaveQuote:
    text: str
    author: str | None = None


@dataclass(frozen=True, slots=True)
class ListQuotes:
    long_format: bool = False


@dataclass(frozen=True, slots=True)
class RemoveQuote:
    quote_id: int


Command = Union[SaveQuote, ListQuotes, RemoveQuote]


@dataclass(slots=True)
class CommandOutcome:
    """Result of one dispatched command.

    ``error`` holds the failure kind when the command did not succeed, so
    callers can branch on it without catching exceptions.
    """

    lines: list[str] = field(default_factory=list)
    error: QuotesError | None = None
    quote: Quote | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        return 0 if self.error is None else self.error.exit_code


class CommandDispatcher:
    """Map each command onto load/mutate/save steps of a :class:`QuoteStore`."""

    def __init__(
        self,
        config: EffectiveConfig,
        *,
        store: QuoteStore | None = None,
        width: int | None = None,
    ) -> None:
        self.config = config
        self.store = store or QuoteStore(config.data_path)
        self.width = width
        self._handlers: dict[type, Callable[..., CommandOutcome]] = {
            SaveQuote: self._save,
            ListQuotes: self._list,
            RemoveQuote: self._remove,
        }

    def dispatch(self, command: Command) -> CommandOutcome:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported command: {command!r}")

        logger.trace("Executing {}", command)
        try:
            outcome = handler(command)
        except QuotesError as exc:
            logger.warning("{} failed: {}", type(command).__name__, exc.message)
            return CommandOutcome(lines=[exc.message], error=exc)
        logger.trace("{} completed", type(command).__name__)
        return outcome

    def _save(self, command: SaveQuote) -> CommandOutcome:
        collection = self.store.load()
        collection, quote = self.store.add(collection, command.text, author=command.author)
        self.store.save(collection)
        logger.info("Saved quote #{} ({} chars)", quote.id, len(quote.text))
        return CommandOutcome(lines=[f"Saved quote #{quote.id}."], quote=quote)

    def _list(self, command: ListQuotes) -> CommandOutcome:
        collection = self.store.load()
        quotes = self.store.list(collection)
        logger.trace("Listing {} quotes", len(quotes))
        return CommandOutcome(
            lines=render_quotes(quotes, long_format=command.long_format, width=self.width)
        )

    def _remove(self, command: RemoveQuote) -> CommandOutcome:
        collection = self.store.load()
        removed = collection.get(command.quote_id)
        collection = self.store.remove(collection, command.quote_id)
        self.store.save(collection)
        logger.info("Removed quote #{}", command.quote_id)
        return CommandOutcome(lines=[f"Removed quote #{command.quote_id}."], quote=removed)


__all__ = [
    "Command",
    "CommandDispatcher",
    "CommandOutcome",
    "ListQuotes",
    "RemoveQuote",
    "SaveQuote",
]
