"""Command dispatch for the qquotes CLI."""

from .dispatcher import (
    Command,
    CommandDispatcher,
    CommandOutcome,
    ListQuotes,
    RemoveQuote,
    SaveQuote,
)
from .render import EMPTY_MESSAGE, render_quotes

__all__ = [
    "Command",
    "CommandDispatcher",
    "CommandOutcome",
    "ListQuotes",
    "RemoveQuote",
    "SaveQuote",
    "EMPTY_MESSAGE",
    "render_quotes",
]
