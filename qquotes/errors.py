"""Error kinds raised by the qquotes core."""

from __future__ import annotations


class QuotesError(Exception):
    """Base class for every failure surfaced to the user."""

    exit_code: int = 1
    kind: str = "error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(QuotesError):
    """Raised when the user configuration file cannot be read or parsed."""

    exit_code = 2
    kind = "config_error"


class CorruptStoreError(QuotesError):
    """Raised when the data file exists but does not hold a valid quote list."""

    exit_code = 3
    kind = "corrupt_store"


class StoreIOError(QuotesError):
    """Raised on filesystem failures while reading or writing the data file."""

    exit_code = 4
    kind = "io_error"


class ValidationError(QuotesError):
    """Raised when user input is rejected before any mutation happens."""

    exit_code = 5
    kind = "validation_error"


class NotFoundError(QuotesError):
    """Raised when a command targets a quote id that does not exist."""

    exit_code = 6
    kind = "not_found"

    def __init__(self, quote_id: int) -> None:
        super().__init__(f"No quote with id {quote_id}")
        self.quote_id = quote_id


__all__ = [
    "QuotesError",
    "ConfigError",
    "CorruptStoreError",
    "StoreIOError",
    "ValidationError",
    "NotFoundError",
]
