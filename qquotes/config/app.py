"""User configuration file model."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator

from qquotes.config.base import BaseConfig


class QuotesFileConfig(BaseConfig):
    """Keys recognised in ``~/.config/qquotes/config.toml``."""

    path_log_file: Path | None = Field(
        None,
        description="Log file path; overrides the default ~/qquotes.log",
    )
    path_data_file: Path | None = Field(
        None,
        description="Quote data file path; overrides the default ~/qquotes_data.json",
    )

    @field_validator("path_log_file", "path_data_file", mode="before")
    @classmethod
    def _reject_blank(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            raise ValueError("path must not be empty")
        return value


__all__ = ["QuotesFileConfig"]
