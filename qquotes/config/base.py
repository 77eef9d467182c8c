"""Shared pydantic base model and TOML loader for configuration files."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

ConfigT = TypeVar("ConfigT", bound="BaseConfig")


class BaseConfig(BaseModel):
    """Base class for configuration models.

    Unknown keys are ignored so that newer config files keep working with
    older releases of the tool.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, str_strip_whitespace=True)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse a TOML document from ``path``.

    Raises :class:`FileNotFoundError` when the file is missing and
    :class:`tomllib.TOMLDecodeError` (a :class:`ValueError`) on syntax errors.
    """

    with path.open("rb") as fh:
        return tomllib.load(fh)


def load_config(model: type[ConfigT], path: Path) -> ConfigT:
    """Load ``path`` and validate it against ``model``."""

    data = read_toml(path)
    return model.model_validate(data)


__all__ = ["BaseConfig", "load_config", "read_toml"]
