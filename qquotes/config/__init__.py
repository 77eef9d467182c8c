"""Configuration namespace for qquotes."""

from __future__ import annotations

from .app import QuotesFileConfig
from .base import BaseConfig, load_config, read_toml
from .resolver import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_DATA_PATH,
    DEFAULT_LOG_PATH,
    ConfigResolver,
    EffectiveConfig,
    expand_path,
    resolve_config,
)

__all__ = [
    "BaseConfig",
    "QuotesFileConfig",
    "load_config",
    "read_toml",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DATA_PATH",
    "DEFAULT_LOG_PATH",
    "ConfigResolver",
    "EffectiveConfig",
    "expand_path",
    "resolve_config",
]
