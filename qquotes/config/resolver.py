"""Resolution of the effective configuration for one invocation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from qquotes.config.app import QuotesFileConfig
from qquotes.config.base import load_config
from qquotes.errors import ConfigError

DEFAULT_CONFIG_PATH = Path("~/.config/qquotes/config.toml")
DEFAULT_DATA_PATH = Path("~/qquotes_data.json")
DEFAULT_LOG_PATH = Path("~/qquotes.log")


@dataclass(frozen=True, slots=True)
class EffectiveConfig:
    """Final paths and flags after merging defaults with the user file."""

    data_path: Path
    log_path: Path
    verbosity: int = 0
    config_path: Path | None = None
    config_found: bool = False

    @property
    def verbose(self) -> bool:
        return self.verbosity > 0


def expand_path(path: Path | str) -> Path:
    """Expand ``~`` and anchor relative paths to the working directory."""

    return Path(path).expanduser().absolute()


class ConfigResolver:
    """Merge built-in defaults with the optional user override file."""

    def __init__(self, config_path: Path | None = None, *, verbosity: int = 0) -> None:
        self.config_path = expand_path(config_path or DEFAULT_CONFIG_PATH)
        self.verbosity = verbosity

    def resolve(self) -> EffectiveConfig:
        data_path = DEFAULT_DATA_PATH
        log_path = DEFAULT_LOG_PATH

        file_config = self._read_user_config()
        if file_config is not None:
            if file_config.path_data_file is not None:
                data_path = file_config.path_data_file
            if file_config.path_log_file is not None:
                log_path = file_config.path_log_file

        return EffectiveConfig(
            data_path=expand_path(data_path),
            log_path=expand_path(log_path),
            verbosity=self.verbosity,
            config_path=self.config_path,
            config_found=file_config is not None,
        )

    def _read_user_config(self) -> QuotesFileConfig | None:
        try:
            return load_config(QuotesFileConfig, self.config_path)
        except FileNotFoundError:
            return None
        except PydanticValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
                for err in exc.errors()
            )
            raise ConfigError(f"Invalid configuration in {self.config_path}: {details}") from exc
        except ValueError as exc:
            raise ConfigError(f"Malformed configuration file {self.config_path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Cannot read configuration file {self.config_path}: {exc}") from exc


def resolve_config(config_path: Path | None = None, *, verbosity: int = 0) -> EffectiveConfig:
    """Shortcut for ``ConfigResolver(config_path, verbosity=...).resolve()``."""

    return ConfigResolver(config_path, verbosity=verbosity).resolve()


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DATA_PATH",
    "DEFAULT_LOG_PATH",
    "ConfigResolver",
    "EffectiveConfig",
    "expand_path",
    "resolve_config",
]
