"""Loguru sinks for the terminal and the activity log file."""

from __future__ import annotations

import sys
from typing import Iterable

from loguru import logger

from qquotes.config import EffectiveConfig

TERMINAL_FORMAT = "[log] <level>{level}</level>: {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH-mm-ss} [{level}] {message}"


def terminal_level(verbosity: int) -> str:
    if verbosity <= 0:
        return "ERROR"
    if verbosity == 1:
        return "WARNING"
    return "TRACE"


def configure_logging(config: EffectiveConfig) -> list[int]:
    """Route log events to stderr and to ``config.log_path``.

    Returns the handler ids so the caller can remove them with
    :func:`reset_logging` once the invocation is over.
    """

    logger.remove()
    sink_ids = [
        logger.add(sys.stderr, level=terminal_level(config.verbosity), format=TERMINAL_FORMAT),
    ]
    try:
        sink_ids.append(
            logger.add(
                config.log_path,
                level="INFO",
                format=FILE_FORMAT,
                mode="a",
                encoding="utf-8",
            )
        )
    except OSError as exc:
        logger.warning("Failed to open log file {}: {}", config.log_path, exc)
    return sink_ids


def reset_logging(sink_ids: Iterable[int]) -> None:
    for sink_id in sink_ids:
        logger.remove(sink_id)


__all__ = ["configure_logging", "reset_logging", "terminal_level"]
