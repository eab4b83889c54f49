"""Logging setup driven by the yaml configuration."""

from __future__ import annotations

import logging
import sys

from mctree_src.util.config import get_key, is_verbose

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: int | str | None = None) -> int:
    """
    Turn a level name or number into a logging level.

    With no explicit level, verbose mode maps to DEBUG and otherwise
    ``logging.level`` from the config is used (INFO when unset).
    """
    if level is None:
        level = logging.DEBUG if is_verbose() else get_key("logging.level", "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def setup_logging(level: int | str | None = None, log_file: str | None = None) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level (name or number). Defaults come from the config.
        log_file: Optional log file path.
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=resolve_level(level),
        format=get_key("logging.format", DEFAULT_FORMAT),
        handlers=handlers,
        force=True,
    )
