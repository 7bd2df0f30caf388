"""Centralised logging helpers for the Sieve language server."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, Optional, Union

ROOT_LOGGER_NAME = "sieve_lsp"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS: Dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""

    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def parse_level(level: Union[str, int, None]) -> int:
    if isinstance(level, int):
        return level
    return _LEVELS.get((level or "info").strip().lower(), logging.INFO)


def set_level(level: Union[str, int, None]) -> None:
    get_logger().setLevel(parse_level(level))


def configure_logging(
    level: Union[str, int, None] = "info",
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Attach a single handler to the package logger.

    Output goes to *log_file* when given, otherwise to stderr.  Stdout is
    left alone because the stdio transport writes protocol frames there.
    """

    logger = get_logger()
    logger.setLevel(parse_level(level))
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    # Prevent propagation to root logger to avoid duplicate messages
    logger.propagate = False
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "parse_level", "set_level", "configure_logging"]
