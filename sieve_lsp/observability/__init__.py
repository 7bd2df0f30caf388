"""Logging helpers shared by the server and CLI."""

from __future__ import annotations

from .logging import configure_logging, get_logger, set_level

__all__ = ["configure_logging", "get_logger", "set_level"]
