"""Error model for the Sieve language server."""

from __future__ import annotations

from typing import Optional


class SieveError(Exception):
    """Base class for errors surfaced to users of the server or CLI."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        text = self.message
        if self.code:
            text = f"{text} ({self.code})"
        if self.hint:
            text = f"{text} Hint: {self.hint}"
        return text


class SieveConfigError(SieveError):
    """Raised when a configuration file or setting is invalid."""

    code = "SIEVE_CONFIG_ERROR"


__all__ = ["SieveError", "SieveConfigError"]
