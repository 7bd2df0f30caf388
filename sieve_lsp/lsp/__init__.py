"""Language Server Protocol implementation for Sieve."""

from .server import SieveLanguageServer, create_server

__all__ = [
    "SieveLanguageServer",
    "create_server",
]
