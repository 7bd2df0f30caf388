"""pygls based Language Server entrypoint."""

from __future__ import annotations

import os
from typing import Optional

from lsprotocol.types import TextDocumentSyncKind
from pygls.server import LanguageServer

from sieve_lsp import __version__

from ..config import ServerConfig
from ..observability import get_logger
from .handlers import register_all
from .workspace import WorkspaceIndex

SERVER_NAME = "sieve-lsp"

logger = get_logger("sieve_lsp.lsp.server")


class SieveLanguageServer(LanguageServer):
    """Concrete LanguageServer with Sieve-specific state."""

    def __init__(self, config: Optional[ServerConfig] = None) -> None:
        super().__init__(
            name=SERVER_NAME,
            version=__version__,
            text_document_sync_kind=TextDocumentSyncKind.Incremental,
        )
        self.config = config or ServerConfig()
        self.workspace_index = WorkspaceIndex()
        register_all(self)


def create_server(config: Optional[ServerConfig] = None) -> SieveLanguageServer:
    return SieveLanguageServer(config)


def run_server(server: SieveLanguageServer) -> None:
    config = server.config
    logger.info("Starting Sieve LSP over %s (pid=%s)", config.transport, os.getpid())
    if config.transport == "tcp":
        server.start_tcp(config.host, config.port)
    else:
        server.start_io()


def main() -> None:
    run_server(create_server())


if __name__ == "__main__":  # pragma: no cover
    main()
