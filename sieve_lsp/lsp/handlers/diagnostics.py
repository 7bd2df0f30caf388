"""Diagnostics and document lifecycle handlers."""

from __future__ import annotations

from lsprotocol.types import (
    DiagnosticOptions,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentDiagnosticParams,
)

from ...observability import get_logger
from ..workspace import WorkspaceIndex
from .capabilities import client_supports

logger = get_logger("sieve_lsp.lsp.handlers.diagnostics")


def register(server) -> None:
    workspace: WorkspaceIndex = server.workspace_index
    config = server.config

    def _should_publish(ls) -> bool:
        # Pull-capable clients fetch diagnostics through textDocument/diagnostic.
        return config.publish_diagnostics and not client_supports(ls, "text_document.diagnostic")

    @server.feature("textDocument/didOpen")
    async def _did_open(ls, params: DidOpenTextDocumentParams) -> None:
        diagnostics = workspace.did_open(params.text_document)
        if _should_publish(ls):
            ls.publish_diagnostics(params.text_document.uri, diagnostics)

    @server.feature("textDocument/didChange")
    async def _did_change(ls, params: DidChangeTextDocumentParams) -> None:
        if not params.content_changes:
            return
        diagnostics = workspace.did_change(
            params.text_document.uri,
            params.text_document.version or 0,
            params.content_changes,
        )
        if _should_publish(ls):
            ls.publish_diagnostics(params.text_document.uri, diagnostics)

    @server.feature("textDocument/didClose")
    async def _did_close(ls, params: DidCloseTextDocumentParams) -> None:
        workspace.did_close(params.text_document.uri)
        if _should_publish(ls):
            ls.publish_diagnostics(params.text_document.uri, [])

    @server.feature(
        "textDocument/diagnostic",
        DiagnosticOptions(
            identifier="sieve-lsp",
            inter_file_dependencies=False,
            workspace_diagnostics=False,
        ),
    )
    async def _pull_diagnostics(ls, params: DocumentDiagnosticParams):
        report = workspace.diagnostic_report(params.text_document.uri)
        logger.debug("Reporting %d diagnostic(s) for %s", len(report.items), params.text_document.uri)
        return report
