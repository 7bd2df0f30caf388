"""Document store and request routing for the Sieve language server."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from lsprotocol.types import (
    CompletionItem,
    CompletionList,
    Diagnostic,
    Hover,
    MarkupContent,
    MarkupKind,
    Position,
    Range,
    RelatedFullDocumentDiagnosticReport,
    TextDocumentContentChangeEvent,
    TextDocumentItem,
    TextDocumentPositionParams,
)

from ..language.catalog import DEFAULT_CATALOG, SymbolCatalog
from ..language.diagnostics import DiagnosticAnalyzer
from ..language.queries import completions_at, hover_at, resolve_completion
from .state import DocumentState, utf16_length


class WorkspaceIndex:
    """Holds the current snapshot of every open Sieve document.

    Every query re-analyses the snapshot it is given.  A URI that is not
    open is a normal condition (for example a late request after
    ``didClose``) and yields an empty result rather than an error.
    """

    def __init__(self, catalog: SymbolCatalog = DEFAULT_CATALOG) -> None:
        self.logger = logging.getLogger("sieve_lsp.lsp.workspace")
        self.catalog = catalog
        self.analyzer = DiagnosticAnalyzer(catalog)
        self._open_documents: Dict[str, DocumentState] = {}

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------
    def did_open(self, item: TextDocumentItem) -> List[Diagnostic]:
        document = DocumentState(uri=item.uri, text=item.text, version=item.version)
        self._open_documents[item.uri] = document
        self.logger.debug("Opened %s (version %s)", item.uri, item.version)
        return self._analyze(document)

    def did_change(
        self,
        uri: str,
        version: int,
        changes: Sequence[TextDocumentContentChangeEvent],
    ) -> List[Diagnostic]:
        document = self._open_documents.get(uri)
        if document is None:
            self.logger.debug("Change for unknown document %s, starting from empty text", uri)
            document = DocumentState(uri=uri, text="", version=version)
            self._open_documents[uri] = document
        next_text = self._apply_content_changes(document, changes)
        document.update(next_text, version)
        return self._analyze(document)

    def did_close(self, uri: str) -> None:
        if self._open_documents.pop(uri, None) is not None:
            self.logger.debug("Closed %s", uri)

    def document(self, uri: str) -> Optional[DocumentState]:
        return self._open_documents.get(uri)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def diagnostics(self, uri: str) -> List[Diagnostic]:
        document = self.document(uri)
        if document is None:
            return []
        return self._analyze(document)

    def diagnostic_report(self, uri: str) -> RelatedFullDocumentDiagnosticReport:
        return RelatedFullDocumentDiagnosticReport(items=self.diagnostics(uri))

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------
    def completion(self, params: TextDocumentPositionParams) -> CompletionList:
        items = completions_at(params.position, self.catalog)
        return CompletionList(is_incomplete=False, items=items)

    def resolve_completion(self, item: CompletionItem) -> CompletionItem:
        return resolve_completion(item)

    # ------------------------------------------------------------------
    # Hover
    # ------------------------------------------------------------------
    def hover(self, params: TextDocumentPositionParams) -> Optional[Hover]:
        document = self.document(params.text_document.uri)
        if document is None:
            return None
        offset = document.offset_at(params.position)
        value = hover_at(document.text, offset, self.catalog)
        if value is None:
            return None
        return Hover(contents=MarkupContent(kind=MarkupKind.Markdown, value=value))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _analyze(self, document: DocumentState) -> List[Diagnostic]:
        """Analyse *document* and report columns in UTF-16 code units."""
        diagnostics = self.analyzer.analyze(document.text)
        if not diagnostics:
            return diagnostics
        lines = document.text.split("\n")
        for diagnostic in diagnostics:
            start = diagnostic.range.start
            end = diagnostic.range.end
            line = lines[start.line]
            diagnostic.range = Range(
                start=Position(line=start.line, character=utf16_length(line[:start.character])),
                end=Position(line=end.line, character=utf16_length(line[:end.character])),
            )
        return diagnostics

    def _apply_content_changes(
        self,
        document: DocumentState,
        changes: Sequence[TextDocumentContentChangeEvent],
    ) -> str:
        text = document.text
        for change in changes:
            change_range = getattr(change, "range", None)
            if change_range is None:
                text = change.text
                document.update(text, document.version)
                continue
            start = document.offset_at(change_range.start)
            end = document.offset_at(change_range.end)
            text = text[:start] + change.text + text[end:]
            document.update(text, document.version)
        return text


__all__ = ["WorkspaceIndex"]
