from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from lsprotocol.types import TextDocumentItem

from sieve_lsp.lsp.workspace import WorkspaceIndex

DATA_DIR = Path(__file__).parent / "data"


def _make_uri(path: Path) -> str:
    return path.resolve().as_uri()


@pytest.fixture()
def workspace() -> WorkspaceIndex:
    return WorkspaceIndex()


@pytest.fixture()
def open_document(workspace: WorkspaceIndex) -> Callable[..., TextDocumentItem]:
    def _open(filename: str, *, version: int = 1) -> TextDocumentItem:
        path = DATA_DIR / filename
        item = TextDocumentItem(
            uri=_make_uri(path),
            language_id="sieve",
            version=version,
            text=path.read_text(encoding="utf-8"),
        )
        workspace.did_open(item)
        return item

    return _open


@pytest.fixture()
def open_text(workspace: WorkspaceIndex) -> Callable[..., TextDocumentItem]:
    def _open(text: str, *, uri: str = "file:///tmp/inline.sieve") -> TextDocumentItem:
        item = TextDocumentItem(uri=uri, language_id="sieve", version=1, text=text)
        workspace.did_open(item)
        return item

    return _open
