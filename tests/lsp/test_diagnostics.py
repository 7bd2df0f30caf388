from __future__ import annotations

from lsprotocol.types import (
    Position,
    Range,
    TextDocumentContentChangeEvent_Type1,
    TextDocumentContentChangeEvent_Type2,
)

from sieve_lsp.lsp.workspace import WorkspaceIndex


def test_valid_script_produces_no_diagnostics(workspace: WorkspaceIndex, open_document) -> None:
    document = open_document("filters.sieve")
    assert workspace.diagnostics(document.uri) == []


def test_broken_script_reports_both_problems(workspace: WorkspaceIndex, open_document) -> None:
    document = open_document("broken.sieve")
    diagnostics = workspace.diagnostics(document.uri)
    assert [(d.range.start.line, d.message) for d in diagnostics] == [
        (2, "Missing semicolon after action statement"),
        (4, "Invalid Sieve statement syntax"),
    ]


def test_did_open_returns_diagnostics(workspace: WorkspaceIndex) -> None:
    from lsprotocol.types import TextDocumentItem

    item = TextDocumentItem(uri="file:///a.sieve", language_id="sieve", version=1, text="keep\n")
    diagnostics = workspace.did_open(item)
    assert len(diagnostics) == 1


def test_pull_report_is_full(workspace: WorkspaceIndex, open_document) -> None:
    document = open_document("broken.sieve")
    report = workspace.diagnostic_report(document.uri)
    assert report.kind == "full"
    assert len(report.items) == 2


def test_unknown_document_reports_nothing(workspace: WorkspaceIndex) -> None:
    assert workspace.diagnostics("file:///nowhere.sieve") == []
    assert workspace.diagnostic_report("file:///nowhere.sieve").items == []


def test_incremental_change_is_reanalysed(workspace: WorkspaceIndex, open_text) -> None:
    document = open_text("keep;\n")
    change = TextDocumentContentChangeEvent_Type1(
        range=Range(start=Position(line=0, character=4), end=Position(line=0, character=5)),
        text="",
    )
    diagnostics = workspace.did_change(document.uri, 2, [change])
    assert workspace.document(document.uri).text == "keep\n"
    assert [d.message for d in diagnostics] == ["Missing semicolon after action statement"]


def test_sequential_changes_apply_in_order(workspace: WorkspaceIndex, open_text) -> None:
    document = open_text("keep;\n")
    changes = [
        TextDocumentContentChangeEvent_Type1(
            range=Range(start=Position(line=1, character=0), end=Position(line=1, character=0)),
            text="stop;\n",
        ),
        TextDocumentContentChangeEvent_Type1(
            range=Range(start=Position(line=1, character=4), end=Position(line=1, character=5)),
            text="",
        ),
    ]
    workspace.did_change(document.uri, 2, changes)
    assert workspace.document(document.uri).text == "keep;\nstop\n"
    assert workspace.document(document.uri).version == 2


def test_full_change_replaces_text(workspace: WorkspaceIndex, open_text) -> None:
    document = open_text("keep;\n")
    diagnostics = workspace.did_change(document.uri, 3, [TextDocumentContentChangeEvent_Type2(text="asdf;")])
    assert workspace.document(document.uri).text == "asdf;"
    assert [d.message for d in diagnostics] == ["Invalid Sieve statement syntax"]


def test_close_forgets_document(workspace: WorkspaceIndex, open_text) -> None:
    document = open_text("keep\n")
    workspace.did_close(document.uri)
    assert workspace.document(document.uri) is None
    assert workspace.diagnostics(document.uri) == []


def test_incremental_insert_after_astral_characters(workspace: WorkspaceIndex, open_text) -> None:
    document = open_text("# \U0001F600\U0001F600 note\nkeep;\n")
    change = TextDocumentContentChangeEvent_Type1(
        range=Range(start=Position(line=0, character=7), end=Position(line=0, character=7)),
        text="X",
    )
    workspace.did_change(document.uri, 2, [change])
    assert workspace.document(document.uri).text == "# \U0001F600\U0001F600 Xnote\nkeep;\n"


def test_incremental_delete_spanning_astral_character(workspace: WorkspaceIndex, open_text) -> None:
    document = open_text('keep "\U0001F600";\n')
    change = TextDocumentContentChangeEvent_Type1(
        range=Range(start=Position(line=0, character=6), end=Position(line=0, character=8)),
        text="ok",
    )
    workspace.did_change(document.uri, 2, [change])
    assert workspace.document(document.uri).text == 'keep "ok";\n'


def test_diagnostic_columns_are_utf16(workspace: WorkspaceIndex, open_text) -> None:
    document = open_text('fileinto "\U0001F600"\n')
    [diagnostic] = workspace.diagnostics(document.uri)
    assert diagnostic.message == "Missing semicolon after action statement"
    # 12 Python characters, 13 UTF-16 units.
    assert diagnostic.range == Range(
        start=Position(line=0, character=12),
        end=Position(line=0, character=13),
    )


def test_invalid_statement_range_is_utf16(workspace: WorkspaceIndex, open_text) -> None:
    document = open_text("\U0001F600 oops;")
    [diagnostic] = workspace.diagnostics(document.uri)
    assert diagnostic.range.end == Position(line=0, character=8)
