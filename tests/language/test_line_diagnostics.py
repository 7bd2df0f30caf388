from __future__ import annotations

from lsprotocol.types import DiagnosticSeverity

from sieve_lsp.language.catalog import SymbolCatalog, SymbolClass
from sieve_lsp.language.diagnostics import (
    DIAGNOSTIC_SOURCE,
    INVALID_STATEMENT_MESSAGE,
    MISSING_SEMICOLON_MESSAGE,
    DiagnosticAnalyzer,
    MissingSemicolonRule,
    analyze,
)


def _span(diagnostic):
    start, end = diagnostic.range.start, diagnostic.range.end
    return (start.line, start.character, end.line, end.character)


def test_terminated_action_is_clean() -> None:
    assert analyze("keep;") == []


def test_unterminated_action_flags_last_character() -> None:
    diagnostics = analyze("keep")
    assert len(diagnostics) == 1
    diagnostic = diagnostics[0]
    assert diagnostic.message == MISSING_SEMICOLON_MESSAGE
    assert diagnostic.severity == DiagnosticSeverity.Error
    assert diagnostic.source == DIAGNOSTIC_SOURCE
    assert diagnostic.code == "sieve/missing-semicolon"
    assert _span(diagnostic) == (0, 3, 0, 4)


def test_unknown_statement_spans_full_line() -> None:
    diagnostics = analyze("asdf;")
    assert len(diagnostics) == 1
    assert diagnostics[0].message == INVALID_STATEMENT_MESSAGE
    assert diagnostics[0].code == "sieve/invalid-statement"
    assert _span(diagnostics[0]) == (0, 0, 0, 5)


def test_range_includes_indentation() -> None:
    diagnostics = analyze("    bogus;  ")
    assert _span(diagnostics[0]) == (0, 0, 0, 12)


def test_blank_and_comment_lines_are_ignored() -> None:
    assert analyze("") == []
    assert analyze("\n\n   \n") == []
    assert analyze("# comment") == []
    assert analyze("# comment;") == []
    assert analyze("# keep") == []


def test_line_numbers_follow_document() -> None:
    text = 'require ["fileinto"];\nif true {\n    fileinto "x"\n}\nasdf;\n'
    diagnostics = analyze(text)
    assert [(d.range.start.line, d.message) for d in diagnostics] == [
        (2, MISSING_SEMICOLON_MESSAGE),
        (4, INVALID_STATEMENT_MESSAGE),
    ]
    assert _span(diagnostics[0]) == (2, 15, 2, 16)


def test_carriage_return_stays_in_line() -> None:
    diagnostics = analyze("keep\r\nstop;")
    assert len(diagnostics) == 1
    assert _span(diagnostics[0]) == (0, 4, 0, 5)


def test_missing_document_yields_no_diagnostics() -> None:
    assert analyze(None) == []


def test_analysis_is_repeatable() -> None:
    text = "keep\nasdf;\nstop\n# ok\n"
    assert analyze(text) == analyze(text)


def test_ranges_stay_on_one_line() -> None:
    text = "keep\n  asdf;\n\tdiscard  \nfoo;\nredirect \"a@b.c\"\n"
    for diagnostic in analyze(text):
        start, end = diagnostic.range.start, diagnostic.range.end
        assert start.line == end.line
        assert start.character <= end.character


def test_analyzer_with_custom_rules_and_catalog() -> None:
    analyzer = DiagnosticAnalyzer(
        SymbolCatalog(names={SymbolClass.ACTION: ("archive",)}),
        rules=[MissingSemicolonRule()],
    )
    assert [d.message for d in analyzer.analyze("archive\nasdf;\nkeep")] == [MISSING_SEMICOLON_MESSAGE]
