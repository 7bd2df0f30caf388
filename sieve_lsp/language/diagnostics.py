"""
Line based diagnostics for Sieve scripts.

The analyzer splits the document on ``\\n`` and runs every rule over every
line.  Rules are independent: a single line can produce more than one
diagnostic.  Each diagnostic covers part of exactly one line.

Analysis is a pure function of the text.  Nothing is cached between
calls, so callers simply re-run it after an edit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from .catalog import DEFAULT_CATALOG, SymbolCatalog
from .classifier import LineClassifier

DIAGNOSTIC_SOURCE = "sieve-lsp"

INVALID_STATEMENT_MESSAGE = "Invalid Sieve statement syntax"
MISSING_SEMICOLON_MESSAGE = "Missing semicolon after action statement"


def _line_range(line_index: int, start: int, end: int) -> Range:
    return Range(
        start=Position(line=line_index, character=start),
        end=Position(line=line_index, character=end),
    )


class LineRule(ABC):
    """Base class for single line checks."""

    def __init__(self, rule_id: str, description: str):
        self.rule_id = rule_id
        self.description = description

    @abstractmethod
    def check(self, line_index: int, line: str, classifier: LineClassifier) -> Optional[Diagnostic]:
        """
        Inspect one line of the document.

        Args:
            line_index: Zero-based line number
            line: Raw line text, without the newline
            classifier: Keyword classifier bound to the active catalog

        Returns:
            A diagnostic for the line, or None when the line passes
        """

    def _error(self, message: str, range_: Range) -> Diagnostic:
        return Diagnostic(
            range=range_,
            message=message,
            severity=DiagnosticSeverity.Error,
            source=DIAGNOSTIC_SOURCE,
            code=self.rule_id,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rule_id!r})"


class InvalidStatementRule(LineRule):
    """Flag terminated lines that mention no known command or keyword."""

    def __init__(self):
        super().__init__(
            rule_id="sieve/invalid-statement",
            description="Statement ends with ';' but contains no known test, action or control keyword",
        )

    def check(self, line_index: int, line: str, classifier: LineClassifier) -> Optional[Diagnostic]:
        if not line.strip().endswith(";"):
            return None
        if classifier.is_plausible_statement(line):
            return None
        return self._error(INVALID_STATEMENT_MESSAGE, _line_range(line_index, 0, len(line)))


class MissingSemicolonRule(LineRule):
    """Flag action lines without a terminating semicolon."""

    def __init__(self):
        super().__init__(
            rule_id="sieve/missing-semicolon",
            description="Action statement does not end with ';'",
        )

    def check(self, line_index: int, line: str, classifier: LineClassifier) -> Optional[Diagnostic]:
        if not classifier.is_action_line(line):
            return None
        if line.strip().endswith(";"):
            return None
        # An action line is never empty, so the last character exists.
        return self._error(MISSING_SEMICOLON_MESSAGE, _line_range(line_index, len(line) - 1, len(line)))


def get_default_rules() -> List[LineRule]:
    return [InvalidStatementRule(), MissingSemicolonRule()]


class DiagnosticAnalyzer:
    """Runs line rules over a whole document."""

    def __init__(
        self,
        catalog: SymbolCatalog = DEFAULT_CATALOG,
        rules: Optional[Sequence[LineRule]] = None,
    ) -> None:
        self.classifier = LineClassifier(catalog)
        self.rules: List[LineRule] = list(rules) if rules is not None else get_default_rules()

    def analyze(self, text: Optional[str]) -> List[Diagnostic]:
        if text is None:
            return []
        diagnostics: List[Diagnostic] = []
        for index, line in enumerate(text.split("\n")):
            for rule in self.rules:
                diagnostic = rule.check(index, line, self.classifier)
                if diagnostic is not None:
                    diagnostics.append(diagnostic)
        return diagnostics


_DEFAULT_ANALYZER = DiagnosticAnalyzer()


def analyze(text: Optional[str]) -> List[Diagnostic]:
    """Return diagnostics for *text* using the default catalog and rules."""

    return _DEFAULT_ANALYZER.analyze(text)


__all__ = [
    "DIAGNOSTIC_SOURCE",
    "INVALID_STATEMENT_MESSAGE",
    "MISSING_SEMICOLON_MESSAGE",
    "LineRule",
    "InvalidStatementRule",
    "MissingSemicolonRule",
    "DiagnosticAnalyzer",
    "get_default_rules",
    "analyze",
]
