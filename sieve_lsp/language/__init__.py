"""Transport independent analysis engine for Sieve scripts."""

from .catalog import DEFAULT_CATALOG, Symbol, SymbolCatalog, SymbolClass
from .classifier import LineClassifier, is_action_line, is_plausible_statement
from .diagnostics import DiagnosticAnalyzer, analyze
from .queries import completions_at, hover_at, hover_text, resolve_completion
from .words import resolve_word, word_span

__all__ = [
    "DEFAULT_CATALOG",
    "Symbol",
    "SymbolCatalog",
    "SymbolClass",
    "LineClassifier",
    "is_action_line",
    "is_plausible_statement",
    "DiagnosticAnalyzer",
    "analyze",
    "completions_at",
    "resolve_completion",
    "hover_at",
    "hover_text",
    "resolve_word",
    "word_span",
]
