"""Completion and hover queries over the symbol catalog."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from lsprotocol.types import CompletionItem, CompletionItemKind, Position

from .catalog import DEFAULT_CATALOG, Symbol, SymbolCatalog, SymbolClass
from .words import resolve_word

_COMPLETION_KIND: Dict[SymbolClass, CompletionItemKind] = {
    SymbolClass.TEST: CompletionItemKind.Function,
    SymbolClass.ACTION: CompletionItemKind.Method,
    SymbolClass.TAG: CompletionItemKind.Property,
    SymbolClass.EXTENSION: CompletionItemKind.Module,
}

# Extensions are not hover targets; they only appear inside ``require``.
HOVER_CLASSES: Tuple[SymbolClass, ...] = (SymbolClass.TEST, SymbolClass.ACTION, SymbolClass.TAG)


def _completion_item(symbol: Symbol) -> CompletionItem:
    label = symbol.name
    if symbol.symbol_class is SymbolClass.EXTENSION:
        label = f'"{symbol.name}"'
    return CompletionItem(
        label=label,
        kind=_COMPLETION_KIND[symbol.symbol_class],
        detail=f"Sieve {symbol.symbol_class.value}: {symbol.name}",
        documentation=symbol.documentation,
    )


def completions_at(
    position: Optional[Position] = None,
    catalog: SymbolCatalog = DEFAULT_CATALOG,
) -> List[CompletionItem]:
    """Return every catalog symbol as a completion item.

    The position is accepted for protocol symmetry but does not filter the
    result: tests, actions, tags and extensions are always returned in
    declaration order.
    """

    return [_completion_item(symbol) for symbol in catalog.all_symbols()]


def resolve_completion(item: CompletionItem) -> CompletionItem:
    return item


def hover_text(word: str, catalog: SymbolCatalog = DEFAULT_CATALOG) -> Optional[str]:
    symbol = catalog.lookup(word, HOVER_CLASSES)
    if symbol is None:
        return None
    return f"**{symbol.name}** - {symbol.documentation}"


def hover_at(text: str, offset: int, catalog: SymbolCatalog = DEFAULT_CATALOG) -> Optional[str]:
    word = resolve_word(text, offset)
    if word is None:
        return None
    return hover_text(word, catalog)


__all__ = ["HOVER_CLASSES", "completions_at", "resolve_completion", "hover_text", "hover_at"]
