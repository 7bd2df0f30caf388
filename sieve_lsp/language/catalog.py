"""
Sieve symbol catalog.

Single source of truth for the commands, tagged arguments and extension
names the language server knows about.  Four classes of symbols are
tracked:

* tests – boolean predicates used in ``if``/``elsif`` conditions
* actions – directives that act on the message (``fileinto``, ``keep``)
* tags – tagged arguments such as the match types ``:is`` or ``:contains``
* extensions – capability names declared with ``require``

**Usage:**
    from sieve_lsp.language.catalog import DEFAULT_CATALOG, SymbolClass

    if DEFAULT_CATALOG.is_member(SymbolClass.ACTION, word):
        doc = DEFAULT_CATALOG.documentation_for(SymbolClass.ACTION, word)

The catalog is built once at import time and never mutated, so it can be
shared by every request without coordination.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Sequence, Tuple


class SymbolClass(Enum):
    """Categories of catalog symbols."""

    TEST = "test"
    ACTION = "action"
    TAG = "tag"
    EXTENSION = "extension"


@dataclass(frozen=True, slots=True)
class Symbol:
    """A named catalog entry with its documentation."""

    name: str
    symbol_class: SymbolClass
    documentation: str


# ============================================================================
# Tests
# ============================================================================

SIEVE_TESTS: Tuple[str, ...] = (
    "address",
    "allof",
    "anyof",
    "envelope",
    "exists",
    "false",
    "header",
    "not",
    "size",
    "true",
    "body",
    "currentdate",
    "date",
    "environment",
    "mailbox",
    "mailboxexists",
    "regex",
    "spamtest",
    "virustest",
)

TEST_DOCUMENTATION: Dict[str, str] = {
    "address": "Tests email addresses in headers like From, To, Cc",
    "allof": "Logical AND - all tests must be true",
    "anyof": "Logical OR - any test can be true",
    "envelope": "Tests SMTP envelope information",
    "exists": "Tests if a header exists",
    "header": "Tests header values",
    "size": "Tests message size",
    "currentdate": "Tests current date/time (Proton extension)",
    "body": "Tests message body content",
    "regex": "Regular expression matching",
}

# ============================================================================
# Actions
# ============================================================================

SIEVE_ACTIONS: Tuple[str, ...] = (
    "discard",
    "fileinto",
    "keep",
    "redirect",
    "reject",
    "stop",
    "addflag",
    "removeflag",
    "setflag",
    "vacation",
    "notify",
    "denotify",
    "expire",
)

ACTION_DOCUMENTATION: Dict[str, str] = {
    "fileinto": "File message into specified folder",
    "redirect": "Redirect message to another address",
    "reject": "Reject message with error",
    "discard": "Silently discard message",
    "keep": "Keep message in inbox",
    "stop": "Stop processing script",
    "vacation": "Send auto-reply message",
    "expire": "Set message expiration (Proton extension)",
}

# ============================================================================
# Tagged arguments
# ============================================================================

SIEVE_TAGS: Tuple[str, ...] = (
    ":is",
    ":contains",
    ":matches",
    ":regex",
    ":count",
    ":value",
    ":comparator",
    ":localpart",
    ":domain",
    ":all",
    ":over",
    ":under",
    ":copy",
    ":zone",
    ":originalzone",
    ":create",
    ":flags",
    ":importance",
    ":mime",
    ":anychild",
    ":type",
    ":subtype",
    ":contenttype",
    ":param",
)

TAG_DOCUMENTATION: Dict[str, str] = {
    ":is": "Exact string match",
    ":contains": "Substring match",
    ":matches": "Wildcard pattern match",
    ":regex": "Regular expression match",
    ":over": "Size comparison (greater than)",
    ":under": "Size comparison (less than)",
    ":copy": "Copy message instead of moving",
    ":zone": "Specify timezone for date operations",
}

# ============================================================================
# Extensions (capability strings for ``require``)
# ============================================================================

SIEVE_EXTENSIONS: Tuple[str, ...] = (
    "body",
    "copy",
    "date",
    "editheader",
    "encoded-character",
    "envelope",
    "environment",
    "ereject",
    "fileinto",
    "foreverypart",
    "imap4flags",
    "include",
    "index",
    "mailbox",
    "mboxmetadata",
    "mime",
    "regex",
    "reject",
    "relational",
    "servermetadata",
    "spamtest",
    "subaddress",
    "vacation",
    "variables",
    "virustest",
)

EXTENSION_DOCUMENTATION: Dict[str, str] = {
    "regex": "Regular expression support",
    "body": "Message body testing",
    "vacation": "Auto-reply functionality",
    "fileinto": "File into folders",
    "copy": "Copy instead of move",
    "variables": "Variable support",
    "date": "Date/time operations",
    "relational": "Numeric comparisons",
}

FALLBACK_DOCUMENTATION: Dict[SymbolClass, str] = {
    SymbolClass.TEST: "Sieve test command",
    SymbolClass.ACTION: "Sieve action command",
    SymbolClass.TAG: "Sieve tag parameter",
    SymbolClass.EXTENSION: "Sieve extension",
}


class SymbolCatalog:
    """Immutable registry of Sieve symbols grouped by class.

    Declaration order is preserved per class and across classes
    (tests, actions, tags, extensions), so anything derived from the
    catalog is stable between calls.
    """

    def __init__(
        self,
        names: Mapping[SymbolClass, Sequence[str]],
        documentation: Optional[Mapping[SymbolClass, Mapping[str, str]]] = None,
    ) -> None:
        documentation = documentation or {}
        self._docs: Dict[SymbolClass, Dict[str, str]] = {
            symbol_class: dict(documentation.get(symbol_class, {})) for symbol_class in SymbolClass
        }
        self._symbols: Dict[SymbolClass, Tuple[Symbol, ...]] = {}
        self._members: Dict[SymbolClass, FrozenSet[str]] = {}
        self._by_name: Dict[SymbolClass, Dict[str, Symbol]] = {}
        for symbol_class in SymbolClass:
            ordered = tuple(dict.fromkeys(names.get(symbol_class, ())))
            self._members[symbol_class] = frozenset(ordered)
            self._symbols[symbol_class] = tuple(
                Symbol(name, symbol_class, self.documentation_for(symbol_class, name)) for name in ordered
            )
            self._by_name[symbol_class] = {symbol.name: symbol for symbol in self._symbols[symbol_class]}

    def symbols(self, symbol_class: SymbolClass) -> Tuple[Symbol, ...]:
        return self._symbols[symbol_class]

    def names(self, symbol_class: SymbolClass) -> Tuple[str, ...]:
        return tuple(symbol.name for symbol in self._symbols[symbol_class])

    def all_symbols(self) -> Iterator[Symbol]:
        for symbol_class in SymbolClass:
            yield from self._symbols[symbol_class]

    def is_member(self, symbol_class: SymbolClass, name: str) -> bool:
        return name in self._members[symbol_class]

    def documentation_for(self, symbol_class: SymbolClass, name: str) -> str:
        """Return curated documentation, or the generic text for the class."""

        return self._docs[symbol_class].get(name, FALLBACK_DOCUMENTATION[symbol_class])

    def lookup(self, name: str, classes: Sequence[SymbolClass] = tuple(SymbolClass)) -> Optional[Symbol]:
        """Return the first symbol called *name* among *classes*, in order."""

        for symbol_class in classes:
            symbol = self._by_name[symbol_class].get(name)
            if symbol is not None:
                return symbol
        return None

    def __len__(self) -> int:
        return sum(len(entries) for entries in self._symbols.values())


def build_default_catalog() -> SymbolCatalog:
    return SymbolCatalog(
        names={
            SymbolClass.TEST: SIEVE_TESTS,
            SymbolClass.ACTION: SIEVE_ACTIONS,
            SymbolClass.TAG: SIEVE_TAGS,
            SymbolClass.EXTENSION: SIEVE_EXTENSIONS,
        },
        documentation={
            SymbolClass.TEST: TEST_DOCUMENTATION,
            SymbolClass.ACTION: ACTION_DOCUMENTATION,
            SymbolClass.TAG: TAG_DOCUMENTATION,
            SymbolClass.EXTENSION: EXTENSION_DOCUMENTATION,
        },
    )


DEFAULT_CATALOG = build_default_catalog()


__all__ = [
    "SymbolClass",
    "Symbol",
    "SymbolCatalog",
    "SIEVE_TESTS",
    "SIEVE_ACTIONS",
    "SIEVE_TAGS",
    "SIEVE_EXTENSIONS",
    "FALLBACK_DOCUMENTATION",
    "DEFAULT_CATALOG",
    "build_default_catalog",
]
