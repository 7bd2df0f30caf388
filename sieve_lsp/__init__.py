"""
Sieve language server package.

This package provides editor language intelligence for Sieve mail
filtering scripts (RFC 5228 and its extensions).  It answers three kinds
of queries over the current text of a document: which symbols are valid
(completion), what a symbol means (hover) and what is wrong with a script
(diagnostics).

The code is organised into several modules:

* ``language`` – the analysis engine.  A static symbol catalog, the word
  resolver, the line classifier and the diagnostic generator, plus the
  completion and hover queries built on top of them.  Nothing in here
  knows about JSON-RPC.
* ``lsp`` – a pygls based language server that keeps document snapshots
  and routes protocol requests into the engine.
* ``cli`` – the ``sieve-lsp`` command line interface which launches the
  server and can also check scripts from a terminal.

The engine is intentionally heuristic: statements are classified line by
line using keyword presence rather than a grammar.
"""

import re
from pathlib import Path
from importlib import metadata as _metadata


def _local_version() -> str | None:
    root = Path(__file__).resolve().parents[1]
    pyproject = root / "pyproject.toml"
    if not pyproject.exists():
        return None
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:  # pragma: no cover - IO errors should not break imports
        return None
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
    if match:
        return match.group(1)
    return None


try:  # pragma: no cover - metadata lookup for installed distributions
    __version__ = _metadata.version("sieve-lsp")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.1.0"

__all__ = ["__version__"]
