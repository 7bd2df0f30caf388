"""
Entry point for ``python -m sieve_lsp``.

Equivalent to the ``sieve-lsp`` console script.
"""

from sieve_lsp.cli import main

if __name__ == "__main__":
    main()
