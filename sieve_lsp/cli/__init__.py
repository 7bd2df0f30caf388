"""
sieve-lsp CLI entry point.

Subcommands:

* ``serve`` – run the language server (stdio by default)
* ``check`` – print diagnostics for scripts on disk
* ``symbols`` – list the known tests, actions, tags and extensions

Editors start the server with ``sieve-lsp --stdio``; a bare transport
flag, or no arguments at all, is treated as ``serve``.
"""

import argparse
import sys
from typing import List, Optional

from sieve_lsp import __version__
from sieve_lsp.config import LOG_LEVELS
from sieve_lsp.language.catalog import SymbolClass

from .commands import cmd_check, cmd_serve, cmd_symbols

COMMANDS = {"serve", "check", "symbols"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sieve-lsp",
        description="Language server for Sieve mail filtering scripts",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Show tracebacks on errors")
    subparsers = parser.add_subparsers(dest="command")

    serve_parser = subparsers.add_parser("serve", help="Run the language server")
    transport = serve_parser.add_mutually_exclusive_group()
    transport.add_argument("--stdio", action="store_true", help="Communicate over stdin/stdout (default)")
    transport.add_argument("--tcp", action="store_true", help="Listen on a TCP socket")
    serve_parser.add_argument("--host", help="TCP host (default 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, help="TCP port (default 2087)")
    serve_parser.add_argument("--config", help="Path to sieve-lsp.toml or .sieve-lsp.json")
    serve_parser.add_argument("--log-level", choices=LOG_LEVELS, help="Logging verbosity")
    serve_parser.add_argument("--log-file", help="Write logs to this file instead of stderr")
    serve_parser.set_defaults(func=cmd_serve)

    check_parser = subparsers.add_parser("check", help="Report diagnostics for Sieve scripts")
    check_parser.add_argument("files", nargs="*", help="Files or directories (default: current directory)")
    check_parser.set_defaults(func=cmd_check)

    symbols_parser = subparsers.add_parser("symbols", help="List known Sieve symbols")
    symbols_parser.add_argument(
        "--class",
        dest="symbol_class",
        choices=[symbol_class.value for symbol_class in SymbolClass],
        help="Only list one class of symbols",
    )
    symbols_parser.set_defaults(func=cmd_symbols)

    return parser


def normalize_argv(argv: List[str]) -> List[str]:
    """Treat ``sieve-lsp`` and ``sieve-lsp --stdio ...`` as ``serve``."""
    if not argv:
        return ["serve"]
    if argv[0] in COMMANDS or argv[0] in {"-h", "--help", "--version", "--verbose"}:
        return argv
    if argv[0].startswith("-"):
        return ["serve"] + argv
    return argv


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Examples:
        >>> main(['check', 'filters/'])  # doctest: +SKIP
        >>> main(['--stdio'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(normalize_argv(list(argv)))
    if not getattr(args, "func", None):
        parser.print_help()
        raise SystemExit(2)
    args.func(args)


__all__ = ["main", "build_parser", "normalize_argv"]
