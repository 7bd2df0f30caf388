"""
Command handlers for the sieve-lsp CLI.

Each ``cmd_*`` function receives the parsed :class:`argparse.Namespace`
and either returns normally or raises/exits through
:func:`handle_cli_exception`.
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from sieve_lsp.config import ServerConfig, load_config
from sieve_lsp.errors import SieveConfigError
from sieve_lsp.language.catalog import DEFAULT_CATALOG, SymbolClass
from sieve_lsp.language.diagnostics import analyze
from sieve_lsp.observability import configure_logging, get_logger

from .errors import CLIFileNotFoundError, CLIRuntimeError, CLIValidationError, handle_cli_exception

SIEVE_SUFFIXES = (".sieve", ".siv")

_SEVERITY_LABELS = {1: "error", 2: "warning", 3: "info", 4: "hint"}


def _resolve_config(args: argparse.Namespace) -> ServerConfig:
    explicit = Path(args.config) if getattr(args, "config", None) else None
    try:
        config = load_config(Path.cwd(), explicit)
    except SieveConfigError as exc:
        raise CLIValidationError(exc.message, hint=exc.hint) from exc
    if getattr(args, "tcp", False):
        config.transport = "tcp"
    elif getattr(args, "stdio", False):
        config.transport = "stdio"
    if getattr(args, "host", None):
        config.host = args.host
    if getattr(args, "port", None) is not None:
        if not 0 < args.port < 65536:
            raise CLIValidationError(f"Invalid port {args.port}", hint="Use a port between 1 and 65535")
        config.port = args.port
    if getattr(args, "log_level", None):
        config.log_level = args.log_level
    if getattr(args, "log_file", None):
        config.log_file = Path(args.log_file).resolve()
    return config


def cmd_serve(args: argparse.Namespace) -> None:
    """
    Handle the 'serve' subcommand to launch the Sieve language server.

    Starts the server over stdio (default) or TCP.  Editors launch it as
    ``sieve-lsp --stdio``.
    """
    try:
        config = _resolve_config(args)
        configure_logging(config.log_level, config.log_file)

        from sieve_lsp.lsp.server import create_server, run_server

        server = create_server(config)
        try:
            run_server(server)
        except KeyboardInterrupt:
            get_logger().info("Language server interrupted by user.")
        except Exception as exc:
            raise CLIRuntimeError(
                f"Language server stopped unexpectedly: {exc}",
            ) from exc
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def collect_scripts(paths: Iterable[str]) -> List[Path]:
    """Expand files and directories into a sorted list of Sieve scripts."""
    scripts: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            scripts.append(path)
        elif path.is_dir():
            for suffix in SIEVE_SUFFIXES:
                scripts.extend(sorted(path.rglob(f"*{suffix}")))
        else:
            raise CLIFileNotFoundError(f"No such file or directory: {raw}")
    return scripts


def cmd_check(args: argparse.Namespace) -> None:
    """
    Handle the 'check' subcommand: report diagnostics for Sieve scripts.

    Prints one ``path:line:column: severity: message [code]`` line per
    diagnostic, with 1-based line and column numbers.  Exits with status 1
    when any diagnostic was reported.
    """
    try:
        scripts = collect_scripts(args.files or ["."])
        if not scripts:
            print("No Sieve scripts found to check")
            return
        total = 0
        for script in scripts:
            # newline="" keeps CR characters so columns match the server's.
            try:
                with script.open(encoding="utf-8", newline="") as handle:
                    text = handle.read()
            except (OSError, UnicodeDecodeError) as exc:
                raise CLIRuntimeError(
                    f"Could not read {script}: {exc}",
                    hint="Sieve scripts must be UTF-8 encoded",
                    context={"script": str(script)},
                ) from exc
            for diagnostic in analyze(text):
                total += 1
                start = diagnostic.range.start
                severity = _SEVERITY_LABELS.get(int(diagnostic.severity or 1), "error")
                print(
                    f"{script}:{start.line + 1}:{start.character + 1}: "
                    f"{severity}: {diagnostic.message} [{diagnostic.code}]"
                )
        if total:
            print(f"Found {total} problem(s) in {len(scripts)} file(s)", file=sys.stderr)
            raise SystemExit(1)
    except SystemExit:
        raise
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def cmd_symbols(args: argparse.Namespace) -> None:
    """Handle the 'symbols' subcommand: list catalog entries with documentation."""
    selected: Optional[SymbolClass] = SymbolClass(args.symbol_class) if args.symbol_class else None
    for symbol in DEFAULT_CATALOG.all_symbols():
        if selected is not None and symbol.symbol_class is not selected:
            continue
        print(f"{symbol.symbol_class.value}\t{symbol.name}\t{symbol.documentation}")


__all__ = ["cmd_serve", "cmd_check", "cmd_symbols", "collect_scripts"]
