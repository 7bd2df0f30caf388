"""Configuration support for the Sieve language server."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    tomllib = None  # type: ignore

from .errors import SieveConfigError

CONFIG_FILENAMES = ("sieve-lsp.toml", ".sieve-lsp.json")
TRANSPORTS = ("stdio", "tcp")
LOG_LEVELS = ("debug", "info", "warn", "warning", "error")

ENV_LOG_LEVEL = "SIEVE_LSP_LOG_LEVEL"
ENV_PUBLISH_DIAGNOSTICS = "SIEVE_LSP_PUBLISH_DIAGNOSTICS"


@dataclass
class ServerConfig:
    """Settings for one language server process."""

    trigger_characters: List[str] = field(default_factory=lambda: [":"])
    publish_diagnostics: bool = True
    log_level: str = "info"
    log_file: Optional[Path] = None
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 2087

    def apply_settings(self, settings: Optional[Mapping[str, Any]]) -> None:
        """Apply client pushed settings (``workspace/didChangeConfiguration``).

        Only ``publishDiagnostics`` and ``logLevel`` can change at runtime;
        other keys are ignored.
        """

        if not settings:
            return
        if "publishDiagnostics" in settings:
            self.publish_diagnostics = _parse_bool(settings["publishDiagnostics"], "publishDiagnostics")
        if "logLevel" in settings:
            self.log_level = _parse_log_level(settings["logLevel"])


def _parse_bool(value: Any, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    raise SieveConfigError(f"Setting '{key}' must be a boolean, got {value!r}")


def _parse_log_level(value: Any) -> str:
    level = str(value).strip().lower()
    if level not in LOG_LEVELS:
        raise SieveConfigError(
            f"Unknown log level {value!r}",
            hint=f"Use one of: {', '.join(LOG_LEVELS)}",
        )
    return level


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise SieveConfigError(f"Invalid JSON in {path}: {exc}") from exc


def _read_toml_config(path: Path) -> Dict[str, Any]:
    if tomllib is None:
        raise SieveConfigError("TOML parsing requires Python 3.11 or later.")
    with path.open("rb") as handle:
        try:
            return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise SieveConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _parse_server(data: Dict[str, Any], root: Path) -> ServerConfig:
    if not isinstance(data, dict):
        raise SieveConfigError("Configuration root must be a table/object")
    section = data.get("server") or {}
    if not isinstance(section, dict):
        raise SieveConfigError("The [server] section must be a table")
    config = ServerConfig()

    triggers = section.get("trigger_characters")
    if triggers is not None:
        if isinstance(triggers, str):
            triggers = [triggers]
        if not isinstance(triggers, (list, tuple)) or not all(isinstance(item, str) for item in triggers):
            raise SieveConfigError("'trigger_characters' must be a list of strings")
        config.trigger_characters = list(triggers)

    if "publish_diagnostics" in section:
        config.publish_diagnostics = _parse_bool(section["publish_diagnostics"], "publish_diagnostics")
    if "log_level" in section:
        config.log_level = _parse_log_level(section["log_level"])

    log_file = section.get("log_file")
    if log_file:
        path = Path(str(log_file))
        config.log_file = path if path.is_absolute() else (root / path).resolve()

    transport = str(section.get("transport") or config.transport).lower()
    if transport not in TRANSPORTS:
        raise SieveConfigError(f"Unknown transport {transport!r}", hint="Use 'stdio' or 'tcp'")
    config.transport = transport
    config.host = str(section.get("host") or config.host)
    try:
        config.port = int(section.get("port") or config.port)
    except (TypeError, ValueError) as exc:
        raise SieveConfigError(f"'port' must be an integer, got {section.get('port')!r}") from exc
    return config


def _apply_environment(config: ServerConfig, environ: Mapping[str, str]) -> None:
    level = environ.get(ENV_LOG_LEVEL)
    if level:
        config.log_level = _parse_log_level(level)
    publish = environ.get(ENV_PUBLISH_DIAGNOSTICS)
    if publish:
        config.publish_diagnostics = _parse_bool(publish, ENV_PUBLISH_DIAGNOSTICS)


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILENAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_config(
    root: Optional[Path] = None,
    explicit: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ServerConfig:
    """Resolve the server configuration for *root*.

    Precedence, lowest first: built-in defaults, the config file, then
    ``SIEVE_LSP_*`` environment variables.
    """

    root = (root or Path.cwd()).resolve()
    if explicit is not None and not explicit.exists():
        raise SieveConfigError(f"Configuration file not found: {explicit}")
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        config = ServerConfig()
    else:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
        config = _parse_server(data, config_path.parent)
    _apply_environment(config, os.environ if environ is None else environ)
    return config


__all__ = [
    "CONFIG_FILENAMES",
    "ServerConfig",
    "locate_config_file",
    "load_config",
]
