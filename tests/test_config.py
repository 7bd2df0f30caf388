from __future__ import annotations

import json
from pathlib import Path

import pytest

from sieve_lsp.config import ServerConfig, load_config, locate_config_file
from sieve_lsp.errors import SieveConfigError


def test_defaults_without_config_file(tmp_path: Path) -> None:
    config = load_config(tmp_path, environ={})
    assert config == ServerConfig()
    assert config.trigger_characters == [":"]
    assert config.transport == "stdio"


def test_toml_config(tmp_path: Path) -> None:
    (tmp_path / "sieve-lsp.toml").write_text(
        "[server]\n"
        "trigger_characters = [\":\", \"\\\"\"]\n"
        "publish_diagnostics = false\n"
        "log_level = \"debug\"\n"
        "log_file = \"logs/sieve.log\"\n"
        "transport = \"tcp\"\n"
        "port = 9000\n",
        encoding="utf-8",
    )
    config = load_config(tmp_path, environ={})
    assert config.trigger_characters == [":", "\""]
    assert config.publish_diagnostics is False
    assert config.log_level == "debug"
    assert config.log_file == (tmp_path / "logs" / "sieve.log").resolve()
    assert config.transport == "tcp"
    assert config.port == 9000


def test_json_config(tmp_path: Path) -> None:
    (tmp_path / ".sieve-lsp.json").write_text(json.dumps({"server": {"log_level": "warning"}}), encoding="utf-8")
    assert locate_config_file(tmp_path) == tmp_path / ".sieve-lsp.json"
    assert load_config(tmp_path, environ={}).log_level == "warning"


def test_toml_takes_precedence_over_json(tmp_path: Path) -> None:
    (tmp_path / "sieve-lsp.toml").write_text("[server]\n", encoding="utf-8")
    (tmp_path / ".sieve-lsp.json").write_text("{}", encoding="utf-8")
    assert locate_config_file(tmp_path) == tmp_path / "sieve-lsp.toml"


def test_environment_overrides_file(tmp_path: Path) -> None:
    (tmp_path / "sieve-lsp.toml").write_text("[server]\nlog_level = \"error\"\n", encoding="utf-8")
    config = load_config(
        tmp_path,
        environ={"SIEVE_LSP_LOG_LEVEL": "debug", "SIEVE_LSP_PUBLISH_DIAGNOSTICS": "off"},
    )
    assert config.log_level == "debug"
    assert config.publish_diagnostics is False


@pytest.mark.parametrize(
    "body",
    [
        "[server]\nlog_level = \"loud\"\n",
        "[server]\ntransport = \"pipe\"\n",
        "[server]\nport = \"abc\"\n",
        "[server]\ntrigger_characters = [1, 2]\n",
        "[server]\npublish_diagnostics = \"maybe\"\n",
        "server = 3\n",
        "[server\n",
    ],
)
def test_invalid_values_raise(tmp_path: Path, body: str) -> None:
    (tmp_path / "sieve-lsp.toml").write_text(body, encoding="utf-8")
    with pytest.raises(SieveConfigError):
        load_config(tmp_path, environ={})


def test_explicit_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SieveConfigError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.toml", environ={})


def test_apply_settings_ignores_unknown_keys() -> None:
    config = ServerConfig()
    config.apply_settings({"publishDiagnostics": "false", "somethingElse": 1})
    assert config.publish_diagnostics is False
    config.apply_settings(None)
    assert config.log_level == "info"
