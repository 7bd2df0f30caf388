"""Shared pytest configuration for all tests."""

import pytest

from sieve_lsp.language.catalog import DEFAULT_CATALOG, SymbolCatalog


def pytest_configure(config):
    """Register markers for pytest."""
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture
def catalog() -> SymbolCatalog:
    return DEFAULT_CATALOG


@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    """Keep CLI error handling deterministic regardless of the caller's shell."""
    for name in ("SIEVE_LSP_DEBUG", "SIEVE_LSP_RERAISE", "SIEVE_LSP_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
