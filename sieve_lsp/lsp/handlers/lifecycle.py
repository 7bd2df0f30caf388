"""Session lifecycle and workspace configuration handlers."""

from __future__ import annotations

from typing import Mapping

from lsprotocol.types import (
    DidChangeConfigurationParams,
    DidChangeWorkspaceFoldersParams,
    InitializedParams,
    Registration,
    RegistrationParams,
)

from ...errors import SieveConfigError
from ...observability import get_logger, set_level
from .capabilities import client_supports

logger = get_logger("sieve_lsp.lsp.handlers.lifecycle")

SETTINGS_SECTION = "sieve"


def register(server) -> None:
    config = server.config

    @server.feature("initialized")
    async def _on_initialized(ls, params: InitializedParams) -> None:  # noqa: ARG001
        if client_supports(ls, "workspace.configuration"):
            await ls.register_capability_async(
                RegistrationParams(
                    registrations=[
                        Registration(
                            id="sieve-lsp-configuration",
                            method="workspace/didChangeConfiguration",
                        )
                    ]
                )
            )
            logger.debug("Registered for configuration change notifications")
        logger.info("Sieve language server initialised")

    @server.feature("workspace/didChangeConfiguration")
    async def _on_configuration(ls, params: DidChangeConfigurationParams) -> None:
        settings = params.settings
        if isinstance(settings, Mapping) and isinstance(settings.get(SETTINGS_SECTION), Mapping):
            settings = settings[SETTINGS_SECTION]
        if not isinstance(settings, Mapping):
            return
        try:
            config.apply_settings(settings)
        except SieveConfigError as exc:
            logger.warning("Ignoring client settings: %s", exc.format())
            return
        set_level(config.log_level)

    @server.feature("workspace/didChangeWorkspaceFolders")
    async def _on_workspace_folders(ls, params: DidChangeWorkspaceFoldersParams) -> None:
        if not client_supports(ls, "workspace.workspace_folders"):
            return
        logger.info(
            "Workspace folder change event received: %d added, %d removed",
            len(params.event.added),
            len(params.event.removed),
        )
