"""Completion handlers."""

from __future__ import annotations

from lsprotocol.types import CompletionItem, CompletionOptions, CompletionParams


def register(server) -> None:
    workspace = server.workspace_index
    options = CompletionOptions(
        trigger_characters=list(server.config.trigger_characters),
        resolve_provider=True,
    )

    @server.feature("textDocument/completion", options)
    async def _completion(ls, params: CompletionParams):
        return workspace.completion(params)

    @server.feature("completionItem/resolve")
    async def _completion_resolve(ls, item: CompletionItem):
        return workspace.resolve_completion(item)
