"""
Text Synchronization Manager

Manages LSP text sync events and provides hook extension points
for capabilities that react to typing and to documents being closed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from lsprotocol.types import (
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    LogMessageParams,
    MessageType,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
)

if TYPE_CHECKING:
    from xqueryls.lsp.xquery_language_server import XQueryLanguageServer


# Type aliases for hook signatures
OnChangeHook = Callable[[DidChangeTextDocumentParams], Awaitable[None]]
OnCloseHook = Callable[[DidCloseTextDocumentParams], Awaitable[None]]


class TextSyncManager:
    """
    Broadcasts document lifecycle events to registered hooks.

    Design Principles:
    - Text sync is infrastructure, NOT a capability
    - Errors are isolated (one hook failure doesn't affect others)
    - Hooks run in registration order

    Usage:
        text_sync = TextSyncManager(server)
        text_sync.register_handlers()

        # Capabilities register hooks while they are registered
        class HintsCapability(CompletionCapability):
            def register(self):
                text_sync = self.server.text_sync_manager
                text_sync.add_on_change_hook(self._on_keystroke)
    """

    def __init__(self, server: XQueryLanguageServer) -> None:
        self.server = server

        self._on_change_hooks: list[OnChangeHook] = []
        self._on_close_hooks: list[OnCloseHook] = []

    def add_on_change_hook(self, hook: OnChangeHook) -> None:
        """
        Register a hook for document change events.

        Change hooks run on EVERY keystroke, so they must stay cheap.
        """
        self._on_change_hooks.append(hook)

    def add_on_close_hook(self, hook: OnCloseHook) -> None:
        """Register a hook for document close events."""
        self._on_close_hooks.append(hook)

    async def _broadcast(
        self, event: str, hooks: Sequence[Callable[[Any], Awaitable[None]]], params
    ) -> None:
        for hook in hooks:
            try:
                await hook(params)
            except Exception as e:
                self.server.window_log_message(
                    LogMessageParams(
                        type=MessageType.Error,
                        message=f"Error in {event} hook {hook.__name__}: "
                                f"{type(e).__name__}: {e}"
                    )
                )

    async def _broadcast_on_change(self, params: DidChangeTextDocumentParams) -> None:
        await self._broadcast("on_change", self._on_change_hooks, params)

    async def _broadcast_on_close(self, params: DidCloseTextDocumentParams) -> None:
        await self._broadcast("on_close", self._on_close_hooks, params)

    def register_handlers(self) -> None:
        """
        Register LSP text synchronization handlers with the server.

        pygls updates ls.workspace before these handlers run, so hooks always
        see the new document content.
        """

        @self.server.feature(TEXT_DOCUMENT_DID_CHANGE)
        async def did_change(
            ls: XQueryLanguageServer,
            params: DidChangeTextDocumentParams,
        ) -> None:
            await self._broadcast_on_change(params)

        @self.server.feature(TEXT_DOCUMENT_DID_CLOSE)
        async def did_close(
            ls: XQueryLanguageServer,
            params: DidCloseTextDocumentParams,
        ) -> None:
            ls.window_log_message(
                LogMessageParams(
                    type=MessageType.Log,
                    message=f"Document closed: {params.text_document.uri}"
                )
            )
            await self._broadcast_on_close(params)
