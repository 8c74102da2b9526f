"""
LSP Capabilities Manager

This module manages LSP feature handlers using a plugin architecture.

Design Principles:
1. Plugin-based (add capabilities without modifying core)
2. Composable (multiple handlers for the same feature)
3. Testable (isolated capability handlers)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from lsprotocol.types import (
    CompletionItem,
    CompletionList,
    CompletionParams,
    LogMessageParams,
    MessageType,
)


if TYPE_CHECKING:
    from xqueryls.lsp.xquery_language_server import XQueryLanguageServer


class Capability(ABC):
    """
    Base class for all LSP capability handlers.

    Each capability can handle one or more LSP features and decides whether
    it can handle a specific request based on context.
    """

    def __init__(self, server: XQueryLanguageServer) -> None:
        self.server = server

    def register(self) -> None:
        """
        Register hooks and commands for this capability.

        Called once while the server is being created.
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name for this capability."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what this capability does."""
        pass

    @abstractmethod
    async def can_handle(self, params) -> bool:
        """Check if the capability can handle the request."""
        pass


class CompletionCapability(Capability):
    """Base class for completion capabilities."""

    @abstractmethod
    async def can_handle(self, params: CompletionParams) -> bool:
        """
        Check if this capability can handle the completion request.

        Returns True if this capability should provide completions
        for the current context.
        """
        pass

    @abstractmethod
    async def complete(self, params: CompletionParams) -> CompletionList:
        """
        Provide completion items.

        Only called if can_handle() returns True.
        """
        pass


class CapabilityManager:
    """
    Central manager for all LSP capabilities.

    Usage:
        # In server creation
        manager = CapabilityManager(server)
        manager.register_all()
    """

    def __init__(
        self,
        server: XQueryLanguageServer,
        capabilities: dict[str, Capability] | None = None,
    ):
        self.server = server

        # Default capabilities
        if capabilities is None:
            from xqueryls.lsp.capabilities.hints_capabilities import (
                XQueryHintsCapability,
            )

            capabilities = {
                "xquery_hints": XQueryHintsCapability(server),
            }

        self.capabilities = capabilities
        self._registered = False

    def register_all(self) -> None:
        """Register all capabilities with the server."""
        if self._registered:
            return

        for capability in self.capabilities.values():
            capability.register()

        self._registered = True

    def get_capabilities_by_type(self, capability_type: type) -> list[Capability]:
        """Get all capabilities of a specific type (e.g., all CompletionCapability)."""
        return [
            cap
            for cap in self.capabilities.values()
            if isinstance(cap, capability_type)
        ]

    async def handle_completion(self, params: CompletionParams) -> CompletionList:
        """
        Handle completion requests by delegating to capable handlers.

        Items from all capable handlers are aggregated. The list is
        incomplete if any handler says so. A failing handler is logged and
        skipped, so completion never breaks editing.
        """
        all_items: list[CompletionItem] = []
        is_incomplete = False

        for capability in self.get_capabilities_by_type(CompletionCapability):
            try:
                if await capability.can_handle(params):
                    result = await capability.complete(params)  # pyright: ignore
                    all_items.extend(result.items)
                    is_incomplete = is_incomplete or result.is_incomplete
            except Exception as e:
                self.server.window_log_message(
                    LogMessageParams(
                        type=MessageType.Error,
                        message=f"Completion error in {capability.name}: {e}"
                    )
                )

        return CompletionList(is_incomplete=is_incomplete, items=all_items)
