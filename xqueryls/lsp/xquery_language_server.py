from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pygls.lsp.server import LanguageServer

from xqueryls.config import ServerConfig
from xqueryls.hints.registry import HintProviderRegistry
from xqueryls.language import LanguageRegistry

if TYPE_CHECKING:
    from xqueryls.lsp.capabilities.capabilities import CapabilityManager
    from xqueryls.lsp.host import LspDocumentManager
    from xqueryls.lsp.text_sync_manager import TextSyncManager


class XQueryLanguageServer(LanguageServer):
    """
    Custom Language Server with XQuery-specific attributes.

    Attributes:
        config: Settings from .xqueryls.yml and initializationOptions
        languages: Languages defined for this process
        hint_providers: Hint providers by language, ordered by priority
        documents: Active document tracking shared by all providers
    """

    def __init__(self, name: str, version: str):
        super().__init__(name, version)

        self.workspace_root: Path | None = None
        self.config = ServerConfig()
        self.languages = LanguageRegistry()
        self.hint_providers = HintProviderRegistry()
        self.documents: LspDocumentManager | None = None
        self.capability_manager: CapabilityManager | None = None
        self.text_sync_manager: TextSyncManager | None = None
