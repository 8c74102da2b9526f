from pathlib import Path
from typing import Any

from lsprotocol.types import (
    INITIALIZE,
    INITIALIZED,
    TEXT_DOCUMENT_COMPLETION,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    InitializedParams,
    InitializeParams,
    LogMessageParams,
    MessageType,
)
from pygls.uris import to_fs_path

from xqueryls.config import ConfigError, load_config
from xqueryls.hints.provider import XQueryHintProvider
from xqueryls.language import XQUERY_LANGUAGE_ID, xquery_language
from xqueryls.lsp.capabilities.capabilities import CapabilityManager
from xqueryls.lsp.host import LspDocumentManager, LspProjectManager
from xqueryls.lsp.text_sync_manager import TextSyncManager
from xqueryls.lsp.xquery_language_server import XQueryLanguageServer
from xqueryls.workspace.corpus import CorpusCollector

# ':' starts most XQuery completions ("xs:", "local:", "child::")
COMPLETION_TRIGGER_CHARACTERS = [":"]


def configure_workspace(
    ls: XQueryLanguageServer,
    root_uri: str | None,
    initialization_options: Any = None,
) -> None:
    """
    Load configuration for the workspace and define the XQuery language.
    """
    root_path = to_fs_path(root_uri) if root_uri else None
    ls.workspace_root = Path(root_path) if root_path else None

    options = initialization_options if isinstance(initialization_options, dict) else None
    try:
        ls.config = load_config(ls.workspace_root, options)
    except ConfigError as e:
        ls.window_log_message(
            LogMessageParams(MessageType.Error, f"Using default settings: {e}")
        )

    language = ls.languages.define_language(xquery_language(ls.config.file_extensions))
    extensions = ", ".join(language.file_extensions)
    ls.window_log_message(
        LogMessageParams(
            MessageType.Info, f"{language.name} language defined for: {extensions}"
        )
    )


def register_hint_provider(ls: XQueryLanguageServer) -> XQueryHintProvider | None:
    """
    Create the XQuery hint provider and register it for the language.
    """
    language = ls.languages.get(XQUERY_LANGUAGE_ID)
    if language is None or ls.documents is None:
        return None

    def log_corpus_warning(message: str) -> None:
        ls.window_log_message(LogMessageParams(MessageType.Warning, message))

    collector = CorpusCollector(
        LspProjectManager(ls.workspace_root, ls.config.exclude_dirs),
        ls.documents,
        language.file_extensions,
        log=log_corpus_warning,
    )
    provider = XQueryHintProvider(ls.documents, collector)
    ls.hint_providers.register(provider, [language.id], ls.config.provider_priority)

    ls.window_log_message(
        LogMessageParams(
            MessageType.Info,
            f"XQuery hints ready (workspace: {ls.workspace_root or 'none'})",
        )
    )
    return provider


def create_server() -> XQueryLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with clients (editors)
    - Request/response lifecycle
    - Notifications and event handling
    """
    server = XQueryLanguageServer("xqueryls", "0.1.0")

    # TextSyncManager goes first so capabilities can add hooks on register.
    server.text_sync_manager = TextSyncManager(server)
    server.text_sync_manager.register_handlers()

    server.documents = LspDocumentManager(server)

    server.capability_manager = CapabilityManager(server)
    server.capability_manager.register_all()

    @server.feature(INITIALIZE)
    def initialize(ls: XQueryLanguageServer, params: InitializeParams):
        configure_workspace(ls, params.root_uri, params.initialization_options)

    @server.feature(INITIALIZED)
    def initialized(ls: XQueryLanguageServer, params: InitializedParams):
        # The client is ready: this is where hint providers come online
        register_hint_provider(ls)

    @server.feature(
        TEXT_DOCUMENT_COMPLETION,
        CompletionOptions(trigger_characters=COMPLETION_TRIGGER_CHARACTERS),
    )
    async def completion(ls: XQueryLanguageServer, params: CompletionParams):
        if ls.capability_manager:
            return await ls.capability_manager.handle_completion(params)
        return CompletionList(is_incomplete=False, items=[])

    return server
