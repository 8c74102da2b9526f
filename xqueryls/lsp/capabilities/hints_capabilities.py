"""
XQuery hint capabilities.

Bridges LSP traffic to the registered hint providers:
- didChange edits are replayed as keystrokes (trigger detection)
- textDocument/completion runs the hint pipeline
- the xqueryls.insertHint command inserts a chosen display string
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    CompletionItemLabelDetails,
    CompletionList,
    CompletionParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    Position,
    Range,
    TextEdit,
)
from pygls.uris import to_fs_path

from xqueryls.hints.host import utf16_width
from xqueryls.hints.present import HintResponse
from xqueryls.hints.provider import HintProvider
from xqueryls.language import LanguageDefinition
from xqueryls.lsp.capabilities.capabilities import CompletionCapability
from xqueryls.lsp.host import LspEditor

INSERT_HINT_COMMAND = "xqueryls.insertHint"


def position_after(
    start: Position, text: str, column_width: Callable[[str], int] = utf16_width
) -> Position:
    """Cursor position after `text` is inserted at `start`."""
    lines = text.split("\n")
    if len(lines) == 1:
        return Position(
            line=start.line, character=start.character + column_width(text)
        )
    return Position(
        line=start.line + len(lines) - 1, character=column_width(lines[-1])
    )


class XQueryHintsCapability(CompletionCapability):
    """Completes XQuery keywords, types, axes and project identifiers."""

    def __init__(self, server) -> None:
        super().__init__(server)
        # One editor per open document, so a session's anchor stays bound
        # to the document it was set in.
        self._editors: dict[str, LspEditor] = {}

    @property
    def name(self) -> str:
        return "xquery_hints"

    @property
    def description(self) -> str:
        return "Autocomplete XQuery vocabulary and identifiers used across the project"

    def register(self) -> None:
        text_sync = self.server.text_sync_manager
        if text_sync:
            text_sync.add_on_change_hook(self._on_keystroke)
            text_sync.add_on_close_hook(self._on_close)

        @self.server.command(INSERT_HINT_COMMAND)
        def insert_hint(ls, *args) -> bool:
            # Older pygls releases pass the argument list as one value
            if len(args) == 1 and isinstance(args[0], list):
                args = tuple(args[0])
            if not args or not isinstance(args[0], str):
                return False
            return self.insert_hint(args[0])

    # ===== Helpers =====

    def _language_for(self, uri: str) -> LanguageDefinition | None:
        fs_path = to_fs_path(uri)
        if fs_path is None:
            return None
        return self.server.languages.language_for_path(Path(fs_path))

    def _providers_for(self, uri: str) -> list[HintProvider]:
        language = self._language_for(uri)
        if language is None:
            return []
        return self.server.hint_providers.providers_for(language.id)

    def _editor_at(self, uri: str, position: Position) -> LspEditor:
        editor = self._editors.get(uri)
        if editor is None:
            editor = self._editors[uri] = LspEditor(uri, position)
        editor.position = position

        if self.server.documents:
            self.server.documents.activate(uri)
        return editor

    def _char_before(self, uri: str, position: Position) -> str:
        doc = self.server.workspace.get_text_document(uri)
        offset = doc.offset_at_position(position)
        if offset <= 0:
            return ""
        return doc.source[offset - 1]

    # ===== Text sync hooks =====

    async def _on_keystroke(self, params: DidChangeTextDocumentParams) -> None:
        """Feed typed text to the providers' trigger detection."""
        uri = params.text_document.uri
        providers = self._providers_for(uri)
        if not providers:
            return

        for change in params.content_changes:
            change_range = getattr(change, "range", None)
            if change_range is None or not change.text:
                # Whole-document syncs and deletions are not keystrokes
                continue

            cursor = position_after(
                change_range.start,
                change.text,
                self.server.workspace.position_codec.client_num_units,
            )
            editor = self._editor_at(uri, cursor)
            for provider in providers:
                provider.has_hints(editor, change.text[-1])

    async def _on_close(self, params: DidCloseTextDocumentParams) -> None:
        uri = params.text_document.uri
        editor = self._editors.pop(uri, None)
        if editor is None:
            return

        for provider in self._providers_for(uri):
            provider.release_editor(editor)

        if self.server.documents and self.server.documents.current_uri == uri:
            self.server.documents.current_uri = None

    # ===== Completion =====

    async def can_handle(self, params: CompletionParams) -> bool:
        return bool(self._providers_for(params.text_document.uri))

    async def complete(self, params: CompletionParams) -> CompletionList:
        uri = params.text_document.uri
        cursor = params.position
        last_char = self._char_before(uri, cursor)
        editor = self._editor_at(uri, cursor)

        for provider in self._providers_for(uri):
            if not provider.has_hints(editor, last_char):
                continue

            response = await provider.get_hints(last_char)
            if response is None:
                continue

            return CompletionList(
                is_incomplete=True,
                items=self._completion_items(response, cursor),
            )

        return CompletionList(is_incomplete=False, items=[])

    def _completion_items(
        self, response: HintResponse, cursor: Position
    ) -> list[CompletionItem]:
        start = response.start_pos or cursor
        replace_range = Range(start=start, end=cursor)

        return [
            CompletionItem(
                label=raw,
                label_details=CompletionItemLabelDetails(description=raw),
                kind=CompletionItemKind.Text,
                filter_text=raw,
                # The server's order is authoritative
                sort_text=f"{index:05d}",
                text_edit=TextEdit(range=replace_range, new_text=raw),
            )
            for index, raw in enumerate(response.raw)
        ]

    # ===== Insertion =====

    def insert_hint(self, hint: str) -> bool:
        """Insert a chosen display string through the active document's providers."""
        documents = self.server.documents
        if documents is None or documents.current_uri is None:
            return False

        for provider in self._providers_for(documents.current_uri):
            if provider.insert_hint(hint):
                return True
        return False
