"""
pygls implementations of the host editor interfaces.

    LspEditor          -> a cursor captured from a keystroke or request
    LspDocument        -> a pygls TextDocument, edited via workspace/applyEdit
    LspDocumentManager -> the active document plus open-buffer/disk reads
    LspProjectManager  -> recursive walk of the workspace root
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from lsprotocol.types import (
    ApplyWorkspaceEditParams,
    Position,
    Range,
    TextEdit,
    WorkspaceEdit,
)

from xqueryls.config import DEFAULT_EXCLUDE_DIRS
from xqueryls.hints.host import Document, DocumentManager, Editor, ProjectManager
from xqueryls.utils.find_files import find_files

if TYPE_CHECKING:
    from xqueryls.lsp.xquery_language_server import XQueryLanguageServer


class ProjectNotOpenError(Exception):
    """Raised when files are requested before a workspace root is known."""


class LspEditor(Editor):
    def __init__(self, uri: str, position: Position) -> None:
        self.uri = uri
        self.position = position

    def get_cursor_pos(self) -> Position:
        return self.position


class LspDocument(Document):
    def __init__(self, server: XQueryLanguageServer, uri: str) -> None:
        self.server = server
        self.uri = uri

    def column_width(self, text: str) -> int:
        return self.server.workspace.position_codec.client_num_units(text)

    def get_range(self, start: Position, end: Position) -> str:
        doc = self.server.workspace.get_text_document(self.uri)
        start_offset = doc.offset_at_position(start)
        end_offset = doc.offset_at_position(end)
        return doc.source[start_offset:end_offset]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        edit = TextEdit(range=Range(start=start, end=end), new_text=text)
        self.server.workspace_apply_edit(
            ApplyWorkspaceEditParams(
                edit=WorkspaceEdit(changes={self.uri: [edit]}),
                label="Insert XQuery hint",
            )
        )


class LspDocumentManager(DocumentManager):
    """Tracks the document the user is typing in."""

    def __init__(self, server: XQueryLanguageServer) -> None:
        self.server = server
        self.current_uri: str | None = None

    def activate(self, uri: str) -> None:
        self.current_uri = uri

    def get_current_document(self) -> LspDocument | None:
        if self.current_uri is None:
            return None
        return LspDocument(self.server, self.current_uri)

    async def get_document_text(self, file: Path) -> str:
        open_doc = self.server.workspace.text_documents.get(file.as_uri())
        if open_doc is not None:
            return open_doc.source

        return await asyncio.to_thread(file.read_text, encoding="utf-8")


class LspProjectManager(ProjectManager):
    def __init__(
        self,
        workspace_root: Path | None,
        exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    ) -> None:
        self.workspace_root = workspace_root
        self.exclude_dirs = frozenset(exclude_dirs)

    async def get_all_files(self, predicate: Callable[[Path], bool]) -> list[Path]:
        if self.workspace_root is None:
            raise ProjectNotOpenError("No workspace root")

        return await asyncio.to_thread(
            find_files, self.workspace_root, predicate, self.exclude_dirs
        )
