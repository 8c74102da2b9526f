"""
In-memory host editor used by the hint pipeline tests.
"""

from pathlib import Path

import pytest
from lsprotocol.types import Position

from xqueryls.hints.host import Document, DocumentManager, Editor, ProjectManager
from xqueryls.hints.provider import XQueryHintProvider
from xqueryls.workspace.corpus import CorpusCollector


class FakeEditor(Editor):
    def __init__(self, line: int = 0, character: int = 0):
        self.position = Position(line=line, character=character)

    def get_cursor_pos(self) -> Position:
        return self.position

    def move_to(self, line: int, character: int) -> None:
        self.position = Position(line=line, character=character)


class FakeDocument(Document):
    def __init__(self, text: str = ""):
        self.text = text
        self.replacements: list[tuple[str, Position, Position]] = []

    def column_width(self, text: str) -> int:
        # Positions in this buffer count code points
        return len(text)

    def _offset(self, position: Position) -> int:
        lines = self.text.splitlines(keepends=True)
        return sum(len(line) for line in lines[: position.line]) + position.character

    def get_range(self, start: Position, end: Position) -> str:
        return self.text[self._offset(start):self._offset(end)]

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        self.replacements.append((text, start, end))
        self.text = self.text[: self._offset(start)] + text + self.text[self._offset(end):]


class FakeDocumentManager(DocumentManager):
    """Files map to their text, or to an exception raised on read."""

    def __init__(self, current: FakeDocument | None = None, files=None):
        self.current = current
        self.files: dict[Path, str | Exception] = files or {}

    def get_current_document(self):
        return self.current

    async def get_document_text(self, file: Path) -> str:
        content = self.files[file]
        if isinstance(content, Exception):
            raise content
        return content


class FakeProjectManager(ProjectManager):
    def __init__(self, files=None, error: Exception | None = None):
        self.files = list(files or [])
        self.error = error

    async def get_all_files(self, predicate):
        if self.error:
            raise self.error
        return [f for f in self.files if predicate(f)]


class Session:
    """A provider wired to a fake editor, document and project."""

    def __init__(self, text: str = "", files: dict | None = None):
        self.document = FakeDocument(text)
        self.editor = FakeEditor()
        self.documents = FakeDocumentManager(self.document, dict(files or {}))
        self.project = FakeProjectManager(self.documents.files.keys())
        self.warnings: list[str] = []
        self.collector = CorpusCollector(
            self.project, self.documents, ["xqy"], log=self.warnings.append
        )
        self.provider = XQueryHintProvider(self.documents, self.collector)

    def type(self, chars: str) -> bool:
        """Append characters at the cursor, notifying the provider for each."""
        active = False
        for char in chars:
            cursor = self.editor.get_cursor_pos()
            offset = self.document._offset(cursor)
            self.document.text = (
                self.document.text[:offset] + char + self.document.text[offset:]
            )
            if char == "\n":
                self.editor.move_to(cursor.line + 1, 0)
            else:
                self.editor.move_to(cursor.line, cursor.character + 1)
            active = self.provider.has_hints(self.editor, char)
        return active


@pytest.fixture
def session_factory():
    return Session
