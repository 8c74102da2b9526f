"""
Host editor interfaces consumed by the hint pipeline.

The hint core never talks to an editor directly. It only sees these narrow
interfaces, which the LSP layer implements on top of pygls
(see xqueryls.lsp.host) and the tests implement in memory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from pathlib import Path

from lsprotocol.types import Position


def utf16_width(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


class Editor(ABC):
    """An editor view with a cursor."""

    @abstractmethod
    def get_cursor_pos(self) -> Position:
        pass


class Document(ABC):
    """A text buffer that can be read and edited by range."""

    def column_width(self, text: str) -> int:
        """Columns `text` spans in a Position; LSP counts UTF-16 code units."""
        return utf16_width(text)

    @abstractmethod
    def get_range(self, start: Position, end: Position) -> str:
        pass

    @abstractmethod
    def replace_range(self, text: str, start: Position, end: Position) -> None:
        pass


class DocumentManager(ABC):
    """Access to the active document and to the text of project files."""

    @abstractmethod
    def get_current_document(self) -> Document | None:
        pass

    @abstractmethod
    async def get_document_text(self, file: Path) -> str:
        """
        Return the current text of a file.

        The live buffer wins over storage when the file is open.
        """
        pass


class ProjectManager(ABC):
    """Enumerates the files of the open project."""

    @abstractmethod
    async def get_all_files(
        self, predicate: Callable[[Path], bool]
    ) -> Sequence[Path]:
        pass
