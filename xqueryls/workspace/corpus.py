"""
Corpus collection for identifier hints.

The corpus is the text of every project file with a supported extension,
joined with blank lines. Collection never fails: enumeration or read errors
only shrink the corpus.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable
from pathlib import Path

from xqueryls.hints.host import DocumentManager, ProjectManager

CORPUS_SEPARATOR = "\n\n"

LogCallback = Callable[[str], None]


def file_extension(path: Path) -> str:
    """Extension without the leading dot ("" when there is none)."""
    return path.suffix[1:]


class CorpusCollector:
    """
    Gathers the text of all supported project files.

    Usage:
        collector = CorpusCollector(project, documents, ["xqy"])
        corpus = await collector.collect()
    """

    def __init__(
        self,
        project: ProjectManager,
        documents: DocumentManager,
        file_extensions: Iterable[str],
        log: LogCallback | None = None,
    ) -> None:
        self.project = project
        self.documents = documents
        self.file_extensions = frozenset(file_extensions)
        self._log = log

    def is_supported(self, path: Path) -> bool:
        return file_extension(path) in self.file_extensions

    async def collect(self) -> str:
        """
        Return the joined text of all supported files.

        Files are read concurrently but joined in path order, so the same
        project always yields the same corpus.
        """
        try:
            files = await self.project.get_all_files(self.is_supported)
        except Exception as e:
            self._warn(f"Could not list project files: {type(e).__name__}: {e}")
            return ""

        contents = await asyncio.gather(*(self._read(f) for f in sorted(files)))
        return CORPUS_SEPARATOR.join(c for c in contents if c is not None)

    async def _read(self, file: Path) -> str | None:
        try:
            return await self.documents.get_document_text(file)
        except Exception as e:
            self._warn(f"Could not read {file}: {type(e).__name__}: {e}")
            return None

    def _warn(self, message: str) -> None:
        if self._log:
            self._log(message)
