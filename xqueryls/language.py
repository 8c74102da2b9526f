"""
Language definitions known to the server.

The XQuery definition mirrors what an editor needs to recognise the language:
a highlighting mode, file extensions and comment delimiters.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from xqueryls.workspace.corpus import file_extension

XQUERY_LANGUAGE_ID = "xquery"
DEFAULT_FILE_EXTENSIONS = ("xqy",)


@dataclass(frozen=True)
class LanguageDefinition:
    id: str
    name: str
    mode: str
    file_extensions: tuple[str, ...]
    line_comment: tuple[str, ...] = ()
    block_comment: tuple[str, str] | None = None


def xquery_language(
    file_extensions: Iterable[str] = DEFAULT_FILE_EXTENSIONS,
) -> LanguageDefinition:
    return LanguageDefinition(
        id=XQUERY_LANGUAGE_ID,
        name="XQuery",
        mode="xquery",
        file_extensions=tuple(file_extensions),
        line_comment=("(:", ":)"),
        block_comment=("(:", ":)"),
    )


class LanguageRegistry:
    """
    Languages defined for this server process.

    Usage:
        languages = LanguageRegistry()
        languages.define_language(xquery_language())
        languages.language_for_path(Path("main.xqy"))  # -> XQuery
    """

    def __init__(self) -> None:
        self._languages: dict[str, LanguageDefinition] = {}

    def define_language(self, definition: LanguageDefinition) -> LanguageDefinition:
        """Define a language once; later definitions of the same id are ignored."""
        return self._languages.setdefault(definition.id, definition)

    def get(self, language_id: str) -> LanguageDefinition | None:
        return self._languages.get(language_id)

    def language_for_path(self, path: Path) -> LanguageDefinition | None:
        extension = file_extension(path)
        for language in self._languages.values():
            if extension in language.file_extensions:
                return language
        return None
