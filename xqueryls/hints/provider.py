"""
XQuery hint provider.

Runs the hint pipeline for one editing session:

    has_hints    -> trigger detection on every keystroke
    get_hints    -> corpus collection, extraction, filtering, presentation
    insert_hint  -> replace the typed token with the chosen candidate

Session state (anchor, hint list) is replaced, never mutated in place, so a
late response can never corrupt the list a newer request produced.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace

from xqueryls.hints.extract import (
    extract,
    filter_candidates,
    is_identifier_char,
    merge_vocabulary,
    prefix_of,
)
from xqueryls.hints.host import DocumentManager, Editor
from xqueryls.hints.present import HintList, HintResponse, build_hint_list
from xqueryls.hints.trigger import (
    TriggerState,
    anchor_precedes,
    detect,
    is_boundary_char,
    token_start,
    written_since_start,
)
from xqueryls.hints.vocabulary import XQUERY_VOCABULARY, StaticVocabulary
from xqueryls.workspace.corpus import CorpusCollector


class HintProvider(ABC):
    """Contract between an editor's hint manager and a hint source."""

    @abstractmethod
    def has_hints(self, editor: Editor, last_char: str | None) -> bool:
        pass

    @abstractmethod
    async def get_hints(self, last_char: str | None) -> HintResponse | None:
        pass

    @abstractmethod
    def insert_hint(self, hint: str) -> bool:
        pass

    def release_editor(self, editor: Editor) -> None:
        """Forget any session bound to an editor that is going away."""
        pass


class XQueryHintProvider(HintProvider):
    """Offers project identifiers and XQuery vocabulary as hints."""

    def __init__(
        self,
        documents: DocumentManager,
        collector: CorpusCollector,
        vocabulary: StaticVocabulary = XQUERY_VOCABULARY,
    ) -> None:
        self.documents = documents
        self.collector = collector
        self.vocabulary = vocabulary

        self.session = TriggerState()
        self.hint_list = HintList()

        # Bumped by every request that reaches the corpus; only the latest
        # request may publish its hint list.
        self._generation = 0

    def has_hints(self, editor: Editor, last_char: str | None) -> bool:
        active, self.session = detect(self.session, editor, last_char)
        if is_boundary_char(last_char):
            # The token was cancelled: drop its hints and any pending request
            self.hint_list = HintList()
            self._generation += 1
        return active

    def reset(self) -> None:
        self.session = TriggerState()
        self.hint_list = HintList()

    def release_editor(self, editor: Editor) -> None:
        if self.session.editor is editor:
            self.reset()

    def valid_position(self, last_char: str | None) -> TriggerState | None:
        """
        Check that hinting may continue and refresh the written text.

        Returns None when the typed character cannot be part of an identifier
        or when no editor is bound to the session.
        """
        if not is_identifier_char(last_char):
            return None

        document = self.documents.get_current_document()
        editor = self.session.editor
        if document is None or editor is None:
            return None

        session = self.session
        cursor = editor.get_cursor_pos()
        if not anchor_precedes(session.start_pos, cursor):
            # Keystrokes were missed; anchor at the token under the cursor
            session = replace(session, start_pos=token_start(document, cursor))

        return written_since_start(session, document)

    async def get_hints(self, last_char: str | None) -> HintResponse | None:
        session = self.valid_position(last_char)
        if session is None:
            return None
        self.session = session

        self._generation += 1
        generation = self._generation

        corpus = await self.collector.collect()

        if generation != self._generation:
            # Superseded while the corpus was loading
            return None

        candidates = merge_vocabulary(extract(corpus), self.vocabulary)
        candidates = filter_candidates(
            candidates, prefix_of(session.written_since_start)
        )

        self.hint_list = build_hint_list(candidates)
        return HintResponse(
            hints=self.hint_list.display,
            raw=self.hint_list.raw,
            start_pos=session.start_pos,
        )

    def insert_hint(self, hint: str) -> bool:
        """
        Replace the text typed since the anchor with the chosen hint.

        Returns False, without touching the document, when the hint is not
        part of the current list.
        """
        raw = self.hint_list.resolve(hint)
        editor = self.session.editor
        start = self.session.start_pos
        if raw is None or editor is None or start is None:
            return False

        document = self.documents.get_current_document()
        if document is None:
            return False

        document.replace_range(raw, start, editor.get_cursor_pos())

        self.reset()
        return True
