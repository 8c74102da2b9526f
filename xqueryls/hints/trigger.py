"""
Trigger detection for hint sessions.

A session is anchored at the position where the current token started. The
anchor moves whenever a boundary character (whitespace or a bracket) is typed,
or when hinting is requested explicitly with no typed character.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from lsprotocol.types import Position

from xqueryls.hints.extract import is_identifier_char
from xqueryls.hints.host import Document, Editor

BOUNDARY_PATTERN = re.compile(r"[\s()\[\]]")


@dataclass(frozen=True)
class TriggerState:
    """Anchor of the token being typed and the editor it belongs to."""

    start_pos: Position | None = None
    written_since_start: str = ""
    editor: Editor | None = None

    @property
    def is_anchored(self) -> bool:
        return self.start_pos is not None and self.editor is not None


def is_boundary_char(char: str | None) -> bool:
    if not char:
        return True
    return BOUNDARY_PATTERN.search(char) is not None


def detect(
    state: TriggerState, editor: Editor, last_char: str | None
) -> tuple[bool, TriggerState]:
    """
    Decide whether hints are active after a keystroke.

    Returns the activity flag and the updated state. A boundary character
    (or no character at all) re-anchors at the cursor and forgets the text
    written so far. Any other character keeps the anchor, unless it was set
    in a different editor.
    """
    if is_boundary_char(last_char):
        state = TriggerState(start_pos=editor.get_cursor_pos(), editor=editor)
    elif state.editor is not editor:
        state = TriggerState(editor=editor)

    return is_identifier_char(last_char), state


def anchor_precedes(start_pos: Position | None, cursor: Position) -> bool:
    """True if the anchor is on the cursor's line, at or before the cursor."""
    if start_pos is None:
        return False
    return start_pos.line == cursor.line and start_pos.character <= cursor.character


def token_start(document: Document, cursor: Position) -> Position:
    """Position right after the last boundary character before the cursor."""
    line_start = Position(line=cursor.line, character=0)
    before_cursor = document.get_range(line_start, cursor)

    start = 0
    for match in BOUNDARY_PATTERN.finditer(before_cursor):
        start = match.end()

    return Position(
        line=cursor.line, character=document.column_width(before_cursor[:start])
    )


def written_since_start(state: TriggerState, document: Document) -> TriggerState:
    """Recompute the text between the anchor and the current cursor."""
    editor = state.editor
    if editor is None or state.start_pos is None:
        return state

    written = document.get_range(state.start_pos, editor.get_cursor_pos())
    return replace(state, written_since_start=written)
