"""
Ordering, rendering and selection of hint candidates.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from lsprotocol.types import Position

# Display entries repeat the candidate as a greyed-out suffix.
DISPLAY_SUFFIX_TEMPLATE = "<span style='color:#a0a0a0; margin-left: 10px'>{}</span>"


@dataclass(frozen=True)
class HintList:
    """
    Insertable candidates and their decorated display strings.

    raw[i] is always the literal text inserted when display[i] is chosen.
    """

    raw: tuple[str, ...] = ()
    display: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.raw)

    def resolve(self, display: str) -> str | None:
        """Map a chosen display string back to its raw candidate."""
        try:
            index = self.display.index(display)
        except ValueError:
            return None
        return self.raw[index]


@dataclass(frozen=True)
class HintResponse:
    """
    A hint result in the shape editors expect from a hint provider.

    `hints` are the display strings. `raw` and `start_pos` let hosts that
    apply edits themselves replace [start_pos, cursor] with raw[i].
    """

    hints: tuple[str, ...] = field(default_factory=tuple)
    match: str | None = None
    select_initial: bool = True
    handle_wide_results: bool = False
    raw: tuple[str, ...] = field(default_factory=tuple)
    start_pos: Position | None = None


def sort_candidates(candidates: Iterable[str]) -> list[str]:
    """Case-insensitive ascending order; equal keys keep their input order."""
    return sorted(candidates, key=str.lower)


def render(candidate: str) -> str:
    return candidate + DISPLAY_SUFFIX_TEMPLATE.format(candidate)


def build_hint_list(candidates: Iterable[str]) -> HintList:
    ordered = sort_candidates(candidates)
    return HintList(
        raw=tuple(ordered),
        display=tuple(render(c) for c in ordered),
    )
