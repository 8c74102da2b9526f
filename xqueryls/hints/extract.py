"""
Candidate extraction and prefix filtering.

Matching is purely lexical: an identifier is any run of word characters,
'-' and ':' (so "local:foo" is one candidate, never "foo").
"""

import re
from collections.abc import Iterable

from xqueryls.hints.vocabulary import StaticVocabulary

# \w is ASCII-only, like the word class of the editor's regex engine.
IDENTIFIER_PATTERN = re.compile(r"[\w\-:]+", re.IGNORECASE | re.ASCII)


def is_identifier_char(char: str | None) -> bool:
    """Check whether a typed character can be part of an identifier."""
    if not char:
        return False
    return IDENTIFIER_PATTERN.search(char) is not None


def extract(corpus: str) -> list[str]:
    """Every identifier in the corpus, left to right, duplicates kept."""
    return IDENTIFIER_PATTERN.findall(corpus)


def merge_vocabulary(
    identifiers: Iterable[str], vocabulary: StaticVocabulary
) -> list[str]:
    """Append keywords, types, operators and axis specifiers, in that order."""
    return [*identifiers, *vocabulary.entries()]


def prefix_of(written_since_start: str) -> str:
    """
    Filter prefix for the text typed since the anchor.

    Only the first space-delimited token counts. An empty string is a valid
    prefix and matches every candidate.
    """
    return written_since_start.lower().split(" ")[0]


def filter_candidates(candidates: Iterable[str], prefix: str) -> list[str]:
    """Keep candidates that start with the prefix, ignoring case."""
    prefix = prefix.lower()
    return [c for c in candidates if c.lower().startswith(prefix)]
