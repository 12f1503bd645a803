"""Normalization of ranked terms into final keywords."""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from doctagger.models import RankedTerm
from doctagger.utils.text import capitalize_first_grapheme, graphemes

MIN_GRAPHEMES = 3
YEAR_LENGTH = 4


def _is_numeric(term: str) -> bool:
    # float() also takes digit separators and non-ASCII digits; numbers here are plain ASCII
    if "_" in term or not term.isascii():
        return False
    try:
        float(term)
    except ValueError:
        return False
    return True


def normalize_keyword(term: str) -> Optional[str]:
    """Return the keyword form of ``term``, or None if it should be dropped.

    Numbers survive only when they are four characters long (years). Other
    terms need at least three grapheme clusters and get their first one
    uppercased.
    """
    trimmed = term.strip()
    if _is_numeric(trimmed):
        return trimmed if len(trimmed) == YEAR_LENGTH else None
    if len(graphemes(trimmed)) >= MIN_GRAPHEMES:
        return capitalize_first_grapheme(trimmed)
    return None


def post_process(ranked: Iterable[Union[RankedTerm, str]]) -> List[str]:
    """Normalize ranked terms, keeping their order and any duplicates."""
    keywords: List[str] = []
    for item in ranked:
        term = item.term if isinstance(item, RankedTerm) else item
        keyword = normalize_keyword(term)
        if keyword is not None:
            keywords.append(keyword)
    return keywords
