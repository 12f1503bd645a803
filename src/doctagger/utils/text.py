"""Text helpers shared by the extractors and the keyword pipeline."""

from __future__ import annotations

import re
from typing import Iterable, List

import regex

_MARKUP_RE = re.compile(r"<[^>]+>")
_GRAPHEME_RE = regex.compile(r"\X")


def normalize_whitespace(lines: Iterable[str]) -> str:
    """Collapse whitespace and join lines."""
    return "\n".join(line.strip() for line in lines if line.strip())


def strip_markup(text: str) -> str:
    """Remove anything between ``<`` and ``>``."""
    return _MARKUP_RE.sub("", text)


def graphemes(text: str) -> List[str]:
    """Split text into user-perceived characters (extended grapheme clusters)."""
    return _GRAPHEME_RE.findall(text)


def capitalize_first_grapheme(text: str) -> str:
    """Uppercase the first grapheme cluster and leave the rest untouched."""
    match = _GRAPHEME_RE.match(text)
    if match is None:
        return text
    first = match.group(0)
    return first.upper() + text[len(first):]
