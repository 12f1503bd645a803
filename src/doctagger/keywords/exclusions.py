"""Exclusion vocabulary loading and filtering."""

from __future__ import annotations

import csv
import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional

from doctagger.errors import FilterConfigError

LOGGER = logging.getLogger(__name__)


def load_exclusions(path: Optional[Path], *, has_header: bool = True) -> List[str]:
    """Read exclusion terms from the first column of a CSV file.

    Any failure to read the file is logged and yields an empty list, so a
    missing or broken exclusion file never stops document processing.
    """
    if path is None:
        return []

    terms: List[str] = []
    try:
        with Path(path).open(newline="", encoding="utf-8") as handle:
            reader = csv.reader(handle)
            if has_header:
                next(reader, None)
            for row in reader:
                if row:
                    terms.append(row[0])
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        LOGGER.warning("Error loading tag exclusions from %s: %s", path, exc)
        return []
    return terms


def _clean_terms(terms: Iterable[str]) -> List[str]:
    cleaned = (term.strip().lower() for term in terms)
    return [term for term in cleaned if term]


def build_exclusion_pattern(terms: Iterable[str]) -> Optional[re.Pattern[str]]:
    """Compile one whole-word pattern matching each term and its plural with ``s``.

    Terms are used as regular expressions. Returns None when there is nothing
    to exclude; raises FilterConfigError if the terms do not compile.
    """
    alternatives: List[str] = []
    for term in _clean_terms(terms):
        alternatives.extend((term, term + "s"))
    if not alternatives:
        return None

    source = r"\b(?:{})\b".format("|".join(alternatives))
    try:
        return re.compile(source, re.IGNORECASE)
    except re.error as exc:
        raise FilterConfigError(f"Invalid exclusion pattern {source!r}: {exc}") from exc


def filter_exclusions(text: str, terms: Iterable[str]) -> str:
    """Return a lowercased copy of ``text`` with excluded terms removed."""
    lowered = text.lower()
    pattern = build_exclusion_pattern(terms)
    if pattern is None:
        return lowered
    return pattern.sub("", lowered)
