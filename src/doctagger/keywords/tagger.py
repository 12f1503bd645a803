"""Turns extracted text into a tagged Document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, Iterable, Optional

from doctagger.keywords.exclusions import filter_exclusions, load_exclusions
from doctagger.keywords.postprocess import post_process
from doctagger.keywords.ranker import DEFAULT_TOP_K, PUNCTUATION, STOP_WORDS, rank_keywords
from doctagger.models import Document

LOGGER = logging.getLogger(__name__)


class DocumentTagger:
    """Runs exclusion filtering, ranking and post-processing for one document.

    The exclusion list is re-read on every call, so edits to the CSV file take
    effect for the next document.
    """

    def __init__(
        self,
        exclusions_path: Optional[Path] = None,
        *,
        top_k: int = DEFAULT_TOP_K,
        stop_words: AbstractSet[str] = STOP_WORDS,
        punctuation: Iterable[str] = PUNCTUATION,
    ) -> None:
        self.exclusions_path = exclusions_path
        self.top_k = top_k
        self.stop_words = stop_words
        self.punctuation = frozenset(punctuation)

    def tag(self, filename: str, text: str) -> Document:
        exclusions = load_exclusions(self.exclusions_path)
        filtered = filter_exclusions(text, exclusions)
        ranked = rank_keywords(
            filtered,
            stop_words=self.stop_words,
            punctuation=self.punctuation,
            top_k=self.top_k,
        )
        keywords = post_process(ranked)
        LOGGER.debug("Tagged %s with %d keywords", filename, len(keywords))
        return Document(filename=filename, keywords=tuple(keywords))
