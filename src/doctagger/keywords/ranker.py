"""TF-IDF keyword ranking over a single document.

Every document is ranked on its own: the corpus handed to the vectorizer is
that one document, so the IDF factor is the same for every term and the order
is driven by term frequency alone.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, List

import numpy as np
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS, TfidfVectorizer

from doctagger.models import RankedTerm

DEFAULT_TOP_K = 50

PUNCTUATION: frozenset[str] = frozenset(
    [".", ",", ":", ";", "!", "?", "(", ")", "[", "]", "{", "}", '"', "'", "-", "’", "‘", "–"]
)

STOP_WORDS: frozenset[str] = frozenset(ENGLISH_STOP_WORDS)


def tokenize(
    text: str,
    stop_words: AbstractSet[str] = STOP_WORDS,
    punctuation: Iterable[str] = PUNCTUATION,
) -> List[str]:
    """Lowercase, replace punctuation with spaces, split, and drop stop words."""
    lowered = text.lower()
    for mark in punctuation:
        lowered = lowered.replace(mark, " ")
    return [token for token in lowered.split() if token not in stop_words]


def rank_keywords(
    text: str,
    *,
    stop_words: AbstractSet[str] = STOP_WORDS,
    punctuation: Iterable[str] = PUNCTUATION,
    top_k: int = DEFAULT_TOP_K,
) -> List[RankedTerm]:
    """Return up to ``top_k`` terms ordered by descending TF-IDF score.

    Equal scores keep the order in which the terms first appear in the text.
    """
    if top_k <= 0:
        return []

    tokens = tokenize(text, stop_words, punctuation)
    if not tokens:
        return []

    # Tokens are already split; the vectorizer only counts and weights them.
    vectorizer = TfidfVectorizer(
        tokenizer=str.split,
        token_pattern=None,
        lowercase=False,
        norm="l1",
        smooth_idf=True,
    )
    matrix = vectorizer.fit_transform([" ".join(tokens)])
    row = matrix.toarray()[0]
    vocabulary = vectorizer.vocabulary_

    terms = list(dict.fromkeys(tokens))
    scores = np.array([row[vocabulary[term]] for term in terms])
    order = np.argsort(-scores, kind="stable")[:top_k]
    return [RankedTerm(term=terms[index], score=float(scores[index])) for index in order]
