"""Core doctagger data models."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Dict, List, Tuple


@dataclass(frozen=True, slots=True)
class Document:
    """Keywords computed for a single file."""

    filename: str
    keywords: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.filename:
            raise ValueError("Document filename must not be empty")

    def to_dict(self) -> Dict[str, object]:
        return {"filename": self.filename, "keywords": list(self.keywords)}


@dataclass(slots=True)
class RankedTerm:
    term: str
    score: float


@dataclass(slots=True)
class WalkResult:
    """Documents and error messages gathered while walking one subtree.

    Mutations go through the helper methods, which hold ``_lock`` so a result
    can be shared between writers. ``complete`` is False when an unexpected
    fault cut the walk short; the data gathered up to that point is kept but
    may be missing entries.
    """

    documents: Dict[str, Document] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    complete: bool = True
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def add_document(self, doc_id: str, document: Document) -> None:
        with self._lock:
            self.documents[doc_id] = document

    def add_error(self, message: str) -> None:
        with self._lock:
            self.errors.append(message)

    def merge(self, other: "WalkResult") -> None:
        """Fold a child subtree's results into this one."""
        with self._lock:
            self.documents.update(other.documents)
            self.errors.extend(other.errors)
            if not other.complete:
                self.complete = False

    def __iter__(self):
        # Allows ``documents, errors = walker.walk(...)``
        yield self.documents
        yield self.errors
