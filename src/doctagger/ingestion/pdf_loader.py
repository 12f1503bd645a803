"""PDF text extraction.

Uses PyMuPDF (fitz) for fast PDF text extraction.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import fitz  # PyMuPDF

from doctagger.errors import ExtractionError
from doctagger.utils.text import normalize_whitespace

LOGGER = logging.getLogger(__name__)


def iter_text_parts(path: Path) -> Iterator[str]:
    """Yield text content from a PDF file page by page.

    Raises ExtractionError if the file cannot be opened as a PDF. Pages that
    fail to render are logged and skipped.
    """
    try:
        doc = fitz.open(path)
    except Exception as exc:
        raise ExtractionError(path.name, exc) from exc

    try:
        if doc.needs_pass:
            raise ExtractionError(path.name, "document is encrypted")
        # MuPDF repairs some broken files into an empty document
        if len(doc) == 0:
            raise ExtractionError(path.name, "document has no pages")
        for index in range(len(doc)):
            try:
                page = doc[index]
                text = page.get_text() or ""
                # One newline between pages keeps words from running together.
                normalized = normalize_whitespace(text.splitlines())
                if normalized:
                    yield normalized + "\n"
            except Exception as exc:  # pragma: no cover - defensive path
                LOGGER.warning("Failed to read page %s in %s: %s", index, path, exc)
    finally:
        doc.close()


def extract_pdf_text(path: Path) -> str:
    """Return the full plain-text rendering of a PDF."""
    return "".join(iter_text_parts(path))
