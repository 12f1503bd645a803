"""EPUB text extraction using ebooklib."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Iterator

from ebooklib import epub

from doctagger.errors import ExtractionError
from doctagger.utils.text import strip_markup

LOGGER = logging.getLogger(__name__)


def iter_text_resources(path: Path) -> Iterator[str]:
    """Yield every archive entry that decodes as UTF-8, with markup removed.

    ebooklib validates the book; the text then comes from every entry of the
    zip archive, including the package document and container files that are
    not part of the manifest. Binary assets (images, fonts) fail to decode and
    are skipped; they are an expected part of an EPUB, not an error.
    """
    try:
        epub.read_epub(str(path), options={"ignore_ncx": True})
    except Exception as exc:
        raise ExtractionError(path.name, exc) from exc

    try:
        with zipfile.ZipFile(path) as archive:
            for name in archive.namelist():
                try:
                    content = archive.read(name).decode("utf-8")
                except UnicodeDecodeError:
                    LOGGER.debug("Skipping non-text resource %s in %s", name, path)
                    continue
                yield strip_markup(content)
    except (OSError, zipfile.BadZipFile) as exc:
        raise ExtractionError(path.name, exc) from exc


def extract_epub_text(path: Path) -> str:
    """Concatenate the text resources of an EPUB into one string."""
    return "".join(iter_text_resources(path))
