"""Shared fixtures that build small real documents on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

import fitz  # PyMuPDF
import pytest
from ebooklib import epub


@pytest.fixture
def make_pdf() -> Callable[[Path, str], Path]:
    """Return a factory writing a one-page PDF containing ``text``."""

    def _make(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        doc = fitz.open()
        page = doc.new_page()
        page.insert_text((72, 72), text)
        doc.save(str(path))
        doc.close()
        return path

    return _make


@pytest.fixture
def make_epub() -> Callable[..., Path]:
    """Return a factory writing an EPUB with one chapter per entry of ``chapters``."""

    def _make(path: Path, chapters: Dict[str, str], binary_asset: bool = False) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        book = epub.EpubBook()
        book.set_identifier("doctagger-test")
        book.set_title("Test Book")
        book.set_language("en")
        book.add_author("Ada Lovelace")

        items = []
        for index, (title, body) in enumerate(chapters.items()):
            chapter = epub.EpubHtml(title=title, file_name=f"chap_{index}.xhtml", lang="en")
            chapter.content = f"<html><body><h1>{title}</h1><p>{body}</p></body></html>"
            book.add_item(chapter)
            items.append(chapter)

        if binary_asset:
            book.add_item(
                epub.EpubItem(
                    uid="cover",
                    file_name="images/cover.png",
                    media_type="image/png",
                    content=b"\x89PNG\r\n\x1a\n\xff\xfe\x00\x80",
                )
            )

        book.add_item(epub.EpubNcx())
        book.add_item(epub.EpubNav())
        book.spine = ["nav", *items]
        epub.write_epub(str(path), book)
        return path

    return _make
