"""Mapping from file suffix to text extractor."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple

from doctagger.ingestion.epub_loader import extract_epub_text
from doctagger.ingestion.pdf_loader import extract_pdf_text

TextExtractor = Callable[[Path], str]


def _normalize_suffix(suffix: str) -> str:
    suffix = suffix.lower()
    return suffix if suffix.startswith(".") else f".{suffix}"


class ExtractorRegistry:
    """Selects the extractor for a path by its (case-insensitive) suffix."""

    def __init__(self, extractors: Optional[Mapping[str, TextExtractor]] = None) -> None:
        self._extractors: Dict[str, TextExtractor] = {}
        for suffix, extractor in (extractors or {}).items():
            self.register(suffix, extractor)

    def register(self, suffix: str, extractor: TextExtractor) -> None:
        self._extractors[_normalize_suffix(suffix)] = extractor

    def for_path(self, path: Path) -> Optional[TextExtractor]:
        return self._extractors.get(path.suffix.lower())

    def supports(self, path: Path) -> bool:
        return self.for_path(path) is not None

    @property
    def suffixes(self) -> Tuple[str, ...]:
        return tuple(sorted(self._extractors))


def default_registry(extra: Iterable[Tuple[str, TextExtractor]] = ()) -> ExtractorRegistry:
    """Registry with the built-in PDF and EPUB extractors."""
    registry = ExtractorRegistry({".pdf": extract_pdf_text, ".epub": extract_epub_text})
    for suffix, extractor in extra:
        registry.register(suffix, extractor)
    return registry
