"""Exception types raised by the tagging pipeline."""

from __future__ import annotations

from pathlib import Path


class DocTaggerError(Exception):
    """Base class for doctagger errors."""


class ExtractionError(DocTaggerError):
    """A document could not be turned into text."""

    def __init__(self, filename: str, cause: BaseException | str) -> None:
        self.filename = filename
        self.cause = cause
        super().__init__(f"Error extracting text from {filename}: {cause}")


class FilterConfigError(DocTaggerError):
    """The exclusion terms do not form a valid pattern.

    The pattern is shared by every document, so this aborts the run instead of
    being recorded against a single file.
    """


class DirectoryReadError(DocTaggerError):
    """A directory or one of its entries could not be read."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading directory entry {path}: {cause}")


class MetadataUpdateError(DocTaggerError):
    """A sibling metadata file could not be patched."""

    def __init__(self, path: Path, cause: BaseException | str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Error updating metadata {path}: {cause}")
