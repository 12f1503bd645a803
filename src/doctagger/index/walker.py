"""Recursive directory tagging pipeline."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from doctagger.errors import (
    DirectoryReadError,
    ExtractionError,
    FilterConfigError,
    MetadataUpdateError,
)
from doctagger.ingestion.registry import ExtractorRegistry, default_registry
from doctagger.keywords.tagger import DocumentTagger
from doctagger.models import WalkResult
from doctagger.utils.files import update_metadata_tags
from doctagger.utils.ids import generate_id

LOGGER = logging.getLogger(__name__)


class DirectoryWalker:
    """Walks a directory tree and tags every supported document in it.

    A failure on one file or subdirectory is recorded in the result's error
    list and the walk moves on to the next entry. Only FilterConfigError, which
    affects every document alike, is allowed to propagate.
    """

    def __init__(
        self,
        tagger: DocumentTagger,
        registry: Optional[ExtractorRegistry] = None,
        *,
        recursive: bool = True,
        update_metadata: bool = False,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        self.tagger = tagger
        self.registry = registry if registry is not None else default_registry()
        self.recursive = recursive
        self.update_metadata = update_metadata
        self.id_factory = id_factory

    def walk(self, root: Path, recursive: Optional[bool] = None) -> WalkResult:
        """Tag all supported files under ``root``."""
        if recursive is None:
            recursive = self.recursive
        return self._walk_directory(Path(root), recursive)

    def _walk_directory(self, directory: Path, recursive: bool) -> WalkResult:
        result = WalkResult()
        try:
            try:
                with os.scandir(directory) as it:
                    entries = sorted(it, key=lambda entry: entry.name)
            except OSError as exc:
                message = str(DirectoryReadError(directory, exc))
                LOGGER.error(message)
                result.add_error(message)
                return result

            for entry in entries:
                self._visit(entry, recursive, result)
        except FilterConfigError:
            raise
        except Exception as exc:
            LOGGER.exception("Unexpected fault while walking %s", directory)
            result.add_error(f"Unexpected fault while walking {directory}: {exc}")
            result.complete = False
        return result

    def _visit(self, entry: os.DirEntry, recursive: bool, result: WalkResult) -> None:
        path = Path(entry.path)
        try:
            # Symlinked directories are not followed
            is_dir = entry.is_dir(follow_symlinks=False)
            is_file = not is_dir and entry.is_file()
        except OSError as exc:
            message = str(DirectoryReadError(path, exc))
            LOGGER.error(message)
            result.add_error(message)
            return

        if is_dir:
            if recursive:
                result.merge(self._walk_directory(path, recursive))
            return

        if is_file and self.registry.supports(path):
            self._process_file(path, result)
        else:
            LOGGER.debug("Ignoring %s", path)

    def _process_file(self, path: Path, result: WalkResult) -> None:
        extractor = self.registry.for_path(path)
        LOGGER.info("Processing: %s", path)
        try:
            text = extractor(path)
            document = self.tagger.tag(path.name, text)
        except FilterConfigError:
            raise
        except ExtractionError as exc:
            LOGGER.error("Failed to process %s: %s", path, exc)
            result.add_error(str(exc))
            return
        except Exception as exc:
            LOGGER.error("Failed to process %s: %s", path, exc)
            result.add_error(f"Error processing {path.name}: {exc}")
            return

        result.add_document(self.id_factory(), document)

        if self.update_metadata:
            try:
                if update_metadata_tags(path, document.keywords):
                    LOGGER.debug("Updated tags in metadata for %s", path)
            except MetadataUpdateError as exc:
                LOGGER.error(str(exc))
                result.add_error(str(exc))
