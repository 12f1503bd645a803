"""Utility helpers for working with files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Sequence

from doctagger.errors import MetadataUpdateError
from doctagger.models import Document

METADATA_SUFFIX = ".metadata.json"


def metadata_path_for(path: Path) -> Path:
    """Return the sibling metadata file for a document (``book.pdf`` -> ``book.metadata.json``)."""
    return path.with_suffix(METADATA_SUFFIX)


def update_metadata_tags(path: Path, keywords: Sequence[str]) -> bool:
    """Overwrite the ``tags`` field of the document's metadata file.

    Returns False when no metadata file exists. Raises MetadataUpdateError if
    the file exists but cannot be read, parsed or written back.
    """
    metadata_path = metadata_path_for(path)
    if not metadata_path.exists():
        return False

    try:
        metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise MetadataUpdateError(metadata_path, exc) from exc

    if not isinstance(metadata, dict):
        raise MetadataUpdateError(metadata_path, "metadata is not a JSON object")

    metadata["tags"] = list(keywords)
    try:
        metadata_path.write_text(
            json.dumps(metadata, indent=2, ensure_ascii=False), encoding="utf-8"
        )
    except OSError as exc:
        raise MetadataUpdateError(metadata_path, exc) from exc
    return True


def write_documents(documents: Mapping[str, Document], path: Path) -> None:
    """Serialize the result set as pretty-printed JSON keyed by document id."""
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = {doc_id: document.to_dict() for doc_id, document in documents.items()}
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
