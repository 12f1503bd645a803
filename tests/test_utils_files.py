"""Tests for file utility functions."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from doctagger.errors import MetadataUpdateError
from doctagger.models import Document
from doctagger.utils.files import metadata_path_for, update_metadata_tags, write_documents


class TestMetadataPathFor:
    """Test metadata_path_for function."""

    def test_replaces_suffix(self) -> None:
        assert metadata_path_for(Path("/lib/book.pdf")) == Path("/lib/book.metadata.json")

    def test_epub(self) -> None:
        assert metadata_path_for(Path("novel.epub")).name == "novel.metadata.json"


class TestUpdateMetadataTags:
    """Test update_metadata_tags function."""

    def test_missing_file(self, tmp_path: Path) -> None:
        assert update_metadata_tags(tmp_path / "book.pdf", ["Tag"]) is False
        assert not (tmp_path / "book.metadata.json").exists()

    def test_overwrites_tags_only(self, tmp_path: Path) -> None:
        metadata = tmp_path / "book.metadata.json"
        metadata.write_text(json.dumps({"author": "Ann", "tags": ["stale"]}), encoding="utf-8")

        assert update_metadata_tags(tmp_path / "book.pdf", ["Harbor", "1999"]) is True

        assert json.loads(metadata.read_text(encoding="utf-8")) == {
            "author": "Ann",
            "tags": ["Harbor", "1999"],
        }

    def test_adds_missing_tags_field(self, tmp_path: Path) -> None:
        metadata = tmp_path / "book.metadata.json"
        metadata.write_text("{}", encoding="utf-8")

        update_metadata_tags(tmp_path / "book.pdf", ["Éclair"])

        text = metadata.read_text(encoding="utf-8")
        assert "Éclair" in text
        assert json.loads(text) == {"tags": ["Éclair"]}

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / "book.metadata.json").write_text("{oops", encoding="utf-8")

        with pytest.raises(MetadataUpdateError):
            update_metadata_tags(tmp_path / "book.pdf", ["Tag"])

    def test_not_an_object(self, tmp_path: Path) -> None:
        (tmp_path / "book.metadata.json").write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(MetadataUpdateError, match="not a JSON object"):
            update_metadata_tags(tmp_path / "book.pdf", ["Tag"])


class TestWriteDocuments:
    """Test write_documents function."""

    def test_writes_json(self, tmp_path: Path) -> None:
        output = tmp_path / "out" / "documents.json"
        documents = {
            "1_2": Document("a.pdf", ("Harbor", "Lights")),
            "3_4": Document("b.epub", ()),
        }

        write_documents(documents, output)

        assert json.loads(output.read_text(encoding="utf-8")) == {
            "1_2": {"filename": "a.pdf", "keywords": ["Harbor", "Lights"]},
            "3_4": {"filename": "b.epub", "keywords": []},
        }

    def test_empty(self, tmp_path: Path) -> None:
        output = tmp_path / "documents.json"

        write_documents({}, output)

        assert json.loads(output.read_text(encoding="utf-8")) == {}
