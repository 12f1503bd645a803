"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from doctagger.keywords.ranker import DEFAULT_TOP_K


def _get_default_exclusions_path() -> Path:
    """Get the default exclusion list path."""
    # When running from a checkout, prefer local data/ if it exists
    local_csv = Path("data/tag_exclusions.csv")
    if local_csv.exists():
        return local_csv

    return Path.home() / ".doctagger" / "tag_exclusions.csv"


@dataclass(slots=True)
class AppConfig:
    root: Path = field(default_factory=lambda: Path("."))
    exclusions_path: Path | None = None
    output_path: Path = field(default_factory=lambda: Path("documents.json"))
    recursive: bool = True
    top_k: int = DEFAULT_TOP_K
    update_metadata: bool = False

    def __post_init__(self) -> None:
        if self.exclusions_path is None:
            self.exclusions_path = _get_default_exclusions_path()
        if self.top_k <= 0:
            raise ValueError("top_k must be positive")

    @staticmethod
    def _resolve(path: Path, base_dir: Path | None) -> Path:
        if Path(path).is_absolute() or base_dir is None:
            return Path(path)
        return base_dir / path

    def resolve_output_path(self, base_dir: Path | None = None) -> Path:
        return self._resolve(self.output_path, base_dir)

    def resolve_exclusions_path(self, base_dir: Path | None = None) -> Path:
        if self.exclusions_path is None:
            self.exclusions_path = _get_default_exclusions_path()
        return self._resolve(self.exclusions_path, base_dir)
