"""Per-format text extraction."""
