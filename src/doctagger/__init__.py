"""doctagger - keyword tagging for local PDF and EPUB collections."""

__version__ = "0.1.0"
