"""Exclusion filtering, ranking and keyword normalization."""
