"""Shared helpers: deep merge and structured file readers."""
from __future__ import annotations

from .io import read_json, read_text, read_yaml
from .merge import deep_merge, merge_arrays

__all__ = ["deep_merge", "merge_arrays", "read_json", "read_text", "read_yaml"]
