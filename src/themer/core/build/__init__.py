"""Build-time integration: bundler entry points."""
from __future__ import annotations

from .entries import OVERWRITE, RESERVE, FeatureEntryResolver, feature_entries

__all__ = ["FeatureEntryResolver", "OVERWRITE", "RESERVE", "feature_entries"]
