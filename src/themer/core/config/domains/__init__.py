"""Typed accessors for each configuration section."""
from __future__ import annotations

from .cascade import CascadeConfig
from .features import FeatureLayout, FeaturesConfig
from .templates import TemplatesConfig
from .validation import DeprecatedFile, ValidationConfig

__all__ = [
    "CascadeConfig",
    "DeprecatedFile",
    "FeatureLayout",
    "FeaturesConfig",
    "TemplatesConfig",
    "ValidationConfig",
]
