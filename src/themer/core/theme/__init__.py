"""Theme package metadata and location."""
from __future__ import annotations

from .descriptor import (
    ThemeDescriptor,
    ThemeFeature,
    load_theme,
    load_theme_descriptor,
    locate_theme,
)

__all__ = [
    "ThemeDescriptor",
    "ThemeFeature",
    "load_theme",
    "load_theme_descriptor",
    "locate_theme",
]
