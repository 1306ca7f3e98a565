"""Domain-specific configuration for feature bundles."""
from __future__ import annotations

from enum import Enum
from functools import cached_property
from typing import Tuple

from ..base import BaseDomainConfig


class FeatureLayout(str, Enum):
    # features/<name>/index.js
    FOLDER = "folder"
    # features/<name>.js
    FLAT = "flat"


class FeaturesConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "features"

    @cached_property
    def layout(self) -> FeatureLayout:
        return FeatureLayout(self.section.get("layout", FeatureLayout.FOLDER.value))

    @cached_property
    def entry_files(self) -> Tuple[str, ...]:
        """Recognized entry files inside a self-contained feature folder."""
        return tuple(self.section.get("entryFiles") or ("index.js",))

    @cached_property
    def exclude_suffixes(self) -> Tuple[str, ...]:
        return tuple(self.section.get("excludeSuffixes") or ())

    @cached_property
    def main_entry(self) -> str:
        return str(self.section.get("mainEntry") or "main.js")

    @cached_property
    def entry_key_style(self) -> str:
        return str(self.section.get("entryKeyStyle") or "name")

    @cached_property
    def reserved_name_policy(self) -> str:
        return str(self.section.get("reservedNamePolicy") or "reserve")


__all__ = ["FeatureLayout", "FeaturesConfig"]
