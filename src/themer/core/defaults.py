"""Framework conventions.

These describe how the framework works, not what a particular theme ships.
They are read from the bundled ``defaults.yaml`` so the same values back both
the configuration layer and code that runs without a loaded configuration.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from themer.data import read_yaml

from .types import ResourceType


def _framework_section(key: str) -> Mapping[ResourceType, str]:
    raw = (read_yaml("config", "defaults.yaml").get("framework") or {}).get(key) or {}
    return MappingProxyType({ResourceType.from_key(k): str(v) for k, v in raw.items()})


# Where resources live inside a theme package.
THEME_RESOURCE_PATHS: Mapping[ResourceType, str] = _framework_section("themePaths")

# Where a content repository places overrides when nothing else is configured.
DEFAULT_OVERRIDE_PATHS: Mapping[ResourceType, str] = _framework_section("defaultOverridePaths")

DEFAULT_ASSET_ENTRIES: Mapping[ResourceType, str] = _framework_section("assetEntries")

THEME_METADATA_FILE = "theme.json"
PROJECT_CONFIG_FILES = ("themer.yaml", "themer.yml")
ENV_PREFIX = "THEMER_"
MAIN_ENTRY_KEY = "main"


__all__ = [
    "THEME_RESOURCE_PATHS",
    "DEFAULT_OVERRIDE_PATHS",
    "DEFAULT_ASSET_ENTRIES",
    "THEME_METADATA_FILE",
    "PROJECT_CONFIG_FILES",
    "ENV_PREFIX",
    "MAIN_ENTRY_KEY",
]
