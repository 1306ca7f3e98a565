"""Bundler entry points for the script build.

The build tool adapter receives a plain ``{entry key: absolute path}``
mapping. ``main`` is always present and points at the project's own script
entry; whether that file exists is reported by validation, not here.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from themer.core.cascade.features import available_features
from themer.core.cascade.paths import PathResolver
from themer.core.config.domains.features import FeaturesConfig
from themer.core.config.overrides import OverrideConfiguration
from themer.core.defaults import MAIN_ENTRY_KEY
from themer.core.theme import ThemeDescriptor
from themer.core.types import ResourceType

logger = logging.getLogger(__name__)

RESERVE = "reserve"
OVERWRITE = "overwrite"


class FeatureEntryResolver:
    """Turn discovered features into bundler entries."""

    def __init__(
        self,
        project_root: Path,
        theme: ThemeDescriptor,
        overrides: Optional[OverrideConfiguration] = None,
        features_config: Optional[FeaturesConfig] = None,
    ) -> None:
        self.project_root = Path(project_root)
        self.theme = theme
        self.overrides = overrides or OverrideConfiguration()
        self.features_config = features_config or FeaturesConfig.from_defaults(self.project_root)
        self.path_resolver = PathResolver(self.project_root, theme, self.overrides)

    def main_entry(self) -> Path:
        scripts_dir = self.overrides.directory_for(ResourceType.SCRIPT)
        return self.project_root / scripts_dir / self.features_config.main_entry

    def entry_key(self, feature_name: str) -> str:
        if self.features_config.entry_key_style == "url":
            return f"/{feature_name}.js"
        return feature_name

    def entries(self) -> Dict[str, str]:
        cfg = self.features_config
        catalog = available_features(
            self.path_resolver,
            layout=cfg.layout,
            entry_files=cfg.entry_files,
            exclude_suffixes=cfg.exclude_suffixes,
        )

        entries: Dict[str, str] = {MAIN_ENTRY_KEY: str(self.main_entry())}
        for name, resolved in catalog.items():
            key = self.entry_key(name)
            if key == MAIN_ENTRY_KEY and cfg.reserved_name_policy != OVERWRITE:
                logger.warning(
                    "Feature '%s' (%s) collides with the reserved '%s' entry and was skipped; rename the feature",
                    name,
                    resolved.path,
                    MAIN_ENTRY_KEY,
                )
                continue
            entries[key] = str(resolved.path)

        if len(catalog):
            logger.info("Discovered features: %s", ", ".join(catalog.names()))
        return entries


def feature_entries(
    project_root: Path,
    theme: ThemeDescriptor,
    overrides: Optional[OverrideConfiguration] = None,
    features_config: Optional[FeaturesConfig] = None,
) -> Dict[str, str]:
    return FeatureEntryResolver(project_root, theme, overrides, features_config).entries()


__all__ = ["FeatureEntryResolver", "OVERWRITE", "RESERVE", "feature_entries"]
