"""Configuration for a Themer build.

``ProjectConfig`` loads the merged document once and hands out the typed
section accessors; it is constructed once per process or build.
"""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Any, Mapping, Optional

from .base import BaseDomainConfig
from .domains import (
    CascadeConfig,
    DeprecatedFile,
    FeatureLayout,
    FeaturesConfig,
    TemplatesConfig,
    ValidationConfig,
)
from .manager import ConfigManager, load_config
from .overrides import (
    MisconfiguredPath,
    OverrideConfiguration,
    check_relative_path,
    resolve_override_paths,
)


class ProjectConfig:
    def __init__(
        self,
        project_root: Optional[Path] = None,
        *,
        config: Optional[Mapping[str, Any]] = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.project_root = Path(project_root) if project_root else Path.cwd()
        if config is None:
            config = ConfigManager(self.project_root).load_config(overrides=overrides)
        self.document: Mapping[str, Any] = config

    @cached_property
    def cascade(self) -> CascadeConfig:
        return CascadeConfig(self.project_root, config=self.document)

    @cached_property
    def templates(self) -> TemplatesConfig:
        return TemplatesConfig(self.project_root, config=self.document)

    @cached_property
    def features(self) -> FeaturesConfig:
        return FeaturesConfig(self.project_root, config=self.document)

    @cached_property
    def validation(self) -> ValidationConfig:
        return ValidationConfig(self.project_root, config=self.document)


__all__ = [
    "BaseDomainConfig",
    "CascadeConfig",
    "ConfigManager",
    "DeprecatedFile",
    "FeatureLayout",
    "FeaturesConfig",
    "MisconfiguredPath",
    "OverrideConfiguration",
    "ProjectConfig",
    "TemplatesConfig",
    "ValidationConfig",
    "check_relative_path",
    "load_config",
    "resolve_override_paths",
]
