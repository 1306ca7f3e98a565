"""Base class for domain-specific configuration accessors.

Each accessor wraps one top-level section of the merged configuration and
exposes typed, cached properties over it:

    class MyConfig(BaseDomainConfig):
        def _config_section(self) -> str:
            return "mySection"

        @cached_property
        def my_setting(self) -> str:
            return self.section.get("mySetting", "default")
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from themer.data import read_yaml

from .manager import ConfigManager


class BaseDomainConfig(ABC):
    def __init__(
        self,
        project_root: Optional[Path] = None,
        *,
        config: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Initialize from an already-loaded document, or load one for ``project_root``."""
        self._project_root = Path(project_root) if project_root else None
        if config is None:
            config = ConfigManager(self._project_root).load_config()
        self._config: Mapping[str, Any] = config

    @classmethod
    def from_defaults(cls, project_root: Optional[Path] = None):
        """Accessor over the bundled defaults only (no project file, no env)."""
        return cls(project_root, config=read_yaml("config", "defaults.yaml"))

    @property
    def project_root(self) -> Path:
        return self._project_root or Path.cwd()

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        """This domain's configuration section, or an empty dict."""
        return dict(self._config.get(self._config_section(), {}) or {})


__all__ = ["BaseDomainConfig"]
