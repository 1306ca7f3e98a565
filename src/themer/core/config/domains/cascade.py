"""Domain-specific configuration for override resolution."""
from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from ..base import BaseDomainConfig
from ..overrides import OverrideConfiguration, resolve_override_paths

if TYPE_CHECKING:
    from themer.core.theme import ThemeDescriptor


class CascadeConfig(BaseDomainConfig):
    """Theme selection and override directories."""

    def _config_section(self) -> str:
        return "cascade"

    @cached_property
    def theme_name(self) -> Optional[str]:
        name = self.section.get("theme")
        return str(name) if name else None

    @cached_property
    def themes_dir(self) -> str:
        return str(self.section.get("themesDir") or "node_modules")

    @cached_property
    def override_paths(self) -> Dict[str, str]:
        """Override paths exactly as the project configured them (may be empty)."""
        return {str(k): str(v) for k, v in (self.section.get("overridePaths") or {}).items()}

    @cached_property
    def data_extensions(self) -> Tuple[str, ...]:
        return tuple(str(e) for e in self.section.get("dataExtensions") or (".js", ".json"))

    def override_configuration(self, theme: Optional["ThemeDescriptor"] = None) -> OverrideConfiguration:
        return resolve_override_paths(theme, self.override_paths)


__all__ = ["CascadeConfig"]
