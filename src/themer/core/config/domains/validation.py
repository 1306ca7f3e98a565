"""Domain-specific configuration for installation checks."""
from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Tuple

from ..base import BaseDomainConfig


@dataclass(frozen=True)
class DeprecatedFile:
    path: str
    message: str = ""


class ValidationConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "validation"

    @cached_property
    def required_theme_dirs(self) -> Tuple[str, ...]:
        return tuple(self.section.get("requiredThemeDirs") or ())

    @cached_property
    def peer_dependencies(self) -> Tuple[str, ...]:
        return tuple(self.section.get("peerDependencies") or ())

    @cached_property
    def deprecated_files(self) -> Tuple[DeprecatedFile, ...]:
        return tuple(
            DeprecatedFile(path=str(item["path"]), message=str(item.get("message") or "").strip())
            for item in self.section.get("deprecatedFiles") or ()
        )

    @cached_property
    def legacy_import_patterns(self) -> Tuple[str, ...]:
        """Text patterns; ``{theme}`` is replaced by the theme name."""
        return tuple(self.section.get("legacyImportPatterns") or ())


__all__ = ["DeprecatedFile", "ValidationConfig"]
