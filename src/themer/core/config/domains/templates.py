"""Domain-specific configuration for template lookup."""
from __future__ import annotations

from functools import cached_property
from typing import Tuple

from ..base import BaseDomainConfig


class TemplatesConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "templates"

    @cached_property
    def theme_prefix(self) -> str:
        return str(self.section.get("themePrefix") or "@theme/")

    @cached_property
    def extension(self) -> str:
        return str(self.section.get("extension") or ".njk")

    @cached_property
    def user_extra_dirs(self) -> Tuple[str, ...]:
        return tuple(self.section.get("userExtraDirs") or ())

    @cached_property
    def theme_extra_dirs(self) -> Tuple[str, ...]:
        return tuple(self.section.get("themeExtraDirs") or ())

    @cached_property
    def additional_paths(self) -> Tuple[str, ...]:
        return tuple(self.section.get("additionalPaths") or ())

    @cached_property
    def production(self) -> bool:
        return bool(self.section.get("production", False))


__all__ = ["TemplatesConfig"]
