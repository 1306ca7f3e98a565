"""Installation diagnostics.

Read-only probes of the project and its theme. Errors mean the build cannot
work; warnings point at likely mistakes and never affect ``is_valid``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from themer.core.cascade.features import resolve_feature
from themer.core.cascade.paths import PathResolver
from themer.core.cascade.resolver import ResourceResolver
from themer.core.config import ProjectConfig
from themer.core.config.overrides import OverrideConfiguration
from themer.core.exceptions import ThemeMetadataError, ThemeNotFoundError
from themer.core.theme import ThemeDescriptor, load_theme_descriptor, locate_theme
from themer.core.types import ResourceType, Source
from themer.core.utils.io import read_text

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {"errors": list(self.errors), "warnings": list(self.warnings), "isValid": self.is_valid}


@dataclass(frozen=True)
class ComponentCheck:
    exists: bool
    path: Optional[Path] = None
    source: Optional[Source] = None


class ValidationReporter:
    """Check that a project and its theme are wired up correctly."""

    def __init__(
        self,
        project_root: Path,
        config: Optional[ProjectConfig] = None,
        *,
        theme_name: Optional[str] = None,
    ) -> None:
        self.project_root = Path(project_root)
        self.config = config or ProjectConfig(self.project_root)
        self.theme_name = theme_name or self.config.cascade.theme_name

    # ----- theme -------------------------------------------------------
    def load_theme(self) -> ThemeDescriptor:
        """Locate and load the configured theme.

        Raises:
            ThemeNotFoundError: No theme configured, or not installed.
            ThemeMetadataError: theme.json missing or invalid.
        """
        if not self.theme_name:
            raise ThemeNotFoundError(
                "No theme configured.\n  Set 'cascade.theme' in themer.yaml to the installed theme package name.",
                context={"checked": []},
            )
        root = locate_theme(self.project_root, self.theme_name, self.config.cascade.themes_dir)
        return load_theme_descriptor(root)

    def _override_configuration(self, theme: ThemeDescriptor) -> OverrideConfiguration:
        return self.config.cascade.override_configuration(theme)

    # ----- checks ------------------------------------------------------
    def validate(self) -> ValidationResult:
        result = ValidationResult()

        try:
            theme = self.load_theme()
        except (ThemeNotFoundError, ThemeMetadataError) as exc:
            result.errors.append(str(exc))
            return result

        overrides = self._override_configuration(theme)
        vcfg = self.config.validation

        for rel in (*vcfg.required_theme_dirs, *theme.required_dirs):
            if not (theme.root / rel).is_dir():
                result.errors.append(f"Theme '{theme.name}' is missing its {rel}/ directory: {theme.root / rel}")

        themes_dir = self.project_root / self.config.cascade.themes_dir
        for peer in dict.fromkeys((*vcfg.peer_dependencies, *theme.peer_dependencies)):
            if not (themes_dir / peer).exists():
                result.errors.append(
                    f"Required dependency '{peer}' is not installed (checked {themes_dir / peer}).\n"
                    f"  Install it alongside the theme."
                )

        main_entry = (
            self.project_root
            / overrides.directory_for(ResourceType.SCRIPT)
            / self.config.features.main_entry
        )
        if not main_entry.is_file():
            result.warnings.append(
                f"Script entry point not found: {main_entry}\n"
                f"  Create it to add site-specific scripts; the build still runs without it."
            )

        for deprecated in vcfg.deprecated_files:
            if (self.project_root / deprecated.path).exists():
                note = deprecated.message or "This file is no longer read."
                result.warnings.append(f"Deprecated file found: {deprecated.path}\n  {note}")

        if main_entry.is_file():
            text = read_text(main_entry)
            for pattern in vcfg.legacy_import_patterns:
                needle = pattern.format(theme=theme.name)
                if needle in text:
                    result.warnings.append(
                        f"{main_entry} still contains a manual theme import ({needle!r}).\n"
                        f"  Theme styles and scripts are now bundled automatically; remove the import."
                    )

        layouts_dir = self.project_root / overrides.directory_for(ResourceType.TEMPLATE)
        if not layouts_dir.is_dir():
            result.warnings.append(
                f"Layout override directory not found: {layouts_dir}\n"
                f"  Create it to override theme layouts."
            )

        for issue in overrides.rejected:
            result.warnings.append(issue.message)

        return result

    def validate_component(self, kind: str, name: str) -> ComponentCheck:
        """Report where a single layout, feature or data file resolves from."""
        theme = self.load_theme()
        path_resolver = PathResolver(self.project_root, theme, self._override_configuration(theme))
        resolver = ResourceResolver(path_resolver)
        if kind == "layout":
            extension = self.config.templates.extension
            filename = name if name.endswith(extension) else f"{name}{extension}"
            resolved = resolver.resolve(ResourceType.TEMPLATE, filename)
        elif kind == "feature":
            resolved = resolve_feature(path_resolver, name, entry_files=self.config.features.entry_files)
        elif kind == "data":
            resolved = resolver.resolve(ResourceType.DATA, name)
        else:
            raise ValueError(f"Unknown component kind: {kind!r} (expected layout, feature or data)")
        if resolved is None:
            return ComponentCheck(exists=False)
        return ComponentCheck(exists=True, path=resolved.path, source=resolved.source)


def log_validation(result: ValidationResult, *, exit_on_error: bool = False) -> None:
    """Log a result; raise ``SystemExit(1)`` on errors when ``exit_on_error``."""
    for error in result.errors:
        logger.error(error)
    for warning in result.warnings:
        logger.warning(warning)
    if result.is_valid:
        logger.info("Theme installation is valid (%d warning(s))", len(result.warnings))
    elif exit_on_error:
        raise SystemExit(1)


def validate_theme(
    project_root: Path,
    config: Optional[ProjectConfig] = None,
    *,
    theme_name: Optional[str] = None,
) -> ValidationResult:
    return ValidationReporter(project_root, config, theme_name=theme_name).validate()


__all__ = [
    "ComponentCheck",
    "ValidationReporter",
    "ValidationResult",
    "log_validation",
    "validate_theme",
]
