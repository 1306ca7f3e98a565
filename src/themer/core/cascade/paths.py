"""Candidate path computation.

Pure path arithmetic: given a resource type and a name, compute where the
project override and the theme default would live. No filesystem access.

    resolver = PathResolver(project_root, theme, overrides)
    paths = resolver.paths(ResourceType.DATA, "site.json")
    paths.user   # <project>/content/_data/site.json
    paths.theme  # <theme root>/data/site.json
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from themer.core.config.overrides import OverrideConfiguration
from themer.core.exceptions import InvalidResourceNameError
from themer.core.theme import ThemeDescriptor
from themer.core.types import ResourceType


@dataclass(frozen=True)
class CandidatePaths:
    user: Path
    theme: Path
    user_dir: Path
    theme_dir: Path

    def checked(self) -> List[Path]:
        return [self.user, self.theme]


def split_resource_name(name: str) -> List[str]:
    """Split ``name`` into safe path segments.

    ``.`` and empty segments are dropped; ``..`` or an absolute name raises,
    so a resolved path can never leave its resource directory.
    """
    text = str(name).replace("\\", "/")
    if text.startswith("/") or (len(text) > 1 and text[1] == ":"):
        raise InvalidResourceNameError(
            f"Resource name must be relative: {name!r}",
            context={"name": name},
        )
    segments = [seg for seg in text.split("/") if seg not in ("", ".")]
    if ".." in segments:
        raise InvalidResourceNameError(
            f"Resource name may not contain '..': {name!r}",
            context={"name": name},
        )
    return segments


def _join(base: Path, segments: List[str]) -> Path:
    return base.joinpath(*segments) if segments else base


@dataclass(frozen=True)
class PathResolver:
    project_root: Path
    theme: ThemeDescriptor
    overrides: OverrideConfiguration = field(default_factory=OverrideConfiguration)

    def user_dir(self, resource_type: ResourceType) -> Path:
        return Path(self.project_root) / self.overrides.directory_for(resource_type)

    def theme_dir(self, resource_type: ResourceType) -> Path:
        return self.theme.resource_root(resource_type)

    def paths(self, resource_type: ResourceType, name: str = "") -> CandidatePaths:
        segments = split_resource_name(name)
        user_dir = self.user_dir(resource_type)
        theme_dir = self.theme_dir(resource_type)
        return CandidatePaths(
            user=_join(user_dir, segments),
            theme=_join(theme_dir, segments),
            user_dir=user_dir,
            theme_dir=theme_dir,
        )


def candidate_paths(
    resource_type: ResourceType,
    name: str,
    config: Optional[OverrideConfiguration],
    theme: ThemeDescriptor,
    project_root: Path,
) -> CandidatePaths:
    """Functional form of ``PathResolver(project_root, theme, config).paths(...)``."""
    return PathResolver(Path(project_root), theme, config or OverrideConfiguration()).paths(resource_type, name)


__all__ = ["CandidatePaths", "PathResolver", "candidate_paths", "split_resource_name"]
