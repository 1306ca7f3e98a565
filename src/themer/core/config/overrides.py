"""Override directory configuration.

Maps each resource type to the project-relative directory where the content
repository may place its overrides. Resolution priority:

1. An explicit, non-empty mapping from the project (replaces wholesale)
2. The theme's ``cascade.defaultOverridePaths``
3. Framework defaults

Keys absent from the chosen mapping fall back to the framework default for
that key. Values that would escape the project root are rejected and
recorded as ``MisconfiguredPath`` issues.
"""
from __future__ import annotations

import logging
import posixpath
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional, Set, Tuple

from themer.core.defaults import DEFAULT_OVERRIDE_PATHS
from themer.core.types import ResourceType

if TYPE_CHECKING:
    from themer.core.theme import ThemeDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MisconfiguredPath:
    """An override directory that was ignored because it is unsafe."""

    key: str
    value: str
    reason: str

    @property
    def message(self) -> str:
        return (
            f"Override path for '{self.key}' is misconfigured: {self.value!r} ({self.reason}).\n"
            f"  It was ignored; using the default '{_default_for(self.key)}' instead.\n"
            f"  Override paths must be relative to the project root and stay inside it."
        )


def _default_for(key: str) -> str:
    try:
        return DEFAULT_OVERRIDE_PATHS.get(ResourceType.from_key(key), "")
    except ValueError:
        return ""


def check_relative_path(value: str) -> Optional[str]:
    """Return why ``value`` cannot be used as a project-relative directory, or None."""
    text = str(value).replace("\\", "/").strip()
    if not text:
        return "empty path"
    if text.startswith("/") or (len(text) > 1 and text[1] == ":"):
        return "absolute path"
    normalized = posixpath.normpath(text)
    if normalized == ".." or normalized.startswith("../"):
        return "escapes the project root"
    return None


@dataclass(frozen=True)
class OverrideConfiguration:
    paths: Mapping[ResourceType, str] = field(default_factory=lambda: MappingProxyType(dict(DEFAULT_OVERRIDE_PATHS)))
    rejected: Tuple[MisconfiguredPath, ...] = ()

    def directory_for(self, resource_type: ResourceType) -> str:
        """Project-relative override directory for ``resource_type``."""
        return self.paths.get(resource_type) or DEFAULT_OVERRIDE_PATHS.get(resource_type) or resource_type.value

    @classmethod
    def defaults(cls) -> "OverrideConfiguration":
        return cls()

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]]) -> "OverrideConfiguration":
        """Build from a ``{config key: directory}`` mapping.

        Unknown keys are ignored with a warning; unsafe values are rejected.
        Partials follow ``<layouts>/partials`` unless mapped on their own.
        """
        paths: Dict[ResourceType, str] = dict(DEFAULT_OVERRIDE_PATHS)
        rejected: List[MisconfiguredPath] = []
        explicit: Set[ResourceType] = set()
        for key, value in (mapping or {}).items():
            try:
                rtype = ResourceType.from_key(str(key))
            except ValueError:
                logger.warning("Ignoring override path for unknown resource type '%s'", key)
                continue
            reason = check_relative_path(value)
            if reason is not None:
                issue = MisconfiguredPath(key=rtype.value, value=str(value), reason=reason)
                logger.warning(issue.message)
                rejected.append(issue)
                continue
            paths[rtype] = posixpath.normpath(str(value).replace("\\", "/"))
            explicit.add(rtype)
        if ResourceType.TEMPLATE in explicit and ResourceType.PARTIAL not in explicit:
            paths[ResourceType.PARTIAL] = posixpath.join(paths[ResourceType.TEMPLATE], "partials")
        return cls(paths=MappingProxyType(paths), rejected=tuple(rejected))

    def to_dict(self) -> Dict[str, str]:
        return {rtype.value: path for rtype, path in self.paths.items()}


def resolve_override_paths(
    theme: Optional["ThemeDescriptor"] = None,
    override_paths: Optional[Mapping[str, Any]] = None,
) -> OverrideConfiguration:
    """Pick the override mapping for this build (see module docstring for priority)."""
    if override_paths:
        return OverrideConfiguration.from_mapping(override_paths)
    if theme is not None and theme.default_override_paths:
        return OverrideConfiguration.from_mapping(theme.default_override_paths)
    return OverrideConfiguration.defaults()


__all__ = [
    "MisconfiguredPath",
    "OverrideConfiguration",
    "check_relative_path",
    "resolve_override_paths",
]
