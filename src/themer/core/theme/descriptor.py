"""Theme package metadata.

A theme describes itself in ``theme.json`` at its package root:

    {
      "name": "base-blog",
      "version": "2.0.0",
      "layouts": ["base", "home", "post"],
      "themeFeatures": [
        {"name": "code-highlighting", "entry": "features/code-highlighting/index.js"}
      ],
      "cascade": {"defaultOverridePaths": {"layouts": "overrides/layouts"}},
      "assets": {"scripts": {"entry": "scripts/main.js"}},
      "peerDependencies": ["nunjucks"]
    }

The descriptor is read once per build and threaded into every entry point;
nothing mutates it afterwards.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from themer.core.config.overrides import check_relative_path
from themer.core.defaults import DEFAULT_ASSET_ENTRIES, THEME_METADATA_FILE, THEME_RESOURCE_PATHS
from themer.core.exceptions import ThemeMetadataError, ThemeNotFoundError
from themer.core.schemas import iter_schema_errors
from themer.core.types import ResourceType
from themer.core.utils.io import read_json


@dataclass(frozen=True)
class ThemeFeature:
    """A feature bundle declared by the theme; ``entry`` is theme-relative."""

    name: str
    entry: str


def _frozen(mapping: Mapping[Any, Any]) -> Mapping[Any, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ThemeDescriptor:
    name: str
    root: Path
    version: str = ""
    features: Tuple[ThemeFeature, ...] = ()
    templates: Tuple[str, ...] = ()
    paths: Mapping[ResourceType, str] = field(default_factory=lambda: _frozen({}))
    default_override_paths: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    asset_entries: Mapping[ResourceType, str] = field(default_factory=lambda: _frozen(DEFAULT_ASSET_ENTRIES))
    peer_dependencies: Tuple[str, ...] = ()
    required_dirs: Tuple[str, ...] = ()

    def resource_dir(self, resource_type: ResourceType) -> str:
        """Theme-relative directory holding ``resource_type``."""
        return self.paths.get(resource_type) or THEME_RESOURCE_PATHS.get(resource_type) or resource_type.value

    def resource_root(self, resource_type: ResourceType) -> Path:
        return self.root / self.resource_dir(resource_type)

    @property
    def feature_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.features)

    def feature(self, name: str) -> Optional[ThemeFeature]:
        for feature in self.features:
            if feature.name == name:
                return feature
        return None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], root: Path) -> "ThemeDescriptor":
        """Build a descriptor from parsed ``theme.json`` data (no validation)."""
        features: Dict[str, ThemeFeature] = {}
        for item in data.get("themeFeatures") or []:
            features[str(item["name"])] = ThemeFeature(str(item["name"]), str(item["entry"]))
        # Legacy shape: bare names living at the conventional features/<name>.js
        features_dir = (data.get("paths") or {}).get("features") or THEME_RESOURCE_PATHS[ResourceType.FEATURE]
        for name in data.get("features") or []:
            features.setdefault(str(name), ThemeFeature(str(name), f"{features_dir}/{name}.js"))

        asset_entries = dict(DEFAULT_ASSET_ENTRIES)
        assets = data.get("assets") or {}
        for rtype in (ResourceType.STYLE, ResourceType.SCRIPT):
            entry = (assets.get(rtype.value) or {}).get("entry")
            if entry:
                asset_entries[rtype] = str(entry)

        return cls(
            name=str(data["name"]),
            root=Path(root),
            version=str(data.get("version", "")),
            features=tuple(features.values()),
            templates=tuple(str(t) for t in data.get("layouts") or []),
            paths=_frozen({ResourceType.from_key(k): str(v) for k, v in (data.get("paths") or {}).items()}),
            default_override_paths=_frozen(
                {str(k): str(v) for k, v in ((data.get("cascade") or {}).get("defaultOverridePaths") or {}).items()}
            ),
            asset_entries=_frozen(asset_entries),
            peer_dependencies=tuple(str(p) for p in data.get("peerDependencies") or []),
            required_dirs=tuple(str(d) for d in data.get("requiredDirs") or []),
        )


def locate_theme(project_root: Path, theme_name: str, themes_dir: str = "node_modules") -> Path:
    """Return the install location of ``theme_name`` under the project.

    Raises:
        ThemeNotFoundError: If the theme directory does not exist.
    """
    theme_root = Path(project_root) / themes_dir / theme_name
    if not theme_root.is_dir():
        raise ThemeNotFoundError(
            f"Theme package not found at: {theme_root}\n"
            f"  Did you install '{theme_name}' into {themes_dir}/?",
            context={"theme": theme_name, "checked": [str(theme_root)]},
        )
    return theme_root


def _unsafe_paths(data: Mapping[str, Any]) -> List[str]:
    """Theme-relative paths in ``data`` that would leave the theme package."""
    found: List[Tuple[str, Any]] = [(f"paths/{k}", v) for k, v in (data.get("paths") or {}).items()]
    found += [(f"themeFeatures/{i}/entry", f["entry"]) for i, f in enumerate(data.get("themeFeatures") or [])]
    assets = data.get("assets") or {}
    found += [(f"assets/{k}/entry", (assets.get(k) or {}).get("entry")) for k in ("styles", "scripts")]
    found += [(f"requiredDirs/{i}", d) for i, d in enumerate(data.get("requiredDirs") or [])]

    messages: List[str] = []
    for location, value in found:
        if value is None:
            continue
        reason = check_relative_path(value)
        if reason is not None:
            messages.append(f"{location}: {value!r} is not a theme-relative path ({reason})")
    return messages


def load_theme_descriptor(theme_root: Path) -> ThemeDescriptor:
    """Read and validate ``theme.json`` under ``theme_root``.

    Raises:
        ThemeMetadataError: If the file is missing, malformed, fails the schema,
            or points a path outside the theme package.
    """
    metadata_path = Path(theme_root) / THEME_METADATA_FILE
    try:
        data = read_json(metadata_path)
    except FileNotFoundError as exc:
        raise ThemeMetadataError(
            f"Theme metadata not found: {metadata_path}\n"
            f"  Every theme must ship a {THEME_METADATA_FILE} at its package root.",
            context={"path": str(metadata_path)},
        ) from exc
    except json.JSONDecodeError as exc:
        raise ThemeMetadataError(
            f"Theme metadata is not valid JSON: {metadata_path}: {exc}",
            context={"path": str(metadata_path)},
        ) from exc

    errors = iter_schema_errors(data, "theme") or _unsafe_paths(data)
    if errors:
        raise ThemeMetadataError(
            f"Invalid theme metadata in {metadata_path}:\n  - " + "\n  - ".join(errors),
            context={"path": str(metadata_path), "errors": errors},
        )
    return ThemeDescriptor.from_dict(data, theme_root)


def load_theme(project_root: Path, theme_name: str, themes_dir: str = "node_modules") -> ThemeDescriptor:
    """Locate and load an installed theme."""
    return load_theme_descriptor(locate_theme(project_root, theme_name, themes_dir))


__all__ = [
    "ThemeFeature",
    "ThemeDescriptor",
    "locate_theme",
    "load_theme_descriptor",
    "load_theme",
]
