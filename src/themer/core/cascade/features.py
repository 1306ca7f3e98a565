"""Feature bundle cascade.

Features are optionally-loaded script/style units pages opt into, e.g. via
front matter ``pageFeatures: [code-highlighting]``. Two layouts exist:

- folder: ``features/<name>/index.js``; theme features come from the
  ``themeFeatures`` declared in theme.json, user features from every
  subfolder of the override directory holding a recognized entry file.
- flat: ``features/<name>.js`` found by scanning both directories.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from themer.core.config.domains.features import FeatureLayout
from themer.core.types import ResolvedResource, ResourceCatalog, ResourceType, Source

from .paths import PathResolver
from .resolver import Candidate, ResourceResolver
from .scanner import scan_directory

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_FILES = ("index.js",)
DEFAULT_EXCLUDE_SUFFIXES = (".auto.js",)


def _flat_extensions(entry_files: Sequence[str]) -> Tuple[str, ...]:
    exts = []
    for entry in entry_files:
        suffix = Path(entry).suffix
        if suffix and suffix not in exts:
            exts.append(suffix)
    return tuple(exts) or (".js",)


def _user_feature_folders(user_dir: Path, entry_files: Sequence[str]) -> List[Tuple[str, Path]]:
    try:
        with os.scandir(user_dir) as it:
            folders = sorted(entry.name for entry in it if entry.is_dir())
    except FileNotFoundError:
        return []
    except OSError as exc:
        logger.debug("Treating unreadable feature directory %s as empty: %s", user_dir, exc)
        return []

    found: List[Tuple[str, Path]] = []
    for name in folders:
        for entry_file in entry_files:
            candidate = user_dir / name / entry_file
            if candidate.is_file():
                found.append((name, candidate))
                break
    return found


def _flat_listing(directory: Path, extensions: Sequence[str], exclude: Sequence[str]) -> List[Tuple[str, Path]]:
    listing: List[Tuple[str, Path]] = []
    for filename in scan_directory(directory):
        if exclude and filename.endswith(tuple(exclude)):
            continue
        for ext in extensions:
            if filename.endswith(ext):
                listing.append((filename[: -len(ext)], directory / filename))
                break
    return listing


def available_features(
    path_resolver: PathResolver,
    *,
    layout: FeatureLayout = FeatureLayout.FOLDER,
    entry_files: Sequence[str] = DEFAULT_ENTRY_FILES,
    exclude_suffixes: Sequence[str] = DEFAULT_EXCLUDE_SUFFIXES,
) -> ResourceCatalog:
    """All features (theme + user) keyed by feature name, with provenance."""
    paths = path_resolver.paths(ResourceType.FEATURE)
    theme = path_resolver.theme

    if FeatureLayout(layout) is FeatureLayout.FOLDER:
        theme_listing = [
            (feature.name, theme.root / feature.entry)
            for feature in theme.features
            if (theme.root / feature.entry).is_file()
        ]
        user_listing = _user_feature_folders(paths.user_dir, entry_files)
    else:
        extensions = _flat_extensions(entry_files)
        theme_listing = _flat_listing(paths.theme_dir, extensions, exclude_suffixes)
        user_listing = _flat_listing(paths.user_dir, extensions, exclude_suffixes)

    return ResourceCatalog.merge(theme_listing, user_listing)


def feature_candidates(name: str, entry_files: Sequence[str] = DEFAULT_ENTRY_FILES) -> List[str]:
    """Names under the features directory that may hold feature ``name``."""
    folder = [f"{name}/{entry}" for entry in entry_files]
    flat = [f"{name}{ext}" for ext in _flat_extensions(entry_files)]
    return folder + flat


def _lookup_order(path_resolver: PathResolver, name: str, entry_files: Sequence[str]) -> List[Candidate]:
    """User candidates, then the theme's declared entry, then theme conventions."""
    resolver = ResourceResolver(path_resolver)
    ordered = resolver.candidates(ResourceType.FEATURE, feature_candidates(name, entry_files))
    declared = path_resolver.theme.feature(name)
    if declared is None:
        return ordered
    declared_path = path_resolver.theme.root / declared.entry
    user = [c for c in ordered if c[2] is Source.USER]
    theme = [c for c in ordered if c[2] is Source.THEME and c[1] != declared_path]
    return user + [(declared.entry, declared_path, Source.THEME)] + theme


def _feature_help(path_resolver: PathResolver, name: str, entry_files: Sequence[str]) -> str:
    declared = path_resolver.theme.feature_names
    available = ", ".join(declared) if declared else "none"
    user_dir = path_resolver.overrides.directory_for(ResourceType.FEATURE)
    theme_dir = path_resolver.theme.resource_dir(ResourceType.FEATURE)
    entry = entry_files[0] if entry_files else "index.js"
    return (
        f'Feature "{name}" not found.\n\n'
        f"Available theme features: {available}\n\n"
        f"To create a custom feature:\n"
        f"  1. Add file: {user_dir}/{name}/{entry}\n\n"
        f"To extend a theme feature:\n"
        f"  import {{ init }} from '@theme/{theme_dir}/{name}/{entry}';\n"
        f"  init({{ /* custom config */ }});"
    )


def resolve_feature(
    path_resolver: PathResolver,
    name: str,
    *,
    entry_files: Sequence[str] = DEFAULT_ENTRY_FILES,
) -> Optional[ResolvedResource]:
    """Winning entry file of feature ``name`` with provenance, or None."""
    return ResourceResolver(path_resolver).first_existing(_lookup_order(path_resolver, name, entry_files))


def resolve_feature_path(
    path_resolver: PathResolver,
    name: str,
    *,
    entry_files: Sequence[str] = DEFAULT_ENTRY_FILES,
) -> Path:
    """Absolute path of feature ``name``, project copy first.

    Raises:
        ResourceNotFoundError: If neither location provides the feature; the
            message names every checked path and how to add the feature.
    """
    result = ResourceResolver(path_resolver).require_first(
        ResourceType.FEATURE,
        _lookup_order(path_resolver, name, entry_files),
        label=name,
        error_message=_feature_help(path_resolver, name, entry_files),
    )
    return result.path


def feature_exists(
    path_resolver: PathResolver,
    name: str,
    *,
    entry_files: Iterable[str] = DEFAULT_ENTRY_FILES,
) -> bool:
    return resolve_feature(path_resolver, name, entry_files=tuple(entry_files)) is not None


__all__ = [
    "available_features",
    "feature_candidates",
    "feature_exists",
    "resolve_feature",
    "resolve_feature_path",
]
