"""Data file cascade.

Theme data files provide defaults; a file of the same name in the project's
data directory replaces the theme file entirely.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Optional

from themer.core.types import ResourceCatalog, ResourceType, Source

from .paths import PathResolver
from .resolver import ResourceResolver
from .scanner import CascadeScanner, extension_filter

DEFAULT_DATA_EXTENSIONS = (".js", ".json", ".yaml", ".yml")


def available_data_files(
    path_resolver: PathResolver,
    extensions: Iterable[str] = DEFAULT_DATA_EXTENSIONS,
) -> ResourceCatalog:
    """All data files (theme + user) with provenance."""
    return CascadeScanner(path_resolver).scan(ResourceType.DATA, extension_filter(*extensions))


def theme_global_data(catalog: ResourceCatalog) -> Dict[str, Path]:
    """Theme-only data files keyed by stem (``site.json`` -> ``site``).

    These are what a site generator registers as global data; user files are
    already picked up from the project's own data directory.
    """
    return {Path(name).stem: item.path for name, item in catalog.by_source(Source.THEME).items()}


def resolve_data_file(path_resolver: PathResolver, filename: str) -> Optional[Path]:
    result = ResourceResolver(path_resolver).resolve(ResourceType.DATA, filename)
    return result.path if result else None


def data_file_exists(path_resolver: PathResolver, filename: str) -> bool:
    return resolve_data_file(path_resolver, filename) is not None


__all__ = [
    "DEFAULT_DATA_EXTENSIONS",
    "available_data_files",
    "data_file_exists",
    "resolve_data_file",
    "theme_global_data",
]
