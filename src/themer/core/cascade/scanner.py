"""Flat, one-level cascade scans.

``scan()`` lists the theme directory first and the user directory second,
tagging each name ``theme``, ``user`` or ``override``. A missing or
unreadable directory contributes nothing.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional

from themer.core.types import ResourceCatalog, ResourceType

from .paths import PathResolver

logger = logging.getLogger(__name__)

NameFilter = Callable[[str], bool]


def scan_directory(dir_path: Path, filter: Optional[NameFilter] = None) -> List[str]:
    """Return sorted names of the regular files directly inside ``dir_path``."""
    try:
        with os.scandir(dir_path) as it:
            names = [entry.name for entry in it if entry.is_file()]
    except FileNotFoundError:
        return []
    except OSError as exc:
        logger.debug("Treating unreadable directory %s as empty: %s", dir_path, exc)
        return []
    if filter is not None:
        names = [n for n in names if filter(n)]
    return sorted(names)


def extension_filter(*extensions: str) -> NameFilter:
    """Accept names ending in one of ``extensions`` (case-insensitive)."""
    suffixes = tuple(e.lower() for e in extensions)

    def _accept(name: str) -> bool:
        return name.lower().endswith(suffixes)

    return _accept


class CascadeScanner:
    def __init__(self, path_resolver: PathResolver) -> None:
        self.path_resolver = path_resolver

    def scan(self, resource_type: ResourceType, filter: Optional[NameFilter] = None) -> ResourceCatalog:
        paths = self.path_resolver.paths(resource_type)
        theme_listing = [(n, paths.theme_dir / n) for n in scan_directory(paths.theme_dir, filter)]
        user_listing = [(n, paths.user_dir / n) for n in scan_directory(paths.user_dir, filter)]
        return ResourceCatalog.merge(theme_listing, user_listing)


__all__ = ["CascadeScanner", "NameFilter", "extension_filter", "scan_directory"]
