"""Tree-structured cascade scans.

Keys are POSIX paths relative to the resource directory (``img/logo.svg``),
so a nested user file overrides the theme file at the same relative path.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

from themer.core.types import ResourceCatalog, ResourceType

from .paths import PathResolver
from .scanner import NameFilter

logger = logging.getLogger(__name__)


def walk_files(root: Path, filter: Optional[NameFilter] = None) -> List[str]:
    """Depth-first list of files under ``root`` as relative POSIX paths.

    Uses an explicit stack of (absolute dir, relative prefix) pairs. A branch
    that cannot be read contributes no entries. Symlinked directories are
    followed and cycles are not detected.
    """
    files: List[str] = []
    stack: List[Tuple[Path, str]] = [(Path(root), "")]
    while stack:
        directory, prefix = stack.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except FileNotFoundError:
            continue
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", directory, exc)
            continue

        subdirs: List[Tuple[Path, str]] = []
        for entry in entries:
            rel = f"{prefix}{entry.name}"
            try:
                is_dir = entry.is_dir()
            except OSError:
                continue
            if is_dir:
                subdirs.append((Path(entry.path), f"{rel}/"))
            elif filter is None or filter(rel):
                files.append(rel)
        # Reversed so the stack pops subdirectories in name order.
        stack.extend(reversed(subdirs))
    return files


class RecursiveScanner:
    def __init__(self, path_resolver: PathResolver) -> None:
        self.path_resolver = path_resolver

    def scan(self, resource_type: ResourceType, filter: Optional[NameFilter] = None) -> ResourceCatalog:
        paths = self.path_resolver.paths(resource_type)
        theme_listing = [(rel, paths.theme_dir / rel) for rel in walk_files(paths.theme_dir, filter)]
        user_listing = [(rel, paths.user_dir / rel) for rel in walk_files(paths.user_dir, filter)]
        return ResourceCatalog.merge(theme_listing, user_listing)


__all__ = ["RecursiveScanner", "walk_files"]
