"""Static asset cascade.

Per-file override: a project file at the same relative path replaces the
theme file. Nested directories are supported.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from themer.core.types import ResourceCatalog, ResourceType, Source

from .paths import PathResolver
from .recursive import RecursiveScanner
from .resolver import ResourceResolver

logger = logging.getLogger(__name__)


def available_assets(path_resolver: PathResolver) -> ResourceCatalog:
    """All static assets (theme + user), keyed by relative path."""
    return RecursiveScanner(path_resolver).scan(ResourceType.STATIC_ASSET)


def resolve_static_asset(path_resolver: PathResolver, relative_path: str) -> Optional[Path]:
    result = ResourceResolver(path_resolver).resolve(ResourceType.STATIC_ASSET, relative_path)
    return result.path if result else None


def passthrough_plan(catalog: ResourceCatalog) -> Dict[str, str]:
    """Theme assets the site generator must copy: ``{source path: output path}``.

    User assets are copied by the generator from the project's own public
    directory and are left out.
    """
    plan = {str(item.path): name for name, item in catalog.by_source(Source.THEME).items()}
    overridden = len(catalog.by_source(Source.OVERRIDE))
    logger.info("Using %d theme asset(s); overriding %d", len(plan), overridden)
    return plan


__all__ = ["available_assets", "passthrough_plan", "resolve_static_asset"]
