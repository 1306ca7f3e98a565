"""Cascade-aware template lookup for Jinja2.

Resolution order:
1. ``@theme/`` prefix -> resolved directly against the theme package root,
   bypassing the cascade (for intentionally extending the original:
   ``{% extends "@theme/layouts/base.njk" %}``)
2. Any other name -> first match across the ordered search roots, user
   override roots first, theme roots last

The cascade applies to ``extends``, ``include`` and ``import`` alike. The
loader composes two ``FileSystemLoader`` instances instead of extending one,
and never parses or renders templates itself.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple

from jinja2 import BaseLoader, Environment, FileSystemLoader

from themer.core.cascade.paths import PathResolver
from themer.core.config.domains.templates import TemplatesConfig
from themer.core.config.overrides import check_relative_path
from themer.core.types import ResourceType

logger = logging.getLogger(__name__)

DEFAULT_THEME_PREFIX = "@theme/"


def _safe_join(base: Path, rel: str, *, label: str) -> Optional[Path]:
    reason = check_relative_path(rel)
    if reason is not None:
        logger.warning("Ignoring %s template directory %r (%s)", label, rel, reason)
        return None
    return base / rel


def template_search_roots(
    path_resolver: PathResolver,
    templates: Optional[TemplatesConfig] = None,
    *,
    additional_paths: Sequence[str] = (),
) -> List[Path]:
    """Search roots in priority order: all user roots, then all theme roots."""
    templates = templates or TemplatesConfig.from_defaults()
    project_root = Path(path_resolver.project_root)
    theme_root = path_resolver.theme.root

    roots: List[Optional[Path]] = [
        path_resolver.user_dir(ResourceType.TEMPLATE),
        path_resolver.user_dir(ResourceType.PARTIAL),
    ]
    roots += [_safe_join(project_root, d, label="user") for d in templates.user_extra_dirs]
    roots += [
        _safe_join(project_root, d, label="additional")
        for d in (*templates.additional_paths, *additional_paths)
    ]
    roots += [
        path_resolver.theme_dir(ResourceType.TEMPLATE),
        path_resolver.theme_dir(ResourceType.PARTIAL),
    ]
    roots += [_safe_join(theme_root, d, label="theme") for d in templates.theme_extra_dirs]

    ordered: List[Path] = []
    for root in roots:
        if root is not None and root not in ordered:
            ordered.append(root)
    return ordered


class ThemeAwareLoader(BaseLoader):
    """Jinja2 loader adding ``@theme/`` addressing on top of a search-root cascade."""

    def __init__(
        self,
        search_roots: Sequence[Path],
        theme_root: Path,
        *,
        prefix: str = DEFAULT_THEME_PREFIX,
        encoding: str = "utf-8",
    ) -> None:
        self.prefix = prefix
        self.search_roots: Tuple[Path, ...] = tuple(Path(p) for p in search_roots)
        self.theme_root = Path(theme_root)
        self._cascade = FileSystemLoader([str(p) for p in self.search_roots], encoding=encoding)
        self._theme = FileSystemLoader(str(self.theme_root), encoding=encoding)

    def get_source(
        self, environment: Environment, template: str
    ) -> Tuple[str, Optional[str], Optional[Callable[[], bool]]]:
        # TemplateNotFound from either loader propagates as-is.
        if template.startswith(self.prefix):
            return self._theme.get_source(environment, template[len(self.prefix):])
        return self._cascade.get_source(environment, template)

    def list_templates(self) -> List[str]:
        names = set(self._cascade.list_templates())
        names.update(f"{self.prefix}{name}" for name in self._theme.list_templates())
        return sorted(names)


def create_loader(
    path_resolver: PathResolver,
    templates: Optional[TemplatesConfig] = None,
    *,
    additional_paths: Sequence[str] = (),
) -> ThemeAwareLoader:
    templates = templates or TemplatesConfig.from_defaults()
    return ThemeAwareLoader(
        template_search_roots(path_resolver, templates, additional_paths=additional_paths),
        path_resolver.theme.root,
        prefix=templates.theme_prefix,
    )


def create_environment(
    path_resolver: PathResolver,
    templates: Optional[TemplatesConfig] = None,
    *,
    additional_paths: Sequence[str] = (),
    **env_options: Any,
) -> Environment:
    """Build a Jinja2 environment wired to the cascade.

    Outside production the template cache is disabled so a newly added
    override is picked up on the next render.
    """
    templates = templates or TemplatesConfig.from_defaults()
    loader = create_loader(path_resolver, templates, additional_paths=additional_paths)

    if not templates.production:
        env_options.setdefault("cache_size", 0)
        env_options.setdefault("auto_reload", True)
    else:
        env_options.setdefault("auto_reload", False)
    env = Environment(loader=loader, **env_options)

    prefix = templates.theme_prefix
    env.globals["theme"] = {
        "name": path_resolver.theme.name,
        "path": lambda relative_path: f"{prefix}{relative_path}",
    }
    return env


__all__ = [
    "DEFAULT_THEME_PREFIX",
    "ThemeAwareLoader",
    "create_environment",
    "create_loader",
    "template_search_roots",
]
