"""Jinja2 integration: cascade-aware template loading."""
from __future__ import annotations

from .loader import (
    DEFAULT_THEME_PREFIX,
    ThemeAwareLoader,
    create_environment,
    create_loader,
    template_search_roots,
)

__all__ = [
    "DEFAULT_THEME_PREFIX",
    "ThemeAwareLoader",
    "create_environment",
    "create_loader",
    "template_search_roots",
]
