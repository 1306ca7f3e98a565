from __future__ import annotations

from pathlib import Path

import pytest

from helpers.project import write_file
from themer.core.cascade import PathResolver, ResourceResolver
from themer.core.cascade.data import data_file_exists, resolve_data_file
from themer.core.cascade.assets import resolve_static_asset
from themer.core.exceptions import ResourceNotFoundError
from themer.core.types import ResourceType, Source


def test_user_template_wins_and_theme_fills_the_rest(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "layouts" / "base.njk", "theme base")
    write_file(theme_root / "layouts" / "post.njk", "theme post")
    user_post = write_file(project_root / "overrides" / "layouts" / "post.njk", "user post")

    resolver = ResourceResolver(path_resolver)
    base = resolver.resolve(ResourceType.TEMPLATE, "base.njk")
    post = resolver.resolve(ResourceType.TEMPLATE, "post.njk")

    assert base is not None and base.source is Source.THEME
    assert base.path == theme_root / "layouts" / "base.njk"
    assert post is not None and post.source is Source.USER
    assert post.path == user_post
    assert post.is_user_provided


def test_missing_resource_returns_none(path_resolver: PathResolver) -> None:
    resolver = ResourceResolver(path_resolver)
    assert resolver.resolve(ResourceType.DATA, "nothing.json") is None
    assert not resolver.exists(ResourceType.DATA, "nothing.json")


def test_strict_missing_resource_lists_both_checked_paths(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    resolver = ResourceResolver(path_resolver)

    with pytest.raises(ResourceNotFoundError) as excinfo:
        resolver.resolve(ResourceType.DATA, "nav.json", strict=True)

    user = project_root / "content" / "_data" / "nav.json"
    theme = theme_root / "data" / "nav.json"
    message = str(excinfo.value)
    assert str(user) in message
    assert str(theme) in message
    assert excinfo.value.checked_paths == [str(user), str(theme)]
    assert isinstance(excinfo.value, FileNotFoundError)


def test_custom_error_message_keeps_checked_paths(path_resolver: PathResolver) -> None:
    resolver = ResourceResolver(path_resolver)
    with pytest.raises(ResourceNotFoundError) as excinfo:
        resolver.resolve(ResourceType.DATA, "nav.json", strict=True, error_message="Add a nav.json")
    message = str(excinfo.value)
    assert message.startswith("Add a nav.json")
    assert "Checked:" in message


def test_resolution_follows_live_filesystem(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "data" / "site.json", "{}")
    resolver = ResourceResolver(path_resolver)
    assert resolver.resolve(ResourceType.DATA, "site.json").source is Source.THEME

    write_file(project_root / "content" / "_data" / "site.json", "{}")
    assert resolver.resolve(ResourceType.DATA, "site.json").source is Source.USER


def test_resolve_any_prefers_any_user_candidate(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "features" / "gallery" / "index.js")
    user = write_file(project_root / "overrides" / "features" / "gallery.js")

    result = ResourceResolver(path_resolver).resolve_any(
        ResourceType.FEATURE, ["gallery/index.js", "gallery.js"]
    )
    assert result is not None
    assert result.source is Source.USER
    assert result.path == user
    assert result.name == "gallery.js"


def test_data_and_asset_helpers(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "data" / "site.json", "{}")
    write_file(theme_root / "public" / "favicon.svg", "<svg/>")
    user_logo = write_file(project_root / "public" / "img" / "logo.png")

    assert resolve_data_file(path_resolver, "site.json") == theme_root / "data" / "site.json"
    assert data_file_exists(path_resolver, "site.json")
    assert resolve_data_file(path_resolver, "missing.json") is None
    assert resolve_static_asset(path_resolver, "favicon.svg") == theme_root / "public" / "favicon.svg"
    assert resolve_static_asset(path_resolver, "img/logo.png") == user_logo
