from __future__ import annotations

import logging
from pathlib import Path

from helpers.project import write_file
from themer.core.cascade import CascadeScanner, PathResolver, extension_filter, scan_directory
from themer.core.cascade.data import available_data_files, theme_global_data
from themer.core.types import ResourceCatalog, ResourceType, Source


def _triples(catalog: ResourceCatalog):
    return [(name, item.source, item.path) for name, item in catalog.items()]


def test_missing_directories_yield_empty_catalog(path_resolver: PathResolver) -> None:
    catalog = CascadeScanner(path_resolver).scan(ResourceType.DATA)
    assert len(catalog) == 0
    assert catalog.names() == []


def test_scan_tags_theme_user_and_override(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "data" / "site.json", "{}")
    write_file(theme_root / "data" / "nav.json", "[]")
    user_nav = write_file(project_root / "content" / "_data" / "nav.json", "[]")
    write_file(project_root / "content" / "_data" / "authors.yaml", "")

    catalog = CascadeScanner(path_resolver).scan(ResourceType.DATA)

    assert catalog["site.json"].source is Source.THEME
    assert catalog["authors.yaml"].source is Source.USER
    assert catalog["nav.json"].source is Source.OVERRIDE
    assert catalog["nav.json"].path == user_nav
    assert len(catalog) == 3


def test_collision_produces_a_single_entry(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "layouts" / "post.njk")
    write_file(project_root / "overrides" / "layouts" / "post.njk")

    catalog = CascadeScanner(path_resolver).scan(ResourceType.TEMPLATE)

    assert catalog.names() == ["post.njk"]
    assert catalog.by_source(Source.THEME).names() == []


def test_scan_is_idempotent(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "data" / "site.json")
    write_file(project_root / "content" / "_data" / "site.json")
    write_file(project_root / "content" / "_data" / "extra.js")

    scanner = CascadeScanner(path_resolver)
    assert _triples(scanner.scan(ResourceType.DATA)) == _triples(scanner.scan(ResourceType.DATA))


def test_different_extension_is_an_addition(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "public" / "icon.png")
    write_file(project_root / "public" / "icon.svg")

    catalog = CascadeScanner(path_resolver).scan(ResourceType.STATIC_ASSET)

    assert catalog["icon.png"].source is Source.THEME
    assert catalog["icon.svg"].source is Source.USER


def test_scan_directory_lists_sorted_regular_files(tmp_path: Path) -> None:
    write_file(tmp_path / "b.json")
    write_file(tmp_path / "a.json")
    (tmp_path / "nested").mkdir()

    assert scan_directory(tmp_path) == ["a.json", "b.json"]
    assert scan_directory(tmp_path / "missing") == []


def test_scan_directory_on_a_file_degrades_to_empty(tmp_path: Path, caplog) -> None:
    target = write_file(tmp_path / "not-a-dir")
    with caplog.at_level(logging.DEBUG, logger="themer.core.cascade.scanner"):
        assert scan_directory(target) == []


def test_extension_filter_is_case_insensitive() -> None:
    accept = extension_filter(".json", ".yaml")
    assert accept("site.JSON")
    assert accept("nav.yaml")
    assert not accept("notes.txt")


def test_available_data_files_filters_extensions(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "data" / "site.json")
    write_file(theme_root / "data" / "README.md")
    write_file(project_root / "content" / "_data" / "authors.yml")

    catalog = available_data_files(path_resolver)

    assert sorted(catalog.names()) == ["authors.yml", "site.json"]


def test_theme_global_data_only_includes_theme_files(path_resolver: PathResolver, project_root: Path, theme_root: Path) -> None:
    write_file(theme_root / "data" / "site.json")
    write_file(theme_root / "data" / "nav.json")
    write_file(project_root / "content" / "_data" / "nav.json")

    globals_ = theme_global_data(available_data_files(path_resolver))

    assert globals_ == {"site": theme_root / "data" / "site.json"}


def test_catalog_serializes_with_provenance(path_resolver: PathResolver, theme_root: Path) -> None:
    write_file(theme_root / "data" / "site.json")
    catalog = CascadeScanner(path_resolver).scan(ResourceType.DATA)

    assert catalog.to_dict() == {
        "site.json": {"name": "site.json", "path": str(theme_root / "data" / "site.json"), "source": "theme"}
    }
    assert "site.json=theme" in repr(catalog)
