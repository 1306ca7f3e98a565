from __future__ import annotations

import json
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from helpers.project import write_file, write_theme
from themer.core.exceptions import ThemeMetadataError, ThemeNotFoundError
from themer.core.theme import ThemeDescriptor, ThemeFeature, load_theme, locate_theme
from themer.core.types import ResourceType


def test_load_theme_reads_metadata(project_root: Path, theme_root: Path) -> None:
    theme = load_theme(project_root, "base-blog")

    assert theme.name == "base-blog"
    assert theme.root == theme_root
    assert theme.version == "1.0.0"
    assert theme.templates == ("base", "post")
    assert theme.features == (ThemeFeature("code-highlighting", "features/code-highlighting/index.js"),)
    assert theme.feature_names == ("code-highlighting",)
    assert theme.feature("code-highlighting").entry == "features/code-highlighting/index.js"
    assert theme.feature("missing") is None


def test_missing_theme_names_checked_location(project_root: Path) -> None:
    with pytest.raises(ThemeNotFoundError) as excinfo:
        locate_theme(project_root, "not-installed")

    expected = project_root / "node_modules" / "not-installed"
    assert str(expected) in str(excinfo.value)
    assert excinfo.value.context["checked"] == [str(expected)]


def test_custom_themes_dir(project_root: Path) -> None:
    write_file(project_root / "themes" / "mini" / "theme.json", json.dumps({"name": "mini"}))
    assert load_theme(project_root, "mini", themes_dir="themes").name == "mini"


def test_missing_metadata_file(project_root: Path) -> None:
    (project_root / "node_modules" / "bare").mkdir(parents=True)
    with pytest.raises(ThemeMetadataError) as excinfo:
        load_theme(project_root, "bare")
    assert "theme.json" in str(excinfo.value)


def test_malformed_metadata_json(project_root: Path) -> None:
    write_file(project_root / "node_modules" / "broken" / "theme.json", "{not json")
    with pytest.raises(ThemeMetadataError):
        load_theme(project_root, "broken")


def test_schema_violation_lists_errors(project_root: Path) -> None:
    write_file(project_root / "node_modules" / "nameless" / "theme.json", json.dumps({"version": "1"}))
    with pytest.raises(ThemeMetadataError) as excinfo:
        load_theme(project_root, "nameless")
    assert "'name' is a required property" in str(excinfo.value)


def test_custom_resource_paths_and_asset_entries(project_root: Path) -> None:
    root = write_theme(
        project_root,
        "custom",
        {
            "paths": {"layouts": "templates", "public": "static"},
            "assets": {"scripts": {"entry": "js/app.js"}},
            "peerDependencies": ["helper-lib"],
        },
    )
    theme = load_theme(project_root, "custom")

    assert theme.resource_root(ResourceType.TEMPLATE) == root / "templates"
    assert theme.resource_root(ResourceType.STATIC_ASSET) == root / "static"
    assert theme.resource_dir(ResourceType.DATA) == "data"
    assert theme.asset_entries[ResourceType.SCRIPT] == "js/app.js"
    assert theme.asset_entries[ResourceType.STYLE] == "styles/main.scss"
    assert theme.peer_dependencies == ("helper-lib",)


def test_descriptor_is_immutable(theme: ThemeDescriptor) -> None:
    with pytest.raises(FrozenInstanceError):
        theme.name = "other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        theme.paths[ResourceType.DATA] = "x"  # type: ignore[index]


@pytest.mark.parametrize(
    "metadata, location",
    [
        ({"paths": {"layouts": "../elsewhere"}}, "paths/layouts"),
        ({"themeFeatures": [{"name": "x", "entry": "../../x.js"}]}, "themeFeatures/0/entry"),
        ({"assets": {"scripts": {"entry": "/abs/main.js"}}}, "assets/scripts/entry"),
        ({"requiredDirs": ["layouts/../../up"]}, "requiredDirs/0"),
    ],
)
def test_paths_leaving_the_theme_package_are_rejected(project_root: Path, metadata, location: str) -> None:
    write_theme(project_root, "escaping", metadata)

    with pytest.raises(ThemeMetadataError) as excinfo:
        load_theme(project_root, "escaping")

    assert location in str(excinfo.value)
