from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path

import pytest

from helpers.project import write_file, write_project_config, write_theme
from themer.core.types import Source
from themer.core.validation import (
    ValidationReporter,
    ValidationResult,
    log_validation,
    validate_theme,
)


@pytest.fixture
def configured_project(project_root: Path, theme_root: Path) -> Path:
    write_project_config(project_root, "cascade:\n  theme: base-blog\n")
    return project_root


def _complete(project_root: Path) -> None:
    write_file(project_root / "overrides" / "scripts" / "main.js", "console.log('hi')\n")
    (project_root / "overrides" / "layouts").mkdir(parents=True, exist_ok=True)


def test_complete_installation_is_clean(configured_project: Path) -> None:
    _complete(configured_project)

    result = validate_theme(configured_project)

    assert result.errors == []
    assert result.warnings == []
    assert result.is_valid


def test_no_theme_configured_is_fatal(project_root: Path) -> None:
    result = validate_theme(project_root)

    assert not result.is_valid
    assert len(result.errors) == 1
    assert "No theme configured" in result.errors[0]
    assert result.warnings == []


def test_uninstalled_theme_short_circuits(project_root: Path) -> None:
    write_project_config(project_root, "cascade:\n  theme: missing-theme\n")

    result = validate_theme(project_root)

    assert len(result.errors) == 1
    assert str(project_root / "node_modules" / "missing-theme") in result.errors[0]
    assert result.warnings == []


def test_invalid_metadata_short_circuits(configured_project: Path, theme_root: Path) -> None:
    (theme_root / "theme.json").write_text(json.dumps({"version": "1"}), encoding="utf-8")

    result = validate_theme(configured_project)

    assert len(result.errors) == 1
    assert "theme metadata" in result.errors[0].lower()


def test_missing_required_theme_dir_is_an_error(configured_project: Path, theme_root: Path) -> None:
    _complete(configured_project)
    shutil.rmtree(theme_root / "styles")

    result = validate_theme(configured_project)

    assert not result.is_valid
    assert any("styles/" in e for e in result.errors)


def test_peer_dependencies_must_be_installed(project_root: Path) -> None:
    write_theme(project_root, metadata={"peerDependencies": ["helper-lib"]})
    write_project_config(project_root, "cascade:\n  theme: base-blog\nvalidation:\n  peerDependencies: [other-lib]\n")
    _complete(project_root)
    (project_root / "node_modules" / "other-lib").mkdir()

    result = validate_theme(project_root)

    assert len(result.errors) == 1
    assert "helper-lib" in result.errors[0]


def test_warnings_never_affect_validity(configured_project: Path) -> None:
    result = validate_theme(configured_project)

    assert result.is_valid
    assert any("Script entry point not found" in w for w in result.warnings)
    assert any("Layout override directory not found" in w for w in result.warnings)


def test_deprecated_config_file_is_warned(configured_project: Path) -> None:
    _complete(configured_project)
    write_file(configured_project / "theme.config.mjs", "export default {}\n")

    result = validate_theme(configured_project)

    assert result.is_valid
    assert len(result.warnings) == 1
    assert "theme.config.mjs" in result.warnings[0]
    assert "theme.json" in result.warnings[0]


def test_legacy_manual_import_is_warned(configured_project: Path) -> None:
    _complete(configured_project)
    write_file(
        configured_project / "overrides" / "scripts" / "main.js",
        "import 'base-blog/styles/main.scss';\n",
    )

    result = validate_theme(configured_project)

    assert len(result.warnings) == 1
    assert "manual theme import" in result.warnings[0]


def test_misconfigured_override_path_is_warned_and_not_used(configured_project: Path) -> None:
    _complete(configured_project)
    write_project_config(
        configured_project,
        "cascade:\n  theme: base-blog\n  overridePaths:\n    layouts: ../outside\n",
    )

    reporter = ValidationReporter(configured_project)
    result = reporter.validate()

    assert result.is_valid
    assert len(result.warnings) == 1
    assert "../outside" in result.warnings[0]
    assert "misconfigured" in result.warnings[0]

    write_file(configured_project.parent / "outside" / "post.njk")
    assert not reporter.validate_component("layout", "post").exists


def test_validate_component_reports_source(configured_project: Path, theme_root: Path) -> None:
    write_file(theme_root / "layouts" / "base.njk")
    user_post = write_file(configured_project / "overrides" / "layouts" / "post.njk")
    write_file(theme_root / "features" / "code-highlighting" / "index.js")
    write_file(theme_root / "data" / "site.json")

    reporter = ValidationReporter(configured_project)

    post = reporter.validate_component("layout", "post")
    assert post.exists and post.source is Source.USER and post.path == user_post
    assert reporter.validate_component("layout", "base.njk").source is Source.THEME
    assert reporter.validate_component("feature", "code-highlighting").source is Source.THEME
    assert reporter.validate_component("data", "site.json").exists
    assert not reporter.validate_component("data", "nav.json").exists
    with pytest.raises(ValueError):
        reporter.validate_component("widget", "x")


def test_result_serializes() -> None:
    result = ValidationResult(errors=[], warnings=["careful"])
    assert result.to_dict() == {"errors": [], "warnings": ["careful"], "isValid": True}


def test_log_validation_exits_on_errors_when_asked(caplog) -> None:
    result = ValidationResult(errors=["boom"], warnings=["careful"])

    with caplog.at_level(logging.INFO, logger="themer.core.validation.reporter"):
        log_validation(result)
    assert "boom" in caplog.text
    assert "careful" in caplog.text

    with pytest.raises(SystemExit) as excinfo:
        log_validation(result, exit_on_error=True)
    assert excinfo.value.code == 1


def test_log_validation_reports_success(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="themer.core.validation.reporter"):
        log_validation(ValidationResult(), exit_on_error=True)
    assert "valid" in caplog.text


def test_validate_component_uses_declared_feature_entry(project_root: Path) -> None:
    root = write_theme(
        project_root,
        metadata={"themeFeatures": [{"name": "gallery", "entry": "features/gallery/gallery.js"}]},
    )
    entry = write_file(root / "features" / "gallery" / "gallery.js")
    write_project_config(project_root, "cascade:\n  theme: base-blog\n")

    check = ValidationReporter(project_root).validate_component("feature", "gallery")

    assert check.exists
    assert check.path == entry
    assert check.source is Source.THEME
