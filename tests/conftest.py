import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'themer' and tests/ importable for helpers
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from themer.core.cascade import PathResolver
from themer.core.config import OverrideConfiguration
from themer.core.theme import ThemeDescriptor, load_theme_descriptor
from helpers.project import write_theme


@pytest.fixture(autouse=True)
def _isolate_themer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """THEMER_* variables from the outer shell must not leak into config loads."""
    for key in list(os.environ):
        if key.startswith("THEMER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def theme_root(project_root: Path) -> Path:
    return write_theme(project_root)


@pytest.fixture
def theme(theme_root: Path) -> ThemeDescriptor:
    return load_theme_descriptor(theme_root)


@pytest.fixture
def path_resolver(project_root: Path, theme: ThemeDescriptor) -> PathResolver:
    return PathResolver(project_root, theme, OverrideConfiguration())
