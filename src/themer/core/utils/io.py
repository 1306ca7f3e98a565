"""Readers for the structured files Themer consumes.

Themer never writes theme or project files, so only read helpers live here.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

_MISSING = object()


def read_json(file_path: Path | str, *, default: Any = _MISSING) -> Any:
    """Read a JSON document.

    Returns ``default`` when the file is missing and a default was given;
    otherwise raises FileNotFoundError. Malformed JSON always raises.
    """
    path = Path(file_path)
    if not path.exists():
        if default is not _MISSING:
            return default
        raise FileNotFoundError(f"JSON file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def read_yaml(path: Path | str, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns ``default`` if the file is missing, empty or invalid, unless
    ``raise_on_error`` is True.

    Examples:
        >>> config = read_yaml(Path("themer.yaml"), default={})
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else default
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


def read_text(path: Path | str, default: str = "") -> str:
    """Read a UTF-8 text file, returning ``default`` when it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return default


__all__ = ["read_json", "read_yaml", "read_text"]
