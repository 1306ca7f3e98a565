"""
Themer configuration management (YAML + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import yaml

from themer.core.defaults import ENV_PREFIX, PROJECT_CONFIG_FILES
from themer.core.exceptions import ConfigError
from themer.core.schemas import iter_schema_errors
from themer.core.utils.io import read_yaml
from themer.core.utils.merge import deep_merge
from themer.data import get_data_path

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load, merge, and validate Themer configuration.

    Configuration sources (highest to lowest priority):
    1. Explicit overrides passed to ``load_config(overrides=...)``
    2. Environment variables: THEMER_<section>__<key>
    3. Project config: <project>/themer.yaml (or themer.yml)
    4. Bundled defaults: themer.data/config/*.yaml (alphabetical order)
    """

    def __init__(self, project_root: Optional[Path] = None) -> None:
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.core_config_dir = get_data_path("config")

    @property
    def project_config_path(self) -> Optional[Path]:
        for name in PROJECT_CONFIG_FILES:
            candidate = self.project_root / name
            if candidate.exists():
                return candidate
        return None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            data = read_yaml(path, default={}, raise_on_error=True)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a YAML mapping", context={"path": str(path)})
        return data

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        if not directory.exists():
            return cfg
        for path in sorted(directory.glob("*.y*ml")):
            cfg = deep_merge(cfg, self.load_yaml(path))
        return cfg

    # ---- environment overrides -------------------------------------------------

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return s
        return s

    def _iter_env_overrides(self, environ: Mapping[str, str]) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(environ):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segments = raw.split("__")
            if not raw or any(seg == "" for seg in segments):
                logger.warning("Ignoring malformed environment override %s", key)
                continue
            yield segments, self._coerce_type(environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for i, part in enumerate(path):
            # Env var names lose camelCase; match existing keys case-insensitively.
            key = {k.lower(): k for k in cur if isinstance(k, str)}.get(part.lower(), part)
            if i == len(path) - 1:
                cur[key] = value
                return
            nxt = cur.get(key)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[key] = nxt
            cur = nxt

    def apply_env_overrides(self, cfg: Dict[str, Any], environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        result = deep_merge({}, cfg)
        for path, value in self._iter_env_overrides(os.environ if environ is None else environ):
            self._set_nested(result, path, value)
        return result

    # ---- public API ----------------------------------------------------------

    def load_config(
        self,
        *,
        overrides: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
        validate: bool = True,
    ) -> Dict[str, Any]:
        """Return the merged configuration document.

        Raises:
            ConfigError: If a file is not valid YAML or the merged document
                fails the configuration schema.
        """
        cfg = self._load_directory(self.core_config_dir, {})

        project_path = self.project_config_path
        if project_path is not None:
            logger.debug("Loading project config from %s", project_path)
            cfg = deep_merge(cfg, self.load_yaml(project_path))

        cfg = self.apply_env_overrides(cfg, environ)
        if overrides:
            cfg = deep_merge(cfg, dict(overrides))

        if validate:
            errors = iter_schema_errors(cfg, "config")
            if errors:
                raise ConfigError(
                    "Invalid Themer configuration:\n  - " + "\n  - ".join(errors),
                    context={"errors": errors, "project_root": str(self.project_root)},
                )
        return cfg


def load_config(
    project_root: Optional[Path] = None,
    *,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Convenience wrapper around ``ConfigManager(project_root).load_config()``."""
    return ConfigManager(project_root).load_config(overrides=overrides, environ=environ)


__all__ = ["ConfigManager", "load_config"]
