"""Shared schema validation utilities.

Themer validates ``theme.json`` and the merged project configuration with
JSON Schema. Schemas are stored as YAML files under ``themer.data/schemas``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from themer.data import get_data_path
from themer.core.utils.io import read_yaml


class SchemaValidationError(ValueError):
    """Raised when schema validation fails."""

    def __init__(self, message: str, errors: List[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


@lru_cache(maxsize=16)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema by name (``.schema.yaml`` is appended if absent).

    Raises:
        FileNotFoundError: If the schema file doesn't exist.
        ValueError: If the schema is not a YAML mapping.
    """
    if not schema_name.endswith((".yaml", ".yml")):
        schema_name = f"{schema_name}.schema.yaml"
    path = get_data_path("schemas", schema_name)
    schema = read_yaml(path, raise_on_error=True)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema {path} must be a mapping")
    Draft202012Validator.check_schema(schema)
    return schema


def iter_schema_errors(payload: Any, schema_name: str) -> List[str]:
    """Return human-readable violations of ``schema_name`` (empty when valid)."""
    validator = Draft202012Validator(load_schema(schema_name))
    messages: List[str] = []
    for err in sorted(validator.iter_errors(payload), key=lambda e: list(e.path)):
        location = "/".join(str(p) for p in err.path) or "<root>"
        messages.append(f"{location}: {err.message}")
    return messages


def validate_payload(payload: Any, schema_name: str) -> None:
    """Validate ``payload`` against ``schema_name``; raise on any violation."""
    errors = iter_schema_errors(payload, schema_name)
    if errors:
        raise SchemaValidationError(
            f"{schema_name} validation failed:\n  - " + "\n  - ".join(errors),
            errors,
        )


__all__ = ["SchemaValidationError", "load_schema", "iter_schema_errors", "validate_payload"]
