"""Schema validation for theme metadata and project configuration."""
from __future__ import annotations

from .validation import SchemaValidationError, iter_schema_errors, load_schema, validate_payload

__all__ = ["SchemaValidationError", "iter_schema_errors", "load_schema", "validate_payload"]
