"""Installation diagnostics for a project and its theme."""
from __future__ import annotations

from .reporter import (
    ComponentCheck,
    ValidationReporter,
    ValidationResult,
    log_validation,
    validate_theme,
)

__all__ = [
    "ComponentCheck",
    "ValidationReporter",
    "ValidationResult",
    "log_validation",
    "validate_theme",
]
