"""Themer: override resolution for convention-based site themes.

A theme package ships default templates, data, features and static assets;
a content repository may override any of them. Themer decides which copy
wins for every request and records where it came from.
"""
from __future__ import annotations

from themer.core.build import FeatureEntryResolver, feature_entries
from themer.core.cascade import (
    CascadeScanner,
    CandidatePaths,
    PathResolver,
    RecursiveScanner,
    ResourceResolver,
)
from themer.core.config import ConfigManager, OverrideConfiguration, load_config
from themer.core.exceptions import (
    ConfigError,
    InvalidResourceNameError,
    ResourceNotFoundError,
    ThemeMetadataError,
    ThemeNotFoundError,
    ThemerError,
)
from themer.core.templates import ThemeAwareLoader, create_environment
from themer.core.theme import ThemeDescriptor, load_theme, locate_theme
from themer.core.types import ResolvedResource, ResourceCatalog, ResourceType, Source
from themer.core.validation import ValidationReporter, ValidationResult, validate_theme

__version__ = "0.1.0"

__all__ = [
    "CandidatePaths",
    "CascadeScanner",
    "ConfigError",
    "ConfigManager",
    "FeatureEntryResolver",
    "InvalidResourceNameError",
    "OverrideConfiguration",
    "PathResolver",
    "RecursiveScanner",
    "ResolvedResource",
    "ResourceCatalog",
    "ResourceNotFoundError",
    "ResourceResolver",
    "ResourceType",
    "Source",
    "ThemeAwareLoader",
    "ThemeDescriptor",
    "ThemeMetadataError",
    "ThemeNotFoundError",
    "ThemerError",
    "ValidationReporter",
    "ValidationResult",
    "create_environment",
    "feature_entries",
    "load_config",
    "load_theme",
    "locate_theme",
    "validate_theme",
]
