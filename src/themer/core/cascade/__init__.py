"""Override resolution: candidate paths, single lookups and catalog scans."""
from __future__ import annotations

from .assets import available_assets, passthrough_plan, resolve_static_asset
from .data import available_data_files, data_file_exists, resolve_data_file, theme_global_data
from .features import (
    available_features,
    feature_candidates,
    feature_exists,
    resolve_feature,
    resolve_feature_path,
)
from .paths import CandidatePaths, PathResolver, candidate_paths, split_resource_name
from .recursive import RecursiveScanner, walk_files
from .resolver import ResourceResolver
from .scanner import CascadeScanner, extension_filter, scan_directory

__all__ = [
    "CandidatePaths",
    "CascadeScanner",
    "PathResolver",
    "RecursiveScanner",
    "ResourceResolver",
    "available_assets",
    "available_data_files",
    "available_features",
    "candidate_paths",
    "data_file_exists",
    "extension_filter",
    "feature_candidates",
    "feature_exists",
    "passthrough_plan",
    "resolve_data_file",
    "resolve_feature",
    "resolve_feature_path",
    "resolve_static_asset",
    "scan_directory",
    "split_resource_name",
    "theme_global_data",
    "walk_files",
]
