"""Utility modules."""
from quizcms.utils.file_utils import safe_asset_path, unique_filename
from quizcms.utils.pagination import clamp_page, contains_pattern, where_contains

__all__ = [
    "safe_asset_path",
    "unique_filename",
    "clamp_page",
    "contains_pattern",
    "where_contains",
]
