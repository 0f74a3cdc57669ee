"""RAW fixture corpus and local download cache."""

from raw_preview_check.fixtures.assets import RAW_ASSETS, RAW_MIME_TYPES, FixtureAsset
from raw_preview_check.fixtures.cache import CacheReport, FixtureCache, calculate_checksum

__all__ = [
    "CacheReport",
    "FixtureAsset",
    "FixtureCache",
    "RAW_ASSETS",
    "RAW_MIME_TYPES",
    "calculate_checksum",
]
