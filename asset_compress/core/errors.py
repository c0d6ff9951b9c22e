"""
Asset compress exception hierarchy.

Every error raised by the core inherits from AssetCompressError so
callers (CLI, web layer) can catch one type.
"""

from __future__ import annotations


class AssetCompressError(Exception):
    """Base exception for all asset compress errors."""


class ConfigError(AssetCompressError):
    """Raised when the asset configuration is invalid or missing."""


class UnknownBuildTarget(AssetCompressError):
    """A build target was resolved but has no known source files."""

    def __init__(self, target: str) -> None:
        super().__init__(f"Cannot create a tag for a build that does not exist: {target}")
        self.target = target


class UnsupportedAssetKind(AssetCompressError):
    """A target name does not end in a recognised asset extension."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported asset kind for '{name}' (expected .js or .css)")
        self.name = name
