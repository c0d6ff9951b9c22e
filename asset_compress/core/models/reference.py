"""
Resolved references — what a build target turns into.

Resolution yields exactly one of:

    StaticFile    a path to serve directly (cached build or raw source)
    DynamicRoute  enough information to build a URL to the build endpoint
"""

from __future__ import annotations

from dataclasses import dataclass, field

from asset_compress.core.models.target import AssetKind


@dataclass(frozen=True)
class StaticFile:
    """A file reference emitted as-is.

    ``cached`` is True for a located build artifact (already a web path)
    and False for an individual source file in raw mode.
    """

    path: str
    kind: AssetKind
    cached: bool = True


@dataclass(frozen=True)
class DynamicRoute:
    """A target served by the on-demand build endpoint."""

    target: str
    build_name: str
    kind: AssetKind
    source_files: tuple[str, ...] = field(default_factory=tuple)
    is_runtime: bool = False


ResolvedReference = StaticFile | DynamicRoute
