"""
Resolution policy — static cached file or dynamic build route.

Decision per target:
    caching disabled for the kind     → dynamic
    cached build located              → static
    caching enabled, nothing built    → dynamic (until a build appears)

Content-addressed targets (``:hash-…``) are expanded to their
fingerprinted file name here, over the file list as it stands now.
"""

from __future__ import annotations

import logging

from asset_compress.core.errors import UnknownBuildTarget
from asset_compress.core.models.config import AssetConfig
from asset_compress.core.models.reference import DynamicRoute, ResolvedReference, StaticFile
from asset_compress.core.models.target import AssetKind, parse_target_name
from asset_compress.core.services.cache_locator import CacheLocator
from asset_compress.core.services.registry import TargetRegistry

logger = logging.getLogger(__name__)


class ResolutionPolicy:
    """Turn target names into resolved references."""

    def __init__(
        self,
        config: AssetConfig,
        registry: TargetRegistry,
        locator: CacheLocator | None = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.locator = locator or CacheLocator(config)

    def build_name(self, name: str) -> str:
        """Concrete file name for a target (hash placeholder expanded)."""
        return parse_target_name(name).concrete_name(self.registry.get_files(name))

    def should_use_dynamic_build(self, name: str) -> bool:
        """Whether the target must be served by the dynamic build route."""
        kind = AssetKind.from_name(name)
        if not self.config.caching_enabled(kind.extension):
            return True
        return self.locator.locate(self.build_name(name)) is None

    def resolve(self, name: str) -> ResolvedReference:
        """Resolve a target to a static file or a dynamic route.

        Raises:
            UnsupportedAssetKind: The name has no .js/.css extension.
            UnknownBuildTarget: No source files are known for the name.
        """
        kind = AssetKind.from_name(name)
        files = self.registry.get_files(name)
        if not files:
            raise UnknownBuildTarget(name)

        build_name = parse_target_name(name).concrete_name(files)

        if self.config.caching_enabled(kind.extension):
            path = self.locator.locate(build_name)
            if path is not None:
                logger.debug("Resolved %s → static %s", name, path)
                return StaticFile(path=path, kind=kind)

        logger.debug("Resolved %s → dynamic build %s", name, build_name)
        return DynamicRoute(
            target=name,
            build_name=build_name,
            kind=kind,
            source_files=tuple(files),
            is_runtime=self.registry.is_runtime(name),
        )

    def resolve_raw(self, name: str) -> list[StaticFile]:
        """One reference per source file, for serving files unconcatenated."""
        kind = AssetKind.from_name(name)
        files = self.registry.get_files(name)
        if not files:
            raise UnknownBuildTarget(name)
        return [StaticFile(path=part, kind=kind, cached=False) for part in files]
