"""
Cache locator — find a pre-built file for a build target.

Lookup order inside the kind's cache directory:
    1. exact name              default.js
    2. versioned name          default.v<digits>.js

When several versioned builds exist, the highest version number wins,
independent of directory listing order.

Every call probes the filesystem again. Builds can appear between two
requests, so nothing is remembered. Filesystem errors are logged and
reported as "not found": falling back to the dynamic route is always
safe.
"""

from __future__ import annotations

import glob
import logging
import re
from pathlib import Path
from typing import Protocol

from asset_compress.core.models.config import AssetConfig
from asset_compress.core.models.target import AssetKind

logger = logging.getLogger(__name__)


class Filesystem(Protocol):
    """The two read-only probes the locator needs."""

    def exists(self, path: Path) -> bool: ...

    def list_matching(self, directory: Path, pattern: str) -> list[Path]: ...


class LocalFilesystem:
    """Filesystem probes backed by pathlib."""

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def list_matching(self, directory: Path, pattern: str) -> list[Path]:
        if not directory.is_dir():
            return []
        return list(directory.glob(pattern))


def versioned_pattern(build_name: str) -> re.Pattern[str]:
    """Regex for ``<base>.v<digits>.<ext>`` with the version captured."""
    base, _, ext = build_name.rpartition(".")
    return re.compile(rf"^{re.escape(base)}\.v(\d+)\.{re.escape(ext)}$")


def pick_latest_version(build_name: str, candidates: list[Path]) -> Path | None:
    """Highest-numbered versioned build among candidates (others ignored)."""
    pattern = versioned_pattern(build_name)
    best: tuple[int, Path] | None = None
    for candidate in candidates:
        match = pattern.match(candidate.name)
        if not match:
            continue
        version = int(match.group(1))
        if best is None or version > best[0]:
            best = (version, candidate)
    return best[1] if best else None


class CacheLocator:
    """Locate cached builds and translate them into web paths.

    Args:
        config: Asset configuration (cache directories, document root).
        filesystem: Probe implementation (default: the local disk).
        base_path: URL prefix the application is mounted under
            (default: ``config.general.base_path``).
    """

    def __init__(
        self,
        config: AssetConfig,
        filesystem: Filesystem | None = None,
        base_path: str | None = None,
    ) -> None:
        self.config = config
        self.filesystem = filesystem or LocalFilesystem()
        self.base_path = config.general.base_path if base_path is None else base_path

    def find(self, build_name: str) -> Path | None:
        """Filesystem path of the cached build, or None."""
        kind = AssetKind.from_name(build_name)
        cache_dir = self.config.cache_directory(kind.extension)
        if cache_dir is None:
            return None

        try:
            exact = cache_dir / build_name
            if self.filesystem.exists(exact):
                return exact

            base = build_name[: -len(kind.suffix)]
            pattern = f"{glob.escape(base)}.v[0-9]*{kind.suffix}"
            candidates = self.filesystem.list_matching(cache_dir, pattern)
        except OSError as e:
            logger.warning("Cannot probe cache for %s in %s: %s", build_name, cache_dir, e)
            return None

        return pick_latest_version(build_name, candidates)

    def locate(self, build_name: str) -> str | None:
        """Web path of the cached build, or None if nothing is built yet."""
        found = self.find(build_name)
        if found is None:
            logger.debug("No cached build for %s", build_name)
            return None
        web_path = self.to_web_path(found)
        logger.debug("Cached build for %s → %s", build_name, web_path)
        return web_path

    def to_web_path(self, path: Path) -> str:
        """Strip the document root and prefix the application base path."""
        relative = path.relative_to(self.config.document_root_path)
        return f"{self.base_path.rstrip('/')}/{relative.as_posix()}"
