"""
Asset configuration model — caching policy and declared build targets.

Loaded from asset_compress.yml by the config loader. This is the
read-through source of truth for targets declared ahead of time and
for per-kind caching policy. Runtime targets live in the registry,
never here.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from asset_compress.core.errors import UnsupportedAssetKind
from asset_compress.core.models.target import AssetKind, BuildTarget


class GeneralSettings(BaseModel):
    """Settings shared by both asset kinds."""

    debug: bool = False                 # no concatenation, one tag per source file
    document_root: str = "webroot"      # filesystem prefix stripped from cache paths
    base_path: str = ""                 # URL prefix the application is mounted under
    build_url: str = "/asset_compress/assets/get"


class KindSettings(BaseModel):
    """Per-kind settings (the ``js:`` and ``css:`` sections)."""

    cache_path: str = ""                # empty → nothing cached for this kind
    caching: bool = True                # administrative switch
    base_url: str = ""                  # prepended to every emitted build URL
    source_url: str = ""                # URL root for raw source files


class AssetConfig(BaseModel):
    """Root configuration document."""

    general: GeneralSettings = Field(default_factory=GeneralSettings)
    js: KindSettings = Field(default_factory=KindSettings)
    css: KindSettings = Field(default_factory=KindSettings)
    targets: dict[str, list[str]] = Field(default_factory=dict)

    # Directory relative paths are resolved against (set by the loader)
    config_dir: str = Field(default="", exclude=True)

    @field_validator("targets")
    @classmethod
    def _check_target_names(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        for name in value:
            try:
                AssetKind.from_name(name)
            except UnsupportedAssetKind as e:
                raise ValueError(str(e)) from None
        return value

    @model_validator(mode="after")
    def _check_cache_paths(self) -> AssetConfig:
        doc_root = self.document_root_path
        for kind in AssetKind:
            cache_dir = self.cache_directory(kind.extension)
            if cache_dir is not None and not cache_dir.is_relative_to(doc_root):
                raise ValueError(
                    f"{kind.extension}.cache_path {cache_dir} is not inside "
                    f"document_root {doc_root}"
                )
        return self

    # ── Paths ────────────────────────────────────────────────────

    def _resolve_path(self, value: str) -> Path:
        path = Path(value)
        if not path.is_absolute():
            path = Path(self.config_dir or ".") / path
        return path.resolve()

    @property
    def document_root_path(self) -> Path:
        """Absolute filesystem path of the web document root."""
        return self._resolve_path(self.general.document_root)

    # ── Provider interface ───────────────────────────────────────

    def settings_for(self, extension: str) -> KindSettings:
        """Per-kind settings for an extension (``js`` or ``.css``)."""
        kind = AssetKind.from_extension(extension)
        return self.js if kind is AssetKind.SCRIPT else self.css

    def extension_of(self, name: str) -> str:
        """Extension of a target name, validated against known kinds."""
        return AssetKind.from_name(name).extension

    def files_for(self, name: str) -> list[str]:
        """Declared source files for a target (empty if undeclared)."""
        return list(self.targets.get(name, []))

    def caching_enabled(self, extension: str) -> bool:
        """Whether static builds may be served for this kind."""
        return self.settings_for(extension).caching

    def cache_directory(self, extension: str) -> Path | None:
        """Absolute cache directory for this kind, or None if unconfigured."""
        cache_path = self.settings_for(extension).cache_path
        if not cache_path:
            return None
        return self._resolve_path(cache_path)

    def base_url_for(self, extension: str) -> str:
        return self.settings_for(extension).base_url

    def source_url_for(self, extension: str) -> str:
        """URL root for raw source files (default: /js/ or /css/)."""
        ext = AssetKind.from_extension(extension).extension
        return self.settings_for(ext).source_url or f"/{ext}/"

    def declared_targets(self) -> list[BuildTarget]:
        """All targets declared in the config file, in file order."""
        return [
            BuildTarget(name=name, kind=AssetKind.from_name(name), source_files=list(files))
            for name, files in self.targets.items()
        ]
