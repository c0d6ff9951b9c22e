"""
Asset includer — the per-render surface templates talk to.

Wires registry, locator, policy and tracker together for one render
and turns resolved references into tags:

    assets.add_script(["menu.js", "tabs.js"], "page")
    assets.add_css("print.css")            # → :hash-default.css
    assets.script("default")               # declared target, one tag
    assets.include_assets()                # every pending runtime target

Build one instance per render. Instances hold the render's pending
state and must never be shared between concurrent renders.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from markupsafe import Markup

from asset_compress.core.models.config import AssetConfig
from asset_compress.core.models.reference import DynamicRoute, ResolvedReference
from asset_compress.core.models.state import InclusionState
from asset_compress.core.models.target import HASH_PLACEHOLDER, AssetKind, ensure_extension
from asset_compress.core.services.cache_locator import CacheLocator
from asset_compress.core.services.inclusion import InclusionTracker
from asset_compress.core.services.markup import join_tags, tag_for
from asset_compress.core.services.registry import TargetRegistry
from asset_compress.core.services.resolution import ResolutionPolicy
from asset_compress.core.services.routes import RouteBuilder

logger = logging.getLogger(__name__)

DEFAULT_SCRIPT_TARGET = f"{HASH_PLACEHOLDER}-default.js"
DEFAULT_CSS_TARGET = f"{HASH_PLACEHOLDER}-default.css"


def _is_absolute_url(path: str) -> bool:
    return path.startswith("/") or "://" in path


class AssetIncluder:
    """Register runtime targets and emit inclusion markup for one render.

    Args:
        config: Asset configuration.
        routes: Dynamic route builder (default: built from ``config.general``).
        locator: Cache locator (default: local filesystem).
        state: Inclusion state for this render (default: fresh).
        base_path: URL prefix the application is mounted under, applied
            to every emitted URL (default: ``config.general.base_path``).
    """

    def __init__(
        self,
        config: AssetConfig,
        routes: RouteBuilder | None = None,
        locator: CacheLocator | None = None,
        state: InclusionState | None = None,
        base_path: str | None = None,
    ) -> None:
        self.config = config
        self.base_path = config.general.base_path if base_path is None else base_path
        self.registry = TargetRegistry(config, state)
        self.policy = ResolutionPolicy(
            config,
            self.registry,
            locator or CacheLocator(config, base_path=self.base_path),
        )
        self.tracker = InclusionTracker(self.registry, self.policy)
        self.routes = routes or RouteBuilder(
            build_url=config.general.build_url,
            base_path=self.base_path,
        )

    @property
    def state(self) -> InclusionState:
        return self.registry.state

    # ── Runtime targets ──────────────────────────────────────────

    def add_script(self, files: str | Iterable[str], target: str = DEFAULT_SCRIPT_TARGET) -> str:
        """Append script files to a runtime target (default: content-addressed)."""
        return self.registry.register_files(target, AssetKind.SCRIPT, files)

    def add_css(self, files: str | Iterable[str], target: str = DEFAULT_CSS_TARGET) -> str:
        """Append stylesheet files to a runtime target (default: content-addressed)."""
        return self.registry.register_files(target, AssetKind.STYLE, files)

    # ── Single targets ───────────────────────────────────────────

    def use_dynamic_build(self, name: str) -> bool:
        return self.policy.should_use_dynamic_build(name)

    def script(self, name: str, **options: Any) -> Markup:
        """Tag(s) for one script target. ``raw=True`` → one tag per source file."""
        return self._single(name, AssetKind.SCRIPT, options)

    def css(self, name: str, **options: Any) -> Markup:
        """Tag(s) for one stylesheet target. ``raw=True`` → one tag per source file."""
        return self._single(name, AssetKind.STYLE, options)

    def _single(self, name: str, kind: AssetKind, options: dict[str, Any]) -> Markup:
        options = dict(options)
        raw = bool(options.pop("raw", False))
        name = ensure_extension(name, kind)
        refs: list[ResolvedReference]
        if raw:
            refs = list(self.policy.resolve_raw(name))
        else:
            refs = [self.policy.resolve(name)]
        return self._render(refs, kind, options)

    # ── Pending runtime targets ──────────────────────────────────

    def include_js(self, *names: str, **options: Any) -> Markup:
        """Tags for pending script targets (all of them if no names given)."""
        return self._include(names, AssetKind.SCRIPT, options)

    def include_css(self, *names: str, **options: Any) -> Markup:
        """Tags for pending stylesheet targets (all of them if no names given)."""
        return self._include(names, AssetKind.STYLE, options)

    def include_assets(self, raw: bool | None = None) -> Markup:
        """Stylesheets then scripts for everything still pending.

        ``raw`` defaults to the config's debug flag.
        """
        if raw is None:
            raw = self.config.general.debug
        css = self.include_css(raw=raw)
        js = self.include_js(raw=raw)
        return Markup("\n").join([css, js])

    def _include(self, names: Iterable[str], kind: AssetKind, options: dict[str, Any]) -> Markup:
        options = dict(options)
        raw = bool(options.pop("raw", False))
        refs: list[ResolvedReference]
        if raw:
            refs = list(self.tracker.consume_raw(names, kind))
        else:
            refs = self.tracker.consume(names, kind)
        return self._render(refs, kind, options)

    # ── URLs & markup ────────────────────────────────────────────

    def url_for(self, ref: ResolvedReference) -> str:
        """URL for a resolved reference, with the kind's base URL applied."""
        ext = ref.kind.extension
        if isinstance(ref, DynamicRoute):
            return self.config.base_url_for(ext) + self.routes.url_for(ref)
        if ref.cached:
            return self.config.base_url_for(ext) + ref.path
        if _is_absolute_url(ref.path):
            return ref.path
        source_url = self.config.source_url_for(ext)
        if source_url.startswith("/") and not source_url.startswith("//"):
            source_url = self.base_path.rstrip("/") + source_url
        return source_url.rstrip("/") + "/" + ref.path

    def _render(self, refs: list[ResolvedReference], kind: AssetKind, options: dict[str, Any]) -> Markup:
        return join_tags([tag_for(kind, self.url_for(ref), **options) for ref in refs])
