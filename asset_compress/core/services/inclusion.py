"""
Inclusion tracker — emit each runtime target once per render.

``consume`` walks the requested names (or every pending name of the
kind, in registration order), skips names with nothing pending, and
resolves the rest. A consumed target stays consumed for the rest of
the render, so a second call for the same name yields nothing.
Asking for a target that was never registered is not an error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from asset_compress.core.models.reference import ResolvedReference, StaticFile
from asset_compress.core.models.state import InclusionState
from asset_compress.core.models.target import AssetKind, ensure_extension
from asset_compress.core.services.registry import TargetRegistry
from asset_compress.core.services.resolution import ResolutionPolicy

logger = logging.getLogger(__name__)


class InclusionTracker:
    """Drain the registry's pending targets into resolved references."""

    def __init__(self, registry: TargetRegistry, policy: ResolutionPolicy) -> None:
        self.registry = registry
        self.policy = policy

    @property
    def state(self) -> InclusionState:
        return self.registry.state

    def _candidates(self, names: Iterable[str] | None, kind: AssetKind) -> list[str]:
        names = list(names or [])
        if not names:
            names = self.state.pending(kind)
        return [ensure_extension(name, kind) for name in names]

    def consume(
        self,
        names: Iterable[str] | None,
        kind: AssetKind,
    ) -> list[ResolvedReference]:
        """Resolve and consume pending targets, one reference each."""
        output: list[ResolvedReference] = []
        for name in self._candidates(names, kind):
            if not self.state.is_pending(name, kind):
                logger.debug("Skipping %s: nothing pending", name)
                continue
            output.append(self.policy.resolve(name))
            self.state.consume(name, kind)
        return output

    def consume_raw(
        self,
        names: Iterable[str] | None,
        kind: AssetKind,
    ) -> list[StaticFile]:
        """Like consume(), but one reference per individual source file."""
        output: list[StaticFile] = []
        for name in self._candidates(names, kind):
            if not self.state.is_pending(name, kind):
                logger.debug("Skipping %s: nothing pending", name)
                continue
            output.extend(self.policy.resolve_raw(name))
            self.state.consume(name, kind)
        return output
