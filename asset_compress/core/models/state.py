"""
InclusionState — which runtime targets are still waiting to be emitted.

One instance belongs to exactly one render. It is created empty when
the render starts, filled as targets are registered, drained as they
are included, and thrown away when the render ends. Nothing here is
shared between renders.

Each (target, kind) pair moves Pending → Consumed once. Registering
more files under a consumed target does not make it pending again
within the same render.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from asset_compress.core.models.target import AssetKind


def _empty_pending() -> dict[AssetKind, dict[str, bool]]:
    return {kind: {} for kind in AssetKind}


def _empty_consumed() -> dict[AssetKind, set[str]]:
    return {kind: set() for kind in AssetKind}


@dataclass
class InclusionState:
    """Per-render pending map, tracked separately for each asset kind."""

    pending_by_kind: dict[AssetKind, dict[str, bool]] = field(default_factory=_empty_pending)
    consumed_by_kind: dict[AssetKind, set[str]] = field(default_factory=_empty_consumed)

    def mark(self, name: str, kind: AssetKind) -> bool:
        """Flag a target as having unconsumed files.

        Returns:
            False if the target was already consumed in this render.
        """
        if name in self.consumed_by_kind[kind]:
            return False
        self.pending_by_kind[kind][name] = True
        return True

    def is_pending(self, name: str, kind: AssetKind) -> bool:
        return self.pending_by_kind[kind].get(name, False)

    def is_consumed(self, name: str, kind: AssetKind) -> bool:
        return name in self.consumed_by_kind[kind]

    def consume(self, name: str, kind: AssetKind) -> None:
        """Move a pending target to consumed (no-op if not pending)."""
        if self.pending_by_kind[kind].pop(name, None):
            self.consumed_by_kind[kind].add(name)

    def pending(self, kind: AssetKind) -> list[str]:
        """Pending target names for a kind, in registration order."""
        return [name for name, flag in self.pending_by_kind[kind].items() if flag]
