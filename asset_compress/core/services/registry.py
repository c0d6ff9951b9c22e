"""
Target registry — declared and runtime build targets.

Declared targets come from the asset config. Runtime targets are
added while a page renders (``add_script`` / ``add_css``) and shadow
the declared list of the same name: the first runtime registration
copies the declared files, later ones append to that copy.

Merge rules:
    Repeated registrations union onto the existing list, keeping
    first-seen order and dropping duplicates.
    Names without an extension get the kind's extension appended
    before anything is stored, so ``default`` and ``default.js`` are
    the same target.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from asset_compress.core.models.config import AssetConfig
from asset_compress.core.models.state import InclusionState
from asset_compress.core.models.target import AssetKind, BuildTarget, ensure_extension

logger = logging.getLogger(__name__)


def _as_list(files: str | Iterable[str]) -> list[str]:
    if isinstance(files, str):
        return [files]
    return list(files)


def _union(existing: list[str], new: Iterable[str]) -> list[str]:
    """Append ``new`` onto ``existing`` preserving first-seen order."""
    return list(dict.fromkeys([*existing, *new]))


class TargetRegistry:
    """Build targets known to one render.

    Args:
        config: Asset configuration (declared targets).
        state: The render's inclusion state; runtime registrations
            are marked pending here.
    """

    def __init__(self, config: AssetConfig, state: InclusionState | None = None) -> None:
        self.config = config
        self.state = state if state is not None else InclusionState()
        self._runtime: dict[str, list[str]] = {}

    def register_files(
        self,
        name: str,
        kind: AssetKind,
        files: str | Iterable[str],
    ) -> str:
        """Append files to a runtime target and mark it pending.

        A target that still has no files after the merge is stored but
        not marked pending, so including pending targets never trips
        over it.

        Returns:
            The normalised target name the files were stored under.
        """
        name = ensure_extension(name, kind)
        self.set_files(name, files)
        if not self._runtime[name]:
            logger.debug("Registered %s with no files; not pending", name)
            return name
        if self.state.is_consumed(name, kind):
            logger.warning("%s was already included in this render; new files are not emitted", name)
            return name
        self.state.mark(name, kind)
        logger.debug("Registered %s → %s", name, self._runtime[name])
        return name

    def set_files(self, name: str, files: str | Iterable[str]) -> None:
        """Declare files for a target, unioned onto any existing list."""
        self._runtime[name] = _union(self.get_files(name), _as_list(files))

    def get_files(self, name: str) -> list[str]:
        """Ordered source files for a target, or an empty list if unknown."""
        if name in self._runtime:
            return list(self._runtime[name])
        return self.config.files_for(name)

    def is_runtime(self, name: str) -> bool:
        """Whether the target was defined (or extended) during this render."""
        return name in self._runtime

    def get(self, name: str) -> BuildTarget | None:
        """Snapshot of a target, or None if it has no files."""
        files = self.get_files(name)
        if not files:
            return None
        return BuildTarget(
            name=name,
            kind=AssetKind.from_name(name),
            source_files=files,
            is_runtime=self.is_runtime(name),
        )
