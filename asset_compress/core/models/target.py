"""
Build target model — names, kinds and source file groups.

A build target is a named, ordered group of source files that is
concatenated into one served file. The name always carries the
extension of its kind:

    default.js          → AssetKind.SCRIPT
    layout.css          → AssetKind.STYLE
    :hash-default.js    → content-addressed, named after its files

Content-addressed names are expanded to ``<md5>.<ext>`` only when
resolved, because files may still be appended after registration.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, Field

from asset_compress.core.errors import UnsupportedAssetKind

# Placeholder token marking a content-addressed target name
HASH_PLACEHOLDER = ":hash"


class AssetKind(StrEnum):
    """The two asset kinds a build target can produce."""

    SCRIPT = "js"
    STYLE = "css"

    @property
    def extension(self) -> str:
        """Extension without the dot (``js``)."""
        return self.value

    @property
    def suffix(self) -> str:
        """Extension with the dot (``.js``)."""
        return f".{self.value}"

    @classmethod
    def from_extension(cls, ext: str) -> AssetKind:
        """Look up a kind by extension, with or without the leading dot.

        Matching is case-sensitive, as for target names: ``JS`` is not ``js``.
        """
        try:
            return cls(ext.removeprefix("."))
        except ValueError:
            raise UnsupportedAssetKind(ext) from None

    @classmethod
    def from_name(cls, name: str) -> AssetKind:
        """Derive the kind from a target name's extension."""
        _, dot, ext = name.rpartition(".")
        if not dot:
            raise UnsupportedAssetKind(name)
        try:
            return cls(ext)
        except ValueError:
            raise UnsupportedAssetKind(name) from None


def ensure_extension(name: str, kind: AssetKind) -> str:
    """Append the kind's extension unless the name already ends with it."""
    if not name.endswith(kind.suffix):
        name += kind.suffix
    return name


def fingerprint(files: Sequence[str]) -> str:
    """Digest of an ordered file list (same files, same order → same digest)."""
    return hashlib.md5("_".join(files).encode("utf-8")).hexdigest()


# ── Target name variants ─────────────────────────────────────────


@dataclass(frozen=True)
class NamedTarget:
    """A target whose name is also its build file name."""

    name: str

    @property
    def kind(self) -> AssetKind:
        return AssetKind.from_name(self.name)

    def concrete_name(self, files: Sequence[str]) -> str:
        return self.name


@dataclass(frozen=True)
class ContentAddressedTarget:
    """A target named by the fingerprint of its source files."""

    name: str

    @property
    def kind(self) -> AssetKind:
        return AssetKind.from_name(self.name)

    def concrete_name(self, files: Sequence[str]) -> str:
        return f"{fingerprint(files)}.{self.kind.extension}"


TargetName = NamedTarget | ContentAddressedTarget


def parse_target_name(name: str) -> TargetName:
    """Classify a raw target name."""
    if name.startswith(HASH_PLACEHOLDER):
        return ContentAddressedTarget(name)
    return NamedTarget(name)


class BuildTarget(BaseModel):
    """A snapshot of a registered build target."""

    name: str
    kind: AssetKind
    source_files: list[str] = Field(default_factory=list)
    is_runtime: bool = False

    @property
    def build_name(self) -> str:
        """The file name this target is built and cached under."""
        return parse_target_name(self.name).concrete_name(self.source_files)
