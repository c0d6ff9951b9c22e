"""
Domain models — build targets, resolved references and configuration.

All models are re-exported here for convenient access:

    from asset_compress.core.models import AssetKind, AssetConfig, StaticFile
"""

from asset_compress.core.models.config import AssetConfig, GeneralSettings, KindSettings
from asset_compress.core.models.reference import DynamicRoute, ResolvedReference, StaticFile
from asset_compress.core.models.state import InclusionState
from asset_compress.core.models.target import (
    HASH_PLACEHOLDER,
    AssetKind,
    BuildTarget,
    ContentAddressedTarget,
    NamedTarget,
    TargetName,
    ensure_extension,
    fingerprint,
    parse_target_name,
)

__all__ = [
    # config.py
    "AssetConfig",
    "GeneralSettings",
    "KindSettings",
    # reference.py
    "DynamicRoute",
    "ResolvedReference",
    "StaticFile",
    # state.py
    "InclusionState",
    # target.py
    "HASH_PLACEHOLDER",
    "AssetKind",
    "BuildTarget",
    "ContentAddressedTarget",
    "NamedTarget",
    "TargetName",
    "ensure_extension",
    "fingerprint",
    "parse_target_name",
]
