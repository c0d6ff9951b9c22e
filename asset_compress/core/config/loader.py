"""
Configuration loader — reads asset_compress.yml into an AssetConfig.

This is the primary entry point for loading asset configuration.
It reads YAML, validates against the Pydantic schema, and anchors
relative paths at the directory holding the config file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from asset_compress.core.errors import ConfigError
from asset_compress.core.models.config import AssetConfig

logger = logging.getLogger(__name__)

# Default config filename
ASSET_CONFIG_FILE = "asset_compress.yml"


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for asset_compress.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to asset_compress.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / ASSET_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> AssetConfig:
    """Load and validate asset configuration.

    Args:
        path: Explicit path to asset_compress.yml. If None, searches upward.

    Returns:
        Validated AssetConfig model.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(
            f"No {ASSET_CONFIG_FILE} found. "
            "Create one in the project root, or pass --config."
        )

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading asset config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    # An empty file is a valid, all-defaults configuration
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # A single file listed as a bare string is accepted as a one-item list
    targets = data.get("targets") or {}
    if isinstance(targets, dict):
        data["targets"] = {
            name: [files] if isinstance(files, str) else (files or [])
            for name, files in targets.items()
        }

    data["config_dir"] = str(path.parent.resolve())

    try:
        config = AssetConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid asset configuration: {e}") from e

    logger.info("Loaded asset config from %s with %d targets", path, len(config.targets))
    return config
