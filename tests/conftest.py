"""
Shared test fixtures and configuration.
"""

import textwrap
from pathlib import Path

import pytest

from asset_compress.core.config.loader import load_config
from asset_compress.core.models.config import AssetConfig


@pytest.fixture
def webroot(tmp_path: Path) -> Path:
    """A document root with empty js/css cache directories."""
    root = tmp_path / "webroot"
    (root / "cache_js").mkdir(parents=True)
    (root / "cache_css").mkdir(parents=True)
    return root


@pytest.fixture
def config_file(tmp_path: Path, webroot: Path) -> Path:
    """A complete asset_compress.yml next to the webroot."""
    content = textwrap.dedent("""\
        general:
          document_root: webroot
        js:
          cache_path: webroot/cache_js
        css:
          cache_path: webroot/cache_css
        targets:
          default.js:
            - jquery.js
            - app.js
          default.css:
            - reset.css
            - layout.css
    """)
    path = tmp_path / "asset_compress.yml"
    path.write_text(content)
    return path


@pytest.fixture
def config(config_file: Path) -> AssetConfig:
    """The loaded configuration from ``config_file``."""
    return load_config(config_file)
