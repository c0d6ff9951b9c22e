"""
Web app factory — a Flask app with the asset helpers installed.

Host applications usually call ``init_assets`` on their own app; this
factory is the standalone entry point. It serves the document root as
static files, so located builds and raw sources resolve, plus an
overview page of the declared targets at /.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flask import Flask

from asset_compress.core.config.loader import load_config
from asset_compress.core.models.config import AssetConfig
from asset_compress.ui.web.assets import init_assets

logger = logging.getLogger(__name__)

# Package directory for templates
_PACKAGE_DIR = Path(__file__).parent


def create_app(
    config_path: Path | None = None,
    config: AssetConfig | None = None,
    route_prefixes: list[str] | None = None,
) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_path: Path to asset_compress.yml (default: auto-detect).
        config: Already-loaded configuration; takes precedence over
            ``config_path``.
        route_prefixes: Path segments placed before the build URL.

    Returns:
        Configured Flask application.

    Raises:
        ConfigError: If no configuration is given and none can be loaded.
    """
    if config is None:
        config = load_config(config_path)

    app = Flask(
        __name__,
        template_folder=str(_PACKAGE_DIR / "templates"),
        static_folder=str(config.document_root_path),
        static_url_path="",
    )
    app.config["ASSET_CONFIG_PATH"] = str(config_path) if config_path else None
    app.config["ASSET_ROUTE_PREFIXES"] = list(route_prefixes or [])

    init_assets(app, config)

    from asset_compress.ui.web.routes_pages import pages_bp

    app.register_blueprint(pages_bp)

    logger.info("Asset web app created (config=%s)", config_path)
    return app


def run_server(
    app: Flask,
    host: str = "127.0.0.1",
    port: int = 8000,
    debug: bool = False,
) -> None:
    """Run the Flask development server."""
    logger.info("Starting asset web app on %s:%d", host, port)
    app.run(host=host, port=port, debug=debug, use_reloader=False)
