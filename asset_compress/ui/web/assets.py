"""
Flask integration — a fresh AssetIncluder for every request.

The includer lives on ``flask.g`` so its pending targets vanish with
the request. Templates reach it as ``assets``:

    {% do assets.add_script(["menu.js", "tabs.js"], "page") %}
    {{ assets.css("layout") }}
    {{ assets.include_assets() }}

The URL prefix is ``general.base_path`` when set, otherwise the
request's ``script_root``. It applies to build routes, cached builds
and raw source URLs.

Host app settings (``app.config``):
    ASSET_ROUTE_PREFIXES  path segments placed before the build URL
"""

from __future__ import annotations

import logging

from flask import Flask, current_app, g, has_request_context, request

from asset_compress.core.models.config import AssetConfig
from asset_compress.core.services.includer import AssetIncluder

logger = logging.getLogger(__name__)

EXTENSION_KEY = "asset_compress"


def init_assets(app: Flask, config: AssetConfig) -> None:
    """Attach an asset configuration to the app and expose ``assets`` to Jinja."""
    app.extensions[EXTENSION_KEY] = config
    app.config.setdefault("ASSET_ROUTE_PREFIXES", [])
    app.jinja_env.add_extension("jinja2.ext.do")

    @app.context_processor
    def _inject_assets():  # type: ignore[no-untyped-def]
        return {"assets": get_includer()}

    logger.debug("Asset helpers registered on %s", app.name)


def get_config() -> AssetConfig:
    """The asset configuration of the current app."""
    return current_app.extensions[EXTENSION_KEY]


def get_includer() -> AssetIncluder:
    """The includer for the current request, created on first use."""
    if "asset_includer" not in g:
        config = get_config()
        base_path = config.general.base_path
        if not base_path and has_request_context():
            base_path = request.script_root
        includer = AssetIncluder(config, base_path=base_path)
        includer.routes = includer.routes.with_prefixes(
            *current_app.config.get("ASSET_ROUTE_PREFIXES", ())
        )
        g.asset_includer = includer
    return g.asset_includer
