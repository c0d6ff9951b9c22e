"""
Page routes — an overview of the configured build targets.

GET / renders every declared target through the request's includer,
so the page itself loads each build the way a host template would
and the table shows whether it came from the cache or the build URL.
"""

from __future__ import annotations

from flask import Blueprint, render_template

from asset_compress.ui.web.assets import get_config, get_includer

pages_bp = Blueprint("pages", __name__)


@pages_bp.route("/")
def index():  # type: ignore[no-untyped-def]
    """List declared targets with the URL each one resolves to."""
    includer = get_includer()
    rows = []
    for target in get_config().declared_targets():
        ref = includer.policy.resolve(target.name)
        rows.append({
            "target": target,
            "mode": "dynamic" if includer.use_dynamic_build(target.name) else "static",
            "url": includer.url_for(ref),
        })
    return render_template("index.html", rows=rows)
