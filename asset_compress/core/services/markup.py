"""
Tag emitter — script and stylesheet tags for resolved URLs.

Pure functions: the same URL and options always give the same markup.
Options are rendered as HTML attributes and not interpreted:

    True          bare attribute     (defer)
    None / False  omitted
    anything else attr="value", escaped
"""

from __future__ import annotations

from typing import Any

from markupsafe import Markup

from asset_compress.core.models.target import AssetKind


def render_attrs(attrs: dict[str, Any]) -> Markup:
    """Render an attribute mapping, sorted for stable output."""
    parts = []
    for key in sorted(attrs):
        value = attrs[key]
        if value is None or value is False:
            continue
        if value is True:
            parts.append(Markup(" {}").format(key))
        else:
            parts.append(Markup(' {}="{}"').format(key, value))
    return Markup("").join(parts)


def script_tag(url: str, **options: Any) -> Markup:
    """``<script src="…"></script>``"""
    return Markup('<script src="{}"{}></script>').format(url, render_attrs(options))


def css_tag(url: str, **options: Any) -> Markup:
    """``<link rel="stylesheet" href="…">``"""
    attrs = {"rel": "stylesheet", **options}
    return Markup('<link href="{}"{}>').format(url, render_attrs(attrs))


def tag_for(kind: AssetKind, url: str, **options: Any) -> Markup:
    """Kind-appropriate inclusion tag."""
    if kind is AssetKind.SCRIPT:
        return script_tag(url, **options)
    if kind is AssetKind.STYLE:
        return css_tag(url, **options)
    raise AssertionError(f"unhandled asset kind: {kind!r}")


def join_tags(tags: list[Markup]) -> Markup:
    """Newline-separated markup block."""
    return Markup("\n").join(tags)
