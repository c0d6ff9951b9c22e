"""
Route builder — URLs for the dynamic build endpoint.

    <base_path>/<prefix>/.../<build_url>/<build_name>[?file[]=a.js&file[]=b.js]

Runtime targets carry their ordered file list in the query string so
the endpoint can build a target it has no configuration for.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from urllib.parse import quote, urlencode

from asset_compress.core.models.reference import DynamicRoute

DEFAULT_BUILD_URL = "/asset_compress/assets/get"


@dataclass(frozen=True)
class RouteBuilder:
    """Build dynamic route URLs.

    Args:
        build_url: Path of the build endpoint.
        base_path: URL prefix the application is mounted under.
        prefixes: Extra path segments placed before ``build_url``
            (e.g. a blueprint or locale prefix of the host app).
    """

    build_url: str = DEFAULT_BUILD_URL
    base_path: str = ""
    prefixes: tuple[str, ...] = ()

    def with_prefixes(self, *prefixes: str) -> RouteBuilder:
        """Copy of this builder with more prefix segments appended."""
        return replace(self, prefixes=(*self.prefixes, *prefixes))

    def url_for(self, route: DynamicRoute) -> str:
        segments = [s.strip("/") for s in (*self.prefixes, self.build_url)]
        path = "/".join([s for s in segments if s] + [quote(route.build_name)])
        url = f"{self.base_path.rstrip('/')}/{path}"
        if route.is_runtime and route.source_files:
            url += "?" + urlencode([("file[]", f) for f in route.source_files])
        return url
