"""URL construction for project-scoped JustCMS endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

if TYPE_CHECKING:
    from collections.abc import Mapping

# ";" separates ids in multi-layout requests and must reach the server as-is.
_SAFE_PATH_CHARS = "/;"


def _stringify(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(query: Mapping[str, object] | None) -> str:
    """Encode query parameters, skipping keys whose value is None.

    Keys keep the mapping's insertion order so identical input always gives
    identical output.
    """
    if not query:
        return ""
    pairs = [(key, _stringify(value)) for key, value in query.items() if value is not None]
    return urlencode(pairs)


def build_url(
    base_url: str,
    project_id: str,
    endpoint: str = "",
    query: Mapping[str, object] | None = None,
) -> str:
    """Build ``base/project[/endpoint][?query]``.

    The project id is encoded as a single path segment.
    """
    url = f"{base_url.rstrip('/')}/{quote(project_id, safe='')}"
    if endpoint:
        url += f"/{quote(endpoint, safe=_SAFE_PATH_CHARS)}"
    qs = build_query(query)
    if qs:
        url += f"?{qs}"
    return url
