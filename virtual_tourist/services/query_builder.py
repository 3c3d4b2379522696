"""Request URL composition for the photo provider."""

from __future__ import annotations

import re
from typing import Mapping

import httpx

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*$")
_HOST_FORBIDDEN_RE = re.compile(r"[\s/?#@\\]")
_PATH_FORBIDDEN_RE = re.compile(r"[\s?#]")


def build_url(
    scheme: str,
    host: str,
    path: str,
    params: Mapping[str, str],
) -> httpx.URL | None:
    """Compose ``scheme://host/path?query`` from already-stringified params.

    Query entries keep the mapping's iteration order. Returns ``None`` when a
    base component is missing or malformed, or the result is not an absolute
    URL.
    """

    scheme = (scheme or "").strip()
    host = (host or "").strip()
    path = (path or "").strip()
    if not scheme or not host or not path:
        return None

    for key, value in params.items():
        if not isinstance(value, str):
            raise TypeError(f"Query parameter {key!r} must be a string, got {type(value).__name__}")

    # Delimiters here would move the query into the path or fragment.
    if not _SCHEME_RE.match(scheme) or _HOST_FORBIDDEN_RE.search(host) or _PATH_FORBIDDEN_RE.search(path):
        return None

    if not path.startswith("/"):
        path = f"/{path}"

    try:
        url = httpx.URL(scheme=scheme, host=host, path=path, params=dict(params))
    except httpx.InvalidURL:
        return None
    if not url.is_absolute_url or not url.host:
        return None
    return url


__all__ = ["build_url"]
