# link_checker/crawler/urls.py
"""
URL normalisation: turns an href found on a page into the canonical absolute
URL used as the crawl's dedup key.
"""
from __future__ import annotations

from typing import List, Optional, Tuple
from urllib.parse import urljoin, urlsplit, urlunsplit

from link_checker.exceptions import InvalidURL

__all__ = ("IGNORED_SCHEMES", "normalize_url", "origin_of", "is_ignored_href")

SUPPORTED_SCHEMES: Tuple[str, ...] = ("http", "https")
#: hrefs that never point at a fetchable page
IGNORED_SCHEMES: Tuple[str, ...] = ("mailto:", "tel:", "javascript:", "data:")
_DEFAULT_PORTS = {"http": 80, "https": 443}


def is_ignored_href(href: str) -> bool:
    return href.strip().lower().startswith(IGNORED_SCHEMES)


def _remove_dot_segments(path: str) -> str:
    if not path:
        return "/"
    segments = path.split("/")
    output: List[str] = []
    for segment in segments[1:]:
        if segment == ".":
            continue
        if segment == "..":
            if output:
                output.pop()
            continue
        output.append(segment)
    result = "/" + "/".join(output)
    # "/a/." and "/a/.." name directories
    if segments[-1] in (".", "..") and not result.endswith("/"):
        result += "/"
    return result


def _netloc(scheme: str, netloc: str, host: str, port: Optional[int]) -> str:
    userinfo, at, _ = netloc.rpartition("@")
    if ":" in host:
        host = f"[{host}]"
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        host = f"{host}:{port}"
    return f"{userinfo}{at}{host}"


def normalize_url(href: str, base_url: Optional[str] = None, *, add_trailing_slash: bool = True) -> str:
    """
    Resolve *href* against *base_url* and canonicalise the result.

    - scheme and host are lower-cased, default ports dropped
    - ``.`` / ``..`` path segments are resolved, an empty path becomes ``/``
    - the fragment is stripped, the query string is kept untouched
    - with *add_trailing_slash*, an extension-less last path segment gets a ``/``

    Raises InvalidURL when the result is not an absolute http(s) URL with a host.
    Normalising an already normalised URL returns it unchanged.
    """
    raw = href.strip()
    try:
        absolute = urljoin(base_url, raw) if base_url else raw
        parts = urlsplit(absolute)
        port = parts.port
    except ValueError as exc:
        raise InvalidURL(href, str(exc)) from exc

    scheme = parts.scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        raise InvalidURL(href, f"unsupported scheme {scheme!r}" if scheme else "not an absolute URL")
    host = parts.hostname
    if not host:
        raise InvalidURL(href, "missing host")

    path = _remove_dot_segments(parts.path)
    if add_trailing_slash and not path.endswith("/"):
        last_segment = path.rsplit("/", 1)[-1]
        if "." not in last_segment:
            path += "/"

    return urlunsplit((scheme, _netloc(scheme, parts.netloc, host, port), path, parts.query, ""))


def origin_of(url: str) -> Tuple[str, str, int]:
    """(scheme, host, effective port) of an absolute http(s) URL."""
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    return scheme, (parts.hostname or ""), parts.port or _DEFAULT_PORTS.get(scheme, 0)
