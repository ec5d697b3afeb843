# File: link_checker/utils.py
"""link_checker.utils: Small helpers shared by the fetcher, the reports and the CLI."""

from __future__ import annotations

import posixpath
from typing import Optional, Sequence
from urllib.parse import urlsplit

__all__: Sequence[str] = (
    "HTML_EXTENSIONS",
    "is_likely_html_content",
    "is_html_content",
    "format_bytes",
)

#: MIME types whose bodies are parsed for links.
HTML_MIME_TYPES: frozenset[str] = frozenset(("text/html", "application/xhtml+xml"))

#: Extensions that are served as HTML by common server stacks.
HTML_EXTENSIONS: frozenset[str] = frozenset(
    ("html", "htm", "php", "asp", "aspx", "jsp", "cfm", "cgi", "pl", "py", "rb")
)


def is_likely_html_content(url: str) -> bool:
    """Guess from the URL alone whether it points to an HTML document.

    Used only when the server does not send a Content-Type header.
    """
    path = urlsplit(url).path.lower()
    if not path or path.endswith("/"):
        return True
    last_segment = posixpath.basename(path)
    if "." not in last_segment:
        return True
    return last_segment.rsplit(".", 1)[1] in HTML_EXTENSIONS


def is_html_content(content_type: Optional[str], url: str) -> bool:
    """HTML by Content-Type; by URL only when the header is missing or empty."""
    if content_type:
        return content_type.split(";", 1)[0].strip().lower() in HTML_MIME_TYPES
    return is_likely_html_content(url)


def format_bytes(size: int) -> str:
    """Human readable size: ``512 B``, ``1.5 KB``, ``2.5 MB``."""
    if size >= 1_048_576:
        return f"{size / 1_048_576:.1f} MB"
    if size >= 1_024:
        return f"{size / 1_024:.1f} KB"
    return f"{size} B"
