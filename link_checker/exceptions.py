"""Exception hierarchy shared by the crawl engine and the CLI."""
from __future__ import annotations

__all__ = ("LinkCheckerError", "InvalidURL", "TransportError")


class LinkCheckerError(Exception):
    """Base class for every error raised by link_checker."""


class InvalidURL(LinkCheckerError, ValueError):
    """An href (or the seed URL) cannot be parsed or resolved to an http(s) URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url!r}: {reason}")
        self.url = url
        self.reason = reason


class TransportError(LinkCheckerError):
    """Network-level failure: timeout, DNS, refused connection, TLS, broken payload."""
