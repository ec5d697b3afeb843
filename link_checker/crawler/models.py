# link_checker/crawler/models.py
"""
Data models passed between the scheduler and the worker threads.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class Success:
    """HTTP response with a status below 400 (after redirects)."""

    code: int
    ok = True

    @property
    def detail(self) -> str:
        return f"HTTP {self.code}"


@dataclass(frozen=True, slots=True)
class Failure:
    """HTTP response received, but the status is 400 or above."""

    code: int
    ok = False

    @property
    def detail(self) -> str:
        return f"HTTP {self.code}"


@dataclass(frozen=True, slots=True)
class Unreachable:
    """No HTTP response at all: timeout, DNS, refused connection, TLS error."""

    cause: str
    ok = False

    @property
    def detail(self) -> str:
        return f"unreachable: {self.cause}"


StatusOutcome = Union[Success, Failure, Unreachable]


def classify_status(code: int) -> StatusOutcome:
    """Map a final HTTP status code onto Success/Failure."""
    return Success(code) if code < 400 else Failure(code)


@dataclass(frozen=True, slots=True)
class CrawlCommand:
    """One unit of work: fetch *url*, and parse it for links if *extract_links*."""

    url: str
    extract_links: bool
    referrer: Optional[str] = None


@dataclass(frozen=True, slots=True)
class DiscoveredLink:
    """An anchor found on a page.

    ``resolved_url`` is ``None`` when the href could not be resolved; ``error``
    then carries the reason and the link is never enqueued.
    """

    href: str
    resolved_url: Optional[str]
    in_scope: bool
    error: Optional[str] = None


@dataclass(frozen=True, slots=True)
class FoundLinks:
    """Result of executing one CrawlCommand."""

    source_url: str
    status: StatusOutcome
    extract_links: bool
    referrer: Optional[str] = None
    discovered: Tuple[DiscoveredLink, ...] = ()
    bytes_downloaded: int = 0
