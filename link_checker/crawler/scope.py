# link_checker/crawler/scope.py
"""
Crawl scope: decides which URLs are parsed for further links (in scope) and
which are only checked for liveness (out of scope).
"""
from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import urlsplit

from link_checker.crawler.urls import normalize_url, origin_of


class ScopeMode(str, enum.Enum):
    """How far link extraction reaches from the seed URL."""

    PATH_PREFIX = "path-prefix"
    DOMAIN = "domain"


@dataclass(frozen=True, slots=True)
class Scope:
    """Immutable crawl-wide settings derived once from the seed URL."""

    seed_url: str
    seed_origin: Tuple[str, str, int]
    seed_path_prefix: str
    mode: ScopeMode = ScopeMode.PATH_PREFIX
    skip_pattern: Optional[re.Pattern[str]] = None
    add_trailing_slash: bool = True

    @classmethod
    def from_seed(
        cls,
        seed: str,
        mode: ScopeMode = ScopeMode.PATH_PREFIX,
        skip_pattern: Optional[str | re.Pattern[str]] = None,
        add_trailing_slash: bool = True,
    ) -> Scope:
        """Normalise *seed* and build the scope. Raises InvalidURL for a bad seed."""
        seed_url = normalize_url(seed, add_trailing_slash=add_trailing_slash)
        path = urlsplit(seed_url).path
        prefix = path[: path.rfind("/") + 1] or path
        if isinstance(skip_pattern, str):
            skip_pattern = re.compile(skip_pattern)
        return cls(
            seed_url=seed_url,
            seed_origin=origin_of(seed_url),
            seed_path_prefix=prefix,
            mode=ScopeMode(mode),
            skip_pattern=skip_pattern,
            add_trailing_slash=add_trailing_slash,
        )

    def normalize(self, href: str, base_url: Optional[str] = None) -> str:
        return normalize_url(href, base_url, add_trailing_slash=self.add_trailing_slash)

    def is_in_scope(self, url: str) -> bool:
        """True if *url* (already normalised) should be parsed for links."""
        if origin_of(url) != self.seed_origin:
            return False
        if self.mode is ScopeMode.DOMAIN:
            return True
        return urlsplit(url).path.startswith(self.seed_path_prefix)

    def is_skipped(self, url: str) -> bool:
        """True if a bad *url* must be left out of the broken-link report."""
        return self.skip_pattern is not None and self.skip_pattern.search(url) is not None
