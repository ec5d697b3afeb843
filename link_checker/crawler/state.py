# link_checker/crawler/state.py
"""
Crawl ledger: the dedup gate and the accumulated results of one run.

Only the scheduler's control loop touches a CrawlState, so no locking is
needed: workers report back through the result queue.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Set

from link_checker.crawler.models import FoundLinks


@dataclass(slots=True)
class CrawlState:
    """Every URL ever admitted, plus one FoundLinks per executed command."""

    seen: Set[str] = field(default_factory=set)
    results: Dict[str, FoundLinks] = field(default_factory=dict)
    interrupted: bool = False

    def admit(self, url: str) -> bool:
        """Claim *url*; True only for the first caller, who may enqueue it."""
        if url in self.seen:
            return False
        self.seen.add(url)
        return True

    def record(self, found: FoundLinks) -> None:
        self.results[found.source_url] = found

    @property
    def bytes_downloaded(self) -> int:
        return sum(found.bytes_downloaded for found in self.results.values())
