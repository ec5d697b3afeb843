"""link_checker.crawler: URL normalisation, scope filtering and the threaded crawl engine."""

from link_checker.crawler.crawler import LinkCrawler
from link_checker.crawler.models import (
    CrawlCommand,
    DiscoveredLink,
    Failure,
    FoundLinks,
    StatusOutcome,
    Success,
    Unreachable,
)
from link_checker.crawler.scope import Scope, ScopeMode
from link_checker.crawler.state import CrawlState
from link_checker.crawler.urls import normalize_url

__all__ = (
    "LinkCrawler",
    "CrawlCommand",
    "CrawlState",
    "DiscoveredLink",
    "Failure",
    "FoundLinks",
    "Scope",
    "ScopeMode",
    "StatusOutcome",
    "Success",
    "Unreachable",
    "normalize_url",
)
