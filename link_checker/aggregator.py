# File: link_checker/aggregator.py
"""link_checker.aggregator: Сборка итогового отчёта из состояния завершённого обхода."""

from __future__ import annotations

import json
from collections import defaultdict
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Set, TypedDict

from link_checker.crawler.models import DiscoveredLink, FoundLinks
from link_checker.crawler.scope import Scope
from link_checker.crawler.state import CrawlState
from link_checker.logger import logger


class LinkInfo(TypedDict, total=False):
    """Ссылка, найденная на странице."""

    href: str
    resolved_url: Optional[str]
    in_scope: bool
    error: str


class BadUrlInfo(TypedDict):
    """Битый URL: код ответа или причина недоступности и страницы-источники."""

    url: str
    status_detail: str
    referenced_from: List[str]


@dataclass(slots=True)
class CrawlReport:
    """Результаты проверки: битые ссылки и карта ссылок по страницам."""

    bad_urls: List[BadUrlInfo] = field(default_factory=list)
    url_map: Dict[str, List[LinkInfo]] = field(default_factory=dict)
    unique_urls: int = 0
    bytes_downloaded: int = 0
    interrupted: bool = False

    @property
    def pages_crawled(self) -> int:
        return len(self.url_map)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление CrawlReport."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def _link_info(link: DiscoveredLink) -> LinkInfo:
    info: LinkInfo = {
        "href": link.href,
        "resolved_url": link.resolved_url,
        "in_scope": link.in_scope,
    }
    if link.error is not None:
        info["error"] = link.error
    return info


def _referrers(results: Dict[str, FoundLinks]) -> Dict[str, Set[str]]:
    """Обратный индекс: URL -> все страницы, на которых он найден."""
    index: Dict[str, Set[str]] = defaultdict(set)
    for found in results.values():
        for link in found.discovered:
            if link.resolved_url is not None:
                index[link.resolved_url].add(found.source_url)
    return index


def aggregate_results(state: CrawlState, scope: Optional[Scope] = None) -> CrawlReport:
    """Собирает bad_urls и url_map; URL, совпадающие со skip_pattern, из bad_urls исключаются."""
    referrers = _referrers(state.results)
    report = CrawlReport(
        unique_urls=len(state.seen),
        bytes_downloaded=state.bytes_downloaded,
        interrupted=state.interrupted,
    )

    for url in sorted(state.results):
        found = state.results[url]
        if found.extract_links:
            report.url_map[url] = [_link_info(link) for link in found.discovered]
        if found.status.ok:
            continue
        if scope is not None and scope.is_skipped(url):
            logger.info("Skipping broken link (matches skip pattern): %s", url)
            continue
        report.bad_urls.append(
            {
                "url": url,
                "status_detail": found.status.detail,
                "referenced_from": sorted(referrers.get(url) or filter(None, [found.referrer])),
            }
        )
    return report
