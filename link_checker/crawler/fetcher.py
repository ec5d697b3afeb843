# link_checker/crawler/fetcher.py
"""
Fetcher module: executes one CrawlCommand against a transport and turns the
response into FoundLinks (status outcome plus scope-tagged discovered links).
"""
from __future__ import annotations

import logging
from typing import List, Optional

from link_checker.crawler.link_extractor import parse_document
from link_checker.crawler.models import (
    CrawlCommand,
    DiscoveredLink,
    FoundLinks,
    Unreachable,
    classify_status,
)
from link_checker.crawler.scope import Scope
from link_checker.crawler.transport import Response, Transport
from link_checker.crawler.urls import is_ignored_href
from link_checker.exceptions import InvalidURL, TransportError
from link_checker.utils import is_html_content


class Fetcher:
    """One GET per command, no retries; link extraction only for in-scope HTML pages."""

    def __init__(self, transport: Transport, scope: Scope) -> None:
        self.transport = transport
        self.scope = scope
        self.logger = logging.getLogger("LinkChecker")

    def fetch(self, command: CrawlCommand) -> FoundLinks:
        self.logger.info("Checking %s", command.url)
        try:
            response = self.transport.fetch(command.url, read_body=command.extract_links)
        except TransportError as exc:
            self.logger.warning("Unreachable %s: %s", command.url, exc)
            return FoundLinks(
                source_url=command.url,
                status=Unreachable(str(exc)),
                extract_links=command.extract_links,
                referrer=command.referrer,
            )

        status = classify_status(response.status)
        if not status.ok:
            self.logger.warning("Bad status %s for %s", response.status, command.url)

        discovered: List[DiscoveredLink] = []
        if command.extract_links and status.ok:
            if is_html_content(response.content_type, response.final_url):
                discovered = self.discover(response)
            else:
                self.logger.debug(
                    "Skipping link extraction for %s (content-type: %s)",
                    command.url,
                    response.content_type,
                )

        return FoundLinks(
            source_url=command.url,
            status=status,
            extract_links=command.extract_links,
            referrer=command.referrer,
            discovered=tuple(discovered),
            bytes_downloaded=len(response.body),
        )

    def discover(self, response: Response) -> List[DiscoveredLink]:
        """Normalise and scope-tag every anchor of an HTML response."""
        document = parse_document(response.body, response.final_url)
        links: List[DiscoveredLink] = []
        for href in document.hrefs:
            if is_ignored_href(href):
                self.logger.debug("Ignoring %r on %s", href, response.url)
                continue
            link = self._resolve(href, document.base_url, response.url)
            links.append(link)
        self.logger.debug("Parsed %s and found %d links", response.url, len(links))
        return links

    def _resolve(self, href: str, base_url: str, page_url: str) -> DiscoveredLink:
        try:
            resolved: Optional[str] = self.scope.normalize(href, base_url)
        except InvalidURL as exc:
            self.logger.warning("On %s: ignored unparsable %r: %s", page_url, href, exc.reason)
            return DiscoveredLink(href=href, resolved_url=None, in_scope=False, error=exc.reason)
        return DiscoveredLink(href=href, resolved_url=resolved, in_scope=self.scope.is_in_scope(resolved))
