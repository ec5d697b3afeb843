# link_checker/crawler/link_extractor.py
"""
Anchor extraction for LinkChecker.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup, SoupStrainer
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from link_checker.logger import logger

# Only <a> and <base> matter, so the rest of the tree is never built.
_STRAINER = SoupStrainer(["a", "base"])


@dataclass(slots=True)
class ParsedDocument:
    """Base URL for relative references plus raw href values in document order."""

    base_url: str
    hrefs: List[str] = field(default_factory=list)


def parse_document(content: Union[str, bytes], page_url: str) -> ParsedDocument:
    """
    Collect ``<a href>`` values and honour ``<base href>``.

    *page_url* should be the final URL after redirects. Markup the parser
    rejects yields an empty document rather than an error.
    """
    try:
        soup = BeautifulSoup(content, "html.parser", parse_only=_STRAINER)
    except ParserRejectedMarkup as exc:
        logger.warning("Could not parse %s: %s", page_url, exc)
        return ParsedDocument(page_url)

    base_url = page_url
    base = soup.find("base", href=True)
    if isinstance(base, Tag) and isinstance(base.get("href"), str):
        try:
            base_url = urljoin(page_url, base["href"].strip())
        except ValueError as exc:
            logger.info("On %s: ignored invalid base href %r: %s", page_url, base["href"], exc)

    hrefs: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if isinstance(href_val, str):
            hrefs.append(href_val)
    return ParsedDocument(base_url, hrefs)


def extract_anchor_targets(content: Union[str, bytes]) -> List[str]:
    """Raw href strings of every anchor, in document order."""
    return parse_document(content, "").hrefs
