# File: tests/conftest.py
from __future__ import annotations

import threading
from collections import Counter
from typing import Dict, List, Tuple, Union

import pytest

from link_checker.crawler.scope import Scope, ScopeMode
from link_checker.crawler.transport import Response
from link_checker.logger import configure
from link_checker.utils import is_html_content

#: (status, html) or (status, body, content_type) or an exception to raise
PageSpec = Union[Tuple[int, str], Tuple[int, str, str], Exception]


class FakeSite:
    """In-memory website shared by all FakeTransports of one crawl."""

    def __init__(self, pages: Dict[str, PageSpec]) -> None:
        self.pages = pages
        self.calls: Counter[str] = Counter()
        self.body_reads: Counter[str] = Counter()
        self.transports: List[FakeTransport] = []
        self._lock = threading.Lock()

    def transport(self) -> "FakeTransport":
        transport = FakeTransport(self)
        self.transports.append(transport)
        return transport

    def serve(self, url: str, read_body: bool) -> Response:
        spec = self.pages.get(url, (404, "not found"))
        if isinstance(spec, Exception):
            with self._lock:
                self.calls[url] += 1
            raise spec
        status, body, *rest = spec
        content_type = rest[0] if rest else "text/html; charset=utf-8"
        # same rule as HttpTransport: only HTML bodies are downloaded
        read_body = read_body and is_html_content(content_type, url)
        with self._lock:
            self.calls[url] += 1
            if read_body:
                self.body_reads[url] += 1
        return Response(
            url=url,
            final_url=url,
            status=status,
            content_type=content_type,
            body=body.encode("utf-8") if read_body else b"",
        )


class FakeTransport:
    def __init__(self, site: FakeSite) -> None:
        self.site = site
        self.closed = False

    def fetch(self, url: str, *, read_body: bool = True) -> Response:
        return self.site.serve(url, read_body)

    def close(self) -> None:
        self.closed = True


def links(*hrefs: str) -> str:
    """HTML page with one anchor per href."""
    anchors = "".join(f'<a href="{href}">{href}</a>' for href in hrefs)
    return f"<html><body>{anchors}</body></html>"


@pytest.fixture(autouse=True)
def reset_logging():
    """CliRunner swaps sys.stdout; rebind the log handler after every test."""
    yield
    configure(level="DEBUG")


@pytest.fixture()
def widgets_scope() -> Scope:
    return Scope.from_seed("https://example.com/products/widgets/")


@pytest.fixture()
def domain_scope() -> Scope:
    return Scope.from_seed("https://example.com/products/widgets/", mode=ScopeMode.DOMAIN)
