# link_checker/crawler/transport.py
"""
HTTP transport: a blocking ``fetch(url)`` built on an aiohttp session.

Each worker thread owns one HttpTransport. The transport keeps a private
event loop, so a worker can call ``fetch`` like a synchronous function while
the session still pools connections between calls.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from link_checker.exceptions import TransportError
from link_checker.utils import is_html_content

__all__ = ("Response", "Transport", "HttpTransport")


@dataclass(frozen=True, slots=True)
class Response:
    """Final response after redirects.

    ``body`` is only read for HTML responses fetched with ``read_body``;
    other responses carry an empty body.
    """

    url: str
    final_url: str
    status: int
    content_type: Optional[str] = None
    body: bytes = b""


class Transport(Protocol):
    def fetch(self, url: str, *, read_body: bool = True) -> Response: ...

    def close(self) -> None: ...


class HttpTransport:
    """GET-only transport following redirects, with a per-request total timeout."""

    def __init__(self, timeout: float, user_agent: str) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self._loop = asyncio.new_event_loop()
        try:
            self._session = self._loop.run_until_complete(self._open())
        except Exception:
            self._loop.close()
            raise

    async def _open(self) -> ClientSession:
        return ClientSession(
            timeout=ClientTimeout(total=self.timeout),
            headers={"User-Agent": self.user_agent},
            raise_for_status=False,
        )

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def fetch(self, url: str, *, read_body: bool = True) -> Response:
        """GET *url*. Raises TransportError when no HTTP response is obtained."""
        if self._loop.is_closed():
            raise RuntimeError("Transport is closed")
        return self._loop.run_until_complete(self._get(url, read_body))

    async def _get(self, url: str, read_body: bool) -> Response:
        try:
            async with self._session.get(url, allow_redirects=True) as resp:
                final_url = str(resp.url)
                content_type = resp.headers.get("Content-Type")
                body = b""
                if read_body and is_html_content(content_type, final_url):
                    body = await resp.read()
                return Response(
                    url=url,
                    final_url=final_url,
                    status=resp.status,
                    content_type=content_type,
                    body=body,
                )
        except asyncio.TimeoutError as exc:
            raise TransportError(f"timed out after {self.timeout:g}s") from exc
        except ClientError as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

    def close(self) -> None:
        if self._loop.is_closed():
            return
        if not self._session.closed:
            self._loop.run_until_complete(self._session.close())
        self._loop.close()
