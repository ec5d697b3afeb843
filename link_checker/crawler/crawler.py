# === FILE: link_checker/crawler/crawler.py ===
from __future__ import annotations

import functools
import logging
import queue
import threading
import time
from typing import Callable, List, Optional

from link_checker.crawler.fetcher import Fetcher
from link_checker.crawler.models import CrawlCommand, FoundLinks, Unreachable
from link_checker.crawler.scope import Scope
from link_checker.crawler.state import CrawlState
from link_checker.crawler.transport import HttpTransport, Transport
from link_checker.utils import format_bytes

__all__ = ("LinkCrawler", "DEFAULT_WORKERS")

DEFAULT_WORKERS = 8

TransportFactory = Callable[[], Transport]


class LinkCrawler:
    """
    Threaded crawler: a single control loop plus a fixed pool of worker threads.

    The control loop is the only code that reads or writes the CrawlState.
    Workers take CrawlCommands from one queue and put FoundLinks on another;
    every newly discovered URL goes through ``CrawlState.admit`` before a
    command is created for it. ``in_flight`` is incremented before a command
    is queued and decremented only after its result has been folded in, so
    ``in_flight == 0`` means no more work can ever appear.
    """

    #: seconds the control loop waits for a result before re-checking stop()
    poll_interval: float = 0.1

    def __init__(
        self,
        scope: Scope,
        *,
        workers: int = DEFAULT_WORKERS,
        transport_factory: Optional[TransportFactory] = None,
        join_timeout: float = 10.0,
    ) -> None:
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self.scope = scope
        self.workers = workers
        self.join_timeout = join_timeout
        self._transport_factory = transport_factory or functools.partial(
            HttpTransport, timeout=10.0, user_agent="LinkChecker"
        )
        self._stop = threading.Event()
        self.logger = logging.getLogger("LinkChecker")

    @classmethod
    def from_config(cls, config, transport_factory: Optional[TransportFactory] = None) -> LinkCrawler:
        """Build a crawler from a CheckerConfig."""
        factory = transport_factory or functools.partial(
            HttpTransport, timeout=config.timeout, user_agent=config.user_agent
        )
        return cls(
            config.scope(), workers=config.workers, transport_factory=factory, join_timeout=config.timeout
        )

    def stop(self) -> None:
        """Ask a running crawl to stop admitting work and return what it has."""
        self._stop.set()

    def crawl(self) -> CrawlState:
        """Run the crawl to completion (or until stopped) and return its state."""
        self.logger.info("Starting crawl: %s (%s, %d workers)", self.scope.seed_url, self.scope.mode.value, self.workers)
        start = time.monotonic()
        transports = self._open_transports()

        state = CrawlState()
        commands: queue.Queue[Optional[CrawlCommand]] = queue.Queue()
        results: queue.Queue[FoundLinks] = queue.Queue()
        threads = [
            threading.Thread(
                target=self._worker,
                args=(Fetcher(transport, self.scope), commands, results),
                name=f"worker-{i}",
                daemon=True,
            )
            for i, transport in enumerate(transports)
        ]
        for thread in threads:
            thread.start()

        try:
            self._control(state, commands, results)
        except KeyboardInterrupt:
            self.logger.warning("Interrupted, finishing current requests…")
            state.interrupted = True
        finally:
            self._shutdown(commands, threads, self.join_timeout if state.interrupted else None)

        duration = time.monotonic() - start
        self.logger.info(
            "Finished%s: %d URLs checked in %.2f s, %s downloaded",
            " (interrupted)" if state.interrupted else "",
            len(state.results),
            duration,
            format_bytes(state.bytes_downloaded),
        )
        return state

    def _open_transports(self) -> List[Transport]:
        transports: List[Transport] = []
        try:
            for _ in range(self.workers):
                transports.append(self._transport_factory())
        except Exception:
            for transport in transports:
                transport.close()
            raise
        return transports

    def _control(
        self,
        state: CrawlState,
        commands: queue.Queue[Optional[CrawlCommand]],
        results: queue.Queue[FoundLinks],
    ) -> None:
        seed = self.scope.seed_url
        state.admit(seed)
        commands.put(CrawlCommand(seed, extract_links=True))
        in_flight = 1

        while in_flight:
            if self._stop.is_set():
                self.logger.warning("Stop requested with %d URLs in flight", in_flight)
                state.interrupted = True
                return
            try:
                found = results.get(timeout=self.poll_interval)
            except queue.Empty:
                continue

            state.record(found)
            for link in found.discovered:
                if link.resolved_url is None:
                    continue
                if state.admit(link.resolved_url):
                    commands.put(CrawlCommand(link.resolved_url, link.in_scope, referrer=found.source_url))
                    in_flight += 1
                else:
                    self.logger.debug("Already seen %s", link.resolved_url)
            in_flight -= 1

    def _worker(
        self,
        fetcher: Fetcher,
        commands: queue.Queue[Optional[CrawlCommand]],
        results: queue.Queue[FoundLinks],
    ) -> None:
        try:
            while True:
                command = commands.get()
                if command is None:
                    break
                try:
                    found = fetcher.fetch(command)
                except Exception as exc:
                    self.logger.exception("Worker failed on %s", command.url)
                    found = FoundLinks(
                        source_url=command.url,
                        status=Unreachable(f"{type(exc).__name__}: {exc}"),
                        extract_links=command.extract_links,
                        referrer=command.referrer,
                    )
                results.put(found)
        finally:
            fetcher.transport.close()

    @staticmethod
    def _shutdown(
        commands: queue.Queue[Optional[CrawlCommand]],
        threads: List[threading.Thread],
        timeout: Optional[float],
    ) -> None:
        # drop work nobody will collect, then one sentinel per worker
        while True:
            try:
                commands.get_nowait()
            except queue.Empty:
                break
        for _ in threads:
            commands.put(None)
        # an interrupted crawl waits at most one fetch timeout per worker
        for thread in threads:
            thread.join(timeout)
