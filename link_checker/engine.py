# File: link_checker/engine.py
"""link_checker.engine: Оркестрация — запуск обхода и агрегация результатов."""

from __future__ import annotations

from typing import Optional

from link_checker.aggregator import CrawlReport, aggregate_results
from link_checker.config import CheckerConfig
from link_checker.crawler.crawler import LinkCrawler, TransportFactory
from link_checker.logger import logger

__all__ = ["Engine", "start_check"]


class Engine:
    """Фасад для CLI и тестов: запуск обхода и агрегация результатов."""

    def __init__(self, config: CheckerConfig, transport_factory: Optional[TransportFactory] = None) -> None:
        """Инициализирует Engine с заданной конфигурацией проверки."""
        self.config = config
        self.crawler = LinkCrawler.from_config(config, transport_factory)

    def start_check(self) -> CrawlReport:
        """Запускает обход до неподвижной точки (или прерывания) и возвращает отчёт."""
        logger.info("Starting link check…")
        try:
            state = self.crawler.crawl()
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise

        try:
            return aggregate_results(state, self.crawler.scope)
        except Exception as exc:
            logger.error("Aggregation failed: %s", exc)
            raise


def start_check(config: CheckerConfig) -> CrawlReport:
    """Короткий путь для CLI: один Engine на один запуск."""
    return Engine(config).start_check()
