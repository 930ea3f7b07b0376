# File: link_scout/engine.py
"""link_scout.engine: запуск обхода и вывод итоговой статистики."""

from __future__ import annotations

import time
from typing import Optional

from link_scout.config import CrawlerConfig
from link_scout.crawler.crawler import AsyncCrawler
from link_scout.crawler.models import CrawlStats
from link_scout.reporter import Reporter

__all__ = ["start_scan", "report_summary"]


async def start_scan(
    origin: str,
    config: Optional[CrawlerConfig] = None,
    reporter: Optional[Reporter] = None,
) -> CrawlStats:
    """Проверяет исходный адрес, обходит сайт и печатает итоги.

    Raises:
        InvalidOriginError: исходный адрес не является абсолютным http(s) URL;
            в этом случае обход не начинается.
    """
    reporter = reporter or Reporter()
    crawler = AsyncCrawler(origin, config, reporter)

    reporter.report_info(f"Starting crawling at '{origin}'.")
    started = time.monotonic()
    async with crawler:
        stats = await crawler.crawl()
    report_summary(stats, time.monotonic() - started, reporter)
    return stats


def report_summary(stats: CrawlStats, elapsed: float, reporter: Reporter) -> None:
    reporter.report_info(f"Pages crawled: {stats.pages_crawled}")
    reporter.report_info(f"External hrefs checked: {stats.external_checked}")
    reporter.report_info(f"Pages failed: {stats.pages_failed}")
    reporter.report_info(f"Broken external hrefs: {stats.broken_external}")
    reporter.report_info(f"Crawling duration: {elapsed:.2f}s")
