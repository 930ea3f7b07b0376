# === FILE: link_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
from collections import deque
from functools import partial
from typing import Deque, List, Optional, Set

from aiohttp import ClientSession, TCPConnector

from link_scout.config import CrawlerConfig
from link_scout.crawler.classifier import classify_hrefs, parse_origin
from link_scout.crawler.fetcher import Fetcher
from link_scout.crawler.link_extractor import iter_hrefs
from link_scout.crawler.models import CrawlJob, CrawlStats, Failure, NonHtmlSuccess
from link_scout.crawler.validator import LinkValidator
from link_scout.reporter import Reporter

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """
    Асинхронный обход сайта в ширину с проверкой внешних ссылок.

    Страницы загружаются пачками по ``max_concurrent_internal``; внешние
    ссылки каждой страницы проверяются пачками по ``max_concurrent_external``.
    Очередь, множества посещённых адресов и статистика меняются только
    в этом объекте и только между точками await.
    """

    def __init__(
        self,
        origin: str,
        config: Optional[CrawlerConfig] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.origin = parse_origin(origin)
        self.config = config or CrawlerConfig()
        self.reporter = reporter or Reporter()
        self.stats = CrawlStats()
        self.session: Optional[ClientSession] = None
        self._fetcher: Optional[Fetcher] = None
        self._validator: Optional[LinkValidator] = None
        self._frontier: Deque[CrawlJob] = deque()
        self._internal_visited: Set[str] = set()
        self._external_visited: Set[str] = set()

    async def __aenter__(self) -> AsyncCrawler:
        connector = TCPConnector(
            limit=self.config.max_concurrent_internal * self.config.max_concurrent_external
        )
        self.session = ClientSession(
            connector=connector,
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        self._fetcher = Fetcher(self.session, self.config)
        self._validator = LinkValidator(self.session, self.config, self.reporter)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> CrawlStats:
        if not self.session:
            raise RuntimeError("Session not initialized")
        root = CrawlJob(self.origin)
        self._internal_visited.add(root.target)
        self._frontier.append(root)

        while self._frontier and self.stats.pages_crawled < self.config.max_pages:
            batch = self._next_batch()
            if batch:
                await asyncio.gather(*(self._visit(job) for job in batch))

        if self._frontier:
            self.reporter.report_info(
                f"Page limit of {self.config.max_pages} reached, "
                f"{len(self._frontier)} queued pages were not visited."
            )
        return self.stats

    def _next_batch(self) -> List[CrawlJob]:
        size = min(
            self.config.max_concurrent_internal,
            self.config.max_pages - self.stats.pages_crawled,
        )
        batch: List[CrawlJob] = []
        while self._frontier and len(batch) < size:
            job = self._frontier.popleft()
            if job.depth > self.config.max_crawling_depth:
                self.reporter.report_debug(
                    "Skipping '%s': depth %d exceeds %d", job.target, job.depth, self.config.max_crawling_depth
                )
                continue
            batch.append(job)
        return batch

    async def _visit(self, job: CrawlJob) -> None:
        outcome = await self._fetcher.fetch(job.target)  # type: ignore[union-attr]
        if isinstance(outcome, Failure):
            self.stats.pages_failed += 1
            self.reporter.report_error(job.parent, job.target, outcome.reason)
            return
        if isinstance(outcome, NonHtmlSuccess):
            self.reporter.report_debug(
                "At page '%s' for href '%s': fetched, but it is not an HTML page.", job.parent, job.target
            )
            return

        self.stats.pages_crawled += 1
        links = classify_hrefs(
            iter_hrefs(outcome.text),
            job.target,
            skip_self_links=self.config.skip_self_links,
            on_error=partial(self.reporter.report_error, job.target),
        )
        self.reporter.report_debug(
            "'%s': found %d internal and %d external hrefs (%d ignored, %d invalid).",
            job.target,
            len(links.internal),
            len(links.external),
            links.dropped,
            links.invalid,
        )
        await self._check_external(job, links.external)
        self._enqueue_internal(job, links.internal)

    async def _check_external(self, job: CrawlJob, hrefs: List[str]) -> None:
        fresh = [href for href in hrefs if href not in self._external_visited]
        self._external_visited.update(fresh)

        step = self.config.max_concurrent_external
        for start in range(0, len(fresh), step):
            chunk = fresh[start:start + step]
            for href in chunk:
                self.reporter.report_debug("\t- %s", href)
            outcomes = await asyncio.gather(
                *(self._validator.validate(href) for href in chunk)  # type: ignore[union-attr]
            )
            for href, outcome in zip(chunk, outcomes):
                if not outcome.valid:
                    self.stats.broken_external += 1
                    self.reporter.report_warn(href, job.target, outcome.reason)
        self.stats.external_checked += len(fresh)

    def _enqueue_internal(self, job: CrawlJob, addresses: List[str]) -> None:
        for address in addresses:
            if address in self._internal_visited:
                continue
            self._internal_visited.add(address)
            self._frontier.append(job.child(address))

