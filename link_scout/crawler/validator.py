# link_scout/crawler/validator.py
"""
Link validator: checks that an external link is alive with HEAD requests.

Only dead statuses (404, 410, 5xx), network errors and timeouts make a link
invalid. Sites commonly answer HEAD probes or unknown user agents with 403,
405 or 999 while the page opens fine in a browser, so those count as valid.
"""
from __future__ import annotations

import asyncio
from typing import Optional, Tuple
from urllib.parse import urljoin

from aiohttp import ClientError, ClientSession, ClientTimeout
from link_scout.config import CrawlerConfig
from link_scout.crawler.fetcher import error_reason, is_dead_status
from link_scout.crawler.models import ValidationOutcome
from link_scout.reporter import Reporter

__all__ = ("LinkValidator", "EXCEEDED_REDIRECTS", "MISSING_LOCATION", "BAD_LOCATION")

EXCEEDED_REDIRECTS = "exceeded max redirections"
MISSING_LOCATION = "301 without Location header"
BAD_LOCATION = "301 with malformed Location header"

_Probe = Tuple[int, str, Optional[str]]


class LinkValidator:
    """HEAD-probes a URL, following permanent redirects up to ``config.max_redirects``."""

    def __init__(
        self,
        session: ClientSession,
        config: CrawlerConfig,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.session = session
        self.config = config
        self.reporter = reporter or Reporter()
        self._timeout = ClientTimeout(total=config.validate_timeout)

    async def validate(self, url: str) -> ValidationOutcome:
        current = url
        hops = 0
        while True:
            try:
                status, reason, location = await self._probe(current)
            except (ClientError, asyncio.TimeoutError, ValueError) as exc:
                return ValidationOutcome(False, error_reason(exc))

            if is_dead_status(status):
                return ValidationOutcome(False, f"{status}: {reason}")
            if status != 301:
                return ValidationOutcome(True)
            if hops >= self.config.max_redirects:
                return ValidationOutcome(False, EXCEEDED_REDIRECTS)
            if not location:
                return ValidationOutcome(False, MISSING_LOCATION)

            try:
                target = urljoin(current, location)
            except ValueError as exc:
                return ValidationOutcome(False, f"{BAD_LOCATION}: {exc}")
            hops += 1
            self.reporter.report_debug("Redirect %d for '%s': '%s' -> '%s'", hops, url, current, target)
            current = target

    async def _probe(self, url: str) -> _Probe:
        async with self.session.head(url, allow_redirects=False, timeout=self._timeout) as resp:
            return resp.status, resp.reason or "", resp.headers.get("Location")
