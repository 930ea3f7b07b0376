# link_scout/crawler/fetcher.py
"""
Fetcher module: downloads internal pages with a per-request timeout.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout
from link_scout.config import CrawlerConfig
from link_scout.crawler.models import FetchOutcome, Failure, Html, NonHtmlSuccess

__all__ = ("Fetcher", "is_dead_status", "status_line", "error_reason")


def is_dead_status(status: int) -> bool:
    """404, 410 and every 5xx mean the resource is gone or broken."""
    return status in (404, 410) or 500 <= status <= 599


def status_line(resp: ClientResponse) -> str:
    return f"{resp.status}: {resp.reason or ''}"


def error_reason(exc: BaseException) -> str:
    """Human-readable message for a client-side failure."""
    if isinstance(exc, asyncio.TimeoutError):
        return "timeout"
    return str(exc) or type(exc).__name__


class Fetcher:
    """Downloads a page and tells apart HTML, other content and failures."""

    def __init__(self, session: ClientSession, config: CrawlerConfig) -> None:
        self.session = session
        self.config = config
        self._timeout = ClientTimeout(total=config.fetch_timeout)

    async def fetch(self, url: str) -> FetchOutcome:
        """
        GET *url* without following redirects.

        The body is read only for HTML responses; the response is released
        on every path, including timeouts and connection errors.
        """
        try:
            async with self.session.get(url, allow_redirects=False, timeout=self._timeout) as resp:
                if is_dead_status(resp.status):
                    return Failure(status_line(resp))
                ctype = resp.headers.get("Content-Type", "").lower()
                if "text/html" not in ctype:
                    return NonHtmlSuccess()
                return Html(await resp.text(errors="replace"))
        except (ClientError, asyncio.TimeoutError) as exc:
            return Failure(error_reason(exc))
