# File: tests/conftest.py
from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator
from typing import Any, List, Optional, Tuple

import pytest
import pytest_asyncio
from aiohttp import web

from link_scout.config import CrawlerConfig
from link_scout.reporter import Reporter


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


class RecordingReporter(Reporter):
    """Reporter that keeps every event instead of logging it."""

    def __init__(self) -> None:
        super().__init__(debug=True)
        self.infos: List[str] = []
        self.warnings: List[Tuple[str, str, Optional[str]]] = []
        self.errors: List[Tuple[Optional[str], str, Optional[str]]] = []
        self.debugs: List[str] = []

    def report_info(self, message: str) -> None:
        self.infos.append(message)

    def report_warn(self, href: str, containing_page: str, reason: Optional[str]) -> None:
        self.warnings.append((href, containing_page, reason))

    def report_error(self, context_page: Optional[str], href: str, reason: Optional[str]) -> None:
        self.errors.append((context_page, href, reason))

    def report_debug(self, message: str, *args: Any) -> None:
        self.debugs.append(message % args if args else message)


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def fast_config() -> CrawlerConfig:
    """Small limits and short timeouts for local test servers."""
    return CrawlerConfig(
        max_concurrent_internal=5,
        max_concurrent_external=5,
        max_crawling_depth=5,
        max_pages=100,
        fetch_timeout=2.0,
        validate_timeout=2.0,
        user_agent="TestAgent/1.0",
    )


class Site:
    """
    A local test server.

    ``base`` addresses it by IP (the crawled host) and ``external`` by the
    ``localhost`` name, so links to ``external`` classify as off-host while
    hitting the same app. Requests are counted per (method, path).
    """

    def __init__(self, port: int) -> None:
        self.port = port
        self.hits: Counter = Counter()
        self.order: List[str] = []
        self.base = f"http://127.0.0.1:{port}"
        self.external = f"http://localhost:{port}"
        self._runner: Optional[web.AppRunner] = None

    def url(self, path: str) -> str:
        return f"{self.base}{path}"

    def ext(self, path: str) -> str:
        return f"{self.external}{path}"

    def gets(self, path: str) -> int:
        return self.hits[("GET", path)]

    def heads(self, path: str) -> int:
        return self.hits[("HEAD", path)]

    async def start(self, app: web.Application) -> None:
        @web.middleware
        async def count_requests(request: web.Request, handler):
            self.hits[(request.method, request.path)] += 1
            if request.method == "GET":
                self.order.append(request.path)
            return await handler(request)

        app.middlewares.append(count_requests)
        self._runner = web.AppRunner(app)
        await self._runner.setup()
        await web.TCPSite(self._runner, "127.0.0.1", self.port).start()

    async def stop(self) -> None:
        if self._runner is not None:
            await self._runner.cleanup()


@pytest_asyncio.fixture
async def site(unused_tcp_port: int) -> AsyncIterator[Site]:
    """Start the app with ``await site.start(app)``; cleanup happens at teardown."""
    server = Site(unused_tcp_port)
    try:
        yield server
    finally:
        await server.stop()

