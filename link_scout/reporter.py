# File: link_scout/reporter.py
"""link_scout.reporter: console boundary of the crawler.

The crawl core never formats output itself; it calls into a :class:`Reporter`,
which renders each event onto the project logger.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from link_scout.logger import LOGGER_NAME

__all__ = ["Reporter"]


class Reporter:
    """Renders crawl events (progress, broken links, failures) as log records."""

    def __init__(self, *, debug: bool = False, logger: Optional[logging.Logger] = None) -> None:
        self.debug = debug
        self._log = logger or logging.getLogger(LOGGER_NAME)

    def report_info(self, message: str) -> None:
        self._log.info(message)

    def report_warn(self, href: str, containing_page: str, reason: Optional[str]) -> None:
        """External link *href* found on *containing_page* failed validation."""
        self._log.warning(
            "Bad response for '%s' contained in '%s'. Message: %s.", href, containing_page, reason
        )

    def report_error(self, context_page: Optional[str], href: str, reason: Optional[str]) -> None:
        """A page could not be fetched, or a href on it could not be resolved."""
        self._log.error("At page '%s' for href '%s'. Message: %s.", context_page, href, reason)

    def report_debug(self, message: str, *args: Any) -> None:
        if self.debug:
            self._log.debug(message, *args)
