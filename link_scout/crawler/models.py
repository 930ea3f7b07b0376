# link_scout/crawler/models.py
"""
Data models for the LinkScout crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True, slots=True)
class CrawlJob:
    """An internal address waiting in the frontier, with the page it was found on."""

    target: str
    parent: Optional[str] = None
    depth: int = 0

    def child(self, target: str) -> CrawlJob:
        return CrawlJob(target=target, parent=self.target, depth=self.depth + 1)


@dataclass(slots=True)
class CrawlStats:
    """Run totals, mutated only by the orchestrator."""

    pages_crawled: int = 0
    external_checked: int = 0
    pages_failed: int = 0
    broken_external: int = 0


@dataclass(frozen=True, slots=True)
class Html:
    """The page was fetched and is HTML."""

    text: str


@dataclass(frozen=True, slots=True)
class NonHtmlSuccess:
    """The resource exists but is not an HTML page (image, PDF, ...)."""


@dataclass(frozen=True, slots=True)
class Failure:
    """The page could not be fetched; *reason* is a status line or an error message."""

    reason: str


FetchOutcome = Union[Html, NonHtmlSuccess, Failure]


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    valid: bool
    reason: Optional[str] = None


@dataclass(slots=True)
class ClassifiedLinks:
    """Absolute hrefs of one page split by host.

    ``dropped`` counts ignored hrefs (fragments, other schemes, self-links),
    ``invalid`` counts hrefs that could not be resolved.
    """

    internal: List[str] = field(default_factory=list)
    external: List[str] = field(default_factory=list)
    dropped: int = 0
    invalid: int = 0


__all__ = [
    "CrawlJob",
    "CrawlStats",
    "Html",
    "NonHtmlSuccess",
    "Failure",
    "FetchOutcome",
    "ValidationOutcome",
    "ClassifiedLinks",
]
