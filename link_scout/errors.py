# File: link_scout/errors.py
"""link_scout.errors: exceptions raised by the crawler."""

from __future__ import annotations

__all__ = ["LinkScoutError", "InvalidOriginError", "HrefResolutionError"]


class LinkScoutError(Exception):
    """Base class for LinkScout errors."""


class InvalidOriginError(LinkScoutError, ValueError):
    """The starting address is not an absolute http(s) URL; nothing is crawled."""

    def __init__(self, origin: str, reason: str) -> None:
        super().__init__(f"'{origin}' is not a valid URL: {reason}")
        self.origin = origin
        self.reason = reason


class HrefResolutionError(LinkScoutError, ValueError):
    """A href found on a page cannot be turned into an absolute http(s) address."""

    def __init__(self, href: str, reason: str) -> None:
        super().__init__(reason)
        self.href = href
        self.reason = reason
