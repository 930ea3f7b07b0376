# link_scout/crawler/classifier.py
"""
URL resolution, normalization and internal/external classification.
"""
from __future__ import annotations

import re
from typing import Callable, Iterable, Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from link_scout.crawler.models import ClassifiedLinks
from link_scout.errors import HrefResolutionError, InvalidOriginError

__all__ = (
    "normalize_url",
    "parse_origin",
    "is_ignored",
    "resolve_href",
    "classify_hrefs",
)

_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.\-]*):")
_WEB_SCHEMES = frozenset(("http", "https"))
_DEFAULT_PORTS = {"http": 80, "https": 443}

ErrorCallback = Callable[[str, str], None]


def normalize_url(url: str) -> str:
    """
    Canonical absolute form of an http(s) URL.

    - lower-cases scheme and host, drops the default port
    - empty path becomes ``/``
    - keeps the query, drops the fragment

    Raises ValueError when *url* is not an absolute http(s) URL with a host.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if scheme not in _WEB_SCHEMES:
        raise ValueError(f"unsupported scheme '{parts.scheme}'" if scheme else "not an absolute URL")
    hostname = parts.hostname
    if not hostname:
        raise ValueError("missing host")
    if any(ch.isspace() for ch in hostname):
        raise ValueError(f"invalid host '{hostname}'")
    port = parts.port  # ValueError on a malformed or out-of-range port

    netloc = f"[{hostname}]" if ":" in hostname else hostname
    if port is not None and port != _DEFAULT_PORTS[scheme]:
        netloc = f"{netloc}:{port}"
    userinfo, at, _ = parts.netloc.rpartition("@")
    if at:
        netloc = f"{userinfo}@{netloc}"
    return urlunsplit((scheme, netloc, parts.path or "/", parts.query, ""))


def parse_origin(origin: str) -> str:
    """Validate the starting address and return its normalized form."""
    if not origin or not _SCHEME_RE.match(origin.strip()):
        raise InvalidOriginError(origin, "not an absolute URL")
    try:
        return normalize_url(origin.strip())
    except ValueError as exc:
        raise InvalidOriginError(origin, str(exc)) from exc


def is_ignored(href: str) -> bool:
    """Empty, fragment-only and non-web (mailto:, tel:, javascript:...) hrefs are not links to check."""
    if not href or href.startswith("#"):
        return True
    scheme = _SCHEME_RE.match(href)
    return scheme is not None and scheme.group(1).lower() not in _WEB_SCHEMES


def resolve_href(href: str, base_url: str) -> str:
    """Resolve *href* against the page it was found on; raises HrefResolutionError."""
    if href.startswith("//"):
        candidate = f"{urlsplit(base_url).scheme}:{href}"
    elif _SCHEME_RE.match(href):
        candidate = href
    else:
        candidate = urljoin(base_url, href)
    try:
        return normalize_url(candidate)
    except ValueError as exc:
        raise HrefResolutionError(href, str(exc)) from exc


def classify_hrefs(
    hrefs: Iterable[str],
    base_url: str,
    *,
    skip_self_links: bool = False,
    on_error: Optional[ErrorCallback] = None,
) -> ClassifiedLinks:
    """
    Split the hrefs of the page at *base_url* into internal and external
    absolute addresses (same hostname → internal).

    Each list keeps first-seen order without duplicates. Hrefs that cannot be
    resolved are passed to ``on_error(href, reason)`` and dropped.
    """
    base = urlsplit(base_url)
    base_key = (base.hostname, base.path or "/")
    links = ClassifiedLinks()
    seen: set[str] = set()

    for raw in hrefs:
        href = raw.strip()
        if is_ignored(href):
            links.dropped += 1
            continue
        try:
            absolute = resolve_href(href, base_url)
        except HrefResolutionError as exc:
            links.invalid += 1
            if on_error is not None:
                on_error(href, exc.reason)
            continue

        parts = urlsplit(absolute)
        if skip_self_links and (parts.hostname, parts.path) == base_key:
            links.dropped += 1
            continue
        if absolute in seen:
            continue
        seen.add(absolute)
        if parts.hostname == base.hostname:
            links.internal.append(absolute)
        else:
            links.external.append(absolute)
    return links
