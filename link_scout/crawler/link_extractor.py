# link_scout/crawler/link_extractor.py
"""
Href extraction from raw HTML for LinkScout.

A single forward scan over the markup: no DOM is built, comments are skipped,
and anything malformed just fails to match.
"""
from __future__ import annotations

import re
from typing import Iterator, Optional

__all__ = ("iter_hrefs",)

# a comment (possibly unterminated) or a whole <a ...> start tag
_TOKEN_RE = re.compile(
    r"<!--.*?(?:-->|\Z)|<a\s(?P<attrs>[^>]*)>",
    re.IGNORECASE | re.DOTALL,
)
# one attribute at a time, so text inside a quoted value is never read as a name;
# the closing quote must be the same character as the opening one
_ATTR_RE = re.compile(
    r"""(?P<name>[^\s"'=<>/]+)"""
    r"""(?:\s*=\s*(?:(?P<quote>['"])(?P<value>.*?)(?P=quote)|(?P<bare>[^\s"'>]+)))?""",
    re.DOTALL,
)


def _href_of(attrs: str) -> Optional[str]:
    for attr in _ATTR_RE.finditer(attrs):
        if attr.group("name").lower() == "href":
            # unquoted and valueless hrefs are not links
            return attr.group("value")
    return None


def iter_hrefs(html: str) -> Iterator[str]:
    """
    Yield the raw href of every anchor in *html*, in document order.

    Values are stripped of surrounding whitespace but otherwise returned as
    written (relative, fragment-only, ``mailto:``...).
    """
    for token in _TOKEN_RE.finditer(html):
        attrs = token.group("attrs")
        if attrs is None:
            continue
        value = _href_of(attrs)
        if value is not None:
            yield value.strip()
