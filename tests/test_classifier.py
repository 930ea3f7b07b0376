# File: tests/test_classifier.py
import pytest

from link_scout.crawler.classifier import (
    classify_hrefs,
    is_ignored,
    normalize_url,
    parse_origin,
    resolve_href,
)
from link_scout.errors import HrefResolutionError, InvalidOriginError

BASE = "http://a.test/"


def test_mixed_page_scenario():
    hrefs = ["/p1", "http://a.test/p1", "http://b.test/x", "#top", "mailto:x@y.com"]
    links = classify_hrefs(hrefs, BASE)
    assert links.internal == ["http://a.test/p1"]
    assert links.external == ["http://b.test/x"]
    assert links.dropped == 2
    assert links.invalid == 0


@pytest.mark.parametrize(
    "href",
    ["", "#", "#section", "mailto:x@y.com", "tel:+123", "javascript:void(0)", "ftp://files.test/a", "data:text/plain,hi"],
)
def test_ignored_hrefs(href):
    assert is_ignored(href)
    links = classify_hrefs([href], BASE)
    assert links.internal == [] and links.external == []


@pytest.mark.parametrize("href", ["/path", "page.html", "HTTP://A.TEST/", "https://b.test", "//cdn.test/x", "?q=a:b"])
def test_web_hrefs_not_ignored(href):
    assert not is_ignored(href)


@pytest.mark.parametrize(
    "href,base,expected",
    [
        ("/p1", "http://a.test/dir/page", "http://a.test/p1"),
        ("sub", "http://a.test/dir/page", "http://a.test/dir/sub"),
        ("../up", "http://a.test/dir/deeper/page", "http://a.test/dir/up"),
        ("?page=2", "http://a.test/list", "http://a.test/list?page=2"),
        ("//cdn.test/lib.js", "https://a.test/", "https://cdn.test/lib.js"),
        ("//cdn.test/lib.js", "http://a.test/", "http://cdn.test/lib.js"),
        ("HTTP://A.Test:80", BASE, "http://a.test/"),
        ("https://a.test:443/x#frag", BASE, "https://a.test/x"),
        ("http://a.test:8080/x", BASE, "http://a.test:8080/x"),
    ],
)
def test_resolve_href(href, base, expected):
    assert resolve_href(href, base) == expected


@pytest.mark.parametrize("href", ["http://[::1", "http://a.test:99999/", "http:/no-host", "https:///path"])
def test_resolve_href_malformed(href):
    with pytest.raises(HrefResolutionError) as info:
        resolve_href(href, BASE)
    assert info.value.href == href
    assert info.value.reason


def test_malformed_href_reported_and_dropped():
    errors = []
    links = classify_hrefs(
        ["/ok", "http://[::1", "http://b.test/"],
        BASE,
        on_error=lambda href, reason: errors.append((href, reason)),
    )
    assert links.internal == ["http://a.test/ok"]
    assert links.external == ["http://b.test/"]
    assert links.invalid == 1
    assert [href for href, _ in errors] == ["http://[::1"]


def test_same_hostname_other_port_is_internal():
    links = classify_hrefs(["http://a.test:8080/admin", "https://a.test/secure"], BASE)
    assert links.internal == ["http://a.test:8080/admin", "https://a.test/secure"]
    assert links.external == []


def test_subdomain_is_external():
    links = classify_hrefs(["http://www.a.test/"], BASE)
    assert links.external == ["http://www.a.test/"]


def test_duplicates_keep_first_seen_order():
    hrefs = ["/b", "/a", "/b#x", "http://c.test/", "http://C.test", "/a"]
    links = classify_hrefs(hrefs, BASE)
    assert links.internal == ["http://a.test/b", "http://a.test/a"]
    assert links.external == ["http://c.test/"]


def test_self_links_kept_by_default():
    links = classify_hrefs(["/page", "/page?x=1", "/other"], "http://a.test/page")
    assert links.internal == ["http://a.test/page", "http://a.test/page?x=1", "http://a.test/other"]


def test_self_links_skipped_when_enabled():
    links = classify_hrefs(
        ["/page", "/page?x=1", "/other", "#top"],
        "http://a.test/page",
        skip_self_links=True,
    )
    assert links.internal == ["http://a.test/other"]
    assert links.dropped == 3


def test_classification_is_idempotent():
    hrefs = ["/p1", "http://b.test/x", "#top", "mailto:x@y.com", "http://[::1", "//cdn.test/a"]
    first = classify_hrefs(hrefs, BASE)
    second = classify_hrefs(hrefs, BASE)
    assert first == second


def test_normalize_url_keeps_query_and_userinfo():
    assert normalize_url("HTTPS://user:pw@Example.COM:443?b=2&a=1#f") == "https://user:pw@example.com/?b=2&a=1"


def test_normalize_url_rejects_relative():
    with pytest.raises(ValueError):
        normalize_url("/relative")


@pytest.mark.parametrize(
    "origin,expected",
    [
        ("http://example.com", "http://example.com/"),
        ("https://Example.com/start?x=1", "https://example.com/start?x=1"),
        ("  http://example.com/  ", "http://example.com/"),
    ],
)
def test_parse_origin_valid(origin, expected):
    assert parse_origin(origin) == expected


@pytest.mark.parametrize("origin", ["", "example.com", "/relative", "ftp://example.com", "http://", "mailto:x@y.com"])
def test_parse_origin_invalid(origin):
    with pytest.raises(InvalidOriginError):
        parse_origin(origin)
