"""Unit tests for the site URL filters."""

from __future__ import annotations

import pytest

from seo_image.config import SiteConfig
from seo_image.filters import SiteFilters, ensure_leading_slash, is_absolute_url


class TestIsAbsoluteUrl:
    """Test absolute URL detection."""

    @pytest.mark.parametrize(
        "value",
        [
            "https://cdn.example/img.png",
            "http://example.com",
            "//cdn.example/img.png",
            "data:image/png;base64,AAAA",
            "http://[::1",
        ],
    )
    def test_absolute(self, value):
        assert is_absolute_url(value) is True

    @pytest.mark.parametrize(
        "value", ["photo.jpg", "/assets/og.png", "../up.png", "", None, 42]
    )
    def test_not_absolute(self, value):
        assert is_absolute_url(value) is False


class TestSiteFilters:
    """Test SiteFilters URL building."""

    def test_ensure_leading_slash(self):
        assert ensure_leading_slash("a") == "/a"
        assert ensure_leading_slash("/a") == "/a"

    def test_relative_url_with_baseurl(self):
        filters = SiteFilters(SiteConfig(baseurl="/blog/"))
        assert filters.relative_url("img/a.png") == "/blog/img/a.png"
        assert filters.relative_url("/img/a.png") == "/blog/img/a.png"

    def test_relative_url_without_baseurl(self):
        filters = SiteFilters(SiteConfig())
        assert filters.relative_url("img/a.png") == "/img/a.png"

    def test_absolute_url(self):
        filters = SiteFilters(SiteConfig(url="https://example.com", baseurl="/blog"))
        assert filters.absolute_url("/img/a.png") == "https://example.com/blog/img/a.png"

    def test_absolute_url_strips_trailing_slash(self):
        filters = SiteFilters(SiteConfig(url="https://example.com/"))
        assert filters.absolute_url("/img/a.png") == "https://example.com/img/a.png"

    def test_absolute_url_keeps_absolute_input(self):
        filters = SiteFilters(SiteConfig(url="https://example.com"))
        assert filters.absolute_url("https://cdn.example/a.png") == "https://cdn.example/a.png"

    def test_none_input(self):
        filters = SiteFilters(SiteConfig(url="https://example.com"))
        assert filters.absolute_url(None) is None
        assert filters.relative_url(None) is None


class TestUriEscape:
    """Test URI escaping."""

    @pytest.fixture
    def filters(self):
        return SiteFilters(SiteConfig())

    def test_escapes_spaces_and_unicode(self, filters):
        assert filters.uri_escape("/a b/é.png") == "/a%20b/%C3%A9.png"

    def test_keeps_reserved_characters(self, filters):
        url = "https://example.com/a.png?x=1&y=2#frag"
        assert filters.uri_escape(url) == url

    def test_keeps_existing_escapes(self, filters):
        assert filters.uri_escape("/a%20b.png") == "/a%20b.png"

    def test_escapes_stray_percent(self, filters):
        assert filters.uri_escape("/100%.png") == "/100%25.png"
