"""URL filters a page template exposes: absolutize, relativize, escape."""

from __future__ import annotations

import re
from typing import Any, Optional, Protocol
from urllib.parse import quote, urlparse

from .config import SiteConfig

# RFC 3986 reserved characters plus "%" so existing escapes survive.
_URI_SAFE_CHARS = "!#$&'()*+,/:;=?@[]~%"
_STRAY_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")


class UrlFilters(Protocol):
    """Capabilities the image resolver needs from its rendering context."""

    def absolute_url(self, input: Optional[str]) -> Optional[str]: ...

    def uri_escape(self, input: str) -> str: ...


def is_absolute_url(value: Any) -> bool:
    """Return True for scheme-qualified or protocol-relative URLs.

    Strings that cannot be parsed as URLs count as absolute so callers leave
    them untouched.
    """
    if not isinstance(value, str) or not value:
        return False
    if value.startswith("//"):
        return True
    try:
        parsed = urlparse(value)
    except ValueError:
        return True
    return bool(parsed.scheme)


def ensure_leading_slash(value: str) -> str:
    if value.startswith("/"):
        return value
    return "/" + value


class SiteFilters:
    """Site-aware implementation of :class:`UrlFilters`."""

    def __init__(self, config: SiteConfig) -> None:
        self.config = config

    @property
    def sanitized_baseurl(self) -> str:
        return (self.config.baseurl or "").rstrip("/")

    def relative_url(self, input: Optional[str]) -> Optional[str]:
        """Prefix a site path with the configured ``baseurl``."""
        if input is None:
            return None
        if is_absolute_url(input):
            return input
        parts = [self.sanitized_baseurl, str(input)]
        return "".join(ensure_leading_slash(part) for part in parts if part)

    def absolute_url(self, input: Optional[str]) -> Optional[str]:
        """Qualify a site path with the configured ``url`` and ``baseurl``."""
        if input is None:
            return None
        if is_absolute_url(input):
            return input
        relative = self.relative_url(input)
        site_url = (self.config.url or "").rstrip("/")
        if not site_url:
            return relative
        return site_url + relative

    def uri_escape(self, input: str) -> str:
        """Percent-encode characters that are not allowed in a URI."""
        return quote(_STRAY_PERCENT.sub("%25", input), safe=_URI_SAFE_CHARS)
