"""Resolution of a page's canonical image URL.

The image path is pulled from, in order of preference:

1. ``image.twitter``
2. ``image.facebook``
3. ``image.path``, or ``image`` itself when it is a plain string

Relative paths are resolved against the page's own directory, site-root
paths against the site, and the result is escaped for use in HTML.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Mapping
from functools import cached_property
from typing import Any, Dict, Optional

from .filters import UrlFilters, is_absolute_url
from .models import ImageRecord, is_present, normalize_image

logger = logging.getLogger("seo_image")


class InvalidArgument(ValueError):
    """Raised when a resolver is built without a page or a context."""


class ImageResolver:
    """Lazily resolves and caches the escaped, absolute URL of a page image."""

    def __init__(
        self,
        page: Optional[Mapping[str, Any]] = None,
        context: Optional[UrlFilters] = None,
    ) -> None:
        if page is None or context is None:
            raise InvalidArgument("ImageResolver requires both a page and a context")
        self.page = page
        self.context = context

    @cached_property
    def image_record(self) -> ImageRecord:
        return normalize_image(self.page.get("image"))

    @property
    def fallback_data(self) -> Dict[str, Any]:
        """Normalized image hash with a ``path`` key (which may be None)."""
        return self.image_record.as_dict()

    @cached_property
    def raw_path(self) -> Optional[Any]:
        record = self.image_record
        for key in ("twitter", "facebook", "path"):
            value = record.get(key)
            if is_present(value):
                return value
        return None

    @cached_property
    def absolute_url(self) -> Optional[Any]:
        if self.raw_path is None:
            return None
        return self._build_absolute_url(self.raw_path)

    def _build_absolute_url(self, raw_path: Any) -> Any:
        if not isinstance(raw_path, str) or is_absolute_url(raw_path):
            return raw_path
        if raw_path.startswith("/"):
            return self.context.absolute_url(raw_path)

        page_dir = str(self.page.get("url") or "/")
        if not page_dir.endswith("/"):
            page_dir = posixpath.dirname(page_dir)
        joined = posixpath.join(page_dir, raw_path)
        logger.debug("Resolved relative image %s against %s", raw_path, page_dir)
        return self.context.absolute_url(joined)

    @cached_property
    def path(self) -> Optional[Any]:
        """The escaped, absolute image URL, or None if none can be determined.

        Non-string image values are passed through without escaping.
        """
        url = self.absolute_url
        if url is None:
            return None
        if not isinstance(url, str):
            return url
        return self.context.uri_escape(url)

    def resolve(self) -> Optional[Any]:
        return self.path

    def __str__(self) -> str:
        path = self.path
        return "" if path is None else str(path)
