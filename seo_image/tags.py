"""Open Graph and Twitter card meta tags for a page image."""

from __future__ import annotations

from typing import List, Tuple

from bs4 import BeautifulSoup

from .models import is_present
from .resolver import ImageResolver

DEFAULT_TWITTER_CARD = "summary_large_image"
NO_IMAGE_TWITTER_CARD = "summary"


def _image_attributes(resolver: ImageResolver) -> List[Tuple[str, str, object]]:
    fallback = resolver.fallback_data
    attributes: List[Tuple[str, str, object]] = [("property", "og:image", resolver.path)]
    for key in ("height", "width", "alt"):
        value = fallback.get(key)
        if is_present(value):
            attributes.append(("property", f"og:image:{key}", value))
    attributes.append(("name", "twitter:card", DEFAULT_TWITTER_CARD))
    attributes.append(("property", "twitter:image", resolver.path))
    if is_present(fallback.get("alt")):
        attributes.append(("name", "twitter:image:alt", fallback["alt"]))
    return attributes


def render_image_tags(resolver: ImageResolver) -> str:
    """Render the image meta tags, one per line."""
    if resolver.path is None:
        attributes = [("name", "twitter:card", NO_IMAGE_TWITTER_CARD)]
    else:
        attributes = _image_attributes(resolver)

    soup = BeautifulSoup("", "html.parser")
    lines = []
    for attr, name, content in attributes:
        tag = soup.new_tag("meta", attrs={attr: name, "content": str(content)})
        lines.append(tag.decode())
    return "\n".join(lines)
