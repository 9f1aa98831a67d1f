"""Front matter parsing for Markdown sources."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Tuple

import yaml

logger = logging.getLogger("seo_image")

FRONT_MATTER_DELIMITER = "---"


class FrontMatterError(ValueError):
    """Raised when a document's front matter is not a valid YAML mapping."""


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split a document into its front matter mapping and body."""
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].strip() != FRONT_MATTER_DELIMITER:
        return {}, text

    closing_index = None
    for idx in range(1, len(lines)):
        if lines[idx].strip() in (FRONT_MATTER_DELIMITER, "..."):
            closing_index = idx
            break
    if closing_index is None:
        raise FrontMatterError("Front matter is missing its closing delimiter")

    raw = "".join(lines[1:closing_index])
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise FrontMatterError(f"Invalid YAML front matter: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise FrontMatterError("Front matter must be a mapping")
    return dict(data), "".join(lines[closing_index + 1 :])


def page_url(path: Path, source_root: Path) -> str:
    """Derive a pretty URL for a source file relative to the site root."""
    relative = PurePosixPath(Path(path).resolve().relative_to(Path(source_root).resolve()).as_posix())
    parent = relative.parent.as_posix()
    parts = [] if parent == "." else [parent]
    if relative.stem != "index":
        parts.append(relative.stem)
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


def load_page(path: Path, source_root: Path) -> Dict[str, Any]:
    """Read a Markdown file into a page mapping carrying its ``url``."""
    text = Path(path).read_text(encoding="utf-8")
    metadata, _ = split_front_matter(text)
    page = dict(metadata)
    permalink = page.get("permalink")
    if permalink:
        page["url"] = str(permalink)
    else:
        page["url"] = page_url(path, source_root)
    logger.debug("Loaded %s with url %s", path, page["url"])
    return page
