"""Command-line entry point for resolving page images."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Sequence, TextIO

from .config import ConfigError, SiteConfig, load_site_config
from .filters import SiteFilters
from .frontmatter import load_page
from .resolver import ImageResolver
from .tags import render_image_tags

logger = logging.getLogger("seo_image.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resolve the canonical image URL of Markdown pages in a static site.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Markdown source files")
    parser.add_argument(
        "--source",
        default=Path("."),
        type=Path,
        help="Site source directory that page URLs are relative to",
    )
    parser.add_argument(
        "--config",
        default=None,
        type=Path,
        help="Site _config.yml (defaults to _config.yml in the source directory)",
    )
    parser.add_argument("--site-url", default=None, help="Override the site url")
    parser.add_argument("--baseurl", default=None, help="Override the site baseurl")
    parser.add_argument(
        "--tags",
        action="store_true",
        help="Print Open Graph and Twitter meta tags instead of the bare URL",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def build_site_config(args: argparse.Namespace) -> SiteConfig:
    config = load_site_config(args.config, source=args.source)
    if args.site_url is not None:
        config = replace(config, url=args.site_url)
    if args.baseurl is not None:
        config = replace(config, baseurl=args.baseurl)
    return config


def run(args: argparse.Namespace, out: TextIO) -> int:
    try:
        config = build_site_config(args)
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1
    filters = SiteFilters(config)

    failures = 0
    for path in args.paths:
        try:
            page = load_page(path, args.source)
        except (OSError, ValueError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            failures += 1
            continue

        resolver = ImageResolver(page=page, context=filters)
        if args.tags:
            out.write(f"<!-- {path} -->\n{render_image_tags(resolver)}\n")
        else:
            resolved = resolver.path
            out.write(f"{path}\t{resolved if resolved is not None else '-'}\n")

    logger.info(
        "Resolved %d/%d page(s)", len(args.paths) - failures, len(args.paths)
    )
    return 1 if failures else 0


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    return run(args, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
