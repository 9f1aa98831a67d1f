"""Site configuration used to absolutize page image URLs."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger("seo_image")

DEFAULT_CONFIG_NAME = "_config.yml"
SITE_URL_ENV = "SITE_URL"
SITE_BASEURL_ENV = "SITE_BASEURL"


class ConfigError(ValueError):
    """Raised when the site configuration cannot be read or is malformed."""


@dataclass(frozen=True)
class SiteConfig:
    """Site-wide settings consulted by the URL filters."""

    url: str = ""
    baseurl: str = ""


def _read_yaml(path: Path) -> dict:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read site config {path}: {exc}") from exc
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in site config {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Site config {path} must be a mapping")
    return dict(data)


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


def load_site_config(
    path: Optional[Path] = None, source: Optional[Path] = None
) -> SiteConfig:
    """Load site settings: config file, then ``SITE_URL``/``SITE_BASEURL`` env vars.

    Without an explicit path, ``_config.yml`` in ``source`` (or the working
    directory) is read when it exists.
    """
    if path is not None:
        config_path = Path(path)
    else:
        config_path = Path(source or ".") / DEFAULT_CONFIG_NAME
    config = SiteConfig()
    if config_path.exists():
        data = _read_yaml(config_path)
        config = SiteConfig(
            url=_as_text(data.get("url")),
            baseurl=_as_text(data.get("baseurl")),
        )
        logger.debug("Loaded site config from %s", config_path)
    elif path is not None:
        logger.warning("Site config %s does not exist; using defaults", config_path)

    env_url = os.getenv(SITE_URL_ENV)
    if env_url is not None:
        config = replace(config, url=env_url)
    env_baseurl = os.getenv(SITE_BASEURL_ENV)
    if env_baseurl is not None:
        config = replace(config, baseurl=env_baseurl)
    return config
