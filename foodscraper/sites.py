"""Mapping of recipe URLs to the configured site they belong to."""

from __future__ import annotations

from typing import Mapping
from urllib.parse import ParseResult, urlparse

from .config import SUPPORTED_ORIGINS
from .errors import InvalidUrlError, UnsupportedDomainError


def validate_url(url: str) -> ParseResult:
    """Parse ``url`` and make sure it has both a scheme and a host.

    Any scheme is accepted here; the allow-list decides which ones are
    supported.
    """
    trimmed = url.strip()
    try:
        parsed = urlparse(trimmed)
        hostname = parsed.hostname
    except ValueError as exc:
        raise InvalidUrlError(f"Invalid URL format: {url!r}") from exc
    if not parsed.scheme:
        raise InvalidUrlError(f"URL must contain a scheme: {url!r}")
    if not hostname:
        raise InvalidUrlError(f"URL must contain a valid host: {url!r}")
    return parsed


def parse_site_key(url: str) -> str:
    """Return the first label of the URL host, e.g. ``dagelijksekost``."""
    parsed = validate_url(url)
    return parsed.hostname.split(".")[0]


def is_supported_url(url: str, origins: Mapping[str, str] = SUPPORTED_ORIGINS) -> bool:
    """Check the trimmed input against the allow-list of origin prefixes.

    The comparison is done on the raw text, so a URL with another scheme,
    letter case or without the trailing slash of the origin is rejected.
    """
    trimmed = url.strip()
    return any(trimmed.startswith(origin) for origin in origins.values())


def resolve(url: str, origins: Mapping[str, str] = SUPPORTED_ORIGINS) -> str:
    """Resolve ``url`` to a site key or raise if it cannot be scraped."""
    validate_url(url)
    if not is_supported_url(url, origins):
        raise UnsupportedDomainError(f"Unsupported domain: {url.strip()}")
    return parse_site_key(url)
