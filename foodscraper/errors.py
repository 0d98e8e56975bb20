"""Exceptions raised by the recipe scraper."""

from __future__ import annotations


class ScrapeError(RuntimeError):
    """Base class for errors that terminate a scrape run."""


class InvalidUrlError(ScrapeError):
    """Raised when the input is not an absolute http(s) URL."""


class UnsupportedDomainError(ScrapeError):
    """Raised when a valid URL does not belong to a supported site."""


class SiteNotConfiguredError(ScrapeError):
    """Raised when a site key has no entry in the selector configuration."""

    def __init__(self, site_key: str) -> None:
        super().__init__(f"Website not found in selectors file: {site_key}")
        self.site_key = site_key


class SelectorConfigError(ScrapeError):
    """Raised when the selector configuration cannot be read or parsed."""


class FetchError(ScrapeError):
    """Raised when the recipe page cannot be downloaded."""


class SaveError(ScrapeError):
    """Raised when the recipe cannot be written to disk."""
