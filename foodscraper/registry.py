"""Per-site CSS selector configuration."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, List, Mapping

from .errors import SelectorConfigError, SiteNotConfiguredError
from .models import FIELD_NAMES, SelectorSet

logger = logging.getLogger("foodscraper")


class SelectorRegistry:
    """Read-only lookup of selector sets keyed by site."""

    def __init__(self, sites: Mapping[str, Any]) -> None:
        self._sites = dict(sites)

    @classmethod
    def from_toml(cls, path: Path) -> "SelectorRegistry":
        """Load the registry from a TOML file with one table per site."""
        try:
            with open(path, "rb") as handle:
                data = tomllib.load(handle)
        except OSError as exc:
            raise SelectorConfigError(f"Could not read selectors file {path}: {exc}") from exc
        except tomllib.TOMLDecodeError as exc:
            raise SelectorConfigError(f"Malformed selectors file {path}: {exc}") from exc
        logger.debug("Loaded selectors for %d site(s) from %s", len(data), path)
        return cls(data)

    def sites(self) -> List[str]:
        return sorted(self._sites)

    def lookup(self, site_key: str) -> SelectorSet:
        """Return the selectors for ``site_key``.

        Missing or non-string entries become ``None`` so that one broken field
        does not prevent the others from being extracted.
        """
        if site_key not in self._sites:
            raise SiteNotConfiguredError(site_key)
        entry = self._sites[site_key]
        if not isinstance(entry, Mapping):
            raise SelectorConfigError(f"Selectors for {site_key!r} must be a table")

        values = {}
        for name in FIELD_NAMES:
            value = entry.get(name)
            if not isinstance(value, str):
                if value is not None:
                    logger.warning(
                        "Ignoring non-string %s selector for %s", name, site_key
                    )
                value = None
            values[name] = value
        missing = [name for name, value in values.items() if value is None]
        if missing:
            logger.debug("No selector configured for %s: %s", site_key, ", ".join(missing))
        return SelectorSet(**values)


def load_selectors(path: Path, site_key: str) -> SelectorSet:
    """Load ``path`` and return the selector set for ``site_key``."""
    return SelectorRegistry.from_toml(path).lookup(site_key)
