"""High-level orchestration for fetching a page and saving the recipe."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import requests
from bs4 import BeautifulSoup

from .config import SUPPORTED_ORIGINS, ScrapeConfig
from .errors import FetchError, SaveError
from .models import Recipe
from .recipe import extract_recipe, output_filename
from .registry import SelectorRegistry
from .sites import resolve

logger = logging.getLogger("foodscraper")


@dataclass
class ScrapeResult:
    """Outcome of a completed scrape run."""

    recipe: Recipe
    output_path: Path
    total_seconds: float


def fetch_html(
    url: str,
    config: ScrapeConfig,
    session: Optional[requests.Session] = None,
) -> str:
    """Download ``url`` with a single GET request and return the body."""
    session = session or requests.Session()
    logger.info("Fetching %s", url)
    try:
        resp = session.get(
            url,
            headers={"User-Agent": config.user_agent},
            timeout=config.timeout,
        )
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc
    return resp.text


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def scrape_recipe(
    url: str,
    config: ScrapeConfig,
    registry: Optional[SelectorRegistry] = None,
    session: Optional[requests.Session] = None,
) -> Recipe:
    """Resolve, fetch and extract the recipe at ``url`` without writing it.

    The site is resolved and its selectors looked up before any request is
    made, so unsupported URLs never reach the network.
    """
    site_key = resolve(url, SUPPORTED_ORIGINS)
    if registry is None:
        registry = SelectorRegistry.from_toml(config.selectors_path)
    selectors = registry.lookup(site_key)
    logger.debug("Using %s selectors: %s", site_key, selectors)

    document = parse_document(fetch_html(url.strip(), config, session))
    return extract_recipe(document, selectors, url)


def save_recipe(recipe: Recipe, output_dir: Path) -> Path:
    """Write ``recipe`` as pretty-printed JSON inside ``output_dir``."""
    output_path = output_dir / output_filename(recipe)
    payload = json.dumps(recipe.to_dict(), indent=2, ensure_ascii=False)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise SaveError(f"Failed to write {output_path}: {exc}") from exc
    logger.info("Saved recipe to %s", output_path)
    return output_path


def run_scrape(
    url: str,
    config: ScrapeConfig,
    registry: Optional[SelectorRegistry] = None,
    session: Optional[requests.Session] = None,
) -> ScrapeResult:
    start = time.perf_counter()
    recipe = scrape_recipe(url, config, registry=registry, session=session)
    output_path = save_recipe(recipe, config.output_root)
    return ScrapeResult(
        recipe=recipe,
        output_path=output_path,
        total_seconds=time.perf_counter() - start,
    )
