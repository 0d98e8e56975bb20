"""Command-line entry point for the recipe scraper."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_SELECTORS_PATH, ScrapeConfig
from .errors import ScrapeError
from .scraper import run_scrape

logger = logging.getLogger("foodscraper.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Scrapes recipes from supported websites into JSON files.",
    )
    parser.add_argument(
        "-u",
        "--url",
        required=True,
        help="The URL of the recipe to scrape",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=".",
        type=Path,
        help="Directory where the recipe JSON should be written",
    )
    parser.add_argument(
        "--selectors",
        default=DEFAULT_SELECTORS_PATH,
        type=Path,
        help="TOML file with the CSS selectors for each supported site",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="HTTP request timeout in seconds",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging, including every extracted field",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = ScrapeConfig(
        output_root=Path(args.output).resolve(),
        selectors_path=args.selectors,
        timeout=args.timeout,
    )

    try:
        result = run_scrape(args.url, config)
    except ScrapeError as exc:
        logger.error("%s", exc)
        return 1

    logger.info(
        "Recipe scraping completed successfully in %.2fs (%s)",
        result.total_seconds,
        result.output_path,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
