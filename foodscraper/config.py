"""Configuration objects and constants for the recipe scraper."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict

DEFAULT_SELECTORS_PATH = Path(__file__).with_name("selectors.toml")
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Site key -> origin prefix the raw URL must start with.
SUPPORTED_ORIGINS: Dict[str, str] = {
    "15gram": "https://15gram.be/",
    "dagelijksekost": "https://dagelijksekost.vrt.be/",
}


@dataclass
class ScrapeConfig:
    """Top-level settings that control fetching and output."""

    output_root: Path
    selectors_path: Path = DEFAULT_SELECTORS_PATH
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
