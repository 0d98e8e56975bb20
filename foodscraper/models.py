"""Data models used throughout the scraping pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

FIELD_NAMES = ("title", "description", "ingredients", "steps", "image")


@dataclass(frozen=True)
class SelectorSet:
    """CSS selectors configured for one site.

    ``None`` marks a field that has no selector configured; a string may still
    be an invalid selector, which is only discovered at extraction time.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    ingredients: Optional[str] = None
    steps: Optional[str] = None
    image: Optional[str] = None


@dataclass
class Recipe:
    """Structured recipe extracted from a single page."""

    title: Optional[str]
    description: Optional[str]
    ingredients: Optional[List[str]]
    steps: Optional[List[str]]
    image_link: Optional[str]
    source_url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
