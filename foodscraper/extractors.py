"""Field extractors that turn CSS selector matches into recipe values."""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

logger = logging.getLogger("foodscraper")


def select_first(document: BeautifulSoup, selector: Optional[str]) -> Optional[Tag]:
    """Return the first node matching ``selector``.

    Unconfigured, empty, unparsable and unmatched selectors all yield ``None``.
    """
    if not selector:
        return None
    try:
        return document.select_one(selector)
    except (SelectorSyntaxError, NotImplementedError) as exc:
        logger.debug("Invalid selector %r: %s", selector, exc)
        return None


def _text_lines(element: Tag) -> List[str]:
    lines: List[str] = []
    for segment in element.strings:
        for line in segment.splitlines():
            line = line.strip()
            if line:
                lines.append(line)
    return lines


def extract_title(document: BeautifulSoup, selector: Optional[str]) -> Optional[str]:
    """Inner HTML of the first match, markup included."""
    element = select_first(document, selector)
    title = element.decode_contents() if element is not None else None
    logger.debug("Title: %r", title)
    return title


def extract_description(document: BeautifulSoup, selector: Optional[str]) -> Optional[str]:
    element = select_first(document, selector)
    description = None
    if element is not None:
        description = " ".join(element.strings).strip()
    logger.debug("Description: %r", description)
    return description


def extract_ingredients(document: BeautifulSoup, selector: Optional[str]) -> Optional[List[str]]:
    element = select_first(document, selector)
    ingredients = _text_lines(element) if element is not None else None
    logger.debug("Ingredients: %r", ingredients)
    return ingredients


def extract_steps(document: BeautifulSoup, selector: Optional[str]) -> Optional[List[str]]:
    element = select_first(document, selector)
    steps = _text_lines(element) if element is not None else None
    logger.debug("Steps: %r", steps)
    return steps


def extract_image(document: BeautifulSoup, selector: Optional[str]) -> Optional[str]:
    """``src`` attribute of the first match, left as written in the page."""
    element = select_first(document, selector)
    image_link = element.get("src") if element is not None else None
    logger.debug("Image link: %r", image_link)
    return image_link
