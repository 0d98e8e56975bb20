"""Assembly of extracted fields into a recipe record."""

from __future__ import annotations

from bs4 import BeautifulSoup

from .extractors import (
    extract_description,
    extract_image,
    extract_ingredients,
    extract_steps,
    extract_title,
)
from .models import Recipe, SelectorSet
from .utils import sanitize_filename

FALLBACK_IDENTIFIER = "recipe"


def extract_recipe(document: BeautifulSoup, selectors: SelectorSet, source_url: str) -> Recipe:
    """Run every field extractor against ``document``."""
    return Recipe(
        title=extract_title(document, selectors.title),
        description=extract_description(document, selectors.description),
        ingredients=extract_ingredients(document, selectors.ingredients),
        steps=extract_steps(document, selectors.steps),
        image_link=extract_image(document, selectors.image),
        source_url=source_url,
    )


def recipe_identifier(recipe: Recipe) -> str:
    """Name derived from the raw title; not safe to use as a path as-is."""
    if recipe.title is None:
        return FALLBACK_IDENTIFIER
    return f"{FALLBACK_IDENTIFIER}_{recipe.title}"


def output_filename(recipe: Recipe) -> str:
    return sanitize_filename(recipe_identifier(recipe), fallback=FALLBACK_IDENTIFIER) + ".json"
