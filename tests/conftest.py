import pytest

from fakes import RECIPE_PAGE, FakeSession
from foodscraper.registry import SelectorRegistry

SITES = {
    "15gram": {
        "title": "h1.text-center",
        "description": ".recipe-intro",
        "ingredients": ".detail-ingr-block",
        "steps": ".detail-steps-block",
        "image": ".recipe-image img",
    },
    "dagelijksekost": {
        "title": "h1.text-center",
        "description": ".recipe-intro",
        "ingredients": ".detail-ingr-block",
        "image": ".recipe-image img",
    },
}


@pytest.fixture
def recipe_page():
    return RECIPE_PAGE


@pytest.fixture
def registry():
    return SelectorRegistry(SITES)


@pytest.fixture
def session():
    return FakeSession()

