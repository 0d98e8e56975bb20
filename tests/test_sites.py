import pytest

from foodscraper.errors import InvalidUrlError, UnsupportedDomainError
from foodscraper.sites import is_supported_url, parse_site_key, resolve, validate_url


class TestResolve:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://15gram.be/recipes/test", "15gram"),
            ("https://dagelijksekost.vrt.be/gerechten/stoofvlees", "dagelijksekost"),
            ("  https://15gram.be/recipes/test  ", "15gram"),
        ],
    )
    def test_supported_urls(self, url, expected):
        assert resolve(url) == expected

    def test_is_deterministic(self):
        url = "https://dagelijksekost.vrt.be/gerechten/soep"
        assert {resolve(url) for _ in range(5)} == {"dagelijksekost"}

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/recipe",
            "http://15gram.be/recipes/test",
            "https://15gram.be",
            "HTTPS://15GRAM.BE/recipes/test",
            "https://www.15gram.be/recipes/test",
            "https://example.com/?next=https://15gram.be/",
            "ftp://15gram.be/recipes/test",
            "ftp://example.com/recipe",
        ],
    )
    def test_rejects_unsupported(self, url):
        with pytest.raises(UnsupportedDomainError):
            resolve(url)

    @pytest.mark.parametrize(
        "url",
        ["", "not a url", "15gram.be/recipes", "https://", "mailto:cook@15gram.be"],
    )
    def test_rejects_invalid(self, url):
        with pytest.raises(InvalidUrlError):
            resolve(url)

    def test_custom_origins(self):
        origins = {"example": "https://example.com/"}
        assert resolve("https://example.com/recipe", origins) == "example"
        with pytest.raises(UnsupportedDomainError):
            resolve("https://15gram.be/recipes/test", origins)


class TestSiteKey:
    def test_first_host_label(self):
        assert parse_site_key("https://dagelijksekost.vrt.be/x") == "dagelijksekost"

    def test_ignores_allow_list(self):
        assert parse_site_key("https://www.example.com/recipe") == "www"

    def test_lowercases_host(self):
        assert parse_site_key("https://15GRAM.be/x") == "15gram"

    def test_invalid(self):
        with pytest.raises(InvalidUrlError):
            parse_site_key("no scheme here")


def test_validate_url_returns_parsed():
    parsed = validate_url(" https://15gram.be/recipes/test ")
    assert parsed.hostname == "15gram.be"
    assert parsed.path == "/recipes/test"


def test_is_supported_url_prefix_only():
    assert is_supported_url("https://15gram.be/")
    assert not is_supported_url("https://15gram.be")
