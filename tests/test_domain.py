"""Tests for domain value objects."""

import pytest

from sitecontent.domain import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    assert_slug,
    assert_url,
    get_locale_or_default,
    is_http_url,
    is_internal_path,
    is_valid_locale,
    is_valid_slug,
    is_valid_url,
    to_slug,
)


class TestLocale:
    """Tests for locale guards."""

    def test_defaults(self) -> None:
        """Test supported and default locales."""
        assert SUPPORTED_LOCALES == ("en", "de")
        assert DEFAULT_LOCALE == "en"

    @pytest.mark.parametrize("value", ["en", "de"])
    def test_valid(self, value: str) -> None:
        """Test supported locales are accepted."""
        assert is_valid_locale(value)

    @pytest.mark.parametrize("value", ["es", "EN", "", None, 123])
    def test_invalid(self, value: object) -> None:
        """Test other values are rejected."""
        assert not is_valid_locale(value)

    def test_fallback(self) -> None:
        """Test fallback to the default locale."""
        assert get_locale_or_default("de") == "de"
        assert get_locale_or_default("es") == DEFAULT_LOCALE
        assert get_locale_or_default(None) == DEFAULT_LOCALE

    def test_custom_locales(self) -> None:
        """Test guards with a custom locale set."""
        assert get_locale_or_default("fr", ("fr", "de"), "de") == "fr"
        assert get_locale_or_default("en", ("fr", "de"), "de") == "de"


class TestSlug:
    """Tests for slug guards."""

    @pytest.mark.parametrize("value", ["home", "how-we-work", "insights-2026"])
    def test_valid(self, value: str) -> None:
        """Test common slug formats."""
        assert is_valid_slug(value)

    @pytest.mark.parametrize(
        "value",
        [
            "How-we-work",
            "with spaces",
            "double--dash",
            "-leading",
            "trailing-",
            "slash/inside",
            "underscore_inside",
            "",
            None,
        ],
    )
    def test_invalid(self, value: object) -> None:
        """Test malformed slugs are rejected."""
        assert not is_valid_slug(value)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (" How we Work ", "how-we-work"),
            ("Hello_world!!", "hello-world"),
            ("a---b", "a-b"),
            ("  ---  ", ""),
        ],
    )
    def test_to_slug(self, value: str, expected: str) -> None:
        """Test normalization into slugs."""
        assert to_slug(value) == expected

    def test_assert_slug(self) -> None:
        """Test fail-fast slug assertion."""
        assert assert_slug("team") == "team"
        with pytest.raises(ValueError, match="Invalid slug"):
            assert_slug("Team")


class TestUrl:
    """Tests for URL guards."""

    def test_internal_paths(self) -> None:
        """Test internal path detection."""
        assert is_internal_path("/")
        assert is_internal_path("/contact")
        assert is_internal_path("/de/how-we-work")

        assert not is_internal_path("//cdn.example.com/file")
        assert not is_internal_path("contact")
        assert not is_internal_path("/with space")

    def test_http_urls(self) -> None:
        """Test absolute http(s) URL detection."""
        assert is_http_url("https://example.com")
        assert is_http_url("http://example.com/path?x=1")

        assert not is_http_url("ftp://example.com")
        assert not is_http_url("javascript:alert(1)")
        assert not is_http_url("https://example.com/with space")
        assert not is_http_url("https://")

    def test_valid_url(self) -> None:
        """Test combined URL validation."""
        assert is_valid_url("/contact")
        assert is_valid_url("https://example.com")

        assert not is_valid_url("data:text/plain,hello")
        assert not is_valid_url("")
        assert not is_valid_url(None)

    def test_assert_url(self) -> None:
        """Test fail-fast URL assertion."""
        assert assert_url("/contact") == "/contact"
        with pytest.raises(ValueError, match="Invalid URL"):
            assert_url("javascript:alert(1)")
