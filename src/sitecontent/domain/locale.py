"""Locale value object."""

from typing import Any

SUPPORTED_LOCALES: tuple[str, ...] = ("en", "de")
DEFAULT_LOCALE = "en"


def is_valid_locale(value: Any, supported: tuple[str, ...] = SUPPORTED_LOCALES) -> bool:
    """Check whether value is one of the supported locale codes (case-sensitive)."""
    return isinstance(value, str) and value in supported


def get_locale_or_default(
    value: Any,
    supported: tuple[str, ...] = SUPPORTED_LOCALES,
    default: str = DEFAULT_LOCALE,
) -> str:
    """Return value if it is a supported locale, otherwise the default."""
    return value if is_valid_locale(value, supported) else default
