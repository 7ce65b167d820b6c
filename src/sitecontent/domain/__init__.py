"""
Domain value objects.

Small runtime guards for locales, slugs and URLs, free of any
framework dependency. Used at loading boundaries.
"""

from sitecontent.domain.locale import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    get_locale_or_default,
    is_valid_locale,
)
from sitecontent.domain.slug import assert_slug, is_valid_slug, to_slug
from sitecontent.domain.url import assert_url, is_http_url, is_internal_path, is_valid_url

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "assert_slug",
    "assert_url",
    "get_locale_or_default",
    "is_http_url",
    "is_internal_path",
    "is_valid_locale",
    "is_valid_slug",
    "is_valid_url",
    "to_slug",
]
