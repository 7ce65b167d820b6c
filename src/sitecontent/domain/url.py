"""
URLs allowed in content.

Accepts internal paths starting with a single "/" and absolute http(s)
URLs. Anything else (javascript:, data:, protocol-relative, ...) is
rejected.
"""

import re
from typing import Any
from urllib.parse import urlsplit

_INTERNAL_PATH = re.compile(r"^/(?!/)")
_WHITESPACE = re.compile(r"\s")


def is_internal_path(value: Any) -> bool:
    """Check whether value is a site-internal path like ``/contact``."""
    return (
        isinstance(value, str)
        and _INTERNAL_PATH.match(value) is not None
        and _WHITESPACE.search(value) is None
    )


def is_http_url(value: Any) -> bool:
    """Check whether value is an absolute http or https URL."""
    if not isinstance(value, str) or _WHITESPACE.search(value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def is_valid_url(value: Any) -> bool:
    """Check whether value is an internal path or an http(s) URL."""
    return is_internal_path(value) or is_http_url(value)


def assert_url(value: Any, message: str = "Invalid URL") -> str:
    """Return value if it is a valid URL, otherwise raise ValueError."""
    if not is_valid_url(value):
        msg = f"{message}: {value!r}"
        raise ValueError(msg)
    return value
