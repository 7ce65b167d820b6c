"""
URL-safe slugs: lowercase letters, digits and single hyphens.

Examples: "how-we-work", "team", "insights-2026"
"""

import re
from typing import Any

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def is_valid_slug(value: Any) -> bool:
    """Check whether value is a well-formed slug."""
    return isinstance(value, str) and SLUG_PATTERN.fullmatch(value) is not None


def to_slug(value: str) -> str:
    """
    Normalize a string into a slug (best effort).

    Whitespace and underscores become hyphens, other characters outside
    ``[a-z0-9-]`` are dropped, and repeated or edge hyphens are collapsed.

    Args:
        value: Arbitrary input, e.g. a title or file stem.

    Returns:
        Slug string, possibly empty.
    """
    slug = value.strip().lower()
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def assert_slug(value: Any, message: str = "Invalid slug") -> str:
    """Return value if it is a valid slug, otherwise raise ValueError."""
    if not is_valid_slug(value):
        msg = f"{message}: {value!r}"
        raise ValueError(msg)
    return value
