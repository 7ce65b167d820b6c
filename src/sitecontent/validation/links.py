"""Link target checks for validated records."""

from collections.abc import Iterator
from typing import Any

from sitecontent.domain.url import is_valid_url

# Record keys holding link targets
LINK_FIELDS: frozenset[str] = frozenset({"href", "image"})


def iter_links(record: Any, path: tuple[str | int, ...] = ()) -> Iterator[tuple[str, str]]:
    """
    Yield (location, value) for every link field in a nested record.

    Args:
        record: Record as plain dicts and lists.
        path: Location prefix used in recursion.

    Yields:
        Dotted location and the link value.
    """
    if isinstance(record, dict):
        for key, value in record.items():
            location = (*path, key)
            if key in LINK_FIELDS and isinstance(value, str):
                yield ".".join(str(part) for part in location), value
            else:
                yield from iter_links(value, location)
    elif isinstance(record, list):
        for index, item in enumerate(record):
            yield from iter_links(item, (*path, index))


def check_links(record: Any) -> list[str]:
    """
    Find link targets that are neither internal paths nor http(s) URLs.

    Returns:
        One ``location: message`` line per unsafe link.
    """
    return [
        f"{location}: unsafe or malformed link {value!r}"
        for location, value in iter_links(record)
        if not is_valid_url(value)
    ]
