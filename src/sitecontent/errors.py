"""
Exception hierarchy for content collections.

Every error raised by this package derives from ContentError so callers
can catch package failures with a single clause.
"""

from typing import Any


class ContentError(Exception):
    """Base class for all content collection errors."""


class CollectionNotFoundError(ContentError, KeyError):
    """Raised when a collection name is not known or not registered."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        self.name = name
        self.available = available or []
        msg = f"Unknown collection '{name}'"
        if self.available:
            msg += f". Available: {', '.join(self.available)}"
        super().__init__(msg)

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvalidSchemaError(ContentError, ValueError):
    """Raised when a collection is registered with a malformed schema."""


class DuplicateCollectionError(ContentError, ValueError):
    """Raised when a collection name is registered twice."""


class RegistryFrozenError(ContentError, RuntimeError):
    """Raised when registering into a registry after bootstrap finished."""


class RecordValidationError(ContentError, ValueError):
    """
    Raised when a raw record does not match its collection schema.

    Attributes:
        collection: Collection the record belongs to (if known).
        entry_id: Entry identifier (if known).
        errors: Error details, one dict per failing field with
            ``loc``, ``msg`` and ``type`` keys.
    """

    def __init__(
        self,
        message: str,
        *,
        collection: str | None = None,
        entry_id: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.collection = collection
        self.entry_id = entry_id
        self.errors = errors or []
        super().__init__(message)

    def with_context(
        self, *, collection: str | None = None, entry_id: str | None = None
    ) -> "RecordValidationError":
        """Fill in missing collection/entry context in place and return self."""
        if self.collection is None:
            self.collection = collection
        if self.entry_id is None:
            self.entry_id = entry_id
        return self

    def format_errors(self) -> list[str]:
        """Format error details as ``path: message`` lines."""
        lines = []
        for error in self.errors:
            loc = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
            lines.append(f"{loc}: {error.get('msg', 'invalid')}")
        return lines
