"""
Entry loader for data collections.

Reads every entry file below ``<content_root>/<collection>/`` and runs it
through the collection's registered schema.
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from sitecontent.collections.definitions import CollectionName
from sitecontent.collections.registry import CollectionRegistry
from sitecontent.config.settings import ContentConfig
from sitecontent.domain.locale import get_locale_or_default
from sitecontent.domain.slug import to_slug
from sitecontent.errors import RecordValidationError
from sitecontent.ingestion.base import ContentEntry, read_record
from sitecontent.utils.logging import get_logger, log_context

log = get_logger(__name__)


class EntryLoader:
    """
    Loads and validates the entries of registered collections.

    Entry ids are derived from file paths relative to the collection
    directory: ``hero/de/Home Page.yaml`` becomes ``de/home-page``. When the
    first id segment is a supported locale it sets the entry locale.
    """

    def __init__(self, config: ContentConfig, registry: CollectionRegistry) -> None:
        """
        Initialize entry loader.

        Args:
            config: Content configuration.
            registry: Frozen collection registry.
        """
        self.config = config
        self.registry = registry

    def entry_id(self, collection_dir: Path, path: Path) -> str:
        """Derive the entry id for a file inside a collection directory."""
        relative = path.relative_to(collection_dir).with_suffix("")
        return "/".join(to_slug(part) for part in relative.parts)

    def claim_entry_id(
        self,
        collection: str,
        entry_id: str,
        path: Path,
        seen: dict[str, Path],
    ) -> None:
        """
        Record entry_id as taken by path.

        Args:
            collection: Collection name, for error context.
            entry_id: Derived entry id.
            path: File the id was derived from.
            seen: Ids already taken in this collection, updated in place.

        Raises:
            RecordValidationError: If the id is empty or taken by another file.
        """
        if not entry_id or "" in entry_id.split("/"):
            msg = f"{path.name} does not yield a usable entry id"
            raise RecordValidationError(
                msg,
                collection=collection,
                entry_id=entry_id,
                errors=[{"loc": (), "msg": msg, "type": "empty_id"}],
            )
        if entry_id in seen:
            msg = (
                f"Entry id '{entry_id}' of {path.name} is already used by {seen[entry_id].name}"
            )
            raise RecordValidationError(
                msg,
                collection=collection,
                entry_id=entry_id,
                errors=[{"loc": (), "msg": msg, "type": "duplicate_id"}],
            )
        seen[entry_id] = path

    def locale_for(self, entry_id: str) -> str:
        """Locale of an entry, taken from its first id segment."""
        locales = self.config.locales
        if "/" not in entry_id:
            return locales.default
        first = entry_id.split("/", 1)[0]
        return get_locale_or_default(first, locales.supported, locales.default)

    def discover(self, name: str | CollectionName) -> list[Path]:
        """List entry files of a collection, sorted by path."""
        definition = self.registry.get_collection(name)
        collection_dir = self.config.collection_dir(definition.name.value)

        if not collection_dir.is_dir():
            log.warning(
                "Collection directory not found",
                collection=definition.name.value,
                path=str(collection_dir),
            )
            return []

        suffixes = {s.lower() for s in self.config.validation.file_suffixes}
        files = [
            path
            for path in collection_dir.rglob("*")
            if path.is_file()
            and path.suffix.lower() in suffixes
            and not path.name.startswith(("_", "."))
        ]
        return sorted(files)

    def iter_raw(self, name: str | CollectionName) -> Iterator[tuple[str, Path, dict[str, Any]]]:
        """
        Yield raw records of a collection without schema validation.

        Yields:
            (entry_id, path, raw_record) tuples.

        Raises:
            RecordValidationError: If a file is not a single mapping, or its
                entry id is empty or already taken by another file.
        """
        definition = self.registry.get_collection(name)
        collection_dir = self.config.collection_dir(definition.name.value)
        seen: dict[str, Path] = {}
        for path in self.discover(definition.name):
            entry_id = self.entry_id(collection_dir, path)
            self.claim_entry_id(definition.name.value, entry_id, path, seen)
            try:
                raw = read_record(path)
            except RecordValidationError as e:
                e.with_context(collection=definition.name.value, entry_id=entry_id)
                raise
            yield entry_id, path, raw

    def load_entry(
        self,
        name: str | CollectionName,
        entry_id: str,
        path: Path,
        raw: dict[str, Any],
    ) -> ContentEntry:
        """Validate one raw record and wrap it as a ContentEntry."""
        definition = self.registry.get_collection(name)
        data = definition.load(raw, entry_id=entry_id)
        return ContentEntry(
            collection=definition.name.value,
            entry_id=entry_id,
            locale=self.locale_for(entry_id),
            source=path,
            data=data,
        )

    def load(self, name: str | CollectionName) -> list[ContentEntry]:
        """
        Load and validate all entries of a collection.

        Args:
            name: Collection name.

        Returns:
            Validated entries sorted by entry id.

        Raises:
            CollectionNotFoundError: If the collection is not registered.
            RecordValidationError: On the first invalid entry.
        """
        definition = self.registry.get_collection(name)
        with log_context(collection=definition.name.value):
            entries = [
                self.load_entry(definition.name, entry_id, path, raw)
                for entry_id, path, raw in self.iter_raw(definition.name)
            ]
            log.info("Loaded entries", count=len(entries))
        return sorted(entries, key=lambda entry: entry.entry_id)

    def get_entry(self, name: str | CollectionName, entry_id: str) -> ContentEntry | None:
        """Load a single entry by id, or None if it does not exist."""
        for candidate_id, path, raw in self.iter_raw(name):
            if candidate_id == entry_id:
                return self.load_entry(name, candidate_id, path, raw)
        return None

    def load_all(self) -> dict[str, list[ContentEntry]]:
        """Load every registered collection."""
        return {
            definition.name.value: self.load(definition.name) for definition in self.registry
        }
