"""
Collection registry.

Maps each collection name to exactly one CollectionDefinition. The
registry is populated once during bootstrap, then frozen; after that it
is read-only and may be shared freely.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from sitecontent.collections.definitions import (
    CollectionDefinition,
    CollectionName,
    ModelSchema,
    SchemaDescriptor,
    StorageKind,
    ensure_schema,
)
from sitecontent.errors import (
    CollectionNotFoundError,
    DuplicateCollectionError,
    InvalidSchemaError,
    RegistryFrozenError,
)
from sitecontent.schemas import Hero, PageSections, SeoMetadata
from sitecontent.utils.logging import get_logger

log = get_logger(__name__)

COLLECTION_DESCRIPTIONS: dict[CollectionName, str] = {
    CollectionName.HERO: "Hero sections on pages",
    CollectionName.PAGE_SECTIONS: "Structured page content sections (cards, CTAs, one-liners)",
    CollectionName.SEO: "Page-level SEO metadata",
}


def default_schemas() -> dict[CollectionName, SchemaDescriptor]:
    """Built-in schemas for the three site collections."""
    return {
        CollectionName.HERO: ModelSchema(Hero),
        CollectionName.PAGE_SECTIONS: ModelSchema(PageSections),
        CollectionName.SEO: ModelSchema(SeoMetadata),
    }


class CollectionRegistry:
    """
    Registry of content collections.

    Registering a name twice raises DuplicateCollectionError. Registering
    after freeze() raises RegistryFrozenError.
    """

    def __init__(self) -> None:
        self._definitions: dict[CollectionName, CollectionDefinition] = {}
        self._frozen = False

    def register_collection(
        self,
        name: str | CollectionName,
        kind: str | StorageKind,
        schema: Any,
    ) -> CollectionDefinition:
        """
        Register a collection.

        Args:
            name: Known collection name.
            kind: Storage kind ("data" for all site collections).
            schema: SchemaDescriptor or pydantic model class.

        Returns:
            The new CollectionDefinition.

        Raises:
            CollectionNotFoundError: If name is not a known collection.
            InvalidSchemaError: If schema or kind is malformed.
            DuplicateCollectionError: If name is already registered.
            RegistryFrozenError: If the registry has been frozen.
        """
        if self._frozen:
            msg = f"Cannot register '{name}': registry is frozen"
            raise RegistryFrozenError(msg)

        collection = CollectionName.parse(name)
        try:
            storage_kind = StorageKind(kind)
        except ValueError as e:
            msg = f"Unknown storage kind {kind!r} for collection '{collection.value}'"
            raise InvalidSchemaError(msg) from e
        descriptor = ensure_schema(schema)

        if collection in self._definitions:
            msg = f"Collection '{collection.value}' is already registered"
            raise DuplicateCollectionError(msg)

        definition = CollectionDefinition(
            name=collection,
            kind=storage_kind,
            schema=descriptor,
            description=COLLECTION_DESCRIPTIONS.get(collection, ""),
        )
        self._definitions[collection] = definition
        log.debug(
            "Registered collection",
            collection=collection.value,
            kind=storage_kind.value,
            schema=repr(descriptor),
        )
        return definition

    def get_collection(self, name: str | CollectionName) -> CollectionDefinition:
        """
        Look up a registered collection.

        Raises:
            CollectionNotFoundError: If the name is unknown or unregistered.
        """
        available = self.list_collections()
        try:
            collection = CollectionName.parse(name)
        except CollectionNotFoundError as e:
            raise CollectionNotFoundError(str(name), available) from e
        if collection not in self._definitions:
            raise CollectionNotFoundError(collection.value, available)
        return self._definitions[collection]

    def load_record(
        self,
        name: str | CollectionName,
        raw: Mapping[str, Any],
        entry_id: str | None = None,
    ) -> Any:
        """
        Validate a raw record against a collection's schema.

        Raises:
            CollectionNotFoundError: If the collection is not registered.
            RecordValidationError: If the record is invalid.
        """
        return self.get_collection(name).load(raw, entry_id=entry_id)

    def freeze(self) -> "CollectionRegistry":
        """Mark bootstrap as complete. Returns self."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        """Whether the registry is read-only."""
        return self._frozen

    def list_collections(self) -> list[str]:
        """Registered collection names, in registration order."""
        return [name.value for name in self._definitions]

    def __contains__(self, name: object) -> bool:
        try:
            return CollectionName(name) in self._definitions
        except ValueError:
            return False

    def __iter__(self) -> Iterator[CollectionDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


def build_registry(
    schemas: Mapping[CollectionName | str, Any] | None = None,
) -> CollectionRegistry:
    """
    Build and freeze the registry of site collections.

    All collections are stored as structured data. Schemas are passed in
    explicitly; when omitted the built-in Pydantic schemas are used.

    Args:
        schemas: Schema per collection name. Must cover every collection.

    Returns:
        Frozen CollectionRegistry.

    Raises:
        InvalidSchemaError: If a schema is missing or malformed.
        CollectionNotFoundError: If schemas names an unknown collection.
    """
    if schemas is None:
        schemas = default_schemas()
    resolved = {CollectionName.parse(name): schema for name, schema in schemas.items()}

    registry = CollectionRegistry()
    for name in CollectionName:
        if name not in resolved:
            msg = f"No schema supplied for collection '{name.value}'"
            raise InvalidSchemaError(msg)
        registry.register_collection(name, StorageKind.DATA, resolved[name])

    log.info("Collection registry ready", collections=registry.list_collections())
    return registry.freeze()
