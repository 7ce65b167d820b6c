"""Content collection definitions and registry."""

from sitecontent.collections.definitions import (
    CollectionDefinition,
    CollectionName,
    ModelSchema,
    SchemaDescriptor,
    StorageKind,
)
from sitecontent.collections.registry import (
    CollectionRegistry,
    build_registry,
    default_schemas,
)

__all__ = [
    "CollectionDefinition",
    "CollectionName",
    "CollectionRegistry",
    "ModelSchema",
    "SchemaDescriptor",
    "StorageKind",
    "build_registry",
    "default_schemas",
]
