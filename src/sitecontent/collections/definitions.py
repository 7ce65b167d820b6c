"""
Collection definitions: names, storage kinds and schema adapters.

A collection binds a fixed name to a storage kind and a schema. The
schema is any object exposing ``validate(raw_record)``; Pydantic models
are adapted through ModelSchema.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from sitecontent.errors import CollectionNotFoundError, InvalidSchemaError, RecordValidationError


class CollectionName(str, Enum):
    """Known content collections."""

    HERO = "hero"
    PAGE_SECTIONS = "pageSections"
    SEO = "seo"

    @classmethod
    def parse(cls, value: "str | CollectionName") -> "CollectionName":
        """
        Resolve a collection name from its string value.

        Raises:
            CollectionNotFoundError: If the name is not a known collection.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise CollectionNotFoundError(str(value), [m.value for m in cls]) from e


class StorageKind(str, Enum):
    """How a collection's raw records are sourced."""

    DATA = "data"  # Static structured data (JSON/YAML)
    CONTENT = "content"  # Long-form documents


@runtime_checkable
class SchemaDescriptor(Protocol):
    """Validation rule for the records of one collection."""

    def validate(self, raw: Mapping[str, Any]) -> Any:
        """Return the validated record or raise RecordValidationError."""
        ...


class ModelSchema:
    """SchemaDescriptor backed by a Pydantic model class."""

    def __init__(self, model: type[BaseModel]) -> None:
        if not (isinstance(model, type) and issubclass(model, BaseModel)):
            msg = f"ModelSchema requires a pydantic model class, got {model!r}"
            raise InvalidSchemaError(msg)
        self.model = model

    def validate(self, raw: Mapping[str, Any]) -> BaseModel:
        """
        Validate a raw record against the model.

        Args:
            raw: Record as read from storage.

        Returns:
            Validated model instance.

        Raises:
            RecordValidationError: If the record does not match the model.
        """
        try:
            return self.model.model_validate(raw)
        except PydanticValidationError as e:
            errors = [
                {"loc": tuple(err["loc"]), "msg": err["msg"], "type": err["type"]}
                for err in e.errors()
            ]
            msg = f"{self.model.__name__} validation failed with {len(errors)} error(s)"
            raise RecordValidationError(msg, errors=errors) from e

    def __repr__(self) -> str:
        return f"ModelSchema({self.model.__name__})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ModelSchema) and other.model is self.model

    def __hash__(self) -> int:
        return hash(self.model)


def ensure_schema(schema: Any) -> SchemaDescriptor:
    """
    Coerce a schema argument into a SchemaDescriptor.

    Pydantic model classes are wrapped in ModelSchema. Other objects must
    expose a callable ``validate``.

    Raises:
        InvalidSchemaError: If the schema is missing or malformed.
    """
    if schema is None:
        msg = "Schema is required"
        raise InvalidSchemaError(msg)
    if isinstance(schema, type) and issubclass(schema, BaseModel):
        return ModelSchema(schema)
    if isinstance(schema, type):
        msg = f"Schema must be an instance or a pydantic model class, got class {schema.__name__}"
        raise InvalidSchemaError(msg)
    if not callable(getattr(schema, "validate", None)):
        msg = f"Schema {schema!r} has no callable 'validate'"
        raise InvalidSchemaError(msg)
    return schema


@dataclass(frozen=True)
class CollectionDefinition:
    """A registered collection."""

    name: CollectionName
    kind: StorageKind
    schema: SchemaDescriptor
    description: str = ""

    def load(self, raw: Mapping[str, Any], entry_id: str | None = None) -> Any:
        """
        Validate a raw record of this collection.

        Args:
            raw: Raw record.
            entry_id: Optional entry identifier for error context.

        Returns:
            Validated record as produced by the schema.

        Raises:
            RecordValidationError: If validation fails.
        """
        try:
            return self.schema.validate(raw)
        except RecordValidationError as e:
            e.with_context(collection=self.name.value, entry_id=entry_id)
            raise
