"""
Shared building blocks for record schemas.

Records are stored with camelCase keys (``primaryCta``, ``noIndex``) and
exposed as snake_case attributes in Python. Input must use the camelCase
keys; snake_case keys are ignored like any other unknown key.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, Field(min_length=1)]


class RecordModel(BaseModel):
    """Base class for all content record schemas."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_name=False,
        validate_by_alias=True,
        extra="ignore",
    )

    def to_record(self) -> dict[str, Any]:
        """Dump back to the stored (camelCase) record shape, omitting unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Cta(RecordModel):
    """Call-to-action button, used across all sections."""

    label: NonEmptyStr = Field(description="Button label")
    href: NonEmptyStr = Field(description="Link target")
