"""Schema for page-level SEO metadata."""

from pydantic import Field, StrictBool

from sitecontent.schemas.shared import NonEmptyStr, RecordModel


class SeoMetadata(RecordModel):
    """SEO metadata record."""

    title: NonEmptyStr = Field(description="Document title")
    description: NonEmptyStr = Field(description="Meta description")
    no_index: StrictBool = Field(default=False, description="Exclude page from search indexing")
