"""Schema for hero sections shown at the top of pages."""

from pydantic import Field

from sitecontent.schemas.shared import Cta, NonEmptyStr, RecordModel


class Hero(RecordModel):
    """Hero section record."""

    title: NonEmptyStr = Field(description="Headline")
    subtitle: NonEmptyStr = Field(description="Supporting line below the headline")
    primary_cta: Cta = Field(description="Main call to action")
    secondary_cta: Cta | None = Field(default=None, description="Optional second action")
    image: str | None = Field(default=None, description="Image path or URL")
