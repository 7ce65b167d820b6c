"""
Schemas for structured page content sections.

A page is a list of sections. Each section carries a ``type`` tag that
selects its shape:

    cards     - grid of cards with title, intro and items
    oneLiner  - title with a concise statement and optional body text
    ctaStrip  - title with primary and optional secondary CTA buttons
"""

from typing import Annotated, Literal

from pydantic import Field

from sitecontent.schemas.shared import Cta, NonEmptyStr, RecordModel


class CardItem(RecordModel):
    """Single card within a cards section."""

    title: NonEmptyStr
    text: NonEmptyStr
    href: str | None = None


class CardsSection(RecordModel):
    """Grid of cards."""

    type: Literal["cards"]
    id: NonEmptyStr
    anchor: NonEmptyStr
    title: NonEmptyStr
    intro: NonEmptyStr
    items: list[CardItem] = Field(min_length=1)


class OneLinerSection(RecordModel):
    """Title with a one-line statement."""

    type: Literal["oneLiner"]
    id: NonEmptyStr
    anchor: NonEmptyStr
    title: NonEmptyStr
    one_liner: NonEmptyStr
    body: str | None = None


class CtaStripSection(RecordModel):
    """Strip of call-to-action buttons."""

    type: Literal["ctaStrip"]
    id: NonEmptyStr
    title: NonEmptyStr
    primary: Cta
    secondary: Cta | None = None


Section = Annotated[
    CardsSection | OneLinerSection | CtaStripSection,
    Field(discriminator="type"),
]

SECTION_TYPES: list[str] = ["cards", "oneLiner", "ctaStrip"]


class PageSections(RecordModel):
    """Ordered sections making up a page."""

    sections: list[Section]
