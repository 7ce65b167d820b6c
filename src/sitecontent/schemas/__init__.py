"""
Schema definitions for content records.

Record schemas are Pydantic models; the inventory table uses Pandera.
"""

from sitecontent.schemas.hero import Hero
from sitecontent.schemas.inventory import InventorySchema
from sitecontent.schemas.page_sections import (
    SECTION_TYPES,
    CardItem,
    CardsSection,
    CtaStripSection,
    OneLinerSection,
    PageSections,
)
from sitecontent.schemas.seo import SeoMetadata
from sitecontent.schemas.shared import Cta, RecordModel

__all__ = [
    "SECTION_TYPES",
    "CardItem",
    "CardsSection",
    "Cta",
    "CtaStripSection",
    "Hero",
    "InventorySchema",
    "OneLinerSection",
    "PageSections",
    "RecordModel",
    "SeoMetadata",
]
