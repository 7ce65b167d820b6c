"""
Pandera schema for the content inventory table.

One row per content entry, with its validation outcome.
"""

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series


class InventorySchema(pa.DataFrameModel):
    """Schema for the content inventory export."""

    collection: Series[str] = pa.Field(
        isin=["hero", "pageSections", "seo"],
        description="Collection name",
    )
    entry_id: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Entry identifier within the collection",
    )
    locale: Series[str] = pa.Field(description="Entry locale code")
    source: Series[str] = pa.Field(description="Path of the source file")
    valid: Series[bool] = pa.Field(description="Whether the entry passed validation")
    error_count: Series[int] = pa.Field(ge=0, description="Number of schema errors")
    warning_count: Series[int] = pa.Field(ge=0, description="Number of link warnings")

    @pa.dataframe_check
    def unique_entries(cls, df: pd.DataFrame) -> bool:
        """Each (collection, entry_id) pair appears once."""
        return not df.duplicated(subset=["collection", "entry_id"]).any()

    class Config:
        """Schema configuration."""

        name = "InventorySchema"
        strict = False
        coerce = True
