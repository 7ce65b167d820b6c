"""
Inventory export of validation results.

Tabulates one row per entry and checks the table against InventorySchema
before writing it.
"""

from pathlib import Path

import pandas as pd

from sitecontent.schemas.inventory import InventorySchema
from sitecontent.utils.logging import get_logger
from sitecontent.validation.core import ValidationResult

log = get_logger(__name__)

INVENTORY_COLUMNS = [
    "collection",
    "entry_id",
    "locale",
    "source",
    "valid",
    "error_count",
    "warning_count",
]


def build_inventory(results: list[ValidationResult]) -> pd.DataFrame:
    """
    Build the content inventory table.

    Args:
        results: Validation results, one per entry.

    Returns:
        Validated inventory DataFrame.

    Raises:
        pandera.errors.SchemaError: If the table violates InventorySchema.
    """
    rows = [
        {
            "collection": r.collection,
            "entry_id": r.entry_id,
            "locale": r.locale,
            "source": str(r.file_path),
            "valid": r.valid,
            "error_count": len(r.errors),
            "warning_count": len(r.warnings),
        }
        for r in results
    ]
    df = pd.DataFrame(rows, columns=INVENTORY_COLUMNS)
    return InventorySchema.validate(df)


def export_inventory(df: pd.DataFrame, output_path: Path) -> Path:
    """
    Write the inventory table to CSV.

    Args:
        df: Inventory DataFrame.
        output_path: Destination CSV path; parent directories are created.

    Returns:
        The written path.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    log.info("Exported inventory", path=str(output_path), rows=len(df))
    return output_path
