"""
Base types and file readers for content ingestion.

Each entry file holds exactly one record: a JSON object or a YAML mapping.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from sitecontent.errors import RecordValidationError


@dataclass(frozen=True)
class ContentEntry:
    """A validated record together with its origin."""

    collection: str
    entry_id: str
    locale: str
    source: Path
    data: Any


def read_record(path: Path) -> dict[str, Any]:
    """
    Read a single raw record from a JSON or YAML file.

    Args:
        path: Entry file.

    Returns:
        Raw record mapping.

    Raises:
        RecordValidationError: If the file is not UTF-8, cannot be parsed,
            or is not a mapping.
        ValueError: If the file format is not supported.
    """
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"{path.name} is not valid UTF-8: {e}"
        raise RecordValidationError(
            msg, errors=[{"loc": (), "msg": msg, "type": "decode_error"}]
        ) from e

    try:
        if suffix == ".json":
            data = json.loads(text)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            msg = f"Unsupported file format: {suffix}"
            raise ValueError(msg)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Could not parse {path.name}: {e}"
        raise RecordValidationError(
            msg, errors=[{"loc": (), "msg": str(e), "type": "parse_error"}]
        ) from e

    if not isinstance(data, dict):
        msg = f"{path.name} must contain a single mapping, got {type(data).__name__}"
        raise RecordValidationError(
            msg, errors=[{"loc": (), "msg": msg, "type": "mapping_type"}]
        )
    return data
