"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from sitecontent.config.settings import (
    ContentConfig,
    LocaleConfig,
    LoggingConfig,
    ValidationConfig,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _parse_bool(value: Any) -> bool:
    """Parse a boolean that may arrive as an interpolated string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("", "0", "false", "no", "off"):
            return False
    msg = f"Cannot parse boolean from {type(value).__name__}: {value!r}"
    raise ValueError(msg)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> ContentConfig:
    """
    Load content configuration from YAML file(s).

    A minimal config may be empty; every setting has a default. A relative
    content_root is resolved against the directory of config_path.

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.

    Returns:
        Fully validated ContentConfig instance.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        if potential_base.exists() and potential_base.resolve() != config_path.resolve():
            base_data = load_yaml(potential_base)
        else:
            base_data = {}

    main_data = load_yaml(config_path)
    merged = _deep_merge(base_data, main_data)

    content_root = Path(merged.get("content_root", "./src/content"))
    if not content_root.is_absolute():
        content_root = config_path.parent / content_root

    locales_data = merged.get("locales", {})
    locales = LocaleConfig(
        default=locales_data.get("default", "en"),
        supported=tuple(locales_data.get("supported", ["en", "de"])),
        names=locales_data.get("names", {"en": "English", "de": "Deutsch"}),
    )

    validation_data = merged.get("validation", {})
    validation = ValidationConfig(
        strict_links=_parse_bool(validation_data.get("strict_links", False)),
        file_suffixes=tuple(
            validation_data.get("file_suffixes", [".json", ".yaml", ".yml"])
        ),
    )

    logging_data = merged.get("logging", {})
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        json_output=_parse_bool(logging_data.get("json_output", False)),
    )

    return ContentConfig(
        content_root=content_root,
        locales=locales,
        validation=validation,
        logging=logging_config,
    )
