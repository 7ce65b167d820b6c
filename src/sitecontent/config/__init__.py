"""
Configuration management with typed Pydantic models.

Provides content-root, locale, validation and logging settings loaded
from YAML with environment variable interpolation.
"""

from sitecontent.config.loader import load_config
from sitecontent.config.settings import (
    ContentConfig,
    LocaleConfig,
    LoggingConfig,
    ValidationConfig,
)

__all__ = [
    "ContentConfig",
    "LocaleConfig",
    "LoggingConfig",
    "ValidationConfig",
    "load_config",
]
