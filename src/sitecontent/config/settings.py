"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sitecontent.domain.locale import DEFAULT_LOCALE, SUPPORTED_LOCALES


class LocaleConfig(BaseModel):
    """Locale settings used to assign entries to a language."""

    model_config = ConfigDict(frozen=True)

    default: str = Field(default=DEFAULT_LOCALE, description="Fallback locale code")
    supported: tuple[str, ...] = Field(
        default=SUPPORTED_LOCALES, description="Locale codes recognised in entry paths"
    )
    names: dict[str, str] = Field(
        default_factory=lambda: {"en": "English", "de": "Deutsch"},
        description="Display name per locale",
    )

    @field_validator("supported")
    @classmethod
    def validate_supported(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Ensure at least one locale is configured."""
        if not v:
            msg = "At least one supported locale is required"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_default(self) -> "LocaleConfig":
        """Ensure the default locale is one of the supported locales."""
        if self.default not in self.supported:
            msg = f"Default locale {self.default!r} is not in supported locales {list(self.supported)}"
            raise ValueError(msg)
        return self


class ValidationConfig(BaseModel):
    """Content validation settings."""

    model_config = ConfigDict(frozen=True)

    strict_links: bool = Field(
        default=False,
        description="Treat unsafe or malformed link targets as errors instead of warnings",
    )
    file_suffixes: tuple[str, ...] = Field(
        default=(".json", ".yaml", ".yml"),
        description="File suffixes read as data entries",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO")
    json_output: bool = Field(default=False, description="Emit JSON log lines")


class ContentConfig(BaseModel):
    """Complete content configuration.

    Collection directories live under content_root:
    ./content/hero, ./content/pageSections, ./content/seo
    """

    model_config = ConfigDict(frozen=True)

    content_root: Path = Field(
        default=Path("./src/content"), description="Root directory of content collections"
    )
    locales: LocaleConfig = Field(default_factory=LocaleConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def collection_dir(self, name: str) -> Path:
        """Directory holding the entries of a collection."""
        return self.content_root / name
