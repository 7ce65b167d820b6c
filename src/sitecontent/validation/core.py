"""
Core validation logic for content entries.

Validates every entry of every registered collection and collects one
result per entry instead of stopping at the first failure.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sitecontent.collections.registry import CollectionRegistry
from sitecontent.config.settings import ContentConfig
from sitecontent.errors import RecordValidationError
from sitecontent.ingestion.base import read_record
from sitecontent.ingestion.loader import EntryLoader
from sitecontent.utils.logging import get_logger, log_context
from sitecontent.validation.links import check_links

log = get_logger(__name__)


@dataclass
class ValidationResult:
    """Result of validating a single entry."""

    collection: str
    entry_id: str
    locale: str
    file_path: Path
    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


class ValidationRunner:
    """
    Runs validation for all registered collections.

    Schema errors always fail an entry. Link problems are warnings unless
    strict_links is enabled.
    """

    def __init__(
        self,
        config: ContentConfig,
        registry: CollectionRegistry,
        *,
        strict_links: bool | None = None,
    ) -> None:
        """
        Initialize validation runner.

        Args:
            config: Content configuration.
            registry: Frozen collection registry.
            strict_links: Override for config.validation.strict_links.
        """
        self.config = config
        self.registry = registry
        self.loader = EntryLoader(config, registry)
        self.strict_links = (
            config.validation.strict_links if strict_links is None else strict_links
        )

    def run(self) -> list[ValidationResult]:
        """
        Validate all entries.

        Returns:
            One result per entry, grouped by collection in registry order.
        """
        results: list[ValidationResult] = []
        for definition in self.registry:
            results.extend(self.validate_collection(definition.name.value))
        return results

    def validate_collection(self, name: str) -> list[ValidationResult]:
        """Validate every entry of one collection."""
        results: list[ValidationResult] = []
        with log_context(collection=name):
            collection_dir = self.config.collection_dir(name)
            seen: dict[str, Path] = {}
            for path in self.loader.discover(name):
                entry_id = self.loader.entry_id(collection_dir, path)
                try:
                    self.loader.claim_entry_id(name, entry_id, path, seen)
                except RecordValidationError as e:
                    # Keyed by file path so inventory rows stay unique
                    source_id = path.relative_to(collection_dir).as_posix()
                    log.warning("Entry id rejected", entry=source_id, error=str(e))
                    results.append(
                        ValidationResult(
                            collection=name,
                            entry_id=source_id,
                            locale=self.loader.locale_for(entry_id),
                            file_path=path,
                            valid=False,
                            errors=e.format_errors(),
                        )
                    )
                    continue
                results.append(self._validate_entry(name, entry_id, path))

            failed = sum(1 for r in results if not r.valid)
            if failed:
                log.error("Collection has invalid entries", entries=len(results), failed=failed)
            else:
                log.info("Collection validated", entries=len(results))
        return results

    def _validate_entry(self, name: str, entry_id: str, path: Path) -> ValidationResult:
        """
        Validate a single entry file.

        Args:
            name: Collection name.
            entry_id: Entry identifier.
            path: Entry file.

        Returns:
            ValidationResult for the entry.
        """
        locale = self.loader.locale_for(entry_id)
        try:
            raw = read_record(path)
            entry = self.loader.load_entry(name, entry_id, path, raw)
        except RecordValidationError as e:
            errors = e.format_errors() or [str(e)]
            log.warning("Entry failed validation", entry=entry_id, errors=errors)
            return ValidationResult(
                collection=name,
                entry_id=entry_id,
                locale=locale,
                file_path=path,
                valid=False,
                errors=errors,
            )

        warnings = check_links(_as_record(entry.data))
        if warnings:
            log.warning("Entry has unsafe links", entry=entry_id, links=warnings)

        if warnings and self.strict_links:
            return ValidationResult(
                collection=name,
                entry_id=entry_id,
                locale=locale,
                file_path=path,
                valid=False,
                errors=warnings,
            )
        return ValidationResult(
            collection=name,
            entry_id=entry_id,
            locale=locale,
            file_path=path,
            valid=True,
            warnings=warnings,
        )


def _as_record(data: Any) -> Any:
    """Convert a validated record into plain dicts/lists for inspection."""
    if hasattr(data, "to_record"):
        return data.to_record()
    if hasattr(data, "model_dump"):
        return data.model_dump(by_alias=True, exclude_none=True)
    return data
