"""Content validation module."""

from sitecontent.validation.core import ValidationResult, ValidationRunner
from sitecontent.validation.export import build_inventory, export_inventory
from sitecontent.validation.reporter import ConsoleReporter

__all__ = [
    "ConsoleReporter",
    "ValidationResult",
    "ValidationRunner",
    "build_inventory",
    "export_inventory",
]
