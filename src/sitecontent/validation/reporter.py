"""
Console reporter for validation results.

Formats validation results using Rich for clear, colored output.
"""

from rich.console import Console
from rich.table import Table

from sitecontent.validation.core import ValidationResult


class ConsoleReporter:
    """Formats and displays validation results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_results(self, results: list[ValidationResult]) -> None:
        """
        Print validation results as a formatted table.

        Args:
            results: List of validation results to display.
        """
        table = Table(title="Content Validation Results", show_header=True)
        table.add_column("Collection", style="cyan", no_wrap=True)
        table.add_column("Entry", style="blue")
        table.add_column("Locale", justify="center")
        table.add_column("Status", justify="center")
        table.add_column("Details", style="dim")

        for result in results:
            table.add_row(
                result.collection,
                result.entry_id,
                result.locale,
                self._format_status(result),
                self._format_details(result),
            )

        self.console.print(table)
        self._print_summary(results)
        self._print_detailed_errors(results)

    def _format_status(self, result: ValidationResult) -> str:
        """Format validation status with color."""
        if not result.valid:
            return "[red]Fail[/red]"
        if result.warnings:
            return "[yellow]Warn[/yellow]"
        return "[green]Pass[/green]"

    def _format_details(self, result: ValidationResult) -> str:
        """Short details string (errors shown separately)."""
        if not result.valid:
            return f"{len(result.errors)} error(s), see below"
        if result.warnings:
            return f"{len(result.warnings)} link warning(s)"
        return "OK"

    def _print_summary(self, results: list[ValidationResult]) -> None:
        """Print summary statistics."""
        total = len(results)
        passed = sum(1 for r in results if r.valid)
        failed = total - passed
        warned = sum(1 for r in results if r.valid and r.warnings)

        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  Total entries: {total}")
        self.console.print(f"  [green]Passed: {passed}[/green]")
        self.console.print(f"  [red]Failed: {failed}[/red]")
        self.console.print(f"  [yellow]With warnings: {warned}[/yellow]")

    def _print_detailed_errors(self, results: list[ValidationResult]) -> None:
        """Print detailed error messages for failed entries."""
        failed = [r for r in results if not r.valid]

        if not failed:
            return

        self.console.print()
        self.console.print("[bold red]Validation Errors:[/bold red]")

        for result in failed:
            self.console.print()
            self.console.print(f"[bold]{result.collection}/{result.entry_id}[/bold]:")
            self.console.print(f"  File: {result.file_path}", markup=False)
            for line in result.errors:
                self.console.print(f"  {line}", markup=False)
