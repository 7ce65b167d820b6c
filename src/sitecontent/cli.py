"""Command-line interface for site content collections."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="sitecontent",
    help="Validate and inspect the site's content collections.",
    no_args_is_help=True,
)

console = Console()

ConfigOption = Annotated[
    Path,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]


@app.command()
def collections() -> None:
    """List registered collections and their schemas."""
    from sitecontent.collections import build_registry

    registry = build_registry()

    table = Table(title="Content Collections")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Kind", style="green", no_wrap=True)
    table.add_column("Schema", style="blue")
    table.add_column("Description", style="dim")

    for definition in registry:
        table.add_row(
            definition.name.value,
            definition.kind.value,
            repr(definition.schema),
            definition.description,
        )

    console.print(table)


@app.command()
def validate(
    config: ConfigOption,
    strict_links: Annotated[
        bool,
        typer.Option(
            "--strict-links",
            help="Fail entries with unsafe or malformed link targets.",
        ),
    ] = False,
) -> None:
    """Validate every content entry against its collection schema."""
    from sitecontent.collections import build_registry
    from sitecontent.config.loader import load_config
    from sitecontent.errors import ContentError
    from sitecontent.utils.logging import configure_logging
    from sitecontent.validation import ConsoleReporter, ValidationRunner

    content_config = load_config(config)
    configure_logging(content_config.logging.level, content_config.logging.json_output)

    console.print(f"[blue]Validating content in {content_config.content_root}[/blue]")

    try:
        registry = build_registry()
        runner = ValidationRunner(
            content_config,
            registry,
            strict_links=strict_links or content_config.validation.strict_links,
        )
        results = runner.run()
    except ContentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    reporter = ConsoleReporter(console)
    reporter.print_results(results)

    if any(not r.valid for r in results):
        raise typer.Exit(code=1)


@app.command()
def inventory(
    config: ConfigOption,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path for the inventory CSV. Prints a table if omitted.",
        ),
    ] = None,
) -> None:
    """Tabulate all content entries and their validation status."""
    from pandera.errors import SchemaError
    from rich.markup import escape

    from sitecontent.collections import build_registry
    from sitecontent.config.loader import load_config
    from sitecontent.errors import ContentError
    from sitecontent.utils.logging import configure_logging
    from sitecontent.validation import ValidationRunner, build_inventory, export_inventory

    content_config = load_config(config)
    configure_logging(content_config.logging.level, content_config.logging.json_output)

    try:
        results = ValidationRunner(content_config, build_registry()).run()
    except ContentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from e

    try:
        df = build_inventory(results)
    except SchemaError as e:
        console.print(f"[red]Inventory check failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    if output is not None:
        export_inventory(df, output)
        console.print(f"[green]Saved {len(df)} entries to: {output}[/green]")
        return

    table = Table(title="Content Inventory")
    for column in df.columns:
        table.add_column(column)
    for row in df.itertuples(index=False):
        table.add_row(*(str(value) for value in row))
    console.print(table)

    per_collection = df.groupby("collection")["valid"].agg(["count", "sum"])
    for name, stats in per_collection.iterrows():
        console.print(f"  {name}: {int(stats['sum'])}/{int(stats['count'])} valid")


@app.command()
def version() -> None:
    """Show version information."""
    from sitecontent import __version__

    console.print(f"sitecontent version {__version__}")


if __name__ == "__main__":
    app()
