# ABOUTME: The `bookenrich enrich` command for spreadsheet metadata enrichment.
# ABOUTME: Reads a book list workbook, resolves each row across providers, writes the result.

import json as json_lib
from collections import Counter
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeRemainingColumn,
)
from rich.table import Table

from bookenrich.cli.options import google_api_key_option, timeout_option
from bookenrich.core.pipeline import run_pipeline
from bookenrich.core.resolver import FallbackResolver, ResolvedRecord
from bookenrich.formats.xlsx import (
    DEFAULT_INPUT_SHEET,
    DEFAULT_OUTPUT_SHEET,
    SheetReadError,
    read_input_rows,
    write_output_rows,
)
from bookenrich.metadata.googlebooks import GoogleBooksProvider
from bookenrich.metadata.http import EnrichHttpClient
from bookenrich.metadata.openlibrary import OpenLibraryIsbnProvider, OpenLibrarySearchProvider
from bookenrich.metadata.types import InputRow

_UNRESOLVED = "unresolved"


def _create_resolver(http_client: EnrichHttpClient, google_api_key: str | None) -> FallbackResolver:
    """Build the default chain: Open Library ISBN, Open Library search, Google Books."""
    return FallbackResolver(
        isbn_provider=OpenLibraryIsbnProvider(http_client=http_client),
        search_providers=[
            OpenLibrarySearchProvider(http_client=http_client),
            GoogleBooksProvider(http_client=http_client, api_key=google_api_key),
        ],
    )


def _make_progress(console: Console, disable: bool = False) -> Progress:
    """Create a Rich progress bar for row processing."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeRemainingColumn(),
        console=console,
        transient=True,
        disable=disable,
    )


@click.command("enrich")
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("enriched_books.xlsx"),
    show_default=True,
    help="Workbook to write the enriched table to (replaced if it exists).",
)
@click.option(
    "--sheet",
    default=DEFAULT_INPUT_SHEET,
    show_default=True,
    help="Sheet holding the ISBN, author, title, condition columns.",
)
@click.option(
    "--output-sheet",
    default=DEFAULT_OUTPUT_SHEET,
    show_default=True,
    help="Sheet name for the enriched table.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Print the run summary as JSON.",
)
@timeout_option
@google_api_key_option
def enrich(
    input_path: Path,
    output_path: Path,
    sheet: str,
    output_sheet: str,
    json_output: bool,
    timeout: float,
    google_api_key: str | None,
) -> None:
    """Look up metadata for every book in INPUT and write an enriched workbook."""
    console = Console()

    try:
        rows = read_input_rows(input_path, sheet=sheet)
    except SheetReadError as exc:
        raise click.ClickException(str(exc)) from exc

    http_client = EnrichHttpClient(timeout=timeout)
    resolver = _create_resolver(http_client, google_api_key)
    sources: Counter[str] = Counter()

    progress = _make_progress(console, disable=json_output)
    task_id = progress.add_task("Enriching", total=len(rows))

    def on_row(index: int, row: InputRow, resolved: ResolvedRecord | None) -> None:
        sources[resolved.source if resolved is not None else _UNRESOLVED] += 1
        label = row.title or row.isbn or f"row {index + 1}"
        progress.update(task_id, advance=1, description=escape(label))

    try:
        with progress:
            output_rows = run_pipeline(rows, resolver, on_row=on_row)
    finally:
        http_client.close()

    write_output_rows(output_path, output_rows, sheet=output_sheet)

    if json_output:
        _print_json(input_path, output_path, len(output_rows), sources)
        return

    _print_rich(console, output_path, len(output_rows), sources)


def _print_json(input_path: Path, output_path: Path, total: int, sources: Counter[str]) -> None:
    """Print the run summary as JSON."""
    data = {
        "input": str(input_path),
        "output": str(output_path),
        "total_rows": total,
        "resolved": total - sources[_UNRESOLVED],
        "unresolved": sources[_UNRESOLVED],
        "sources": {name: count for name, count in sorted(sources.items()) if name != _UNRESOLVED},
    }
    click.echo(json_lib.dumps(data, indent=2))


def _print_rich(console: Console, output_path: Path, total: int, sources: Counter[str]) -> None:
    """Print the run summary with Rich formatting."""
    if total == 0:
        console.print(f"[dim]0 row(s) enriched, wrote header only to {output_path}[/dim]")
        return

    table = Table(title="Resolved By")
    table.add_column("Source", style="bold")
    table.add_column("Rows", justify="right")

    for name in sorted(sources):
        if name != _UNRESOLVED:
            table.add_row(name, str(sources[name]))
    table.add_row("[yellow]no data found[/yellow]", str(sources[_UNRESOLVED]))

    console.print(table)
    console.print(f"\n[bold]{total} row(s) enriched.[/bold] Saved to {output_path}")
