# ABOUTME: CLI package for bookenrich, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from bookenrich.cli.commands import enrich_cmd


@click.group()
@click.version_option(package_name="bookenrich")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log provider requests.")
def cli(verbose: bool) -> None:
    """bookenrich - fill in book metadata for a spreadsheet of ISBNs and titles."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    # httpx logs each request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


cli.add_command(enrich_cmd.enrich)
