"""Utility functions for terminal output and logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

console = Console()


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through rich; DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )
    if not verbose:
        # HTTP libraries are chatty at INFO
        for name in ("httpx", "openai", "urllib3"):
            logging.getLogger(name).setLevel(logging.WARNING)


def create_table(title: str, headers: list) -> Table:
    """Create a formatted table for display."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    return table


def format_outcome_color(ok: bool) -> str:
    """Format a submission outcome with appropriate color."""
    if ok:
        return "[green]sent[/green]"
    return "[red]failed[/red]"
