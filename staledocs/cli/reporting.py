"""Rich console output for staledocs runs."""

import logging
from typing import Any, Dict

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..rules import RunResult


def setup_logging(console: Console, verbose: bool = False):
    """Route library logging through rich; DEBUG when verbose, WARNING otherwise"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False, markup=False)],
        force=True,
    )


def report_run(console: Console, result: RunResult):
    """
    Prints one line per diagnostic followed by a summary.

    Diagnostic lines keep their literal ``<file>: Line <n>: <message>`` form:
    markup is escaped and lines are never wrapped.
    """
    for diagnostic in result.diagnostics:
        console.print(escape(diagnostic.format()), style="red", soft_wrap=True,
                      highlight=False, emoji=False)

    if result.success:
        console.print(
            f"[green]✅ Success: no stale docstrings found in {len(result.file_results)} file(s).[/green]"
        )
    else:
        console.print(f"[bold red]Found stale docstrings in {result.files_with_errors} file(s).[/bold red]")


def report_profile(console: Console, stats: Dict[str, Any], profile_text: str):
    """Prints profiling statistics and the top functions by cumulative time"""
    table = Table(title="Profiling Results", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    for key, value in stats.items():
        if isinstance(value, float):
            table.add_row(key, f"{value:.3f}")
        else:
            table.add_row(key, str(value))

    console.print(table)
    console.print(profile_text, markup=False, highlight=False, soft_wrap=True)
