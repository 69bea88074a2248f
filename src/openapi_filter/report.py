"""Console reporting for the filter command."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from openapi_filter.document import FilterResult
from openapi_filter.selector import SelectionResult
from openapi_filter.settings import MatchMode, settings

console = Console()

CONTAINER_LABELS = {"schemas": "Schemas", "definitions": "Definitions"}


def report_selectors(selectors: list[str], mode: MatchMode) -> None:
    label = "Regex patterns" if mode == "regex" else "Paths"
    console.print(f"[bold]{label} to keep:[/bold] {escape(', '.join(selectors))}")


def report_selection(selection: SelectionResult) -> None:
    """Print the kept paths, at most ``settings.max_listed_paths`` of them, and
    the selectors that matched nothing."""
    console.print(
        f"Filtered {selection.total_paths} paths using {selection.mode} matching"
    )
    console.print(f"[green]Found and kept {len(selection.matches)} paths[/green]")

    limit = settings.max_listed_paths
    for match in selection.matches[:limit]:
        if selection.mode == "regex":
            console.print(
                f"  {escape(match.path)} "
                f"[dim](matched by: {escape(match.selector)})[/dim]"
            )
        else:
            console.print(f"  {escape(match.path)}")
    if len(selection.matches) > limit:
        console.print(f"  ... and {len(selection.matches) - limit} more paths")

    if selection.unmatched:
        label = (
            "Patterns with no matches" if selection.mode == "regex" else "Missing paths"
        )
        console.print(
            f"[yellow]{label}:[/yellow] {escape(', '.join(selection.unmatched))}",
            highlight=False,
        )


def report_containers(result: FilterResult) -> None:
    for stats in result.containers:
        label = CONTAINER_LABELS.get(stats.name, stats.name)
        console.print(f"{label}: {stats.original} → {stats.retained}")


def report_summary(result: FilterResult) -> None:
    """Print a table of input and output sizes."""
    table = Table(title="Summary", show_header=True)
    table.add_column("")
    table.add_column("Input", justify="right")
    table.add_column("Output", justify="right")

    total_paths = result.selection.total_paths if result.selection else 0
    table.add_row("Paths", str(total_paths), str(result.path_count))
    for stats in result.containers:
        label = CONTAINER_LABELS.get(stats.name, stats.name)
        table.add_row(label, str(stats.original), str(stats.retained))
    console.print(table)


def report_result(result: FilterResult) -> None:
    if result.selection is not None:
        report_selection(result.selection)
    report_containers(result)
    report_summary(result)
