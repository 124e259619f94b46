"""Shared CLI helpers."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..exceptions import RepoPulseError
from ..sources import FixtureSource, GitLogSource, JsonFileSource
from ..suggestions import Suggestion, SuggestionPriority

console = Console()

PRIORITY_COLORS = {
    SuggestionPriority.CRITICAL: "bold red",
    SuggestionPriority.HIGH: "red",
    SuggestionPriority.MEDIUM: "yellow",
    SuggestionPriority.LOW: "dim",
}


def resolve_source(
    path: Optional[Path],
    fixture: bool = False,
    from_json: Optional[Path] = None,
):
    """Pick the history source from CLI options.

    Returns a DataSource, or a path for the API to open as a git checkout.
    """
    if fixture and from_json is not None:
        raise typer.BadParameter("--fixture and --from-json are mutually exclusive")
    if fixture:
        return FixtureSource()
    if from_json is not None:
        return JsonFileSource(from_json)
    return path if path is not None else Path.cwd()


def source_label(source) -> str:
    if isinstance(source, FixtureSource):
        return "fixture data"
    if isinstance(source, JsonFileSource):
        return str(source.path)
    if isinstance(source, GitLogSource):
        return source.repo_path
    if isinstance(source, (str, Path)):
        return str(Path(source).resolve())
    return getattr(source, "name", type(source).__name__)


def suggestions_table(suggestions: list[Suggestion], verbose: bool = False) -> Table:
    table = Table(show_header=True, show_lines=verbose, pad_edge=True)
    table.add_column("Priority")
    table.add_column("Category")
    table.add_column("Suggestion", min_width=30)
    table.add_column("Confidence", justify="right")
    table.add_column("Effort")

    for s in suggestions:
        color = PRIORITY_COLORS.get(s.priority, "white")
        text = f"[bold]{s.title}[/bold]"
        if verbose:
            text += f"\n[dim]{s.description}[/dim]"
            text += "".join(f"\n  • {step}" for step in s.implementation)
        table.add_row(
            f"[{color}]{s.priority.value}[/{color}]",
            s.category.value,
            text,
            f"{s.confidence:.2f}",
            s.effort.value,
        )
    return table


def fail(error: Exception, json_output: bool = False) -> None:
    """Print a user-facing error and exit 1."""
    if json_output and isinstance(error, RepoPulseError):
        print(json.dumps(error.to_dict(), indent=2))
    elif isinstance(error, RepoPulseError):
        console.print(f"[red]Error:[/red] {error}")
    else:
        console.print(f"[red]Unexpected error:[/red] {error}")
    raise typer.Exit(1)
