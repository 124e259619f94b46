"""Suggest command: ranked improvement suggestions only."""

import json
from pathlib import Path
from typing import Optional

import typer

from ..api import analyze as run_analysis
from ..exceptions import RepoPulseError
from ..logging_config import get_logger
from . import app
from ._common import console, fail, resolve_source, suggestions_table

logger = get_logger(__name__)


@app.command()
def suggest(
    path: Optional[Path] = typer.Argument(
        None,
        help="Git repository to analyze (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    fixture: bool = typer.Option(
        False,
        "--fixture",
        help="Analyze built-in sample history instead of a repository",
    ),
    from_json: Optional[Path] = typer.Option(
        None,
        "--from-json",
        help="Read history from a JSON export",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    deps: Optional[Path] = typer.Option(
        None,
        "--deps",
        help="Dependency audit report (JSON)",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    min_confidence: Optional[float] = typer.Option(
        None,
        "--min-confidence",
        help="Drop suggestions below this confidence (0.0-1.0)",
        min=0.0,
        max=1.0,
    ),
    max_suggestions: Optional[int] = typer.Option(
        None,
        "--max",
        help="Maximum suggestions to generate",
        min=0,
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show implementation steps"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Generate ranked improvement suggestions for a repository.

    [bold cyan]Examples:[/bold cyan]

      repo-pulse suggest --deps audit.json

      repo-pulse suggest --fixture --min-confidence 0.8 --json
    """
    source = resolve_source(path, fixture=fixture, from_json=from_json)

    engine_overrides = {}
    if min_confidence is not None:
        engine_overrides["min_confidence_score"] = min_confidence
    if max_suggestions is not None:
        engine_overrides["max_suggestions"] = max_suggestions

    try:
        result, suggestions = run_analysis(
            source,
            dependency_report=deps,
            config_file=config,
            verbose=verbose,
            quiet=quiet,
            suggestions=engine_overrides or None,
        )
    except RepoPulseError as e:
        logger.error(f"{e.kind}: {e}")
        fail(e, json_output)

    if not result.success:
        if json_output:
            failure = {"success": False, "error": result.error, "suggestions": []}
            print(json.dumps(failure, indent=2))
        else:
            console.print(f"[red]Analysis failed:[/red] {result.error}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps([s.to_dict() for s in suggestions], indent=2))
        return

    console.print()
    if not suggestions:
        console.print("[bold green]No suggestions.[/bold green]")
        console.print()
        return
    console.print(f"[bold cyan]SUGGESTIONS[/bold cyan] - {len(suggestions)} total")
    console.print(suggestions_table(suggestions, verbose=verbose))
    console.print()
