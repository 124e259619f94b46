"""Analyze command: health profile, hot files, recommendations, suggestions."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from ..api import analyze as run_analysis
from ..exceptions import RepoPulseError
from ..logging_config import get_logger
from ..models import AnalysisResult
from ..serialization import dumps
from ..suggestions import Suggestion
from . import app
from ._common import console, fail, resolve_source, source_label, suggestions_table

logger = get_logger(__name__)

_HEALTH_COLORS = {
    "excellent": "green",
    "good": "cyan",
    "fair": "yellow",
    "poor": "red",
}

_IMPACT_COLORS = {
    "critical": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "dim",
}


def _score_color(score: int) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "cyan"
    if score >= 40:
        return "yellow"
    return "red"


@app.command()
def analyze(
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
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    top: int = typer.Option(
        10,
        "--top",
        "-n",
        help="Hot files and suggestions to display",
        min=1,
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
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """
    Analyze commit history and score repository health.

    [bold cyan]Examples:[/bold cyan]

      repo-pulse analyze

      repo-pulse analyze /path/to/repo --deps audit.json

      repo-pulse analyze --fixture --json
    """
    source = resolve_source(path, fixture=fixture, from_json=from_json)

    try:
        result, suggestions = run_analysis(
            source,
            dependency_report=deps,
            config_file=config,
            verbose=verbose,
            quiet=quiet,
        )
    except RepoPulseError as e:
        logger.error(f"{e.kind}: {e}")
        fail(e, json_output)

    if json_output:
        print(
            dumps(
                {
                    "result": result,
                    "suggestions": [s.to_dict() for s in suggestions],
                }
            )
        )
    else:
        _output_rich(result, suggestions, source_label(source), top, verbose)

    if not result.success:
        raise typer.Exit(1)


def _output_rich(
    result: AnalysisResult,
    suggestions: list[Suggestion],
    label: str,
    top: int,
    verbose: bool,
) -> None:
    console.print()
    if not result.success or result.data is None:
        console.print(f"[red]Analysis failed:[/red] {result.error}")
        return

    analysis = result.data
    history = analysis.commit_history
    health = analysis.repository_health
    velocity = history.development_velocity

    console.print(
        f"[bold cyan]REPO PULSE[/bold cyan] - [bold]{history.total_commits}[/bold] commits, "
        f"[bold]{len(history.authors)}[/bold] authors, "
        f"[bold]{history.time_range.days_active}[/bold] active days ({label})"
    )
    console.print(
        f"  [dim]{velocity.avg_commits_per_day:.1f} commits/day, "
        f"intensity {velocity.development_intensity.value}, "
        f"analyzed in {result.metadata.analysis_time_ms:.0f}ms[/dim]"
    )
    console.print()

    table = Table(show_header=True, pad_edge=True, title="Repository health")
    table.add_column("Signal", min_width=24)
    table.add_column("Score", justify="right")
    for name, score in (
        ("Commit frequency", health.commit_frequency_score),
        ("Contributor diversity", health.contributor_diversity_score),
        ("Code churn", health.code_churn_score),
        ("Branch management", health.branch_management_score),
    ):
        color = _score_color(score)
        table.add_row(name, f"[{color}]{score}[/{color}]")
    console.print(table)

    overall = health.overall_health.value
    color = _HEALTH_COLORS.get(overall, "white")
    console.print(f"  Overall: [{color}]{overall.upper()}[/{color}]")
    console.print()

    if history.hot_files:
        hot = Table(show_header=True, pad_edge=True, title="Hot files")
        hot.add_column("File", min_width=30)
        hot.add_column("Changes", justify="right")
        hot.add_column("Churn", justify="right")
        hot.add_column("Authors", justify="right")
        hot.add_column("Impact")
        for f in history.hot_files[:top]:
            impact_color = _IMPACT_COLORS.get(f.impact.value, "white")
            hot.add_row(
                f.filename,
                str(f.changes),
                str(f.additions + f.deletions),
                str(len(f.authors)),
                f"[{impact_color}]{f.impact.value}[/{impact_color}]",
            )
        console.print(hot)
        console.print()

    if analysis.recommendations:
        console.print("[bold]Recommendations[/bold]")
        for rec in analysis.recommendations:
            console.print(f"  [dim]•[/dim] {rec}")
        console.print()

    if suggestions:
        console.print(f"[bold]Suggestions[/bold] - {len(suggestions)} total")
        console.print(suggestions_table(suggestions[:top], verbose=verbose))
        console.print()
    else:
        console.print("[bold green]No suggestions.[/bold green]")
        console.print()
