"""CLI entry point: registers all subcommands."""

import typer

from ._common import console  # noqa: F401

app = typer.Typer(
    name="repo-pulse",
    help="repo-pulse - Repository history analytics and improvement suggestions",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .suggest import suggest as _suggest  # noqa: F401, E402
