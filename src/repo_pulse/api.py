"""Public API for repo-pulse.

Example:
    >>> from repo_pulse import analyze
    >>> from repo_pulse.sources import FixtureSource
    >>>
    >>> result, suggestions = analyze(FixtureSource())
    >>> result.success
    True
    >>>
    >>> # A local checkout, with an audit report and a tighter window
    >>> result, suggestions = analyze(
    ...     "/path/to/repo",
    ...     dependency_report="audit.json",
    ...     max_commits=200,
    ... )
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .analyzer import GitAnalyzer
from .config import load_config
from .dependencies import DependencyReport, load_dependency_report
from .logging_config import get_logger, setup_logging
from .models import AnalysisResult
from .sources import DataSource, GitLogSource
from .suggestions import Suggestion, SuggestionContext, SuggestionEngine

logger = get_logger(__name__)


def analyze(
    source: Union[DataSource, str, Path] = ".",
    dependency_report: Union[DependencyReport, str, Path, None] = None,
    context: Optional[SuggestionContext] = None,
    config_file: Optional[Path] = None,
    now: Optional[datetime] = None,
    **overrides,
) -> tuple[AnalysisResult, list[Suggestion]]:
    """Analyze a repository history and suggest improvements.

    Pipeline:
    1. Load configuration (auto-discover TOML, env vars, apply overrides)
       and set up logging at the configured verbosity
    2. Fetch history from the source (a path means a local git checkout)
    3. Run the analyzer
    4. On success, generate and filter suggestions

    Args:
        source: A DataSource, or a path to a local git repository
        dependency_report: Audit report, or a path to its JSON file
        context: Optional caller descriptors passed to the suggestion engine
        config_file: Optional explicit config file path
        now: Reference time for file ages (default: wall clock)
        **overrides: Configuration overrides (e.g., verbose=True, max_commits=200)

    Returns:
        Tuple of (AnalysisResult, suggestions). Suggestions are empty when
        the analysis failed.

    Raises:
        RepoPulseError: If configuration is invalid
        DependencyReportError: If the dependency report file can't be read
    """
    config = load_config(config_file=config_file, **overrides)
    setup_logging(config.verbosity, log_file=config.log_file)
    logger.debug(f"Configuration loaded: {config.verbosity} mode")

    if isinstance(source, (str, Path)):
        source = GitLogSource(source, max_commits=config.max_commits)

    if isinstance(dependency_report, (str, Path)):
        dependency_report = load_dependency_report(dependency_report)

    result = GitAnalyzer(config, now=now).analyze_repository(source)
    if not result.success or result.data is None:
        return result, []

    engine = SuggestionEngine(config.suggestions)
    suggestions = engine.filter_suggestions(
        engine.generate_suggestions(result.data, dependency_report, context)
    )
    logger.info(f"Analysis complete: {len(suggestions)} suggestions")
    return result, suggestions
