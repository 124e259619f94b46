"""GitAnalyzer: history snapshot in, repository analysis out.

Pipeline: fetch -> window -> aggregate -> synthesize -> score -> recommend.
``analyze_repository`` is the failure boundary: anything raised inside is
logged and turned into an ``AnalysisResult`` with ``success=False``.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Optional, Sequence

from .config import AnalysisConfig
from .health import HealthScorer, RepositoryHealth, generate_recommendations
from .history import CommitAggregator, CommitRecord
from .history.models import HistorySnapshot
from .logging_config import get_logger
from .metrics import CommitHistory, MetricSynthesizer
from .models import (
    AnalysisMetadata,
    AnalysisResult,
    BranchAnalysis,
    RepositoryAnalysis,
)
from .sources import DataSource

logger = get_logger(__name__)


def select_commits(
    commits: Sequence[CommitRecord],
    max_commits: int = 0,
    since: Optional[datetime] = None,
    until: Optional[datetime] = None,
) -> list[CommitRecord]:
    """Apply the time window, then keep the newest ``max_commits`` (0 = all).

    Surviving commits keep their input order.
    """
    selected = [
        c
        for c in commits
        if (since is None or c.timestamp >= since) and (until is None or c.timestamp <= until)
    ]
    if max_commits and len(selected) > max_commits:
        newest = sorted(
            range(len(selected)), key=lambda i: selected[i].timestamp, reverse=True
        )[:max_commits]
        selected = [selected[i] for i in sorted(newest)]
    return selected


class GitAnalyzer:
    """Run the analysis pipeline over one history snapshot.

    ``now`` fixes the reference time for file ages and the metadata stamp;
    it defaults to the wall clock at construction.
    """

    def __init__(self, config: Optional[AnalysisConfig] = None, now: Optional[datetime] = None):
        self.config = config or AnalysisConfig()
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        self.now = now
        self._aggregator = CommitAggregator()
        self._synthesizer = MetricSynthesizer(
            now=now,
            hot_file_limit=self.config.hot_file_limit,
            peak_day_limit=self.config.peak_day_limit,
        )
        self._scorer = HealthScorer()

    def analyze_commits(self, commits: Sequence[CommitRecord]) -> CommitHistory:
        return self._synthesizer.synthesize(self._aggregator.aggregate(commits))

    def calculate_repository_health(
        self, history: CommitHistory, branch_analysis: BranchAnalysis
    ) -> RepositoryHealth:
        return self._scorer.score(history, branch_analysis.branches)

    def generate_recommendations(
        self, history: CommitHistory, health: RepositoryHealth
    ) -> list[str]:
        return generate_recommendations(history, health)

    def analyze_snapshot(self, snapshot: HistorySnapshot) -> RepositoryAnalysis:
        """Run the pipeline on an already-fetched snapshot. May raise."""
        commits = select_commits(
            snapshot.commits,
            max_commits=self.config.max_commits,
            since=self.config.since_datetime,
            until=self.config.until_datetime,
        )
        branches = tuple(snapshot.branches) if self.config.include_branches else ()
        branch_analysis = BranchAnalysis(current_branch=snapshot.current_branch, branches=branches)

        history = self.analyze_commits(commits)
        health = self.calculate_repository_health(history, branch_analysis)
        recommendations = self.generate_recommendations(history, health)

        return RepositoryAnalysis(
            commit_history=history,
            branch_analysis=branch_analysis,
            repository_health=health,
            recommendations=tuple(recommendations),
        )

    def analyze_repository(self, source: DataSource) -> AnalysisResult:
        """Fetch from ``source`` and analyze. Never raises."""
        start = time.perf_counter()
        source_name = getattr(source, "name", type(source).__name__)
        logger.info(f"Starting analysis from {source_name} source")

        try:
            snapshot = source.fetch()
            analysis = self.analyze_snapshot(snapshot)
        except Exception as e:
            logger.error(f"Analysis failed: {e}")
            return AnalysisResult(
                success=False,
                error=str(e),
                metadata=self._metadata(0, start),
            )

        result = AnalysisResult(
            success=True,
            data=analysis,
            metadata=self._metadata(analysis.commit_history.total_commits, start),
        )
        logger.info(
            f"Analysis completed in {result.metadata.analysis_time_ms:.1f}ms "
            f"({result.metadata.analyzed_commits} commits)"
        )
        return result

    def _metadata(self, analyzed_commits: int, start: float) -> AnalysisMetadata:
        return AnalysisMetadata(
            analyzed_commits=analyzed_commits,
            analysis_time_ms=(time.perf_counter() - start) * 1000,
            last_updated=datetime.now(timezone.utc).isoformat(),
        )
