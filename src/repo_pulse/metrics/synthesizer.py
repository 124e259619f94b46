"""Turn aggregator output into named, bounded metrics.

Every derived value here is a pure function of one FileStat (or the
aggregate totals) plus two run-global constants: the total commit count and
the reference time ``now``. ``now`` is passed in rather than read from the
clock so re-running a synthesis reproduces the same numbers.
"""

from __future__ import annotations

import math
from dataclasses import replace
from datetime import datetime, timezone
from typing import Optional

from ..history.aggregator import AggregateResult, FileStat
from ..logging_config import get_logger
from ..numeric import round_half_up, safe_div
from .models import (
    ChurnEntry,
    CommitHistory,
    CommitPatterns,
    DevelopmentVelocity,
    HotFile,
    Impact,
    Intensity,
    Risk,
    TimeRange,
)

logger = get_logger(__name__)

DAYS_PER_WEEK = 7
SECONDS_PER_DAY = 86400

# Risk score = changes*0.3 + recency*0.1 + complexity*0.6
RISK_CHANGES_WEIGHT = 0.3
RISK_RECENCY_WEIGHT = 0.1
RISK_COMPLEXITY_WEIGHT = 0.6
RISK_RECENCY_HORIZON_DAYS = 365
RISK_HIGH_THRESHOLD = 70
RISK_MEDIUM_THRESHOLD = 40

MAX_COMPLEXITY = 100


def classify_impact(changes: int, change_frequency: float) -> Impact:
    """Both the raw count and the weekly frequency must clear a tier."""
    if changes > 50 and change_frequency > 5:
        return Impact.CRITICAL
    if changes > 25 and change_frequency > 3:
        return Impact.HIGH
    if changes > 10 and change_frequency > 1:
        return Impact.MEDIUM
    return Impact.LOW


def change_frequency(changes: int, total_commits: int) -> float:
    """Changes per notional week: changes / (total_commits / 7)."""
    if total_commits <= 0:
        return 0.0
    return changes / (total_commits / DAYS_PER_WEEK)


def estimate_complexity(changes: int, additions: int, deletions: int) -> int:
    """Churn-shape heuristic, bounded to [0, 100].

    Files that delete a lot relative to what they add are rewritten rather
    than grown; the deletion ratio inflates the change count.
    """
    churn_ratio = deletions / additions if additions > 0 else 0.0
    return min(round_half_up(changes * (1 + churn_ratio)), MAX_COMPLEXITY)


def risk_score(changes: int, age: int, complexity: int) -> float:
    return (
        changes * RISK_CHANGES_WEIGHT
        + max(0, RISK_RECENCY_HORIZON_DAYS - age) * RISK_RECENCY_WEIGHT
        + complexity * RISK_COMPLEXITY_WEIGHT
    )


def classify_risk(changes: int, age: int, complexity: int) -> Risk:
    score = risk_score(changes, age, complexity)
    if score > RISK_HIGH_THRESHOLD:
        return Risk.HIGH
    if score > RISK_MEDIUM_THRESHOLD:
        return Risk.MEDIUM
    return Risk.LOW


def classify_intensity(avg_commits_per_day: float, avg_commits_per_contributor: float) -> Intensity:
    if avg_commits_per_day > 20 or avg_commits_per_contributor > 10:
        return Intensity.VERY_HIGH
    if avg_commits_per_day > 10 or avg_commits_per_contributor > 5:
        return Intensity.HIGH
    if avg_commits_per_day > 5 or avg_commits_per_contributor > 2:
        return Intensity.MEDIUM
    return Intensity.LOW


def days_since(then: Optional[datetime], now: datetime) -> int:
    """Whole days between ``then`` and ``now``, rounded down."""
    if then is None:
        return 0
    return math.floor((now - then).total_seconds() / SECONDS_PER_DAY)


class MetricSynthesizer:
    """Derive hot files, churn, velocity and patterns from one aggregate."""

    def __init__(
        self,
        now: Optional[datetime] = None,
        hot_file_limit: int = 20,
        peak_day_limit: int = 5,
    ):
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        self.now = now
        self.hot_file_limit = hot_file_limit
        self.peak_day_limit = peak_day_limit

    def synthesize(self, aggregate: AggregateResult) -> CommitHistory:
        history = CommitHistory(
            total_commits=aggregate.total_commits,
            time_range=self.time_range(aggregate),
            authors=self.authors(aggregate),
            hot_files=self.hot_files(aggregate),
            code_churn=self.code_churn(aggregate),
            development_velocity=self.development_velocity(aggregate),
            commit_patterns=self.commit_patterns(aggregate),
        )
        logger.debug(
            f"Synthesized metrics: {len(history.hot_files)} hot files, "
            f"{len(history.code_churn)} churn entries, "
            f"intensity={history.development_velocity.development_intensity.value}"
        )
        return history

    # -- per-file views -------------------------------------------------

    def hot_file(self, stat: FileStat, total_commits: int) -> HotFile:
        frequency = change_frequency(stat.changes, total_commits)
        return HotFile(
            filename=stat.filename,
            changes=stat.changes,
            additions=stat.additions,
            deletions=stat.deletions,
            last_modified=stat.last_modified,
            authors=tuple(sorted(stat.authors)),
            change_frequency=frequency,
            impact=classify_impact(stat.changes, frequency),
        )

    def churn_entry(self, stat: FileStat) -> ChurnEntry:
        age = days_since(stat.last_modified, self.now)
        complexity = estimate_complexity(stat.changes, stat.additions, stat.deletions)
        return ChurnEntry(
            file=stat.filename,
            churn=stat.churn,
            age=age,
            complexity=complexity,
            risk=classify_risk(stat.changes, age, complexity),
        )

    def hot_files(self, aggregate: AggregateResult) -> tuple[HotFile, ...]:
        stats = sorted(aggregate.file_stats.values(), key=lambda s: (-s.changes, s.filename))
        return tuple(
            self.hot_file(stat, aggregate.total_commits)
            for stat in stats[: self.hot_file_limit]
        )

    def code_churn(self, aggregate: AggregateResult) -> tuple[ChurnEntry, ...]:
        entries = [self.churn_entry(stat) for stat in aggregate.file_stats.values()]
        entries.sort(key=lambda e: (-e.churn, e.file))
        return tuple(entries)

    # -- repository-wide views ------------------------------------------

    def development_velocity(self, aggregate: AggregateResult) -> DevelopmentVelocity:
        total = aggregate.total_commits
        active_days = len(aggregate.active_days)
        contributors = len(aggregate.author_stats)

        avg_commits_per_day = safe_div(total, active_days)
        avg_commits_per_contributor = safe_div(total, contributors)

        return DevelopmentVelocity(
            total_commits=total,
            active_contributors=contributors,
            avg_commits_per_day=avg_commits_per_day,
            avg_lines_per_day=safe_div(aggregate.total_lines, active_days),
            peak_development_days=self.peak_days(aggregate),
            development_intensity=classify_intensity(
                avg_commits_per_day, avg_commits_per_contributor
            ),
        )

    def peak_days(self, aggregate: AggregateResult) -> tuple[str, ...]:
        """Busiest calendar dates, ties broken by date ascending."""
        ranked = sorted(
            ((day.isoformat(), count) for day, count in aggregate.commits_per_day.items()),
            key=lambda item: (-item[1], item[0]),
        )
        return tuple(day for day, _ in ranked[: self.peak_day_limit])

    def commit_patterns(self, aggregate: AggregateResult) -> CommitPatterns:
        return CommitPatterns(
            hour_of_day=tuple(aggregate.hour_of_day),
            day_of_week=tuple(aggregate.day_of_week),
            commit_size_distribution=replace(aggregate.commit_sizes),
            author_collaboration=dict(aggregate.author_commits),
            file_type_distribution=dict(aggregate.extension_counts),
        )

    def time_range(self, aggregate: AggregateResult) -> TimeRange:
        return TimeRange(
            first_commit=aggregate.first_commit,
            last_commit=aggregate.last_commit,
            days_active=len(aggregate.active_days),
        )

    def authors(self, aggregate: AggregateResult):
        ranked = sorted(aggregate.author_stats.values(), key=lambda a: (-a.commits, a.author))
        return tuple(replace(stat) for stat in ranked)
