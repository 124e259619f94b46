"""Derived metric models produced by the synthesizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from ..history.aggregator import AuthorStat, CommitSizeDistribution


class Impact(Enum):
    """How much attention a frequently changed file needs."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Risk(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Intensity(Enum):
    """Commit cadence per active day and per contributor."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"


@dataclass(frozen=True)
class HotFile:
    filename: str
    changes: int
    additions: int
    deletions: int
    last_modified: Optional[datetime]
    authors: tuple[str, ...]
    change_frequency: float  # changes per notional week
    impact: Impact


@dataclass(frozen=True)
class ChurnEntry:
    file: str
    churn: int  # lines added + deleted
    age: int  # whole days since last modification
    complexity: int  # 0-100 heuristic
    risk: Risk


@dataclass(frozen=True)
class DevelopmentVelocity:
    total_commits: int
    active_contributors: int
    avg_commits_per_day: float
    avg_lines_per_day: float
    peak_development_days: tuple[str, ...]  # ISO dates, busiest first
    development_intensity: Intensity


@dataclass(frozen=True)
class CommitPatterns:
    hour_of_day: tuple[int, ...]  # 24 buckets
    day_of_week: tuple[int, ...]  # 7 buckets, Sunday first
    commit_size_distribution: CommitSizeDistribution
    author_collaboration: dict[str, int]
    file_type_distribution: dict[str, int]


@dataclass(frozen=True)
class TimeRange:
    first_commit: Optional[datetime]
    last_commit: Optional[datetime]
    days_active: int


@dataclass(frozen=True)
class CommitHistory:
    total_commits: int
    time_range: TimeRange
    authors: tuple[AuthorStat, ...]  # busiest first
    hot_files: tuple[HotFile, ...]
    code_churn: tuple[ChurnEntry, ...]
    development_velocity: DevelopmentVelocity
    commit_patterns: CommitPatterns = field(repr=False)
