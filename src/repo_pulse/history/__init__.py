"""Commit history input models and aggregation."""

from .aggregator import (
    AggregateResult,
    AuthorStat,
    CommitAggregator,
    CommitSizeDistribution,
    FileStat,
    file_extension,
)
from .models import Branch, CommitRecord, CommitStats, FileChange, HistorySnapshot

__all__ = [
    "AggregateResult",
    "AuthorStat",
    "Branch",
    "CommitAggregator",
    "CommitRecord",
    "CommitSizeDistribution",
    "CommitStats",
    "FileChange",
    "FileStat",
    "HistorySnapshot",
    "file_extension",
]
