"""Deterministic offline history for demos and tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from ..history.models import (
    Branch,
    CommitRecord,
    CommitStats,
    FileChange,
    HistorySnapshot,
)


class FixtureSource:
    """``count`` commits, one day apart going back from ``now``.

    Each commit has its own author and touches a single file with a small
    diff (at most 10 changed lines), so the output is reproducible for a
    fixed ``now``.
    """

    name = "fixture"

    def __init__(self, count: int = 10, now: Optional[datetime] = None):
        if count < 0:
            raise ValueError("count must be non-negative")
        if now is None:
            now = datetime.now(timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        self.count = count
        self.now = now

    def fetch(self) -> HistorySnapshot:
        commits = [self._commit(i) for i in range(self.count)]
        return HistorySnapshot(
            commits=commits,
            branches=[Branch(name="main", protected=True), Branch(name="develop")],
            current_branch="main",
        )

    def _commit(self, i: int) -> CommitRecord:
        additions = 3 + i % 4
        deletions = i % 3
        return CommitRecord(
            sha=f"fixture-commit-{i}",
            author_name=f"Author {i}",
            author_email=f"author{i}@example.com",
            timestamp=self.now - timedelta(days=i),
            files=(FileChange(f"src/file{i}.py", additions, deletions),),
            stats=CommitStats(additions, deletions, additions + deletions),
            message=f"Fixture commit {i}",
        )
