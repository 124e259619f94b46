"""Single-pass aggregation of commit records into per-file and per-author stats."""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional

from ..logging_config import get_logger
from ..numeric import round_half_up
from .models import CommitRecord

logger = get_logger(__name__)

NO_EXTENSION = "no_extension"

# Upper bounds (inclusive) of the commit-size buckets, in changed lines
SMALL_COMMIT_MAX = 10
MEDIUM_COMMIT_MAX = 50
LARGE_COMMIT_MAX = 200


def file_extension(filename: str) -> str:
    """Text after the last '.' of the file's base name."""
    base = filename.rsplit("/", 1)[-1]
    if "." not in base:
        return NO_EXTENSION
    ext = base.rsplit(".", 1)[1]
    return ext or NO_EXTENSION


def weekday_index(dt: datetime) -> int:
    """Day of week with Sunday = 0 ... Saturday = 6."""
    return (dt.weekday() + 1) % 7


@dataclass
class FileStat:
    filename: str
    changes: int = 0
    additions: int = 0
    deletions: int = 0
    last_modified: Optional[datetime] = None
    authors: set[str] = field(default_factory=set)

    @property
    def churn(self) -> int:
        return self.additions + self.deletions


@dataclass
class AuthorStat:
    """Running per-author totals.

    ``avg_commit_size`` and ``productivity_score`` are derived from the
    totals on every read.
    """

    author: str
    email: str = ""
    commits: int = 0
    additions: int = 0
    deletions: int = 0
    files_changed: int = 0
    active_days: int = 0

    @property
    def avg_commit_size(self) -> float:
        if self.commits == 0:
            return 0.0
        return (self.additions + self.deletions) / self.commits

    @property
    def productivity_score(self) -> int:
        commit_score = min(self.commits * 2, 50)
        size_score = min(self.avg_commit_size * 0.5, 30)
        activity_score = min(self.active_days * 1, 20)
        return round_half_up(commit_score + size_score + activity_score)

    def to_dict(self) -> dict:
        return {
            "author": self.author,
            "email": self.email,
            "commits": self.commits,
            "additions": self.additions,
            "deletions": self.deletions,
            "files_changed": self.files_changed,
            "avg_commit_size": self.avg_commit_size,
            "active_days": self.active_days,
            "productivity_score": self.productivity_score,
        }


@dataclass
class CommitSizeDistribution:
    small: int = 0  # <= 10 lines
    medium: int = 0  # 11-50 lines
    large: int = 0  # 51-200 lines
    huge: int = 0  # > 200 lines

    def record(self, changed_lines: int) -> None:
        if changed_lines <= SMALL_COMMIT_MAX:
            self.small += 1
        elif changed_lines <= MEDIUM_COMMIT_MAX:
            self.medium += 1
        elif changed_lines <= LARGE_COMMIT_MAX:
            self.large += 1
        else:
            self.huge += 1


@dataclass
class AggregateResult:
    total_commits: int = 0
    file_stats: dict[str, FileStat] = field(default_factory=dict)
    author_stats: dict[str, AuthorStat] = field(default_factory=dict)
    hour_of_day: list[int] = field(default_factory=lambda: [0] * 24)
    day_of_week: list[int] = field(default_factory=lambda: [0] * 7)
    commit_sizes: CommitSizeDistribution = field(default_factory=CommitSizeDistribution)
    total_additions: int = 0
    total_deletions: int = 0
    active_days: set[date] = field(default_factory=set)
    commits_per_day: dict[date, int] = field(default_factory=dict)
    extension_counts: dict[str, int] = field(default_factory=dict)
    first_commit: Optional[datetime] = None
    last_commit: Optional[datetime] = None

    @property
    def author_commits(self) -> dict[str, int]:
        return {name: stat.commits for name, stat in self.author_stats.items()}

    @property
    def total_lines(self) -> int:
        return self.total_additions + self.total_deletions


class CommitAggregator:
    """Roll a commit sequence up into per-file, per-author and temporal stats.

    The accumulating maps are owned by a single ``aggregate`` call; nothing is
    shared between calls.
    """

    def aggregate(self, commits: Iterable[CommitRecord]) -> AggregateResult:
        result = AggregateResult()
        per_day: Counter[date] = Counter()
        extensions: Counter[str] = Counter()
        files: dict[str, FileStat] = {}
        authors: dict[str, AuthorStat] = {}

        for commit in commits:
            ts = commit.timestamp
            author = commit.author
            day = ts.date()

            result.total_commits += 1
            result.hour_of_day[ts.hour] += 1
            result.day_of_week[weekday_index(ts)] += 1
            result.active_days.add(day)
            per_day[day] += 1

            result.commit_sizes.record(commit.changed_lines)
            result.total_additions += commit.additions
            result.total_deletions += commit.deletions

            if result.first_commit is None or ts < result.first_commit:
                result.first_commit = ts
            if result.last_commit is None or ts > result.last_commit:
                result.last_commit = ts

            for change in commit.files:
                stat = files.get(change.filename)
                if stat is None:
                    stat = files[change.filename] = FileStat(filename=change.filename)
                stat.changes += 1
                stat.additions += change.additions
                stat.deletions += change.deletions
                stat.last_modified = ts
                stat.authors.add(author)
                extensions[file_extension(change.filename)] += 1

            author_stat = authors.get(author)
            if author_stat is None:
                author_stat = authors[author] = AuthorStat(
                    author=author, email=commit.author_email
                )
            author_stat.commits += 1
            author_stat.additions += commit.additions
            author_stat.deletions += commit.deletions
            author_stat.files_changed += len(commit.files)
            author_stat.active_days = len(result.active_days)

        result.file_stats = files
        result.author_stats = authors
        result.commits_per_day = dict(per_day)
        result.extension_counts = dict(extensions)

        logger.debug(
            f"Aggregated {result.total_commits} commits: {len(files)} files, "
            f"{len(authors)} authors, {len(result.active_days)} active days"
        )
        return result
