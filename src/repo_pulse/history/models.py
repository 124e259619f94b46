"""Data models for commit history input."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

UNKNOWN_AUTHOR = "Unknown"


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 string (or datetime) into an aware datetime.

    Naive values are taken to be UTC. A trailing ``Z`` is accepted.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    else:
        raise ValueError(f"expected ISO-8601 timestamp, got {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    return int(value)


@dataclass(frozen=True)
class FileChange:
    filename: str
    additions: int = 0
    deletions: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileChange:
        return cls(
            filename=str(data["filename"]),
            additions=_as_int(data.get("additions")),
            deletions=_as_int(data.get("deletions")),
        )


@dataclass(frozen=True)
class CommitStats:
    additions: int = 0
    deletions: int = 0
    total: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CommitStats:
        additions = _as_int(data.get("additions"))
        deletions = _as_int(data.get("deletions"))
        total = data.get("total")
        return cls(
            additions=additions,
            deletions=deletions,
            total=_as_int(total) if total is not None else additions + deletions,
        )


@dataclass(frozen=True)
class CommitRecord:
    """One commit as delivered by a history source. Never mutated."""

    sha: str
    author_name: str
    author_email: str
    timestamp: datetime  # timezone-aware
    files: tuple[FileChange, ...] = ()
    stats: Optional[CommitStats] = None
    message: str = ""

    @property
    def author(self) -> str:
        """Normalized author identity used as the aggregation key."""
        name = self.author_name.strip()
        return name or UNKNOWN_AUTHOR

    @property
    def additions(self) -> int:
        return self.stats.additions if self.stats else 0

    @property
    def deletions(self) -> int:
        return self.stats.deletions if self.stats else 0

    @property
    def changed_lines(self) -> int:
        return self.additions + self.deletions

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CommitRecord:
        """Build a record from the history-source JSON contract.

        Expected shape::

            {"sha": ..., "author": {"name": ..., "email": ...},
             "timestamp": "2024-01-01T10:00:00Z", "message": ...,
             "files": [{"filename": ..., "additions": ..., "deletions": ...}],
             "stats": {"additions": ..., "deletions": ..., "total": ...}}
        """
        author = data.get("author") or {}
        stats = data.get("stats")
        return cls(
            sha=str(data.get("sha", "")),
            author_name=str(author.get("name") or ""),
            author_email=str(author.get("email") or ""),
            timestamp=parse_timestamp(data.get("timestamp") or author.get("date")),
            files=tuple(FileChange.from_dict(f) for f in data.get("files") or []),
            stats=CommitStats.from_dict(stats) if stats else None,
            message=str(data.get("message", "")),
        )


@dataclass(frozen=True)
class Branch:
    name: str
    protected: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Branch:
        return cls(name=str(data["name"]), protected=bool(data.get("protected", False)))


@dataclass
class HistorySnapshot:
    """Complete, already-fetched history handed to the analyzer."""

    commits: list[CommitRecord] = field(default_factory=list)
    branches: list[Branch] = field(default_factory=list)
    current_branch: str = "main"

    @property
    def total_commits(self) -> int:
        return len(self.commits)

    @classmethod
    def from_dict(cls, data: Any) -> HistorySnapshot:
        """Parse an export document; a bare list is read as the commit list."""
        if isinstance(data, list):
            return cls(commits=[CommitRecord.from_dict(c) for c in data])
        return cls(
            commits=[CommitRecord.from_dict(c) for c in data.get("commits") or []],
            branches=[Branch.from_dict(b) for b in data.get("branches") or []],
            current_branch=str(data.get("current_branch") or "main"),
        )
