"""Extract history from a local git repository via subprocess."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path
from typing import Optional, Union

from ..history.models import (
    Branch,
    CommitRecord,
    CommitStats,
    FileChange,
    HistorySnapshot,
    parse_timestamp,
)
from ..logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_BRANCH = "main"

# Record and field separators; neither can appear in names or subjects
_RECORD_SEP = "\x1e"
_FIELD_SEP = "\x1f"
_LOG_FORMAT = f"--format={_RECORD_SEP}%H{_FIELD_SEP}%an{_FIELD_SEP}%ae{_FIELD_SEP}%aI{_FIELD_SEP}%s"

# "src/{old => new}/a.py" and "{old => new}.py"
_BRACE_RENAME_RE = re.compile(r"\{([^{}]*) => ([^{}]*)\}")


def resolve_rename(path: str) -> str:
    """Return the post-rename path of a numstat entry."""
    if _BRACE_RENAME_RE.search(path):
        path = _BRACE_RENAME_RE.sub(lambda m: m.group(2), path)
        return re.sub(r"/{2,}", "/", path).lstrip("/")
    if " => " in path:
        return path.split(" => ", 1)[1]
    return path


def _numstat_count(value: str) -> int:
    # Binary files report "-"
    return int(value) if value.isdigit() else 0


def parse_git_log(raw: str) -> list[CommitRecord]:
    """Parse ``git log --numstat`` output in this module's format.

    Merge commits and commits without file changes yield records with no
    files and zero stats.
    """
    commits = []
    for record in raw.split(_RECORD_SEP):
        if not record.strip():
            continue
        lines = record.split("\n")
        fields = lines[0].split(_FIELD_SEP)
        if len(fields) < 5:
            logger.debug(f"Skipping malformed log header: {lines[0]!r}")
            continue
        sha, name, email, date, subject = fields[:5]
        try:
            timestamp = parse_timestamp(date)
        except ValueError:
            logger.debug(f"Skipping commit {sha} with unparseable date {date!r}")
            continue

        files = []
        for line in lines[1:]:
            parts = line.split("\t", 2)
            if len(parts) != 3:
                continue
            added, deleted, path = parts
            files.append(
                FileChange(resolve_rename(path), _numstat_count(added), _numstat_count(deleted))
            )

        additions = sum(f.additions for f in files)
        deletions = sum(f.deletions for f in files)
        commits.append(
            CommitRecord(
                sha=sha,
                author_name=name,
                author_email=email,
                timestamp=timestamp,
                files=tuple(files),
                stats=CommitStats(additions, deletions, additions + deletions),
                message=subject,
            )
        )
    return commits


class GitLogSource:
    """History of a local repository, newest commit first.

    Local git has no notion of branch protection, so every branch is
    reported unprotected.
    """

    name = "git"

    def __init__(self, repo_path: Union[str, Path] = ".", max_commits: int = 1000):
        self.repo_path = str(Path(repo_path).resolve())
        self.max_commits = max_commits

    def fetch(self) -> HistorySnapshot:
        if not self._is_git_repo():
            logger.warning(f"Not a git repository: {self.repo_path}")
            return HistorySnapshot(current_branch=DEFAULT_BRANCH)

        cmd = ["log", _LOG_FORMAT, "--numstat", "--no-color"]
        if self.max_commits > 0:
            cmd.append(f"-n{self.max_commits}")
        raw = self._run_git(cmd)
        if raw is None:
            return HistorySnapshot(current_branch=DEFAULT_BRANCH)

        commits = parse_git_log(raw)
        snapshot = HistorySnapshot(
            commits=commits,
            branches=self._branches(),
            current_branch=self._current_branch(),
        )
        logger.info(f"Read {len(commits)} commits from {self.repo_path}")
        return snapshot

    def _is_git_repo(self) -> bool:
        return self._run_git(["rev-parse", "--git-dir"], quiet=True) is not None

    def _branches(self) -> list[Branch]:
        raw = self._run_git(["for-each-ref", "--format=%(refname:short)", "refs/heads"])
        if raw is None:
            return []
        return [Branch(name=line.strip()) for line in raw.splitlines() if line.strip()]

    def _current_branch(self) -> str:
        raw = self._run_git(["rev-parse", "--abbrev-ref", "HEAD"], quiet=True)
        name = raw.strip() if raw else ""
        if not name or name == "HEAD":
            return DEFAULT_BRANCH
        return name

    def _run_git(self, args: list[str], quiet: bool = False) -> Optional[str]:
        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, *args],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=60,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired) as e:
            logger.warning(f"git {args[0]} error: {e}")
            return None
        if result.returncode != 0:
            if not quiet:
                logger.warning(f"git {args[0]} failed: {result.stderr.strip()}")
            return None
        return result.stdout
