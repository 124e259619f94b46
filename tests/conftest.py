"""Shared fixtures for repo-pulse tests."""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

from repo_pulse.analyzer import GitAnalyzer
from repo_pulse.config import AnalysisConfig
from repo_pulse.history.models import (
    Branch,
    CommitRecord,
    CommitStats,
    FileChange,
    HistorySnapshot,
)

# Saturday 2024-06-01 12:00 UTC
NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)

_DERIVE = object()


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Keep user/project config files and REPO_PULSE_* env vars out of tests."""
    home = tmp_path_factory.mktemp("home")
    workdir = tmp_path_factory.mktemp("work")
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.chdir(workdir)
    for key in list(os.environ):
        if key.startswith("REPO_PULSE_"):
            monkeypatch.delenv(key)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_commit():
    """Factory for CommitRecord.

    ``files`` is a sequence of (filename, additions, deletions). Stats are
    summed from the files unless given explicitly (``stats=None`` for a
    commit without stats).
    """
    counter = {"n": 0}

    def _make(
        author="alice",
        timestamp=NOW,
        files=(("src/app.py", 1, 0),),
        stats=_DERIVE,
        email=None,
        sha=None,
    ):
        counter["n"] += 1
        changes = tuple(FileChange(name, add, dele) for name, add, dele in files)
        if stats is _DERIVE:
            additions = sum(c.additions for c in changes)
            deletions = sum(c.deletions for c in changes)
            stats = CommitStats(additions, deletions, additions + deletions)
        return CommitRecord(
            sha=sha or f"sha{counter['n']}",
            author_name=author,
            author_email=email if email is not None else f"{author.strip().lower()}@example.com",
            timestamp=timestamp,
            files=changes,
            stats=stats,
            message=f"commit {counter['n']}",
        )

    return _make


@pytest.fixture
def build_analysis():
    """Run the analysis pipeline over commits and branches at ``NOW``."""

    def _build(commits, branches=(), current_branch="main", config=None):
        snapshot = HistorySnapshot(
            commits=list(commits),
            branches=[b if isinstance(b, Branch) else Branch(*b) for b in branches],
            current_branch=current_branch,
        )
        analyzer = GitAnalyzer(config or AnalysisConfig(), now=NOW)
        return analyzer.analyze_snapshot(snapshot)

    return _build
