"""Tests for the single-pass commit aggregator."""

from datetime import datetime, timedelta, timezone

import pytest

from repo_pulse.history.aggregator import (
    NO_EXTENSION,
    AuthorStat,
    CommitAggregator,
    file_extension,
    weekday_index,
)


class TestFileExtension:
    @pytest.mark.parametrize(
        "filename,expected",
        [
            ("src/app.py", "py"),
            ("web/app.test.js", "js"),
            ("Makefile", NO_EXTENSION),
            ("pkg.d/README", NO_EXTENSION),
            ("notes.", NO_EXTENSION),
        ],
    )
    def test_extension(self, filename, expected):
        """Extension is taken from the base name only."""
        assert file_extension(filename) == expected


class TestWeekdayIndex:
    def test_sunday_is_zero(self):
        """Sunday maps to 0 and Saturday to 6."""
        assert weekday_index(datetime(2024, 6, 2)) == 0
        assert weekday_index(datetime(2024, 6, 1)) == 6
        assert weekday_index(datetime(2024, 6, 3)) == 1


class TestCommitAggregator:
    def test_empty_history(self):
        """No commits produce zeroed buckets and no time range."""
        result = CommitAggregator().aggregate([])
        assert result.total_commits == 0
        assert result.hour_of_day == [0] * 24
        assert result.day_of_week == [0] * 7
        assert result.first_commit is None
        assert result.file_stats == {}

    def test_temporal_buckets(self, make_commit):
        """Hour and weekday come from the commit's own timestamp."""
        sunday_afternoon = datetime(2024, 6, 2, 14, 30, tzinfo=timezone.utc)
        result = CommitAggregator().aggregate([make_commit(timestamp=sunday_afternoon)])
        assert result.hour_of_day[14] == 1
        assert result.day_of_week[0] == 1
        assert sum(result.hour_of_day) == 1

    def test_hour_uses_local_offset(self, make_commit):
        """A +05:00 commit at 23:00 lands in hour 23, not 18."""
        tz = timezone(timedelta(hours=5))
        result = CommitAggregator().aggregate(
            [make_commit(timestamp=datetime(2024, 6, 1, 23, 0, tzinfo=tz))]
        )
        assert result.hour_of_day[23] == 1

    def test_file_stats(self, make_commit, now):
        """Per-file counts, line totals and author sets accumulate."""
        t1 = now - timedelta(days=2)
        t2 = now - timedelta(days=1)
        commits = [
            make_commit(author="alice", timestamp=t1, files=[("a.py", 10, 2), ("b.md", 1, 0)]),
            make_commit(author="bob", timestamp=t2, files=[("a.py", 5, 5)]),
        ]
        result = CommitAggregator().aggregate(commits)

        stat = result.file_stats["a.py"]
        assert stat.changes == 2
        assert stat.additions == 15
        assert stat.deletions == 7
        assert stat.churn == 22
        assert stat.authors == {"alice", "bob"}
        assert stat.last_modified == t2
        assert result.extension_counts == {"py": 2, "md": 1}

    def test_last_modified_follows_processing_order(self, make_commit, now):
        """The last commit processed sets last_modified, even if older."""
        newer = now - timedelta(days=1)
        older = now - timedelta(days=5)
        commits = [
            make_commit(timestamp=newer, files=[("a.py", 1, 0)]),
            make_commit(timestamp=older, files=[("a.py", 1, 0)]),
        ]
        result = CommitAggregator().aggregate(commits)
        assert result.file_stats["a.py"].last_modified == older
        assert result.first_commit == older
        assert result.last_commit == newer

    def test_every_touched_file_has_an_author(self, make_commit):
        """Author sets are never empty once a file is touched."""
        commits = [make_commit(author="", files=[("x.py", 1, 1)])]
        result = CommitAggregator().aggregate(commits)
        assert result.file_stats["x.py"].authors == {"Unknown"}

    def test_commit_size_buckets(self, make_commit):
        """Bucket boundaries: <=10 small, <=50 medium, <=200 large, else huge."""
        sizes = [10, 11, 50, 51, 200, 201]
        commits = [make_commit(files=[("f.py", n, 0)]) for n in sizes]
        dist = CommitAggregator().aggregate(commits).commit_sizes
        assert (dist.small, dist.medium, dist.large, dist.huge) == (1, 2, 2, 1)

    def test_missing_stats_is_small_commit(self, make_commit):
        """Commits without stats count as zero changed lines."""
        result = CommitAggregator().aggregate([make_commit(stats=None)])
        assert result.commit_sizes.small == 1
        assert result.total_additions == 0
        assert result.total_lines == 0

    def test_author_totals(self, make_commit):
        """Author stats sum commit-level stats and touched files."""
        commits = [
            make_commit(author="alice", files=[("a.py", 4, 1), ("b.py", 2, 0)]),
            make_commit(author="alice", files=[("a.py", 3, 3)]),
            make_commit(author="bob", files=[("c.py", 1, 0)]),
        ]
        result = CommitAggregator().aggregate(commits)
        alice = result.author_stats["alice"]
        assert alice.commits == 2
        assert alice.additions == 9
        assert alice.deletions == 4
        assert alice.files_changed == 3
        assert alice.email == "alice@example.com"
        assert result.author_commits == {"alice": 2, "bob": 1}

    def test_commits_per_day(self, make_commit):
        """Calendar days are counted separately from active-day membership."""
        day = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
        commits = [
            make_commit(timestamp=day),
            make_commit(timestamp=day + timedelta(hours=3)),
            make_commit(timestamp=day + timedelta(days=1)),
        ]
        result = CommitAggregator().aggregate(commits)
        assert len(result.active_days) == 2
        assert result.commits_per_day[day.date()] == 2

    def test_calls_are_independent(self, make_commit):
        """Nothing leaks between aggregate calls."""
        aggregator = CommitAggregator()
        aggregator.aggregate([make_commit(files=[("a.py", 1, 0)])])
        second = aggregator.aggregate([make_commit(files=[("b.py", 1, 0)])])
        assert set(second.file_stats) == {"b.py"}
        assert second.total_commits == 1


class TestAuthorStat:
    def test_derived_values(self):
        """avg_commit_size and productivity_score follow the running totals."""
        stat = AuthorStat(author="alice", commits=10, additions=100, deletions=0, active_days=10)
        assert stat.avg_commit_size == 10
        # 20 (commits) + 5 (size) + 10 (days)
        assert stat.productivity_score == 35

        stat.commits = 40
        # 50 (capped) + 1.25 (size) + 10 (days) = 61.25
        assert stat.productivity_score == 61

    def test_caps(self):
        """Each productivity component is capped."""
        stat = AuthorStat(author="a", commits=100, additions=100000, active_days=500)
        assert stat.productivity_score == 100

    def test_zero_commits(self):
        """An author with no commits has zero average size."""
        assert AuthorStat(author="a").avg_commit_size == 0.0
