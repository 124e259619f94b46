"""Tests for metric synthesis: impact, churn risk, velocity and patterns."""

from datetime import datetime, timedelta, timezone

import pytest

from repo_pulse.history.aggregator import CommitAggregator, FileStat
from repo_pulse.metrics import (
    Impact,
    Intensity,
    MetricSynthesizer,
    Risk,
    classify_impact,
    classify_intensity,
    classify_risk,
    estimate_complexity,
)
from repo_pulse.metrics.synthesizer import change_frequency, days_since, risk_score


class TestImpact:
    def test_critical_boundary_is_exclusive(self):
        """changes=50 with frequency=5 is not critical."""
        assert classify_impact(50, 5) is not Impact.CRITICAL
        assert classify_impact(50, 5) is Impact.HIGH

    def test_critical_needs_both(self):
        """Both thresholds must be exceeded for critical."""
        assert classify_impact(51, 5.01) is Impact.CRITICAL
        assert classify_impact(51, 5) is Impact.HIGH
        assert classify_impact(50, 6) is Impact.HIGH

    @pytest.mark.parametrize(
        "changes,frequency,expected",
        [
            (26, 3.5, Impact.HIGH),
            (25, 3.5, Impact.MEDIUM),
            (11, 1.5, Impact.MEDIUM),
            (11, 1, Impact.LOW),
            (10, 2, Impact.LOW),
            (0, 0, Impact.LOW),
        ],
    )
    def test_tiers(self, changes, frequency, expected):
        assert classify_impact(changes, frequency) is expected

    def test_change_frequency(self):
        """Changes per notional week of the analyzed history."""
        assert change_frequency(10, 70) == pytest.approx(1.0)
        assert change_frequency(3, 0) == 0.0


class TestComplexityAndRisk:
    def test_complexity_inflated_by_deletions(self):
        """Deletion ratio multiplies the change count."""
        assert estimate_complexity(10, 10, 5) == 15
        assert estimate_complexity(10, 0, 5) == 10

    def test_complexity_rounds_half_up(self):
        """1 * (1 + 2/4) = 1.5 rounds to 2."""
        assert estimate_complexity(1, 4, 2) == 2

    def test_complexity_capped(self):
        assert estimate_complexity(80, 10, 10) == 100

    def test_risk_score_weights(self):
        """0.3*changes + 0.1*max(0, 365-age) + 0.6*complexity."""
        assert risk_score(50, 0, 50) == pytest.approx(81.5)
        assert risk_score(50, 400, 50) == pytest.approx(45.0)

    @pytest.mark.parametrize(
        "changes,age,complexity,expected",
        [
            (1, 0, 1, Risk.LOW),
            (10, 0, 10, Risk.MEDIUM),
            (50, 0, 50, Risk.HIGH),
            (50, 1000, 50, Risk.MEDIUM),
            (0, 1000, 0, Risk.LOW),
        ],
    )
    def test_risk_classes(self, changes, age, complexity, expected):
        assert classify_risk(changes, age, complexity) is expected


class TestIntensity:
    @pytest.mark.parametrize(
        "per_day,per_contributor,expected",
        [
            (20.5, 0, Intensity.VERY_HIGH),
            (0, 10.5, Intensity.VERY_HIGH),
            (20, 10, Intensity.HIGH),
            (5.1, 0, Intensity.MEDIUM),
            (0, 2.5, Intensity.MEDIUM),
            (5, 2, Intensity.LOW),
        ],
    )
    def test_classes(self, per_day, per_contributor, expected):
        assert classify_intensity(per_day, per_contributor) is expected


class TestDaysSince:
    def test_floors_partial_days(self, now):
        assert days_since(now - timedelta(days=2, hours=12), now) == 2

    def test_future_is_negative(self, now):
        """Ages are not clamped."""
        assert days_since(now + timedelta(hours=12), now) == -1

    def test_none_is_zero(self, now):
        assert days_since(None, now) == 0


class TestMetricSynthesizer:
    def test_naive_now_is_utc(self):
        synthesizer = MetricSynthesizer(now=datetime(2024, 1, 1))
        assert synthesizer.now.tzinfo == timezone.utc

    def test_hot_files_sorted_and_limited(self, make_commit, now):
        """Hot files are ordered by change count, then name, and capped."""
        commits = []
        for i in range(25):
            for _ in range(i % 3 + 1):
                commits.append(make_commit(files=[(f"f{i:02d}.py", 1, 0)]))
        aggregate = CommitAggregator().aggregate(commits)
        hot = MetricSynthesizer(now=now).hot_files(aggregate)

        assert len(hot) == 20
        counts = [h.changes for h in hot]
        assert counts == sorted(counts, reverse=True)
        assert [h.filename for h in hot[:3]] == ["f02.py", "f05.py", "f08.py"]

    def test_hot_file_fields(self, make_commit, now):
        commits = [
            make_commit(author="bob", files=[("a.py", 2, 1)]),
            make_commit(author="alice", files=[("a.py", 1, 0)]),
        ]
        aggregate = CommitAggregator().aggregate(commits)
        hot = MetricSynthesizer(now=now).hot_files(aggregate)[0]
        assert hot.authors == ("alice", "bob")
        assert hot.change_frequency == pytest.approx(2 / (2 / 7))
        assert hot.impact is Impact.LOW

    def test_code_churn_ordering_and_age(self, make_commit, now):
        """Churn entries are ordered by churn; age is days since last change."""
        commits = [
            make_commit(timestamp=now - timedelta(days=3), files=[("small.py", 1, 0)]),
            make_commit(timestamp=now - timedelta(days=10), files=[("big.py", 100, 50)]),
        ]
        aggregate = CommitAggregator().aggregate(commits)
        churn = MetricSynthesizer(now=now).code_churn(aggregate)
        assert [c.file for c in churn] == ["big.py", "small.py"]
        assert churn[0].churn == 150
        assert churn[0].age == 10
        assert churn[1].age == 3

    def test_churn_is_pure_function_of_file_stat(self, now):
        """Same FileStat and now give identical entries."""
        stat = FileStat("a.py", changes=5, additions=10, deletions=3, last_modified=now)
        synthesizer = MetricSynthesizer(now=now)
        assert synthesizer.churn_entry(stat) == synthesizer.churn_entry(stat)

    def test_velocity(self, make_commit, now):
        """Averages are per active day; contributors are distinct authors."""
        day = datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
        commits = [
            make_commit(author="alice", timestamp=day, files=[("a.py", 10, 0)]),
            make_commit(author="bob", timestamp=day, files=[("a.py", 5, 5)]),
            make_commit(author="alice", timestamp=day + timedelta(days=1), files=[("b.py", 0, 0)]),
        ]
        velocity = MetricSynthesizer(now=now).development_velocity(
            CommitAggregator().aggregate(commits)
        )
        assert velocity.total_commits == 3
        assert velocity.active_contributors == 2
        assert velocity.avg_commits_per_day == pytest.approx(1.5)
        assert velocity.avg_lines_per_day == pytest.approx(10.0)
        assert velocity.peak_development_days == ("2024-05-01", "2024-05-02")
        assert velocity.development_intensity is Intensity.LOW

    def test_velocity_empty_history(self, now):
        """No commits: zero averages, no division error."""
        velocity = MetricSynthesizer(now=now).development_velocity(
            CommitAggregator().aggregate([])
        )
        assert velocity.avg_commits_per_day == 0
        assert velocity.avg_lines_per_day == 0
        assert velocity.peak_development_days == ()
        assert velocity.development_intensity is Intensity.LOW

    def test_peak_days_ties_by_date(self, make_commit, now):
        """Equal counts are ordered by ascending date; at most five days."""
        base = datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
        commits = [make_commit(timestamp=base + timedelta(days=d)) for d in (6, 5, 4, 3, 2, 1, 0)]
        commits.append(make_commit(timestamp=base + timedelta(days=6)))
        peak = MetricSynthesizer(now=now).peak_days(CommitAggregator().aggregate(commits))
        assert peak == ("2024-05-07", "2024-05-01", "2024-05-02", "2024-05-03", "2024-05-04")

    def test_authors_ranked_by_commits(self, make_commit, now):
        commits = [make_commit(author="zed"), make_commit(author="zed"), make_commit(author="amy")]
        authors = MetricSynthesizer(now=now).authors(CommitAggregator().aggregate(commits))
        assert [a.author for a in authors] == ["zed", "amy"]

    def test_synthesize_is_deterministic(self, make_commit, now):
        """Synthesizing the same aggregate twice gives equal histories."""
        commits = [
            make_commit(
                author=name, timestamp=now - timedelta(days=i), files=[(f"{name}.py", i, 1)]
            )
            for i, name in enumerate(["a", "b", "c", "a"])
        ]
        aggregate = CommitAggregator().aggregate(commits)
        synthesizer = MetricSynthesizer(now=now)
        assert synthesizer.synthesize(aggregate) == synthesizer.synthesize(aggregate)

    def test_enum_values_for_nonempty_history(self, make_commit, now):
        """Every impact and risk is a defined member."""
        commits = [
            make_commit(files=[(f"f{i % 4}.py", i * 7, i * 3)], timestamp=now - timedelta(days=i))
            for i in range(30)
        ]
        history = MetricSynthesizer(now=now).synthesize(CommitAggregator().aggregate(commits))
        assert all(isinstance(h.impact, Impact) for h in history.hot_files)
        assert all(isinstance(c.risk, Risk) for c in history.code_churn)
        assert history.time_range.days_active == 30
