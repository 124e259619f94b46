"""Combine synthesized metrics into bounded health sub-scores."""

from __future__ import annotations

from typing import Sequence

from ..history.models import Branch
from ..logging_config import get_logger
from ..metrics.models import ChurnEntry, CommitHistory
from ..numeric import clamp, round_half_up
from .models import OverallHealth, RepositoryHealth

logger = get_logger(__name__)

# Branch protection status is unknown without branches: neither good nor bad
UNKNOWN_BRANCH_SCORE = 50.0
POINTS_PER_CONTRIBUTOR = 20


def commit_frequency_score(avg_commits_per_day: float) -> float:
    """Piecewise-linear in the daily commit rate.

    [0, 1): 0-50, [1, 5): 50-90, [5, ...): 90-100.
    """
    rate = avg_commits_per_day
    if rate < 1:
        score = rate * 50
    elif rate < 5:
        score = 50 + (rate - 1) * 10
    else:
        score = 90 + min(10, rate - 5)
    return clamp(score)


def contributor_diversity_score(author_count: int) -> float:
    return clamp(author_count * POINTS_PER_CONTRIBUTOR)


def code_churn_score(code_churn: Sequence[ChurnEntry]) -> float:
    """Lower mean churn per file scores higher; floors at 0."""
    if not code_churn:
        mean_churn = 0.0
    else:
        mean_churn = sum(entry.churn for entry in code_churn) / len(code_churn)
    return clamp(100 - mean_churn / 10)


def branch_management_score(branches: Sequence[Branch]) -> float:
    if not branches:
        return UNKNOWN_BRANCH_SCORE
    protected = sum(1 for b in branches if b.protected)
    return clamp(protected / len(branches) * 100)


def classify_overall(mean_score: float) -> OverallHealth:
    if mean_score >= 80:
        return OverallHealth.EXCELLENT
    if mean_score >= 60:
        return OverallHealth.GOOD
    if mean_score >= 40:
        return OverallHealth.FAIR
    return OverallHealth.POOR


class HealthScorer:
    """Score a commit history and its branches."""

    def score(self, history: CommitHistory, branches: Sequence[Branch]) -> RepositoryHealth:
        raw = [
            commit_frequency_score(history.development_velocity.avg_commits_per_day),
            contributor_diversity_score(len(history.authors)),
            code_churn_score(history.code_churn),
            branch_management_score(branches),
        ]
        # Rate on the unrounded mean; only the reported numbers are rounded
        overall = classify_overall(sum(raw) / len(raw))
        scores = [round_half_up(s) for s in raw]

        health = RepositoryHealth(
            commit_frequency_score=scores[0],
            contributor_diversity_score=scores[1],
            code_churn_score=scores[2],
            branch_management_score=scores[3],
            overall_health=overall,
        )
        logger.debug(f"Health scores {scores} -> {overall.value}")
        return health
