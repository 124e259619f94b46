"""Repository health models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OverallHealth(Enum):
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"


@dataclass(frozen=True)
class RepositoryHealth:
    """Four independent 0-100 signals plus a categorical rating."""

    commit_frequency_score: int
    contributor_diversity_score: int
    code_churn_score: int
    branch_management_score: int
    overall_health: OverallHealth

    @property
    def sub_scores(self) -> tuple[int, int, int, int]:
        return (
            self.commit_frequency_score,
            self.contributor_diversity_score,
            self.code_churn_score,
            self.branch_management_score,
        )

    @property
    def mean_score(self) -> float:
        """Mean of the reported (rounded) sub-scores.

        ``overall_health`` is classified from the unrounded mean, so near a
        category boundary the two can disagree by up to half a point.
        """
        return sum(self.sub_scores) / len(self.sub_scores)
