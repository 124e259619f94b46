"""Repository health scoring and free-text recommendations."""

from .models import OverallHealth, RepositoryHealth
from .recommendations import generate_recommendations
from .scorer import (
    HealthScorer,
    branch_management_score,
    classify_overall,
    code_churn_score,
    commit_frequency_score,
    contributor_diversity_score,
)

__all__ = [
    "HealthScorer",
    "OverallHealth",
    "RepositoryHealth",
    "branch_management_score",
    "classify_overall",
    "code_churn_score",
    "commit_frequency_score",
    "contributor_diversity_score",
    "generate_recommendations",
]
