"""Short free-text advisories derived from health and metric thresholds."""

from __future__ import annotations

from ..metrics.models import CommitHistory, Impact, Intensity
from .models import RepositoryHealth

LOW_COMMIT_FREQUENCY = 50
LOW_CONTRIBUTOR_DIVERSITY = 60
LOW_CODE_CHURN = 50
LOW_BRANCH_MANAGEMENT = 70
MAX_NAMED_HOT_FILES = 3


def generate_recommendations(history: CommitHistory, health: RepositoryHealth) -> list[str]:
    """Evaluate every rule independently; output order follows rule order."""
    recommendations: list[str] = []

    if health.commit_frequency_score < LOW_COMMIT_FREQUENCY:
        recommendations.append(
            "Consider increasing commit frequency for better development velocity"
        )

    if health.contributor_diversity_score < LOW_CONTRIBUTOR_DIVERSITY:
        recommendations.append(
            "Encourage more contributors to improve code diversity and reduce bus factor"
        )

    if health.code_churn_score < LOW_CODE_CHURN:
        recommendations.append(
            "High code churn detected - consider refactoring frequently modified files"
        )

    critical = [f for f in history.hot_files if f.impact is Impact.CRITICAL]
    if critical:
        names = ", ".join(f.filename for f in critical[:MAX_NAMED_HOT_FILES])
        recommendations.append(
            f"Critical hot files detected: {names} - consider splitting or refactoring"
        )

    if history.development_velocity.development_intensity is Intensity.VERY_HIGH:
        recommendations.append(
            "Very high development intensity detected - ensure adequate testing and code review"
        )

    if health.branch_management_score < LOW_BRANCH_MANAGEMENT:
        recommendations.append(
            "Consider protecting main branches and implementing branch protection rules"
        )

    return recommendations
