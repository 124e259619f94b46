"""GIT_HEALTH: suggestions from health sub-scores, hot files and velocity.

Triggers:
- commit frequency score < 60
- contributor diversity score < 70
- any hot file with critical impact
- very high development intensity
"""

from __future__ import annotations

from ...metrics.models import Impact, Intensity
from ..models import (
    Effort,
    Suggestion,
    SuggestionCategory,
    SuggestionMetrics,
    SuggestionPriority,
)
from .base import SuggestionInputs


class GitHealthRule:
    """Flags weak commit cadence, narrow authorship and hot spots."""

    name = "git_health"

    COMMIT_FREQUENCY_THRESHOLD = 60
    CONTRIBUTOR_DIVERSITY_THRESHOLD = 70
    MAX_NAMED_FILES = 3

    def generate(self, inputs: SuggestionInputs) -> list[Suggestion]:
        analysis = inputs.analysis
        health = analysis.repository_health
        velocity = analysis.commit_history.development_velocity
        suggestions: list[Suggestion] = []

        if health.commit_frequency_score < self.COMMIT_FREQUENCY_THRESHOLD:
            suggestions.append(
                Suggestion(
                    id="git-health-low-commit-frequency",
                    category=SuggestionCategory.DEVELOPMENT,
                    priority=SuggestionPriority.MEDIUM,
                    confidence=0.8,
                    title="Increase Commit Frequency",
                    description=(
                        "Low commit frequency detected. Consider committing smaller, more "
                        "frequent changes to improve code review and collaboration."
                    ),
                    impact="Improves code review quality and reduces merge conflicts",
                    effort=Effort.LOW,
                    implementation=(
                        "Break large features into smaller commits",
                        "Commit early and often",
                        "Use feature branches for experimental work",
                        "Set up commit hooks for better commit messages",
                    ),
                    metrics=SuggestionMetrics(
                        current=health.commit_frequency_score,
                        target=80,
                        improvement="35% increase in commit frequency",
                    ),
                )
            )

        if health.contributor_diversity_score < self.CONTRIBUTOR_DIVERSITY_THRESHOLD:
            suggestions.append(
                Suggestion(
                    id="git-health-low-contributor-diversity",
                    category=SuggestionCategory.COLLABORATION,
                    priority=SuggestionPriority.MEDIUM,
                    confidence=0.75,
                    title="Improve Contributor Diversity",
                    description=(
                        "Limited contributor diversity detected. Encourage more team members "
                        "to contribute to reduce bus factor."
                    ),
                    impact="Reduces knowledge silos and improves code quality",
                    effort=Effort.MEDIUM,
                    implementation=(
                        "Implement pair programming sessions",
                        "Create mentorship programs for new contributors",
                        "Establish code review rotation",
                        "Document contribution guidelines clearly",
                    ),
                    metrics=SuggestionMetrics(
                        current=health.contributor_diversity_score,
                        target=85,
                        improvement="20% increase in contributor diversity",
                    ),
                )
            )

        critical = [f for f in analysis.commit_history.hot_files if f.impact is Impact.CRITICAL]
        if critical:
            names = ", ".join(f.filename for f in critical[: self.MAX_NAMED_FILES])
            suggestions.append(
                Suggestion(
                    id="git-hot-files-critical",
                    category=SuggestionCategory.ARCHITECTURE,
                    priority=SuggestionPriority.HIGH,
                    confidence=0.9,
                    title="Refactor Critical Hot Files",
                    description=(
                        f"Critical hot files detected: {names}. These files are modified "
                        "frequently and may benefit from refactoring."
                    ),
                    impact="Improves maintainability and reduces technical debt",
                    effort=Effort.HIGH,
                    implementation=(
                        "Analyze dependencies and coupling of hot files",
                        "Extract common functionality into shared modules",
                        "Implement proper separation of concerns",
                        "Consider splitting large files into smaller, focused modules",
                        "Add comprehensive tests before refactoring",
                    ),
                    metrics=SuggestionMetrics(
                        current=len(critical),
                        target=0,
                        improvement="Eliminate critical hot file dependencies",
                    ),
                )
            )

        if velocity.development_intensity is Intensity.VERY_HIGH:
            suggestions.append(
                Suggestion(
                    id="git-velocity-very-high",
                    category=SuggestionCategory.DEVELOPMENT,
                    priority=SuggestionPriority.MEDIUM,
                    confidence=0.7,
                    title="Balance Development Intensity",
                    description=(
                        "Very high development intensity detected. Consider adding more "
                        "testing and code review to maintain quality."
                    ),
                    impact="Maintains code quality during rapid development",
                    effort=Effort.MEDIUM,
                    implementation=(
                        "Implement automated testing for new features",
                        "Increase code review requirements",
                        "Add performance testing for critical paths",
                        "Consider feature flags for safer deployments",
                        "Monitor technical debt regularly",
                    ),
                    metrics=SuggestionMetrics(
                        current=velocity.avg_commits_per_day,
                        target=velocity.avg_commits_per_day * 0.8,
                        improvement="20% reduction in development intensity",
                    ),
                )
            )

        return suggestions
